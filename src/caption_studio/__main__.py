"""Launch the Streamlit page: ``python -m caption_studio`` or ``caption-studio``."""

from __future__ import annotations

import sys
from pathlib import Path

APP_PATH = Path(__file__).resolve().parent / "app.py"


def main(argv: list[str] | None = None) -> int:
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(APP_PATH), *(sys.argv[1:] if argv is None else argv)]
    return stcli.main()


if __name__ == "__main__":
    sys.exit(main())
