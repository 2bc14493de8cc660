"""Console entry point: `credit-revenue` starts the Streamlit dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

from streamlit.web import cli as stcli

APP_PATH = Path(__file__).resolve().parent / "streamlit_app.py"


def main() -> None:
    sys.argv = ["streamlit", "run", str(APP_PATH), *sys.argv[1:]]
    sys.exit(stcli.main())
