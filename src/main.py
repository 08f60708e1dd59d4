"""`python -m main` from inside `src/`; same command as the `temp-convert` script."""

from __future__ import annotations

import sys

# Text output contains "°", which cp1252 Windows consoles cannot encode.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
