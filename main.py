"""Run temp-convert from a source checkout.

    python -m main 98.6 -u f -c c

Puts `src/` on `sys.path` first, so the `cli` and `core` packages import
without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_PATH = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_PATH) not in sys.path:
        sys.path.insert(0, str(SRC_PATH))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
