"""Module entrypoint.

Allows:
    python -m log_json_converter app.log --year 2024
"""

from __future__ import annotations

from log_json_converter.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
