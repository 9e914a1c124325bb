"""Print the beacon identifier for an employee display name.

Usage: python scripts/encode_identifier.py "Ana Lopez"
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.beacon_attendance.beacon_attendance.common import hex_codec


def main(argv: list[str]) -> int:
    if len(argv) != 2 or not argv[1].strip():
        print(__doc__.strip(), file=sys.stderr)
        return 2
    print(hex_codec.encode(argv[1].strip()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
