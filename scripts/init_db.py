from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.beacon_attendance.beacon_attendance.database.bootstrap import apply_schema, apply_sql_file, list_tables
from src.beacon_attendance.beacon_attendance.database.connection import DBConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply database/schema.sql (and optionally seed.sql).")
    parser.add_argument("--seed", action="store_true", help="also load database/seed.sql demo employees")
    args = parser.parse_args()

    load_dotenv(REPO_ROOT / ".env", override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if args.seed:
        apply_sql_file(db_config, sql_path=REPO_ROOT / "database" / "seed.sql")

    tables = list_tables(db_config)
    target = DBConfig.from_dict(db_config).describe()
    seeded = " + seed.sql" if args.seed else ""
    print(f"OK: Applied schema.sql{seeded} -> {target} (tables={len(tables)}: {', '.join(sorted(tables))})")


if __name__ == "__main__":
    main()
