"""Schema bootstrap used by ``create_app`` (AUTO_INIT_DB) and scripts/init_db.py."""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

# Quoted strings, line comments, statement terminators, everything else.
_SQL_TOKEN = re.compile(r"""'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*"|--[^\n]*|;|[^'";-]+|-""", re.S)
_DB_SWITCH = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.I)


def split_statements(sql: str) -> List[str]:
    statements: List[str] = []
    current: List[str] = []
    for token in _SQL_TOKEN.findall(sql):
        if token.startswith("--"):
            continue
        if token == ";":
            statements.append("".join(current).strip())
            current = []
        else:
            current.append(token)
    statements.append("".join(current).strip())
    # The target database comes from DB_CONFIG, not from the file.
    return [s for s in statements if s and not _DB_SWITCH.match(s)]


@contextmanager
def _session(db_config: dict, *, with_database: bool = True) -> Iterator:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect(with_database=with_database)
    try:
        cur = conn.cursor()
        yield cur
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    name = DBConfig.from_dict(db_config).database
    with _session(db_config, with_database=False) as cur:
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")


def apply_sql_file(db_config: dict, *, sql_path: Union[str, Path]) -> int:
    statements = split_statements(Path(sql_path).read_text(encoding="utf-8"))
    with _session(db_config) as cur:
        for statement in statements:
            cur.execute(statement)
    logger.info("Applied %d statements from %s", len(statements), Path(sql_path).name)
    return len(statements)


def apply_schema(db_config: dict, *, schema_path: Union[str, Path]) -> None:
    ensure_database_exists(db_config)
    apply_sql_file(db_config, sql_path=schema_path)


def list_tables(db_config: dict) -> List[str]:
    with _session(db_config) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
