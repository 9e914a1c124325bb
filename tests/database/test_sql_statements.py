from datetime import time, timedelta

from src.beacon_attendance.beacon_attendance.database.bootstrap import split_statements
from src.beacon_attendance.beacon_attendance.database.mysql_base import time_to_text


def test_split_ignores_comments_and_database_switches():
    sql = """
    -- demo schema
    CREATE DATABASE IF NOT EXISTS other_db;
    USE other_db;
    CREATE TABLE t (id INT); -- trailing note
    INSERT INTO t VALUES (1);
    """

    assert split_statements(sql) == ["CREATE TABLE t (id INT)", "INSERT INTO t VALUES (1)"]


def test_split_keeps_semicolons_and_dashes_inside_quotes():
    sql = "INSERT INTO e(name) VALUES ('a;b -- c'); INSERT INTO e(name) VALUES (\"it\\'s\")"

    assert split_statements(sql) == [
        "INSERT INTO e(name) VALUES ('a;b -- c')",
        "INSERT INTO e(name) VALUES (\"it\\'s\")",
    ]


def test_time_to_text_accepts_connector_shapes():
    assert time_to_text(timedelta(hours=8, minutes=5, seconds=3)) == "08:05:03"
    assert time_to_text(time(17, 30)) == "17:30:00"
    assert time_to_text("09:00:00") == "09:00:00"
    assert time_to_text("garbage") is None
    assert time_to_text(None) is None
