import mysql.connector
import pytest

from src.beacon_attendance.beacon_attendance.core.exceptions import StorageError
from src.beacon_attendance.beacon_attendance.database.mysql_base import db_cursor


class StubCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class StubConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class StubFactory:
    def __init__(self, conn=None, error=None):
        self.conn = conn
        self.error = error

    def connect(self, **kwargs):
        if self.error:
            raise self.error
        return self.conn


def test_driver_error_is_wrapped_and_rolled_back():
    cursor = StubCursor(error=mysql.connector.Error("Lost connection"))
    conn = StubConnection(cursor)

    with pytest.raises(StorageError):
        with db_cursor(StubFactory(conn)) as (_, cur):
            cur.execute("SELECT 1")

    assert conn.rolled_back is True
    assert conn.committed is False
    assert conn.closed is True
    assert cursor.closed is True


def test_connect_failure_is_wrapped():
    factory = StubFactory(error=mysql.connector.Error("Can't connect"))

    with pytest.raises(StorageError):
        with db_cursor(factory):
            pass


def test_other_errors_roll_back_and_propagate_unchanged():
    conn = StubConnection(StubCursor())

    with pytest.raises(KeyError):
        with db_cursor(StubFactory(conn)):
            raise KeyError("event_id")

    assert conn.rolled_back is True
    assert conn.closed is True


def test_success_commits_and_closes():
    conn = StubConnection(StubCursor())

    with db_cursor(StubFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed is True
    assert conn.rolled_back is False
    assert conn.closed is True
