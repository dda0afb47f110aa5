import logging
from unittest.mock import MagicMock

import pytest

from schema_introspect.db import DBAPIExecutor, QueryExecutor
from schema_introspect.errors import DataAccessError


class DriverError(Exception):
    pass


def create_mock_connection(rows, description) -> tuple[MagicMock, MagicMock]:
    cursor = MagicMock()
    cursor.fetchall.return_value = rows
    cursor.description = description
    connection = MagicMock()
    connection.cursor.return_value = cursor
    return connection, cursor


def test_rows_are_keyed_by_lowercase_column_names() -> None:
    connection, cursor = create_mock_connection(
        [("foo", "app"), ("bar", "app")],
        [("RELNAME", None), ("SchemaName", None)],
    )
    executor = DBAPIExecutor(connection, DriverError)

    rows = executor.fetch_all("SELECT ...")

    assert rows == [
        {"relname": "foo", "schemaname": "app"},
        {"relname": "bar", "schemaname": "app"},
    ]
    cursor.execute.assert_called_once_with("SELECT ...")
    cursor.close.assert_called_once()


def test_empty_result() -> None:
    connection, _ = create_mock_connection([], None)
    assert DBAPIExecutor(connection, DriverError).fetch_all("SELECT 1") == []


def test_driver_error_becomes_data_access_error(caplog: pytest.LogCaptureFixture) -> None:
    connection, cursor = create_mock_connection([], None)
    cursor.execute.side_effect = DriverError("relation does not exist")
    executor = DBAPIExecutor(connection, DriverError)

    with caplog.at_level(logging.WARNING):
        with pytest.raises(DataAccessError) as excinfo:
            executor.fetch_all("SELECT * FROM missing")

    assert isinstance(excinfo.value.__cause__, DriverError)
    assert "Catalog query failed" in caplog.text
    cursor.close.assert_called_once()


def test_driver_error_taken_from_connection() -> None:
    connection, cursor = create_mock_connection([], None)
    connection.Error = DriverError
    cursor.execute.side_effect = DriverError("boom")

    with pytest.raises(DataAccessError):
        DBAPIExecutor(connection).fetch_all("SELECT 1")


def test_unrelated_errors_are_not_wrapped() -> None:
    connection, cursor = create_mock_connection([], None)
    cursor.execute.side_effect = KeyError("bug")

    with pytest.raises(KeyError):
        DBAPIExecutor(connection, DriverError).fetch_all("SELECT 1")


def test_satisfies_query_executor_protocol() -> None:
    connection, _ = create_mock_connection([], None)
    assert isinstance(DBAPIExecutor(connection, DriverError), QueryExecutor)
