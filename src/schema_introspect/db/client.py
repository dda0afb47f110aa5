from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from ..errors import DataAccessError
from ..logging_utils import log_extra


@runtime_checkable
class QueryExecutor(Protocol):
    """Run one catalog query and return its rows in result order."""

    def fetch_all(self, sql: str) -> list[Mapping[str, Any]]: ...


class DBAPIExecutor:
    """QueryExecutor over a caller-owned DB-API 2.0 connection.

    The connection is not opened, committed or closed here. Each query runs on
    its own cursor, and rows come back as dicts keyed by lower-cased column
    names.
    """

    def __init__(
        self,
        connection: Any,
        driver_errors: type[BaseException] | tuple[type[BaseException], ...] | None = None,
    ) -> None:
        self._connection = connection
        self._driver_errors = driver_errors or _connection_error(connection)
        self._log = logging.getLogger(__name__)

    def fetch_all(self, sql: str) -> list[dict[str, Any]]:
        """
        Execute SQL and return results as a list of dictionaries.

        Parameters:
        sql (str): Catalog query to execute

        Returns:
        list[dict[str, Any]]: Rows keyed by lower-cased column name

        Raises:
        DataAccessError: If the driver reports a failure
        """
        query_id = str(uuid.uuid4())
        cursor = self._connection.cursor()
        try:
            cursor.execute(sql)
            rows_raw = cursor.fetchall()
            description: Sequence[Any] = cursor.description or []
        except self._driver_errors as exc:
            self._log.warning(
                "Catalog query failed",
                extra=log_extra(query_id=query_id, error_message=str(exc)),
            )
            raise DataAccessError(f"Query execution failed: {exc}") from exc
        finally:
            cursor.close()

        columns = [str(col[0]).lower() for col in description]
        rows = [dict(zip(columns, row)) for row in rows_raw]

        self._log.debug(
            "Catalog query executed",
            extra=log_extra(query_id=query_id, row_count=len(rows)),
        )
        return rows


def _connection_error(connection: Any) -> type[BaseException] | tuple[type[BaseException], ...]:
    # optional DB-API extension: drivers may expose Error on the connection
    error = getattr(connection, "Error", None)
    if isinstance(error, type) and issubclass(error, BaseException):
        return error
    return ()
