"""Database helpers: SQL Server connection URIs and result-row access."""

from .rows import get_column, get_column_names, get_value
from .sql_uri import SqlServerUri, parse_sql_server_uri, to_connection_string

__all__ = [
    "SqlServerUri",
    "get_column",
    "get_column_names",
    "get_value",
    "parse_sql_server_uri",
    "to_connection_string",
]
