from __future__ import annotations

from .base import Platform, quote_literal

_SYSTEM_SCHEMA_PREDICATE = "{column} NOT LIKE 'pg\\_%' AND {column} != 'information_schema'"


class PostgreSQLPlatform(Platform):
    name = "postgresql"
    now_function = "now()"
    cast_literal_pattern = r"^'((?:[^']|'')*)'(?:::[^']+)?$"
    type_mapping = {
        "smallint": "smallint",
        "int2": "smallint",
        "serial": "integer",
        "int": "integer",
        "int4": "integer",
        "integer": "integer",
        "bigserial": "bigint",
        "bigint": "bigint",
        "int8": "bigint",
        "bool": "boolean",
        "boolean": "boolean",
        "text": "text",
        "tsvector": "text",
        "varchar": "string",
        "interval": "string",
        "_varchar": "string",
        "char": "string",
        "bpchar": "string",
        "inet": "string",
        "date": "date",
        "datetime": "datetime",
        "timestamp": "datetime",
        "timestamptz": "datetimetz",
        "time": "time",
        "timetz": "time",
        "float": "float",
        "float4": "float",
        "float8": "float",
        "double": "float",
        "double precision": "float",
        "real": "float",
        "decimal": "decimal",
        "money": "decimal",
        "numeric": "decimal",
        "year": "date",
        "uuid": "guid",
        "bytea": "blob",
        "json": "json",
        "jsonb": "json",
    }

    def list_sequences_sql(self, database: str | None) -> str:
        sql = (
            "SELECT sequence_name AS relname, sequence_schema AS schemaname "
            "FROM information_schema.sequences "
            "WHERE " + _SYSTEM_SCHEMA_PREDICATE.format(column="sequence_schema")
        )
        if database:
            sql += f" AND sequence_catalog = {quote_literal(database)}"
        return sql

    def sequence_properties_sql(self, namespace: str | None, name: str) -> str:
        if namespace:
            schema_predicate = f"schemaname = {quote_literal(namespace)}"
        else:
            schema_predicate = "schemaname = ANY(current_schemas(false))"
        return (
            "SELECT min_value, increment_by "
            "FROM pg_catalog.pg_sequences "
            f"WHERE {schema_predicate} AND sequencename = {quote_literal(name)}"
        )

    def list_table_columns_sql(self, table: str, database: str | None = None) -> str:
        return (
            "SELECT a.attnum, "
            "quote_ident(a.attname) AS field, "
            "t.typname AS type, "
            "format_type(a.atttypid, a.atttypmod) AS complete_type, "
            "(SELECT t1.typname FROM pg_catalog.pg_type t1 "
            "WHERE t1.oid = t.typbasetype) AS domain_type, "
            "(SELECT format_type(t2.typbasetype, t2.typtypmod) FROM pg_catalog.pg_type t2 "
            "WHERE t2.typtype = 'd' AND t2.oid = a.atttypid) AS domain_complete_type, "
            "a.attnotnull AS isnotnull, "
            "(SELECT 't' FROM pg_catalog.pg_index "
            "WHERE c.oid = pg_index.indrelid AND pg_index.indkey[0] = a.attnum "
            "AND pg_index.indisprimary = 't') AS pri, "
            "(SELECT pg_get_expr(adbin, adrelid) FROM pg_catalog.pg_attrdef "
            "WHERE c.oid = pg_attrdef.adrelid AND pg_attrdef.adnum = a.attnum) AS \"default\", "
            "(SELECT pg_description.description FROM pg_catalog.pg_description "
            "WHERE pg_description.objoid = c.oid AND a.attnum = pg_description.objsubid) AS comment, "
            "CASE WHEN a.attcollation = t.typcollation THEN NULL "
            "ELSE coll.collname END AS \"collation\", "
            "CASE WHEN t.typname IN ('varchar', 'bpchar') AND a.atttypmod > 0 "
            "THEN a.atttypmod - 4 ELSE NULL END AS length "
            "FROM pg_catalog.pg_attribute a "
            "JOIN pg_catalog.pg_class c ON c.oid = a.attrelid "
            "JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace "
            "JOIN pg_catalog.pg_type t ON t.oid = a.atttypid "
            "LEFT JOIN pg_catalog.pg_collation coll ON coll.oid = a.attcollation "
            f"WHERE {self._table_predicate(table)} "
            "AND a.attnum > 0 AND NOT a.attisdropped "
            f"{self._catalog_predicate(database)}"
            "ORDER BY a.attnum"
        )

    def list_tables_sql(self) -> str:
        return (
            "SELECT quote_ident(table_name) AS table_name, table_schema AS schema_name "
            "FROM information_schema.tables "
            "WHERE " + _SYSTEM_SCHEMA_PREDICATE.format(column="table_schema") + " "
            "AND table_name != 'geometry_columns' "
            "AND table_name != 'spatial_ref_sys' "
            "AND table_type != 'VIEW'"
        )

    def _table_predicate(self, table: str) -> str:
        if "." in table:
            schema, name = table.split(".", 1)
            schema_predicate = f"n.nspname = {quote_literal(schema)}"
        else:
            name = table
            schema_predicate = "n.nspname = ANY(current_schemas(false))"
        return f"c.relname = {quote_literal(name)} AND {schema_predicate}"

    def _catalog_predicate(self, database: str | None) -> str:
        # a session only sees its own catalog; a mismatch yields no rows
        if not database:
            return ""
        return f"AND current_database() = {quote_literal(database)} "
