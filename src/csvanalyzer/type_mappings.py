"""Type mapping utilities for converting inferred labels to target type systems."""


def map_to_sql_type(type_name: str) -> str:
    """Map an inferred type label to a SQL column type.

    Args:
    ----
        type_name: Inferred type label (e.g., "integer", "date", "email")

    Returns:
    -------
        SQL type name (e.g., "BIGINT", "DATE", "VARCHAR")

    """
    mapping = {
        "BOOLEAN": "BOOLEAN",
        "INTEGER": "BIGINT",  # Integers are checked against the 64-bit range
        "FLOAT": "DOUBLE",
        "DATE": "DATE",
        "DATETIME": "TIMESTAMP",
        "TIME": "TIME",
        "EMAIL": "VARCHAR",
        "URL": "VARCHAR",
        "IP": "VARCHAR",
        "STRING": "VARCHAR",
        "NULL": "VARCHAR",  # No values to infer from
    }
    return mapping.get(type_name.upper(), "VARCHAR")


def map_to_json_type(type_name: str) -> str:
    """Map an inferred type label to a JSON schema type.

    Args:
    ----
        type_name: Inferred type label (e.g., "integer", "date", "email")

    Returns:
    -------
        JSON schema type (e.g., "string", "integer", "number")

    """
    mapping = {
        "BOOLEAN": "boolean",
        "INTEGER": "integer",
        "FLOAT": "number",
        "DATE": "string",
        "DATETIME": "string",
        "TIME": "string",
        "EMAIL": "string",
        "URL": "string",
        "IP": "string",
        "STRING": "string",
        "NULL": "null",
    }
    return mapping.get(type_name.upper(), "string")


def map_to_json_format(type_name: str) -> str | None:
    """Map an inferred type label to a JSON schema ``format`` hint, if any.

    date, url and ip have no hint: date also matches DD/MM/YYYY, url matches
    hosts without a scheme and ip covers both address families.
    """
    mapping = {
        "DATETIME": "date-time",
        "TIME": "time",
        "EMAIL": "email",
    }
    return mapping.get(type_name.upper())
