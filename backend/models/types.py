"""
types.py: Column type for ordered sequences (score ledgers, level sets).
PostgreSQL stores them in a native JSONB column; every other dialect
stores a JSON-encoded string in a TEXT column.
"""

import json

from sqlalchemy import Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import TypeDecorator


def decode_list(value) -> list:
    """Turn a stored column value back into a list. Unreadable values become []."""
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError:
            return []
    if not isinstance(value, list):
        return []
    return list(value)


class JSONList(TypeDecorator):
    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value, dialect):
        items = list(value) if value is not None else []
        if dialect.name == "postgresql":
            return items
        return json.dumps(items)

    def process_result_value(self, value, dialect):
        return decode_list(value)
