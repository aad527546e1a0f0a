"""
Column types shared by the models.
"""
from typing import Optional, Type
from enum import Enum

from sqlalchemy import JSON
from sqlalchemy.types import TypeDecorator


class EnumList(TypeDecorator):
    """
    List of enum members stored as a JSON array of member values.

    Works on both PostgreSQL and SQLite; order and duplicates are kept as given.
    """

    impl = JSON
    cache_ok = True

    def __init__(self, enum_class: Type[Enum], *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.enum_class = enum_class

    def process_bind_param(self, value, dialect) -> Optional[list]:
        if value is None:
            return None
        return [self.enum_class(item).value for item in value]

    def process_result_value(self, value, dialect) -> Optional[list]:
        if value is None:
            return None
        # Unknown values mean the column holds data this code cannot decode
        return [self.enum_class(item) for item in value]
