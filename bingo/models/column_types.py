"""Integer list columns stored as JSON text.

Rows keep a compact ``"[1,2,3]"`` text encoding so existing records stay
readable. ``IntegerList`` preserves order; ``IntegerSet`` writes members
sorted and de-duplicated since their order carries no meaning.
"""

import json
from collections.abc import Iterable
from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator


def _coerce_integers(values: Iterable[Any]) -> list[int]:
    result: list[int] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected integer, got {value!r}")
        result.append(value)
    return result


def encode_integers(values: Iterable[int]) -> str:
    return json.dumps(_coerce_integers(values), separators=(",", ":"))


def decode_integers(text: str | None) -> list[int]:
    if not text:
        return []
    decoded = json.loads(text)
    if not isinstance(decoded, list):
        raise ValueError(f"expected JSON array, got {text!r}")
    return _coerce_integers(decoded)


class IntegerList(TypeDecorator[list[int]]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Iterable[int] | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return encode_integers(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[int] | None:
        if value is None:
            return None
        return decode_integers(value)


class IntegerSet(IntegerList):
    cache_ok = True

    def process_bind_param(self, value: Iterable[int] | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return encode_integers(sorted(set(_coerce_integers(value))))
