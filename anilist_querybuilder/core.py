# anilist_querybuilder/core.py

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

# Unknown month and day are encoded as zeros, e.g. 2016 -> 20160000
FUZZY_DATE_YEAR_FACTOR = 10000


@dataclass(frozen=True)
class Present:
    value: Any


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

OptionalField = Union[Present, _Absent]


def present(value: Any) -> Present:
    return Present(value)


def is_present(value: OptionalField) -> bool:
    return isinstance(value, Present)


def present_if_not_null(value: Any) -> OptionalField:
    return ABSENT if value is None else Present(value)


def present_if_not_blank(value: Optional[str]) -> OptionalField:
    """
    Free-text filter: only sent when something other than whitespace was typed.

    The value is forwarded as given, surrounding whitespace included.
    """
    if value is None or not value.strip():
        return ABSENT
    return Present(value)


def present_if_not_empty(values: Optional[Sequence[Any]]) -> OptionalField:
    if not values:
        return ABSENT
    return Present(list(values))


def encode_fuzzy_year(year: int) -> int:
    return year * FUZZY_DATE_YEAR_FACTOR


def year_bound(year: Optional[int]) -> OptionalField:
    """
    Convert a plain year into a fuzzy date bound.

    Args:
        year: Calendar year, or None for no bound

    Returns:
        Present(year * 10000) or ABSENT
    """
    if year is None:
        return ABSENT
    return Present(encode_fuzzy_year(year))


def require_id(name: str, value: Any) -> int:
    if value is None:
        raise ValueError(f"'{name}' is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"'{name}' must be positive, got {value}")
    return value


@dataclass(frozen=True)
class QueryRequest:
    operation: str
    document: str
    fields: Mapping[str, OptionalField] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def variables(self) -> dict:
        """Wire variables: absent fields are omitted, Present(None) is sent as null."""
        return {
            name: value.value
            for name, value in self.fields.items()
            if is_present(value)
        }

    def present_fields(self) -> list[str]:
        return [name for name, value in self.fields.items() if is_present(value)]

    def get(self, name: str) -> OptionalField:
        return self.fields.get(name, ABSENT)
