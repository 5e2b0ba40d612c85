"""
Range units.
"""

from enum import Enum
from typing import Any, ClassVar, Optional, Tuple


class KnownUnit(Enum):
    "Range units that are registered for use in HTTP."
    BYTES = "bytes"


class RangeUnit:
    """
    The unit that a range field's ranges are measured in.

    The token is kept exactly as it was given, so that it survives a round
    trip. Only the registered spelling counts as a known unit.
    """

    __slots__ = ("_token",)

    BYTES: ClassVar["RangeUnit"]

    def __init__(self, token: str) -> None:
        if not isinstance(token, str):
            raise TypeError(f"unit token must be a str, not {type(token).__name__}")
        self._token = token

    @classmethod
    def from_raw(cls, token: str) -> "RangeUnit":
        "Make a unit from a token found on the wire. Never fails."
        return cls(token)

    def to_raw(self) -> str:
        return self._token

    @property
    def known(self) -> Optional[KnownUnit]:
        try:
            return KnownUnit(self._token)
        except ValueError:
            return None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RangeUnit):
            return NotImplemented
        return self._token == other._token

    def __hash__(self) -> int:
        return hash((RangeUnit, self._token))

    def __reduce__(self) -> Tuple[Any, ...]:
        return (RangeUnit, (self._token,))

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_token"):
            raise AttributeError("RangeUnit is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"RangeUnit({self._token!r})"

    def __str__(self) -> str:
        return self._token


RangeUnit.BYTES = RangeUnit(KnownUnit.BYTES.value)
