"""Human-readable offset strings.

An offset string is an optional sign followed by unit components in the
fixed order ``y M w d h m s ms``, each written as an integer count and its
unit token, with any amount of whitespace in between:

    >>> parse_offset("- 1y 2M  3w").total_seconds()
    -38630844.0

Parsing happens in two passes: a tokenizer turns the text into sign, number
and unit tokens, then the parser checks their order and builds an ``Offset``.
"""

import math
from dataclasses import dataclass
from typing import Literal

from unixstamp.errors import OffsetFormatError
from unixstamp.util import UNITS, is_number

_UNIT_RANK = {token: rank for rank, token in enumerate(UNITS)}

# Unit token -> Offset field name
_UNIT_FIELDS = {
    "y": "years",
    "M": "months",
    "w": "weeks",
    "d": "days",
    "h": "hours",
    "m": "minutes",
    "s": "seconds",
    "ms": "milliseconds",
}


@dataclass(frozen=True, kw_only=True)
class Offset:
    sign: int = 1
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"Offset sign must be 1 or -1, got {self.sign!r}")
        for name in _UNIT_FIELDS.values():
            count = getattr(self, name)
            if not isinstance(count, int) or isinstance(count, bool):
                raise ValueError(
                    f"Offset {name} must be a whole number, "
                    f"got {type(count).__name__!r}: {count!r}"
                )
            if count < 0:
                raise ValueError(
                    f"Offset {name} must be non-negative, got {count}.\n"
                    f"Hint: use sign=-1 for negative offsets"
                )
        # A zero offset has no sign: "-0s" == "0s"
        if not any(getattr(self, name) for name in _UNIT_FIELDS.values()):
            object.__setattr__(self, "sign", 1)

    def total_seconds(self) -> float:
        """Signed sum of every component, in seconds.

        Counts too large for a float make the total infinite.
        """
        total = 0.0
        for token, name in _UNIT_FIELDS.items():
            try:
                total += getattr(self, name) * UNITS[token]
            except OverflowError:
                total = math.inf
        return self.sign * total

    def __str__(self) -> str:
        """Canonical compact form, e.g. ``-1y 2M 34ms``."""
        parts = [
            f"{getattr(self, name)}{token}"
            for token, name in _UNIT_FIELDS.items()
            if getattr(self, name)
        ]
        body = " ".join(parts) or "0s"
        return f"-{body}" if self.sign < 0 else body


@dataclass(frozen=True)
class _Token:
    kind: Literal["sign", "number", "unit"]
    text: str
    position: int


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char.isspace():
            pos += 1
        elif char in "+-":
            tokens.append(_Token("sign", char, pos))
            pos += 1
        elif "0" <= char <= "9":
            end = pos
            while end < len(text) and "0" <= text[end] <= "9":
                end += 1
            tokens.append(_Token("number", text[pos:end], pos))
            pos = end
        elif text.startswith("ms", pos):
            # "ms" must win over "m"
            tokens.append(_Token("unit", "ms", pos))
            pos += 2
        elif char in _UNIT_RANK:
            tokens.append(_Token("unit", char, pos))
            pos += 1
        else:
            raise OffsetFormatError(text, pos, f"unexpected character {char!r}")
    return tokens


def parse_offset(text: str) -> Offset:
    """Parse an offset string into an ``Offset``.

    Raises:
        OffsetFormatError: If the string does not follow the offset format
    """
    tokens = _tokenize(text)
    sign = 1
    index = 0
    if tokens and tokens[0].kind == "sign":
        sign = -1 if tokens[0].text == "-" else 1
        index = 1

    counts: dict[str, int] = {}
    last_rank = -1
    while index < len(tokens):
        number = tokens[index]
        if number.kind != "number":
            raise OffsetFormatError(
                text, number.position, f"expected a count, got {number.text!r}"
            )
        if index + 1 >= len(tokens):
            raise OffsetFormatError(
                text, None, f"count {number.text} is missing its unit"
            )
        unit = tokens[index + 1]
        if unit.kind != "unit":
            raise OffsetFormatError(
                text, unit.position, f"expected a unit, got {unit.text!r}"
            )
        rank = _UNIT_RANK[unit.text]
        if rank <= last_rank:
            raise OffsetFormatError(
                text, unit.position, f"unit {unit.text!r} is out of order"
            )
        last_rank = rank
        counts[_UNIT_FIELDS[unit.text]] = int(number.text)
        index += 2

    return Offset(sign=sign, **counts)


def to_seconds(offset: str | float) -> float:
    """Convert an offset string or a number of seconds to seconds.

    Raises:
        TypeError: If offset is neither a string nor a number
        OffsetFormatError: If offset is a malformed offset string
    """
    if isinstance(offset, str):
        return parse_offset(offset).total_seconds()
    if is_number(offset):
        return offset
    raise TypeError(
        f"offset must be a string or a number.\n"
        f"Got {type(offset).__name__!r}: {offset!r}\n"
        f"Examples:\n"
        f"  add(ts, -60)        # seconds\n"
        f"  add(ts, '-1m')      # offset string"
    )
