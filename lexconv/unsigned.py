"""Digit-by-digit reading and writing of unsigned integers, with digit grouping."""

from __future__ import annotations

import locale
import math
from dataclasses import dataclass

from .errors import BadLexicalCast


@dataclass(frozen=True)
class Numpunct:
    """Punctuation rules for numbers.

    ``grouping`` lists group sizes from the rightmost group leftwards; the
    last size repeats.  A size of zero or less means "no further grouping".
    An empty ``grouping`` (the classic locale) disables separators entirely.
    """

    grouping: tuple[int, ...] = ()
    thousands_sep: str = ","
    decimal_point: str = "."

    @classmethod
    def from_locale(cls) -> "Numpunct":
        """Build the rules of the current ``LC_NUMERIC`` locale."""
        conv = locale.localeconv()
        sizes: list[int] = []
        for size in conv.get("grouping", []):
            if size == 0:
                break
            if size == locale.CHAR_MAX:
                sizes.append(-1)
                break
            sizes.append(size)
        sep = conv.get("thousands_sep", "") or ""
        point = conv.get("decimal_point", ".") or "."
        if not sep:
            return cls(grouping=(), thousands_sep=",", decimal_point=point)
        return cls(grouping=tuple(sizes), thousands_sep=sep, decimal_point=point)


def _uses_grouping(numpunct: Numpunct | None) -> bool:
    return bool(numpunct and numpunct.grouping and numpunct.grouping[0] > 0)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def to_unsigned(value: int, bits: int) -> int:
    """Return the magnitude of ``value`` as an unsigned integer of ``bits`` bits.

    Negative values are negated in modular arithmetic, so the most negative
    value of a signed type maps to ``2 ** (bits - 1)``.
    """
    magnitude = -value if value < 0 else value
    return magnitude & ((1 << bits) - 1)


def format_unsigned(value: int, numpunct: Numpunct | None = None) -> str:
    """Write a non-negative integer, inserting separators as ``numpunct`` asks."""
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    digits = str(value)
    if not _uses_grouping(numpunct):
        return digits

    grouping = numpunct.grouping
    groups: list[str] = []
    rest = digits
    index = 0
    size: float = grouping[0]
    while len(rest) > size:
        cut = int(size)
        groups.append(rest[-cut:])
        rest = rest[:-cut]
        index += 1
        if index < len(grouping):
            size = grouping[index] if grouping[index] > 0 else math.inf
    groups.append(rest)
    return numpunct.thousands_sep.join(reversed(groups))


def _plain_value(text: str, max_value: int) -> int:
    if not text or not all(_is_digit(ch) for ch in text):
        raise BadLexicalCast(str, int)
    value = int(text)
    if value > max_value:
        raise BadLexicalCast(str, int)
    return value


def parse_unsigned(text: str, max_value: int, numpunct: Numpunct | None = None) -> int:
    """Read an unsigned integer no greater than ``max_value``.

    Separators are accepted only where ``numpunct.grouping`` places them;
    text without any separators is always accepted.  Raises
    ``BadLexicalCast`` on malformed input or overflow.
    """
    if not text or not _is_digit(text[-1]):
        raise BadLexicalCast(str, int)
    if not _uses_grouping(numpunct):
        return _plain_value(text, max_value)

    grouping = numpunct.grouping
    sep = numpunct.thousands_sep
    digits = [text[-1]]
    rest = text[:-1]
    current = 0
    remained = grouping[0] - 1

    while rest:
        ch = rest[-1]
        if remained:
            if not _is_digit(ch):
                raise BadLexicalCast(str, int)
            digits.append(ch)
            remained -= 1
            rest = rest[:-1]
        elif ch != sep:
            return _plain_value(rest + "".join(reversed(digits)), max_value)
        else:
            if len(rest) == 1:
                raise BadLexicalCast(str, int)
            if current < len(grouping) - 1:
                current += 1
            remained = grouping[current]
            rest = rest[:-1]

    return _plain_value("".join(reversed(digits)), max_value)