"""Reading and writing the special floating point values NaN and infinity."""

from __future__ import annotations

import math

_NAN = "nan"
_INFINITY = "infinity"
_OPEN = "("
_CLOSE = ")"


def _iequal(text: str, word: str) -> bool:
    """Compare ``text`` with ``word`` character by character, ignoring case."""
    return len(text) == len(word) and all(
        c == lower or c == lower.upper() for c, lower in zip(text, word)
    )


def parse_inf_nan(text: str) -> float | None:
    """Return NaN or infinity if ``text`` spells one, otherwise ``None``.

    Accepted forms, with an optional leading ``+`` or ``-`` and any letter case:
    ``nan``, ``nan(...)``, ``inf`` and ``infinity``.
    """
    if not text:
        return None
    negative = text[0] == "-"
    if negative or text[0] == "+":
        text = text[1:]
    if len(text) < 3:
        return None

    if _iequal(text[:3], _NAN):
        rest = text[3:]
        if rest:
            if len(rest) < 2 or rest[0] != _OPEN or rest[-1] != _CLOSE:
                return None
        return math.copysign(math.nan, -1.0) if negative else math.nan

    if _iequal(text, _INFINITY[:3]) or _iequal(text, _INFINITY):
        return -math.inf if negative else math.inf

    return None


def format_inf_nan(value: float) -> str | None:
    """Return ``nan``/``inf`` text (with ``-`` for a set sign bit), or ``None``.

    ``None`` means the value is finite and must be formatted some other way.
    """
    if math.isnan(value):
        word = _NAN
    elif math.isinf(value):
        word = _INFINITY[:3]
    else:
        return None
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    return sign + word