"""Choosing the character type and buffer size a lexical conversion works with.

Types taking part in a conversion are described by ``TypeSpec``.  The
character type of a conversion is found in two stages: first from the shape
of the type (a character, a string or a sequence of characters), and, when
that gives nothing, from whether the type can be written to or read from a
narrow or a wide text stream.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

from .numeric import NumericType

_KINDS = frozenset(
    {
        "character",
        "bool",
        "integer",
        "int128",
        "uint128",
        "float",
        "pointer",
        "c_array",
        "array",
        "range",
        "buffer_view",
        "string",
        "other",
    }
)
_NEED_CHAR = frozenset({"character", "string", "buffer_view"})
_MAY_HOLD_CHAR = frozenset({"pointer", "c_array", "array", "range"})
_CHARACTER_NUMERICS = frozenset(
    {NumericType.CHAR, NumericType.SIGNED_CHAR, NumericType.UNSIGNED_CHAR, NumericType.BOOL}
)
_FLOAT_SRC_LENGTH = 156


class CharType(enum.Enum):
    """Character types a text stream may be built on."""

    CHAR = ("char", 1, True)
    SIGNED_CHAR = ("signed char", 1, True)
    UNSIGNED_CHAR = ("unsigned char", 1, False)
    WCHAR = ("wchar_t", 4, True)
    CHAR16 = ("char16_t", 2, False)
    CHAR32 = ("char32_t", 4, False)

    def __init__(self, label: str, size: int, signed: bool) -> None:
        self.label = label
        self.size = size
        self.signed = signed

    def normalized(self) -> "CharType":
        """Map signed and unsigned char onto plain char."""
        if self in (CharType.SIGNED_CHAR, CharType.UNSIGNED_CHAR):
            return CharType.CHAR
        return self


@dataclass(frozen=True)
class TypeSpec:
    """Description of a type that takes part in a conversion.

    ``kind`` is one of ``character``, ``bool``, ``integer``, ``int128``,
    ``uint128``, ``float``, ``pointer``, ``c_array`` (a built-in array, which
    decays to a pointer), ``array``, ``range``, ``buffer_view``, ``string``
    or ``other``.  ``char`` is the character type, or the element type for
    sequences whose elements are characters.  ``numeric`` is the arithmetic
    type of ``integer`` and ``float`` kinds.  ``traits`` names custom
    character traits of a string.  The four stream flags tell whether the
    type can be written to / read from narrow and wide text streams.
    """

    kind: str
    char: CharType | None = None
    numeric: NumericType | None = None
    traits: str | None = None
    is_const: bool = False
    ostreamable: bool = True
    istreamable: bool = True
    wostreamable: bool = False
    wistreamable: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown type kind {self.kind!r}")
        if self.kind in _NEED_CHAR and self.char is None:
            raise ValueError(f"a {self.kind} type needs a character type")
        if self.char is not None and self.kind not in _NEED_CHAR | _MAY_HOLD_CHAR:
            raise ValueError(f"a {self.kind} type has no character type")
        if self.kind == "integer":
            if self.numeric is None or not self.numeric.is_integral or self.numeric in _CHARACTER_NUMERICS:
                raise ValueError("an integer type needs a non-character integral numeric type")
        elif self.kind == "float":
            if self.numeric is None or not self.numeric.is_float:
                raise ValueError("a float type needs a floating numeric type")
        elif self.numeric is not None:
            raise ValueError(f"a {self.kind} type has no numeric type")
        if self.traits is not None and self.kind != "string":
            raise ValueError("only strings carry character traits")


@dataclass(frozen=True)
class StreamTraits:
    """What a conversion from ``source`` to ``target`` needs."""

    src_char: CharType
    target_char: CharType
    char_type: CharType
    traits: str
    is_string_widening_required: bool
    is_source_input_not_optimized: bool
    src_length: int

    @property
    def requires_stringbuf(self) -> bool:
        """True when the source cannot be written by an optimised path."""
        return self.is_string_widening_required or self.is_source_input_not_optimized


def _stage1(spec: TypeSpec) -> CharType | None:
    """Character type known from the shape of the type alone, or ``None``."""
    if spec.kind in ("int128", "uint128"):
        return CharType.CHAR
    if spec.kind in _NEED_CHAR or spec.kind in _MAY_HOLD_CHAR:
        return spec.char
    return None


def _is_integral(spec: TypeSpec) -> bool:
    return spec.kind in ("character", "bool", "integer", "int128", "uint128")


def _digits10(value_bits: int) -> int:
    return len(str((1 << value_bits) - 1)) - 1


def _integral_length(bits: int, signed: bool) -> int:
    return int(signed) + 1 + _digits10(bits - int(signed)) * 2


def _decay(spec: TypeSpec) -> TypeSpec:
    spec = dataclasses.replace(spec, is_const=False)
    if spec.kind == "c_array":
        spec = dataclasses.replace(spec, kind="pointer")
    return spec


def is_character(spec: TypeSpec) -> bool:
    """Tell whether ``spec`` is one of the character types."""
    return spec.kind == "character"


def deduce_source_char(spec: TypeSpec) -> CharType:
    """Character type of the stream a value of ``spec`` is written to.

    Raises ``TypeError`` if the type can be written to neither a narrow nor
    a wide stream.
    """
    stage1 = _stage1(spec)
    if stage1 is not None:
        return stage1.normalized()
    if spec.ostreamable:
        return CharType.CHAR
    if spec.wostreamable:
        return CharType.WCHAR
    raise TypeError("source type can be written neither to a narrow nor to a wide stream")


def deduce_target_char(spec: TypeSpec) -> CharType:
    """Character type of the stream a value of ``spec`` is read from.

    Raises ``TypeError`` if the type can be read from neither a narrow nor a
    wide stream.
    """
    stage1 = _stage1(spec)
    if stage1 is not None:
        return stage1.normalized()
    if spec.istreamable:
        return CharType.CHAR
    if spec.wistreamable:
        return CharType.WCHAR
    raise TypeError("target type can be read neither from a narrow nor from a wide stream")


def src_length(spec: TypeSpec) -> int:
    """Longest text a value of ``spec`` may produce when written.

    Integral types allow for a sign, every digit and a separator after each
    digit; floating types use a fixed conservative bound; everything else
    reports 1.
    """
    if spec.kind == "character":
        return _integral_length(spec.char.size * 8, spec.char.signed)
    if spec.kind == "bool":
        return _integral_length(1, False)
    if spec.kind == "integer":
        return _integral_length(spec.numeric.bits, spec.numeric.min_value < 0)
    if spec.kind == "int128":
        return _integral_length(128, True)
    if spec.kind == "uint128":
        return _integral_length(128, False)
    if spec.kind == "float":
        return _FLOAT_SRC_LENGTH
    return 1


def _own_traits(char_type: CharType, spec: TypeSpec) -> tuple[bool, str | None]:
    if spec.kind == "string" and spec.char is char_type:
        return True, spec.traits
    return False, None


def stream_traits(source: TypeSpec, target: TypeSpec) -> StreamTraits:
    """Work out the stream settings for converting ``source`` to ``target``."""
    src = _decay(source)
    src_char = deduce_source_char(src)
    target_char = deduce_target_char(target)
    char_type = target_char if target_char.size > src_char.size else src_char

    found, traits = _own_traits(char_type, target)
    if not found:
        _, traits = _own_traits(char_type, src)
    if traits is None:
        traits = f"std::char_traits<{char_type.label}>"

    widening = (
        src_char is CharType.CHAR
        and CharType.CHAR.size != target_char.size
        and not is_character(src)
    )
    not_optimized = not (_is_integral(src) or _stage1(src) is not None)

    return StreamTraits(
        src_char=src_char,
        target_char=target_char,
        char_type=char_type,
        traits=traits,
        is_string_widening_required=widening,
        is_source_input_not_optimized=not_optimized,
        src_length=src_length(src),
    )