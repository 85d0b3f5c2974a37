"""Building blocks for strict lexical conversions: errors, inf/NaN text,
a seekable read buffer, unsigned digit handling, checked numeric
conversion and stream character-type deduction."""

__version__ = "0.1.0"
__all__ = ["errors", "inf_nan", "pointerbuf", "unsigned", "numeric", "traits"]