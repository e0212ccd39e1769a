"""
Numeric literal parsing utilities.

This module converts already-isolated literal text (for example ``"0x1F"``,
``"-42"`` or ``"6.02e23"``) into numeric values. It does not scan text for
literals; callers hand in a single literal substring.

Two parsers are provided:
  - parse_integer_literal: base-aware, strict, bounded to the signed 32-bit range.
  - parse_float_literal: standard string-to-float coercion.

Both return a NaN sentinel instead of raising on bad input. Because NaN is never
equal to itself, callers must test results with is_not_a_number(), not ``==``.

Vectorized variants operating on pandas Series are provided for bulk work
(for example, a column of literal strings loaded from a CSV).
"""

import math
import re
from functools import lru_cache
from typing import Pattern, Union

import numpy as np
import pandas as pd

# Distinguished "could not parse" value shared by both parsers.
NOT_A_NUMBER: float = float("nan")

INT32_MIN: int = int(np.iinfo(np.int32).min)
INT32_MAX: int = int(np.iinfo(np.int32).max)

MIN_BASE = 2
MAX_BASE = 36

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Optional sign, mantissa with digits on at least one side of the point,
# optional exponent. Infinity spellings are handled separately.
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)
_INFINITY_WORDS = frozenset({"inf", "infinity"})


def is_not_a_number(value: Union[int, float, None]) -> bool:
    """
    Return True if value is the NotANumber sentinel (or any NaN / None).

    **Conceptual**: The parsers in this module signal failure with NaN. NaN
    compares unequal to everything, itself included, so ``result == NOT_A_NUMBER``
    is always False. This predicate is the only correct way to check.

    Args:
        value: A result from parse_integer_literal or parse_float_literal.

    Returns:
        True if value is NaN or None, False for any real number.
    """
    if value is None:
        return True
    if isinstance(value, int):
        return False
    return math.isnan(value)


def fits_int32(value: Union[int, float]) -> bool:
    """
    Check whether value is representable losslessly as a signed 32-bit integer.

    **Mathematical**: True iff value has no fractional part and
        -2**31 <= value <= 2**31 - 1

    Non-finite values (NaN, +/-inf) never fit.
    """
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
    return INT32_MIN <= value <= INT32_MAX


@lru_cache(maxsize=MAX_BASE)
def _digit_pattern(base: int) -> Pattern[str]:
    # ASCII-only digit class; str.isdigit() would also admit e.g. Arabic-Indic digits.
    valid = _DIGITS[:base]
    letters = valid[10:]
    char_class = re.escape(valid[:10]) + re.escape(letters) + re.escape(letters.upper())
    return re.compile(rf"[+-]?[{char_class}]+")


@lru_cache(maxsize=MAX_BASE)
def _max_int32_digits(base: int) -> int:
    """Digit count of 2**31 (the largest int32 magnitude) written in base."""
    return len(np.base_repr(-INT32_MIN, base))


def parse_integer_literal(text: str, base: int) -> Union[int, float]:
    """
    Parse an integer literal in the given base, bounded to the signed 32-bit range.

    **Conceptual**: Upstream code has already isolated a literal such as ``"0xFF"``
    or ``"1234"`` and knows which base it was written in. This function turns that
    text into an int, or reports "not representable" via the NaN sentinel. It never
    raises, so it is safe to call on untrusted input inside tight loops.

    **Functionally**:
    1. If base != 10, the first two characters are treated as a radix prefix
       (``0x``, ``0o``, ``0b``) and stripped without inspection. With base == 10
       nothing is stripped.
    2. The remainder must be an optional sign followed by one or more ASCII digits
       valid for base. Trailing characters, whitespace and ``_`` separators are
       rejected (whole-string match, no partial parse).
    3. The value must satisfy INT32_MIN <= v <= INT32_MAX.

    **Edge cases**:
    - ``""``, ``"0x"`` or ``"0xZZ"`` -> NOT_A_NUMBER (no valid digits).
    - ``"0xFFFFFFFF"`` with base 16 -> NOT_A_NUMBER (4294967295 > 2**31 - 1).
    - ``"12abc"`` with base 10 -> NOT_A_NUMBER (strict match).
    - base outside 2..36 or non-str text -> NOT_A_NUMBER.

    Args:
        text: The literal text, prefixed when base != 10.
        base: Radix used to interpret the digits (2..36).

    Returns:
        Parsed int in the signed 32-bit range, or NOT_A_NUMBER.

    Usage example:
        >>> parse_integer_literal("0x1F", 16)
        31
        >>> is_not_a_number(parse_integer_literal("0xFFFFFFFF", 16))
        True
    """
    if not isinstance(text, str) or isinstance(base, bool) or not isinstance(base, int):
        return NOT_A_NUMBER
    if not MIN_BASE <= base <= MAX_BASE:
        return NOT_A_NUMBER

    body = text if base == 10 else text[2:]
    if not _digit_pattern(base).fullmatch(body):
        return NOT_A_NUMBER

    # Convert only the significant digits: int() refuses very long strings in
    # non-power-of-two bases, and anything longer than 2**31 cannot fit anyway.
    sign = "-" if body[0] == "-" else ""
    digits = body.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _max_int32_digits(base):
        return NOT_A_NUMBER

    value = int(sign + digits, base)
    return value if fits_int32(value) else NOT_A_NUMBER


def parse_float_literal(text: str) -> float:
    """
    Parse a floating-point literal with standard numeric coercion.

    Surrounding whitespace is tolerated and scientific notation is supported.
    ``inf``/``infinity`` (any case, optionally signed) parse to infinity.
    Anything else, including the empty string and ``_`` digit separators,
    yields NaN. Never raises.

    Usage example:
        >>> parse_float_literal(" 6.02e23 ")
        6.02e+23
        >>> is_not_a_number(parse_float_literal("abc"))
        True
    """
    if not isinstance(text, str):
        return NOT_A_NUMBER

    stripped = text.strip()
    unsigned = stripped.lstrip("+-")
    is_infinity = len(stripped) - len(unsigned) <= 1 and unsigned.lower() in _INFINITY_WORDS
    if not (is_infinity or _FLOAT_PATTERN.fullmatch(stripped)):
        return NOT_A_NUMBER

    return float(stripped)


def parse_integer_literals(literals: pd.Series, base: int) -> pd.Series:
    """
    Apply parse_integer_literal element-wise to a Series of literal strings.

    **Functionally**:
    - Input: Series of str (other values, e.g. None, are treated as unparseable).
    - Output: float64 Series, same index. Parsed values are exact (every int32
      is representable in float64); failures are NaN.

    Args:
        literals: Series of literal text, all in the same base.
        base: Radix shared by every element.

    Returns:
        Series of parsed values with NaN where parsing failed.
    """
    parsed = [parse_integer_literal(text, base) for text in literals]
    return pd.Series(parsed, index=literals.index, dtype="float64", name=literals.name)


def parse_float_literals(literals: pd.Series) -> pd.Series:
    """Apply parse_float_literal element-wise; NaN where parsing failed."""
    parsed = [parse_float_literal(text) for text in literals]
    return pd.Series(parsed, index=literals.index, dtype="float64", name=literals.name)
