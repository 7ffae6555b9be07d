"""
Defines the value domain for jqarith binary operators.

Values are plain Python objects: None, int, float, str, list and
string-keyed mappings. This module classifies them into kinds, provides
the structural equality used by subtraction, the numeric promotion rule
shared by every arithmetic operator, and the BinopTypeError failure value.
"""

import collections.abc
import math
from enum import Enum
from typing import Any, Optional, Tuple

# =================================================================
# Kinds
# =================================================================

class Kind(Enum):
    NULL = "null"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


NUMERIC_KINDS = (Kind.INT, Kind.FLOAT)


def kind_of(value: Any) -> Optional[Kind]:
    """Returns the Kind of a value, or None when it is outside the domain."""
    if value is None:
        return Kind.NULL
    # bool is an int subclass but never a number here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, list):
        return Kind.SEQUENCE
    if isinstance(value, collections.abc.Mapping):
        return Kind.MAPPING
    return None


def is_number(value: Any) -> bool:
    return kind_of(value) in NUMERIC_KINDS


# =================================================================
# Equality and numeric promotion
# =================================================================

def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality over the value tree.

    Kinds must match exactly, so 1 and 1.0 differ. Sequences compare
    pairwise in order; mappings compare by key set and values regardless
    of insertion order.
    """
    ka = kind_of(a)
    if ka is None or ka is not kind_of(b):
        # Out-of-domain values only equal themselves
        return ka is None and kind_of(b) is None and a is b
    if ka is Kind.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    if ka is Kind.MAPPING:
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b:
                return False
            if not deep_equal(value, b[key]):
                return False
        return True
    return a == b


def to_float(n) -> float:
    """Converts a number to float, saturating to +/-inf for huge integers."""
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def promote(l: Any, r: Any) -> Tuple[Any, Any]:
    """Applies numeric promotion: int pairs stay integral, anything with a float goes float."""
    if kind_of(l) is Kind.INT and kind_of(r) is Kind.INT:
        return l, r
    return to_float(l), to_float(r)


# =================================================================
# Failure value
# =================================================================

class BinopTypeError:
    """A binary operator applied to operands it has no rule for.

    This is returned as a result, never raised. The interpreter decides
    how to surface it.
    """
    __slots__ = ("verb", "left", "right")

    def __init__(self, verb: str, left: Any, right: Any):
        self.verb = verb
        self.left = left
        self.right = right

    @property
    def message(self) -> str:
        from jqarith.jqarith_printer import type_name, preview
        return (
            f"cannot {self.verb}: "
            f"{type_name(self.left)} ({preview(self.left)}) and "
            f"{type_name(self.right)} ({preview(self.right)})"
        )

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"<BinopTypeError verb={self.verb!r} left={self.left!r} right={self.right!r}>"

    def __eq__(self, other):
        if not isinstance(other, BinopTypeError):
            return NotImplemented
        return (
            self.verb == other.verb
            and deep_equal(self.left, other.left)
            and deep_equal(self.right, other.right)
        )

    __hash__ = None


def is_error(value: Any) -> bool:
    return isinstance(value, BinopTypeError)
