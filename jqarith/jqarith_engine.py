"""
Binary dispatch for the arithmetic operators.

Each operator is a function of two already-evaluated operands. It first
tries the same-kind rule for the pair, then its cross-kind special cases,
and finally returns a BinopTypeError. Nothing here raises for data: every
pair of operands produces a result value.
"""

import math
import sys
from typing import Any, Callable

from jqarith.jqarith_datatypes import (
    Kind, BinopTypeError, kind_of, is_number, deep_equal, promote, to_float,
)

Binop = Callable[[Any, Any], Any]


def binop_type_switch(l: Any, r: Any, *,
                      ints: Binop,
                      floats: Binop,
                      strings: Binop,
                      sequences: Binop,
                      mappings: Binop,
                      fallback: Binop) -> Any:
    """Routes an operand pair to the callback for its kinds.

    Int pairs go to `ints`; any int/float mix goes to `floats` with both
    sides promoted. Every other pair of matching kinds has its own
    callback, and everything else goes to `fallback` with the original
    operands.
    """
    kl, kr = kind_of(l), kind_of(r)
    match kl, kr:
        case Kind.INT, Kind.INT:
            return ints(l, r)
        case (Kind.INT | Kind.FLOAT), (Kind.INT | Kind.FLOAT):
            return floats(*promote(l, r))
        case Kind.STRING, Kind.STRING:
            return strings(l, r)
        case Kind.SEQUENCE, Kind.SEQUENCE:
            return sequences(l, r)
        case Kind.MAPPING, Kind.MAPPING:
            return mappings(l, r)
        case _:
            return fallback(l, r)


def _type_error(verb: str) -> Binop:
    def _fail(l, r):
        return BinopTypeError(verb, l, r)
    return _fail


def _merge(l, r) -> dict:
    merged = dict(l)
    merged.update(r)
    return merged


# ===================================================================
# Add
# ===================================================================

def op_add(l: Any, r: Any) -> Any:
    # null absorption wins over every other rule, mismatched kinds included
    if l is None:
        return r
    if r is None:
        return l
    return binop_type_switch(
        l, r,
        ints=lambda a, b: a + b,
        floats=lambda a, b: a + b,
        strings=lambda a, b: a + b,
        sequences=lambda a, b: [*a, *b],
        mappings=_merge,
        fallback=_type_error("add"),
    )


# ===================================================================
# Subtract
# ===================================================================

def _exclude(l: list, r: list) -> list:
    return [v for v in l if not any(deep_equal(v, w) for w in r)]


def op_sub(l: Any, r: Any) -> Any:
    fail = _type_error("subtract")
    return binop_type_switch(
        l, r,
        ints=lambda a, b: a - b,
        floats=lambda a, b: a - b,
        strings=fail,
        sequences=_exclude,
        mappings=fail,
        fallback=fail,
    )


# ===================================================================
# Multiply
# ===================================================================

def _repeat_string(s: str, count: float, l: Any, r: Any) -> Any:
    if math.isnan(count) or count < 0:
        return None
    if count < 1:
        return s
    if math.isinf(count):
        return BinopTypeError("multiply", l, r)
    times = math.floor(count)
    # str repetition fails past sys.maxsize characters
    if times > sys.maxsize or len(s) * times > sys.maxsize:
        return BinopTypeError("multiply", l, r)
    try:
        return s * times
    except MemoryError:
        return BinopTypeError("multiply", l, r)


def _mul_fallback(l: Any, r: Any) -> Any:
    kl, kr = kind_of(l), kind_of(r)
    if kl is Kind.STRING and is_number(r):
        return _repeat_string(l, to_float(r), l, r)
    if kr is Kind.STRING and is_number(l):
        return _repeat_string(r, to_float(l), l, r)
    return BinopTypeError("multiply", l, r)


def op_mul(l: Any, r: Any) -> Any:
    fail = _type_error("multiply")
    return binop_type_switch(
        l, r,
        ints=lambda a, b: a * b,
        floats=lambda a, b: a * b,
        strings=fail,
        sequences=fail,
        mappings=_merge,
        fallback=_mul_fallback,
    )


# ===================================================================
# Divide
# ===================================================================

def _int_div(l: int, r: int) -> Any:
    if r == 0:
        return BinopTypeError("divide", l, r)
    q = abs(l) // abs(r)
    return q if (l < 0) == (r < 0) else -q


def _float_div(l: float, r: float) -> float:
    if r == 0.0:
        if l == 0.0 or math.isnan(l):
            return math.nan
        return math.copysign(math.inf, l) * math.copysign(1.0, r)
    return l / r


def _split(l: str, r: str) -> list:
    if r == "":
        return list(l)
    return l.split(r)


def op_div(l: Any, r: Any) -> Any:
    fail = _type_error("divide")
    return binop_type_switch(
        l, r,
        ints=_int_div,
        floats=_float_div,
        strings=_split,
        sequences=fail,
        mappings=fail,
        fallback=fail,
    )
