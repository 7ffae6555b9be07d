"""
The arithmetic operator registry: symbols, tags, and the dispatch entry point.
"""

from enum import Enum
from typing import Any, Sequence

from jqarith.jqarith_engine import op_add, op_sub, op_mul, op_div


class Operator(Enum):
    ADD = "add"
    SUB = "subtract"
    MUL = "multiply"
    DIV = "divide"

    @property
    def verb(self) -> str:
        """The word used in failure messages, e.g. 'cannot subtract: ...'."""
        return self.value

    @property
    def symbol(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)

    def eval(self, l: Any, r: Any) -> Any:
        return evaluate(self, l, r)


OPERATOR_MAP = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "*": Operator.MUL,
    "/": Operator.DIV,
}

_SYMBOLS = {op: sym for sym, op in OPERATOR_MAP.items()}

_HANDLERS = {
    Operator.ADD: op_add,
    Operator.SUB: op_sub,
    Operator.MUL: op_mul,
    Operator.DIV: op_div,
}


def parse_symbol(symbol: str) -> Operator:
    """Resolves one of '+', '-', '*', '/'. Any other symbol raises KeyError."""
    return OPERATOR_MAP[symbol]


def capture(tokens: Sequence[str]) -> Operator:
    """Token-capture hook for parsers: resolves the first captured token."""
    if not tokens:
        raise ValueError("capture() needs at least one token")
    return parse_symbol(tokens[0])


def render(op: Operator) -> str:
    try:
        return _SYMBOLS[op]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown operator: {op!r}") from None


def evaluate(op: Operator, l: Any, r: Any) -> Any:
    """
    Applies `op` to two evaluated operands.

    Returns the result value, or a BinopTypeError when the operand kinds
    have no rule. Only an invalid `op` raises.
    """
    try:
        handler = _HANDLERS[op]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported operator: {op!r}") from None
    return handler(l, r)


__all__ = [
    "Operator",
    "OPERATOR_MAP",
    "parse_symbol",
    "capture",
    "render",
    "evaluate",
]
