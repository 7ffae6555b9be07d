# jqarith_runtime.py

import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional, Union

from jqarith.jqarith_datatypes import BinopTypeError, is_error
from jqarith.jqarith_operators import Operator, evaluate, parse_symbol
from jqarith.jqarith_printer import Printer, type_name


def _dbg(*parts):
    if os.environ.get("JQARITH_DEBUG"):
        try:
            print("[DBG]", *parts, file=sys.stderr)
        except Exception:
            pass


class BinopFailure(Exception):
    """Raised by check() so an interpreter can unwind on a type error."""
    def __init__(self, error: BinopTypeError):
        super().__init__(error.message)
        self.error = error


def check(value: Any) -> Any:
    """Returns `value` unchanged unless it is a BinopTypeError, which is raised."""
    if is_error(value):
        raise BinopFailure(value)
    return value


def _resolve(op: Union[str, Operator]) -> Operator:
    if isinstance(op, Operator):
        return op
    return parse_symbol(op)


# ===================================================================
# Binary nodes
# ===================================================================

class Deferred:
    """An operand computed when its node is evaluated."""
    def __init__(self, func: Callable[[], Any]):
        self.func = func

    def force(self) -> Any:
        return self.func()

    def __repr__(self):
        return f"<Deferred {self.func!r}>"


class BinaryOp:
    """An arithmetic node of an expression tree.

    Operands are plain values, Deferred thunks, or nested BinaryOp nodes;
    the lazy ones are evaluated left first when the node is evaluated.
    Any other object, callables included, is passed through as a value.
    """
    def __init__(self, op: Union[str, Operator], left: Any, right: Any):
        self.op = _resolve(op)
        self.left = left
        self.right = right

    @staticmethod
    def _value(operand: Any) -> Any:
        if isinstance(operand, Deferred):
            return operand.force()
        if isinstance(operand, BinaryOp):
            return operand.eval()
        return operand

    def eval(self) -> Any:
        l = self._value(self.left)
        r = self._value(self.right)
        result = evaluate(self.op, l, r)
        _dbg("BINOP", self.op.symbol, type_name(l), type_name(r), "->", type_name(result))
        return result

    def __repr__(self):
        return f"<BinaryOp {self.op.symbol} left={self.left!r} right={self.right!r}>"


# ===================================================================
# Results
# ===================================================================

@dataclass
class ExecutionResult:
    """The structured result of applying one operator."""
    status: Literal['success', 'error']
    value: Any = None
    error_message: Optional[str] = None
    error: Optional[BinopTypeError] = None

    def format_error(self) -> str:
        if self.status != 'error':
            return ""
        msg = str(self.error_message or "Unknown error")
        if not msg.startswith("TypeError: "):
            return f"TypeError: {msg}"
        return msg

    def format_value(self) -> str:
        if self.status != 'success':
            return ""
        return Printer().pformat(self.value)


def apply(op: Union[str, Operator], left: Any, right: Any) -> ExecutionResult:
    """Evaluates `left op right` and packages the outcome."""
    result = BinaryOp(op, left, right).eval()
    if is_error(result):
        _dbg("BINOP error", result.message)
        return ExecutionResult(
            status='error',
            error_message=f"TypeError: {result.message}",
            error=result,
        )
    return ExecutionResult(status='success', value=result)


__all__ = [
    "BinaryOp",
    "Deferred",
    "BinopFailure",
    "ExecutionResult",
    "apply",
    "check",
]
