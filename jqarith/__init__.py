"""jqarith public API."""

from jqarith.jqarith_datatypes import (
    BinopTypeError,
    Kind,
    deep_equal,
    is_error,
    kind_of,
    promote,
)
from jqarith.jqarith_operators import (
    OPERATOR_MAP,
    Operator,
    capture,
    evaluate,
    parse_symbol,
    render,
)
from jqarith.jqarith_printer import Printer, preview, type_name
from jqarith.jqarith_runtime import (
    BinaryOp,
    BinopFailure,
    Deferred,
    ExecutionResult,
    apply,
    check,
)

__all__ = [
    "BinopTypeError",
    "Kind",
    "deep_equal",
    "is_error",
    "kind_of",
    "promote",
    "OPERATOR_MAP",
    "Operator",
    "capture",
    "evaluate",
    "parse_symbol",
    "render",
    "Printer",
    "preview",
    "type_name",
    "BinaryOp",
    "Deferred",
    "BinopFailure",
    "ExecutionResult",
    "apply",
    "check",
]
