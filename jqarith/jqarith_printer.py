"""
A compact printer for jqarith values, used in failure messages.
"""
import collections.abc
import json
import math

from jqarith.jqarith_datatypes import BinopTypeError

PREVIEW_LIMIT = 30

_TYPE_NAMES = {
    type(None): "null",
    bool: "boolean",
    int: "number",
    float: "number",
    str: "string",
    list: "array",
    dict: "object",
}


def type_name(value) -> str:
    """Returns the jq type name of a value ('null', 'number', 'object', ...)."""
    name = _TYPE_NAMES.get(type(value))
    if name is not None:
        return name
    if isinstance(value, collections.abc.Mapping):
        return "object"
    return type(value).__name__


class Printer:
    """Formats values as compact JSON-like text."""

    def __init__(self):
        self._handlers = self._create_handlers()

    def pformat(self, obj) -> str:
        """Public entry point to format an object."""
        handler = self._get_handler(obj)
        return handler(obj)

    def _get_handler(self, obj):
        obj_type = type(obj)
        if obj_type in self._handlers:
            return self._handlers[obj_type]
        if isinstance(obj, collections.abc.Mapping):
            return self._pformat_dict
        return repr

    def _create_handlers(self):
        return {
            type(None): self._pformat_none,
            bool: self._pformat_bool,
            int: self._pformat_int,
            float: self._pformat_float,
            str: self._pformat_str,
            list: self._pformat_list,
            dict: self._pformat_dict,
            BinopTypeError: self._pformat_error,
        }

    def _pformat_none(self, obj):
        return "null"

    def _pformat_bool(self, obj):
        return "true" if obj else "false"

    def _pformat_int(self, obj):
        return str(obj)

    def _pformat_float(self, obj):
        if math.isnan(obj):
            return "nan"
        if math.isinf(obj):
            return "infinity" if obj > 0 else "-infinity"
        # Integral floats print without the trailing '.0', like jq
        if obj.is_integer() and abs(obj) < 1e17:
            return str(int(obj))
        return repr(obj)

    def _pformat_str(self, obj):
        return json.dumps(obj, ensure_ascii=False)

    def _pformat_list(self, obj):
        return "[" + ",".join(self.pformat(item) for item in obj) + "]"

    def _pformat_dict(self, obj):
        items = (f"{self._pformat_str(str(k))}:{self.pformat(v)}" for k, v in obj.items())
        return "{" + ",".join(items) + "}"

    def _pformat_error(self, obj):
        return f"error({self._pformat_str(obj.message)})"


def preview(value, limit: int = PREVIEW_LIMIT) -> str:
    """pformat() truncated to `limit` characters, marked with '...'."""
    text = Printer().pformat(value)
    if len(text) <= limit:
        return text
    return text[:max(limit - 3, 0)] + "..."


__all__ = [
    "Printer",
    "PREVIEW_LIMIT",
    "type_name",
    "preview",
]
