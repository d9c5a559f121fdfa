from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from sprints.schemas import PlanRequest

PLAN_PARAMS = ("age", "level", "days", "surface", "injury")

# Browser number literals: signed decimals with optional exponent, Infinity,
# and unsigned 0x/0o/0b integers.
DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
RADIX_LITERAL = re.compile(r"0([xXoObB])([0-9a-fA-F]+)", re.ASCII)
RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def has_plan_input(params: Mapping) -> bool:
    return "age" in params


def _parse_number_text(text: str) -> int | float:
    if DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    radix = RADIX_LITERAL.fullmatch(text)
    if radix:
        try:
            return int(radix.group(2), RADIX_BASES[radix.group(1).lower()])
        except ValueError:
            return math.nan
    return math.nan


def coerce_number(raw: Any) -> int | float:
    """Loose numeric coercion for form and query values.

    Reads text the way a browser's ``Number()`` does: missing or blank input
    is 0, hex/octal/binary prefixes and ``Infinity`` are understood, and any
    other text (``inf``, ``1_00``, non-ASCII digits) is NaN.
    """
    if raw is None or isinstance(raw, bool):
        return int(bool(raw))
    if isinstance(raw, (int, float)):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            return 0
        value = _parse_number_text(text)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _first(params: Mapping, key: str) -> Any:
    # QueryDict.get returns the last repeated value; the first one wins here.
    if hasattr(params, "getlist"):
        values = params.getlist(key)
        return values[0] if values else None
    return params.get(key)


def _text(params: Mapping, key: str) -> str:
    value = _first(params, key)
    return "" if value is None else str(value)


def plan_request_from_params(params: Mapping) -> PlanRequest:
    return PlanRequest(
        age=coerce_number(_first(params, "age")),
        level=_text(params, "level"),
        days=coerce_number(_first(params, "days")),
        surface=_text(params, "surface"),
        injury=_text(params, "injury"),
    )


def collect_plan_params(data: Mapping) -> dict[str, str]:
    return {key: _text(data, key) for key in PLAN_PARAMS}


def plan_query_string(data: Mapping) -> str:
    return urlencode(collect_plan_params(data))
