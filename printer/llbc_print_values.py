#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import json

from llbc_types import IntegerTy
from llbc_values import ScalarValue


def format_integer_ty(int_ty: IntegerTy) -> str:
    return int_ty.value


def format_scalar_value(sv: ScalarValue) -> str:
    """The bare integer; the type is printed by the caller where it matters."""
    return str(sv.value)


def format_bool(b: bool) -> str:
    return "true" if b else "false"


def format_char(c: str) -> str:
    if c == "'":
        return "'\\''"
    escaped = json.dumps(c, ensure_ascii=False)[1:-1]
    return f"'{escaped}'"


def format_string(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)
