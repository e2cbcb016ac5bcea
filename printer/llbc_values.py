#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from llbc_types import GlobalDeclId, IntegerTy, VariantId


@dataclass(frozen=True)
class ScalarValue:
    """An integer value tagged with its integer type."""
    value: int
    int_ty: IntegerTy


# --- constant values (operands of kind `Constant`) ---

@dataclass(frozen=True)
class ConstScalar:
    value: ScalarValue


@dataclass(frozen=True)
class ConstBool:
    value: bool


@dataclass(frozen=True)
class ConstChar:
    value: str


@dataclass(frozen=True)
class ConstString:
    value: str


@dataclass(frozen=True)
class ConstAdt:
    """A constant struct (variant_id is None) or enum value."""
    variant_id: Optional[VariantId]
    fields: Tuple["ConstantValue", ...] = ()


@dataclass(frozen=True)
class ConstGlobal:
    global_id: GlobalDeclId


ConstantValue = Union[ConstScalar, ConstBool, ConstChar, ConstString, ConstAdt, ConstGlobal]
