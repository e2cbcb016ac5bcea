#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from llbc_types import (
    FieldId,
    FunDeclId,
    GlobalDeclId,
    IntegerTy,
    Region,
    Ty,
    TypeDeclId,
    VarId,
    VariantId,
)
from llbc_values import ConstantValue

# ==========================
# Places
# ==========================


@dataclass(frozen=True)
class Deref:
    pass


@dataclass(frozen=True)
class DerefBox:
    pass


@dataclass(frozen=True)
class ProjAdt:
    def_id: TypeDeclId
    variant_id: Optional[VariantId] = None


@dataclass(frozen=True)
class ProjTuple:
    arity: int


FieldProjKind = Union[ProjAdt, ProjTuple]


@dataclass(frozen=True)
class Field:
    proj_kind: FieldProjKind
    field_id: FieldId


ProjectionElem = Union[Deref, DerefBox, Field]


@dataclass(frozen=True)
class Place:
    """A local variable followed by a (possibly empty) path of projections."""
    var_id: VarId
    projection: Tuple[ProjectionElem, ...] = ()


# ==========================
# Operands
# ==========================


@dataclass(frozen=True)
class Copy:
    place: Place


@dataclass(frozen=True)
class Move:
    place: Place


@dataclass(frozen=True)
class Constant:
    ty: Ty
    value: ConstantValue


Operand = Union[Copy, Move, Constant]


# ==========================
# R-values
# ==========================


class BorrowKind(Enum):
    SHARED = "shared"
    MUT = "mut"
    TWO_PHASE_MUT = "two-phase"
    SHALLOW = "shallow"


@dataclass(frozen=True)
class Not:
    pass


@dataclass(frozen=True)
class Neg:
    pass


@dataclass(frozen=True)
class Cast:
    src: IntegerTy
    tgt: IntegerTy


UnOp = Union[Not, Neg, Cast]


class BinOp(Enum):
    BIT_XOR = "^"
    BIT_AND = "&"
    BIT_OR = "|"
    EQ = "=="
    LT = "<"
    LE = "<="
    NE = "!="
    GE = ">="
    GT = ">"
    DIV = "/"
    REM = "%"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    SHL = "<<"
    SHR = ">>"


@dataclass(frozen=True)
class AggregatedTuple:
    pass


@dataclass(frozen=True)
class AggregatedOption:
    variant_id: VariantId
    ty: Ty


@dataclass(frozen=True)
class AggregatedAdt:
    def_id: TypeDeclId
    variant_id: Optional[VariantId] = None
    regions: Tuple[Region, ...] = ()
    types: Tuple[Ty, ...] = ()


AggregateKind = Union[AggregatedTuple, AggregatedOption, AggregatedAdt]

# Variant ids of the assumed `Option` type.
OPTION_NONE_VARIANT_ID = VariantId(0)
OPTION_SOME_VARIANT_ID = VariantId(1)


@dataclass(frozen=True)
class Use:
    op: Operand


@dataclass(frozen=True)
class RvRef:
    """A borrow of a place (`&p`, `&mut p`, ...)."""
    place: Place
    kind: BorrowKind


@dataclass(frozen=True)
class UnaryOp:
    op: UnOp
    operand: Operand


@dataclass(frozen=True)
class BinaryOp:
    op: BinOp
    left: Operand
    right: Operand


@dataclass(frozen=True)
class Discriminant:
    place: Place


@dataclass(frozen=True)
class Aggregate:
    kind: AggregateKind
    operands: Tuple[Operand, ...] = ()


@dataclass(frozen=True)
class Global:
    global_id: GlobalDeclId


Rvalue = Union[Use, RvRef, UnaryOp, BinaryOp, Discriminant, Aggregate, Global]


# ==========================
# Assertions and calls
# ==========================


@dataclass(frozen=True)
class Assertion:
    cond: Operand
    expected: bool


class AssumedFunId(Enum):
    REPLACE = "Replace"
    BOX_NEW = "BoxNew"
    BOX_DEREF = "BoxDeref"
    BOX_DEREF_MUT = "BoxDerefMut"
    BOX_FREE = "BoxFree"
    VEC_NEW = "VecNew"
    VEC_PUSH = "VecPush"
    VEC_INSERT = "VecInsert"
    VEC_LEN = "VecLen"
    VEC_INDEX = "VecIndex"
    VEC_INDEX_MUT = "VecIndexMut"


@dataclass(frozen=True)
class Regular:
    fun_id: FunDeclId


@dataclass(frozen=True)
class Assumed:
    fun_id: AssumedFunId


FunId = Union[Regular, Assumed]


@dataclass(frozen=True)
class FnCall:
    func: FunId
    args: Tuple[Operand, ...]
    dest: Place
    region_args: Tuple[Region, ...] = ()
    type_args: Tuple[Ty, ...] = ()
