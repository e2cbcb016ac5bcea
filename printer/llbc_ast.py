#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from llbc_expressions import Assertion, FnCall, Operand, Place, Rvalue
from llbc_meta import Name, Node
from llbc_types import FunDeclId, GlobalDeclId, IntegerTy, RegionVar, Ty, TypeParam, VarId, VariantId
from llbc_values import ScalarValue


# ==========================
# Statements
# ==========================


@dataclass(frozen=True)
class Statement(Node):
    """A statement node; `span` carries the source location when known."""
    content: "RawStatement"


@dataclass(frozen=True)
class Assign:
    place: Place
    rvalue: Rvalue


@dataclass(frozen=True)
class FakeRead:
    place: Place


@dataclass(frozen=True)
class SetDiscriminant:
    place: Place
    variant_id: VariantId


@dataclass(frozen=True)
class Drop:
    place: Place


@dataclass(frozen=True)
class Assert:
    assertion: Assertion


@dataclass(frozen=True)
class Call:
    call: FnCall


@dataclass(frozen=True)
class Panic:
    pass


@dataclass(frozen=True)
class Return:
    pass


@dataclass(frozen=True)
class Break:
    depth: int  # number of enclosing loops to skip, 0 = innermost


@dataclass(frozen=True)
class Continue:
    depth: int


@dataclass(frozen=True)
class Nop:
    pass


@dataclass(frozen=True)
class Sequence:
    first: Statement
    second: Statement


@dataclass(frozen=True)
class Switch:
    switch: "SwitchKind"


@dataclass(frozen=True)
class Loop:
    body: Statement


RawStatement = Union[
    Assign,
    FakeRead,
    SetDiscriminant,
    Drop,
    Assert,
    Call,
    Panic,
    Return,
    Break,
    Continue,
    Nop,
    Sequence,
    Switch,
    Loop,
]


# --- switches ---

@dataclass(frozen=True)
class If:
    operand: Operand
    then_st: Statement
    else_st: Statement


@dataclass(frozen=True)
class SwitchInt:
    operand: Operand
    int_ty: IntegerTy
    branches: Tuple[Tuple[Tuple[ScalarValue, ...], Statement], ...]
    otherwise: Statement


@dataclass(frozen=True)
class Match:
    place: Place
    branches: Tuple[Tuple[Tuple[VariantId, ...], Statement], ...]
    otherwise: Statement


SwitchKind = Union[If, SwitchInt, Match]


def mk_sequence(*stmts: Statement) -> Statement:
    """
    Chain statements into a right-nested Sequence.
    A single statement is returned unchanged.
    """
    if not stmts:
        return Statement(Nop())
    result = stmts[-1]
    for st in reversed(stmts[:-1]):
        result = Statement(Sequence(st, result))
    return result


# ==========================
# Declarations
# ==========================


@dataclass(frozen=True)
class Var:
    """A local variable (the return slot, a parameter, or a temporary)."""
    index: VarId
    name: Optional[str]
    ty: Ty


@dataclass(frozen=True)
class FunSig:
    inputs: Tuple[Ty, ...]
    output: Ty
    region_params: Tuple[RegionVar, ...] = ()
    type_params: Tuple[TypeParam, ...] = ()


@dataclass(frozen=True)
class FunBody:
    """
    Body of a transparent function.

    locals[0] is the return slot, locals[1..arg_count] are the parameters,
    the remaining locals are temporaries.
    """
    arg_count: int
    locals: Tuple[Var, ...]
    body: Statement


@dataclass(frozen=True)
class FunDecl(Node):
    def_id: FunDeclId
    name: Name
    signature: FunSig
    body: Optional[FunBody] = None

    @property
    def is_opaque(self) -> bool:
        return self.body is None


@dataclass(frozen=True)
class GlobalDecl(Node):
    def_id: GlobalDeclId
    name: Name
    ty: Ty
    body_id: FunDeclId
