#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from llbc_ast import Assign, FunBody, FunDecl, FunSig, GlobalDecl, Return, Statement, Var, mk_sequence
from llbc_crate import DeclContext
from llbc_expressions import Constant, Move, Place, Use
from llbc_formatter import AstFormatter
from llbc_types import (
    Adt,
    AdtId,
    AssumedTy,
    Bool,
    EnumKind,
    EnumVariant,
    FieldDecl,
    FunDeclId,
    GlobalDeclId,
    Integer,
    IntegerTy,
    Never,
    OpaqueKind,
    Ref,
    RefKind,
    RegionVar,
    RegionVarId,
    RVar,
    StructKind,
    TupleId,
    TypeDecl,
    TypeDeclId,
    TypeParam,
    TypeVar,
    TypeVarId,
    VarId,
)
from llbc_values import ConstScalar, ScalarValue

U32 = Integer(IntegerTy.U32)
T = TypeVar(TypeVarId(0))


def _demo_types():
    pair = TypeDecl(
        TypeDeclId(0),
        ("demo", "Pair"),
        StructKind((FieldDecl("fst", U32), FieldDecl("snd", U32))),
    )
    list_ = TypeDecl(
        TypeDeclId(1),
        ("demo", "List"),
        EnumKind((
            EnumVariant("Cons", (
                FieldDecl(None, T),
                FieldDecl(None, Adt(AssumedTy.BOX, (), (Adt(AdtId(TypeDeclId(1)), (), (T,)),))),
            )),
            EnumVariant("Nil"),
        )),
        type_params=(TypeParam(TypeVarId(0), "T"),),
    )
    handle = TypeDecl(TypeDeclId(2), ("demo", "Handle"), OpaqueKind())
    return [pair, list_, handle]


def _demo_functions():
    ident = FunDecl(
        FunDeclId(0),
        ("demo", "id"),
        FunSig((T,), T, type_params=(TypeParam(TypeVarId(0), "T"),)),
        body=FunBody(
            1,
            (Var(VarId(0), None, T), Var(VarId(1), "x", T)),
            mk_sequence(
                Statement(Assign(Place(VarId(0)), Use(Move(Place(VarId(1)))))),
                Statement(Return()),
            ),
        ),
    )
    ext = FunDecl(FunDeclId(1), ("demo", "ext"), FunSig((U32,), Bool()))
    max_body = FunDecl(
        FunDeclId(2),
        ("demo", "MAX_body"),
        FunSig((), U32),
        body=FunBody(
            0,
            (Var(VarId(0), None, U32),),
            mk_sequence(
                Statement(Assign(Place(VarId(0)), Use(Constant(U32, ConstScalar(ScalarValue(10, IntegerTy.U32)))))),
                Statement(Return()),
            ),
        ),
    )
    return [ident, ext, max_body]


@pytest.fixture
def demo_decls() -> DeclContext:
    """
    A small crate:
      types:     demo::Pair (struct), demo::List<T> (enum), demo::Handle (opaque)
      globals:   demo::MAX
      functions: demo::id<T>, demo::ext (opaque), demo::MAX_body
    """
    globals_ = [GlobalDecl(GlobalDeclId(0), ("demo", "MAX"), U32, FunDeclId(2))]
    return DeclContext.from_decls(_demo_types(), globals_, _demo_functions(), name="demo")


@pytest.fixture
def demo_locals():
    pair = Adt(AdtId(TypeDeclId(0)))
    list_u32 = Adt(AdtId(TypeDeclId(1)), (), (U32,))
    return (
        Var(VarId(0), None, U32),
        Var(VarId(1), "x", U32),
        Var(VarId(2), "y", U32),
        Var(VarId(3), "b", Bool()),
        Var(VarId(4), "p", pair),
        Var(VarId(5), "l", list_u32),
        Var(VarId(6), "r", Ref(RVar(RegionVarId(0)), U32, RefKind.MUT)),
        Var(VarId(7), "t", Adt(TupleId(), (), (U32, Bool()))),
        Var(VarId(8), "bx", Adt(AssumedTy.BOX, (), (U32,))),
        Var(VarId(9), "n", Never()),
    )


@pytest.fixture
def fmt(demo_decls, demo_locals) -> AstFormatter:
    """Formatter for a function `demo::f<'a, T>` with the locals of `demo_locals`."""
    return AstFormatter(
        decls=demo_decls,
        decl_name="demo::f",
        locals={v.index: v for v in demo_locals},
        region_params={RegionVarId(0): RegionVar(RegionVarId(0), "'a")},
        type_params={TypeVarId(0): TypeParam(TypeVarId(0), "T")},
    )


@pytest.fixture
def write_crate_file(tmp_path: Path):
    """Write a JSON crate export under tmp_path and return its path."""

    def _write(data, name: str = "crate.json") -> Path:
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def demo_json():
    """The JSON export of the `demo_decls` crate."""
    u32 = {"Integer": "U32"}
    t = {"TypeVar": 0}
    return {
        "name": "demo",
        "types": [
            {
                "def_id": 0,
                "name": ["demo", "Pair"],
                "kind": {"Struct": [{"name": "fst", "ty": u32}, {"name": "snd", "ty": u32}]},
            },
            {
                "def_id": 1,
                "name": ["demo", "List"],
                "type_params": [{"index": 0, "name": "T"}],
                "kind": {"Enum": [
                    {"name": "Cons", "fields": [
                        {"name": None, "ty": t},
                        {"name": None, "ty": {"Adt": [{"Assumed": "Box"}, [], [{"Adt": [{"Adt": 1}, [], [t]]}]]}},
                    ]},
                    {"name": "Nil", "fields": []},
                ]},
            },
            {"def_id": 2, "name": ["demo", "Handle"], "kind": "Opaque"},
        ],
        "globals": [
            {"def_id": 0, "name": ["demo", "MAX"], "ty": u32, "body_id": 2},
        ],
        "functions": [
            {
                "def_id": 0,
                "name": ["demo", "id"],
                "signature": {"type_params": [{"index": 0, "name": "T"}], "inputs": [t], "output": t},
                "body": {
                    "arg_count": 1,
                    "locals": [{"index": 0, "name": None, "ty": t}, {"index": 1, "name": "x", "ty": t}],
                    "body": {"content": {"Sequence": [
                        {"content": {"Assign": [
                            {"var_id": 0, "projection": []},
                            {"Use": {"Move": {"var_id": 1, "projection": []}}},
                        ]}},
                        {"content": "Return"},
                    ]}},
                },
            },
            {
                "def_id": 1,
                "name": ["demo", "ext"],
                "signature": {"inputs": [u32], "output": "Bool"},
                "body": None,
            },
            {
                "def_id": 2,
                "name": ["demo", "MAX_body"],
                "signature": {"inputs": [], "output": u32},
                "body": {
                    "arg_count": 0,
                    "locals": [{"index": 0, "name": None, "ty": u32}],
                    "body": {"content": {"Sequence": [
                        {"content": {"Assign": [
                            {"var_id": 0, "projection": []},
                            {"Use": {"Const": [u32, {"Scalar": {"U32": 10}}]}},
                        ]}},
                        {"content": "Return"},
                    ]}},
                },
            },
        ],
    }


DEMO_CRATE_TEXT = """\
struct demo::Pair =
{
  fst : u32,
  snd : u32,
}

enum demo::List<T> =
|  Cons(T, Box<demo::List<T>>)
|  Nil

opaque type demo::Handle

global demo::MAX : u32 = demo::MAX_body

fn demo::id<T>(x : T) -> T {
  var@0 : T;
  x : T;

  var@0 := move x;
  return
}

opaque fn demo::ext(u32) -> bool

fn demo::MAX_body() -> u32 {
  var@0 : u32;

  var@0 := const (10 : u32);
  return
}"""


@pytest.fixture
def demo_crate_text() -> str:
    return DEMO_CRATE_TEXT
