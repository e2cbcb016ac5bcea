#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from llbc_expressions import (
    Aggregate,
    AggregatedAdt,
    AggregatedOption,
    AggregatedTuple,
    Assertion,
    Assumed,
    AssumedFunId,
    BinaryOp,
    BinOp,
    BorrowKind,
    Cast,
    Constant,
    Copy,
    Deref,
    DerefBox,
    Discriminant,
    Field,
    FnCall,
    Global,
    Move,
    Neg,
    Not,
    OPTION_NONE_VARIANT_ID,
    OPTION_SOME_VARIANT_ID,
    Place,
    ProjAdt,
    ProjTuple,
    Regular,
    RvRef,
    UnaryOp,
    Use,
)
from llbc_internal_error import InternalPrinterError
from llbc_print_expressions import format_assertion, format_call, format_operand, format_place, format_rvalue
from llbc_print_values import format_char, format_scalar_value, format_string
from llbc_types import (
    Bool,
    Char,
    FieldId,
    FunDeclId,
    GlobalDeclId,
    Integer,
    IntegerTy,
    Str,
    TypeDeclId,
    VarId,
    VariantId,
)
from llbc_values import ConstAdt, ConstBool, ConstChar, ConstGlobal, ConstScalar, ConstString, ScalarValue

U32 = Integer(IntegerTy.U32)


def _place(index: int, *projection) -> Place:
    return Place(VarId(index), tuple(projection))


# --- places ---

def test_place_projections(fmt):
    assert format_place(fmt, _place(6, Deref())) == "*(r)"
    assert format_place(fmt, _place(8, DerefBox())) == "deref_box(bx)"
    assert format_place(fmt, _place(7, Field(ProjTuple(2), FieldId(1)))) == "(t).1"


def test_struct_field_uses_field_name(fmt):
    assert format_place(fmt, _place(4, Field(ProjAdt(TypeDeclId(0)), FieldId(1)))) == "(p).snd"


def test_enum_field_names_the_variant(fmt):
    place = _place(5, Field(ProjAdt(TypeDeclId(1), VariantId(0)), FieldId(0)))

    assert format_place(fmt, place) == "(l as Cons).0"


def test_projections_compose_left_to_right(fmt):
    place = _place(6, Deref(), Field(ProjTuple(2), FieldId(0)))

    assert format_place(fmt, place) == "(*(r)).0"


def test_unknown_field(fmt):
    with pytest.raises(InternalPrinterError) as exc:
        format_place(fmt, _place(4, Field(ProjAdt(TypeDeclId(0)), FieldId(5))))

    assert exc.value.message == "[ICE-0080] unknown field of 'demo::Pair' id 5"


# --- operands ---

def test_operands(fmt):
    assert format_operand(fmt, Copy(_place(1))) == "copy x"
    assert format_operand(fmt, Move(_place(2))) == "move y"


def test_constants(fmt):
    assert format_operand(fmt, Constant(U32, ConstScalar(ScalarValue(3, IntegerTy.U32)))) == "const (3 : u32)"
    assert format_operand(fmt, Constant(Bool(), ConstBool(True))) == "const (true : bool)"
    assert format_operand(fmt, Constant(Char(), ConstChar("a"))) == "const ('a' : char)"
    assert format_operand(fmt, Constant(Str(), ConstString("hi\n"))) == 'const ("hi\\n" : str)'
    assert format_operand(fmt, Constant(U32, ConstGlobal(GlobalDeclId(0)))) == "const (demo::MAX : u32)"


def test_constant_adt(fmt):
    value = ConstAdt(VariantId(1), (ConstBool(False), ConstScalar(ScalarValue(2, IntegerTy.U8))))

    assert format_operand(fmt, Constant(Bool(), value)) == "const (variant@1 {false, 2} : bool)"
    assert format_operand(fmt, Constant(Bool(), ConstAdt(None))) == "const ({} : bool)"


def test_values():
    assert format_scalar_value(ScalarValue(-12, IntegerTy.I64)) == "-12"
    assert format_char("'") == "'\\''"
    assert format_char("\t") == "'\\t'"
    assert format_string('say "hi"') == '"say \\"hi\\""'


# --- r-values ---

def test_borrows(fmt):
    assert format_rvalue(fmt, RvRef(_place(1), BorrowKind.SHARED)) == "&x"
    assert format_rvalue(fmt, RvRef(_place(1), BorrowKind.MUT)) == "&mut x"
    assert format_rvalue(fmt, RvRef(_place(1), BorrowKind.TWO_PHASE_MUT)) == "&two-phase x"
    assert format_rvalue(fmt, RvRef(_place(1), BorrowKind.SHALLOW)) == "&shallow x"


def test_unary_operators(fmt):
    assert format_rvalue(fmt, UnaryOp(Not(), Copy(_place(3)))) == "¬ copy b"
    assert format_rvalue(fmt, UnaryOp(Neg(), Copy(_place(1)))) == "- copy x"
    assert format_rvalue(fmt, UnaryOp(Cast(IntegerTy.U32, IntegerTy.I64), Copy(_place(1)))) == "cast<u32,i64> copy x"


def test_binary_operators(fmt):
    assert format_rvalue(fmt, BinaryOp(BinOp.ADD, Copy(_place(1)), Copy(_place(2)))) == "copy x + copy y"
    assert format_rvalue(fmt, BinaryOp(BinOp.SHL, Move(_place(1)), Copy(_place(2)))) == "move x << copy y"
    assert format_rvalue(fmt, BinaryOp(BinOp.NE, Copy(_place(1)), Copy(_place(2)))) == "copy x != copy y"


def test_use_discriminant_and_global(fmt):
    assert format_rvalue(fmt, Use(Copy(_place(1)))) == "copy x"
    assert format_rvalue(fmt, Discriminant(_place(5))) == "@discriminant(l)"
    assert format_rvalue(fmt, Global(GlobalDeclId(0))) == "demo::MAX"


def test_tuple_and_option_aggregates(fmt):
    tuple_ = Aggregate(AggregatedTuple(), (Copy(_place(1)), Copy(_place(3))))
    none = Aggregate(AggregatedOption(OPTION_NONE_VARIANT_ID, U32))
    some = Aggregate(AggregatedOption(OPTION_SOME_VARIANT_ID, U32), (Copy(_place(1)),))

    assert format_rvalue(fmt, tuple_) == "(copy x, copy b)"
    assert format_rvalue(fmt, none) == "@Option::None"
    assert format_rvalue(fmt, some) == "@Option::Some(copy x)"


def test_struct_aggregate_names_fields(fmt):
    rv = Aggregate(AggregatedAdt(TypeDeclId(0)), (Copy(_place(1)), Copy(_place(2))))

    assert format_rvalue(fmt, rv) == "demo::Pair { fst = copy x; snd = copy y; }"


def test_enum_aggregates(fmt):
    cons = Aggregate(AggregatedAdt(TypeDeclId(1), VariantId(0), (), (U32,)), (Copy(_place(1)), Move(_place(8))))
    nil = Aggregate(AggregatedAdt(TypeDeclId(1), VariantId(1), (), (U32,)))

    assert format_rvalue(fmt, cons) == "demo::List::Cons(copy x, move bx)"
    assert format_rvalue(fmt, nil) == "demo::List::Nil"


def test_unknown_variant(fmt):
    with pytest.raises(InternalPrinterError) as exc:
        format_rvalue(fmt, Aggregate(AggregatedAdt(TypeDeclId(1), VariantId(4))))

    assert exc.value.message == "[ICE-0070] unknown variant of 'demo::List' id 4"


# --- assertions and calls ---

def test_assertion(fmt):
    assert format_assertion(fmt, Assertion(Copy(_place(3)), False)) == "assert(copy b == false)"


def test_regular_call_without_arguments(fmt):
    call = FnCall(Regular(FunDeclId(2)), (), _place(0))

    assert format_call(fmt, call) == "var@0 := demo::MAX_body()"


def test_assumed_calls(fmt):
    box_new = FnCall(Assumed(AssumedFunId.BOX_NEW), (Move(_place(1)),), _place(8), type_args=(U32,))
    vec_len = FnCall(Assumed(AssumedFunId.VEC_LEN), (Copy(_place(6)),), _place(2), type_args=(U32,))

    assert format_call(fmt, box_new) == "bx := alloc::boxed::Box<u32>::new(move x)"
    assert format_call(fmt, vec_len) == "y := alloc::vec::Vec<u32>::len(copy r)"


def test_unknown_callee(fmt):
    with pytest.raises(InternalPrinterError) as exc:
        format_call(fmt, FnCall(Regular(FunDeclId(99)), (), _place(0)))

    assert exc.value.message == "[ICE-0050] unknown function declaration id 99"
