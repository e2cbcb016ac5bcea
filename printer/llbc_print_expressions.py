#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from llbc_expressions import (
    Aggregate,
    AggregatedAdt,
    AggregatedOption,
    AggregatedTuple,
    Assertion,
    Assumed,
    AssumedFunId,
    BinaryOp,
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
    Operand,
    OPTION_NONE_VARIANT_ID,
    Place,
    ProjAdt,
    ProjTuple,
    Regular,
    Rvalue,
    RvRef,
    UnaryOp,
    UnOp,
    Use,
)
from llbc_formatter import AstFormatter
from llbc_internal_error import InternalPrinterError
from llbc_print_types import format_generic_args, format_ty
from llbc_print_values import format_bool, format_char, format_integer_ty, format_scalar_value, format_string
from llbc_values import ConstAdt, ConstantValue, ConstBool, ConstChar, ConstGlobal, ConstScalar, ConstString


def format_place(fmt: AstFormatter, p: Place) -> str:
    s = fmt.var_id_to_string(p.var_id)
    for pe in p.projection:
        if isinstance(pe, Deref):
            s = f"*({s})"
        elif isinstance(pe, DerefBox):
            s = f"deref_box({s})"
        elif isinstance(pe, Field):
            kind = pe.proj_kind
            if isinstance(kind, ProjTuple):
                s = f"({s}).{pe.field_id}"
            elif isinstance(kind, ProjAdt):
                field_name = fmt.adt_field_to_string(kind.def_id, kind.variant_id, pe.field_id)
                if kind.variant_id is None:
                    s = f"({s}).{field_name}"
                else:
                    variant_name = fmt.adt_variant_to_string(kind.def_id, kind.variant_id)
                    s = f"({s} as {variant_name}).{field_name}"
            else:
                raise InternalPrinterError(f"[ICE-0090] unexpected field projection {kind!r}")
        else:
            raise InternalPrinterError(f"[ICE-0090] unexpected projection element {pe!r}")
    return s


def format_constant_value(fmt: AstFormatter, cv: ConstantValue) -> str:
    if isinstance(cv, ConstScalar):
        return format_scalar_value(cv.value)
    elif isinstance(cv, ConstBool):
        return format_bool(cv.value)
    elif isinstance(cv, ConstChar):
        return format_char(cv.value)
    elif isinstance(cv, ConstString):
        return format_string(cv.value)
    elif isinstance(cv, ConstAdt):
        fields = ", ".join(format_constant_value(fmt, f) for f in cv.fields)
        variant = f"variant@{cv.variant_id} " if cv.variant_id is not None else ""
        return f"{variant}{{{fields}}}"
    elif isinstance(cv, ConstGlobal):
        return fmt.global_decl_id_to_string(cv.global_id)
    raise InternalPrinterError(f"[ICE-0090] unexpected constant value {cv!r}")


def format_operand(fmt: AstFormatter, op: Operand) -> str:
    if isinstance(op, Copy):
        return f"copy {format_place(fmt, op.place)}"
    elif isinstance(op, Move):
        return f"move {format_place(fmt, op.place)}"
    elif isinstance(op, Constant):
        return f"const ({format_constant_value(fmt, op.value)} : {format_ty(fmt, op.ty)})"
    raise InternalPrinterError(f"[ICE-0090] unexpected operand {op!r}")


_BORROW_PREFIXES = {
    BorrowKind.SHARED: "&",
    BorrowKind.MUT: "&mut ",
    BorrowKind.TWO_PHASE_MUT: "&two-phase ",
    BorrowKind.SHALLOW: "&shallow ",
}


def format_unop(op: UnOp) -> str:
    if isinstance(op, Not):
        return "¬"
    elif isinstance(op, Neg):
        return "-"
    elif isinstance(op, Cast):
        return f"cast<{format_integer_ty(op.src)},{format_integer_ty(op.tgt)}>"
    raise InternalPrinterError(f"[ICE-0090] unexpected unary operator {op!r}")


def _format_aggregate(fmt: AstFormatter, rv: Aggregate) -> str:
    ops = [format_operand(fmt, op) for op in rv.operands]
    kind = rv.kind
    if isinstance(kind, AggregatedTuple):
        return "(" + ", ".join(ops) + ")"
    elif isinstance(kind, AggregatedOption):
        if kind.variant_id == OPTION_NONE_VARIANT_ID:
            return "@Option::None"
        return "@Option::Some(" + ", ".join(ops) + ")"
    elif isinstance(kind, AggregatedAdt):
        name = fmt.type_decl_id_to_string(kind.def_id)
        if kind.variant_id is not None:
            name = f"{name}::{fmt.adt_variant_to_string(kind.def_id, kind.variant_id)}"
        field_names = fmt.adt_field_names(kind.def_id, kind.variant_id)
        if field_names is None:
            if not ops:
                return name
            return name + "(" + ", ".join(ops) + ")"
        fields = " ".join(f"{f} = {v};" for f, v in zip(field_names, ops))
        return f"{name} {{ {fields} }}"
    raise InternalPrinterError(f"[ICE-0090] unexpected aggregate kind {kind!r}")


def format_rvalue(fmt: AstFormatter, rv: Rvalue) -> str:
    if isinstance(rv, Use):
        return format_operand(fmt, rv.op)
    elif isinstance(rv, RvRef):
        return _BORROW_PREFIXES[rv.kind] + format_place(fmt, rv.place)
    elif isinstance(rv, UnaryOp):
        return f"{format_unop(rv.op)} {format_operand(fmt, rv.operand)}"
    elif isinstance(rv, BinaryOp):
        return f"{format_operand(fmt, rv.left)} {rv.op.value} {format_operand(fmt, rv.right)}"
    elif isinstance(rv, Discriminant):
        return f"@discriminant({format_place(fmt, rv.place)})"
    elif isinstance(rv, Aggregate):
        return _format_aggregate(fmt, rv)
    elif isinstance(rv, Global):
        return fmt.global_decl_id_to_string(rv.global_id)
    raise InternalPrinterError(f"[ICE-0090] unexpected rvalue {rv!r}")


def format_assertion(fmt: AstFormatter, a: Assertion) -> str:
    return f"assert({format_operand(fmt, a.cond)} == {format_bool(a.expected)})"


# `{g}` stands for the generic arguments of the call
_ASSUMED_FUN_NAMES = {
    AssumedFunId.REPLACE: "core::mem::replace{g}",
    AssumedFunId.BOX_NEW: "alloc::boxed::Box{g}::new",
    AssumedFunId.BOX_DEREF: "core::ops::deref::Deref<Box{g}>::deref",
    AssumedFunId.BOX_DEREF_MUT: "core::ops::deref::DerefMut<Box{g}>::deref_mut",
    AssumedFunId.BOX_FREE: "alloc::alloc::box_free{g}",
    AssumedFunId.VEC_NEW: "alloc::vec::Vec{g}::new",
    AssumedFunId.VEC_PUSH: "alloc::vec::Vec{g}::push",
    AssumedFunId.VEC_INSERT: "alloc::vec::Vec{g}::insert",
    AssumedFunId.VEC_LEN: "alloc::vec::Vec{g}::len",
    AssumedFunId.VEC_INDEX: "core::ops::index::Index<alloc::vec::Vec{g}>::index",
    AssumedFunId.VEC_INDEX_MUT: "core::ops::index::IndexMut<alloc::vec::Vec{g}>::index_mut",
}


def format_call(fmt: AstFormatter, call: FnCall) -> str:
    generics = format_generic_args(fmt, call.region_args, call.type_args)
    func = call.func
    if isinstance(func, Regular):
        name = fmt.fun_decl_id_to_string(func.fun_id) + generics
    elif isinstance(func, Assumed):
        name = _ASSUMED_FUN_NAMES[func.fun_id].format(g=generics)
    else:
        raise InternalPrinterError(f"[ICE-0090] unexpected function id {func!r}")
    args = ", ".join(format_operand(fmt, op) for op in call.args)
    return f"{format_place(fmt, call.dest)} := {name}({args})"
