#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import List, Sequence, Tuple, assert_never

from llbc_ast import (
    Assert,
    Assign,
    Break,
    Call,
    Continue,
    Drop,
    FakeRead,
    FunDecl,
    GlobalDecl,
    If,
    Loop,
    Match,
    Nop,
    Panic,
    RawStatement,
    Return,
    Sequence as Seq,
    SetDiscriminant,
    Statement,
    Switch,
    SwitchInt,
    SwitchKind,
)
from llbc_formatter import AstFormatter, var_to_varname
from llbc_meta import format_name
from llbc_print_expressions import format_assertion, format_call, format_operand, format_place, format_rvalue
from llbc_print_types import format_generic_params, format_ty
from llbc_print_values import format_scalar_value


def format_statement(fmt: AstFormatter, indent: str, indent_step: str, st: Statement) -> str:
    """
    Pretty-print a statement tree.

    - Every line produced for `st` starts with `indent`; nested blocks are
      printed at `indent + indent_step`.
    - The result has no leading or trailing newline.
    """
    return format_raw_statement(fmt, indent, indent_step, st.content)


def format_raw_statement(fmt: AstFormatter, indent: str, indent_step: str, st: RawStatement) -> str:
    match st:
        case Assign(place, rvalue):
            return f"{indent}{format_place(fmt, place)} := {format_rvalue(fmt, rvalue)}"
        case FakeRead(place):
            return f"{indent}fake_read {format_place(fmt, place)}"
        case SetDiscriminant(place, variant_id):
            # variant ids are printed raw, not looked up in the enum declaration
            return f"{indent}set_discriminant({format_place(fmt, place)}, {variant_id})"
        case Drop(place):
            return f"{indent}drop {format_place(fmt, place)}"
        case Assert(assertion):
            return indent + format_assertion(fmt, assertion)
        case Call(call):
            return indent + format_call(fmt, call)
        case Panic():
            return f"{indent}panic"
        case Return():
            return f"{indent}return"
        case Break(depth):
            return f"{indent}break {depth}"
        case Continue(depth):
            return f"{indent}continue {depth}"
        case Nop():
            return f"{indent}nop"
        case Seq(first, second):
            return (
                format_statement(fmt, indent, indent_step, first)
                + ";\n"
                + format_statement(fmt, indent, indent_step, second)
            )
        case Switch(switch):
            return format_switch(fmt, indent, indent_step, switch)
        case Loop(body):
            inner = format_statement(fmt, indent + indent_step, indent_step, body)
            return f"{indent}loop {{\n{inner}\n{indent}}}"
        case _:
            assert_never(st)


def format_switch(fmt: AstFormatter, indent: str, indent_step: str, switch: SwitchKind) -> str:
    match switch:
        case If(operand, then_st, else_st):
            inner_indent = indent + indent_step
            op = format_operand(fmt, operand)
            then_str = format_statement(fmt, inner_indent, indent_step, then_st)
            else_str = format_statement(fmt, inner_indent, indent_step, else_st)
            return (
                f"{indent}if ({op}) {{\n{then_str}\n{indent}}}\n"
                f"{indent}else {{\n{else_str}\n{indent}}}"
            )
        case SwitchInt(operand, _int_ty, branches, otherwise):
            labelled = [([format_scalar_value(sv) for sv in values], body) for values, body in branches]
            header = f"switch ({format_operand(fmt, operand)})"
            return _format_branches(fmt, indent, indent_step, header, labelled, otherwise)
        case Match(place, branches, otherwise):
            labelled = [([str(vid) for vid in variants], body) for variants, body in branches]
            header = f"match ({format_place(fmt, place)})"
            return _format_branches(fmt, indent, indent_step, header, labelled, otherwise)
        case _:
            assert_never(switch)


def _format_branches(
        fmt: AstFormatter,
        indent: str,
        indent_step: str,
        header: str,
        branches: Sequence[Tuple[List[str], Statement]],
        otherwise: Statement,
) -> str:
    """
    Shared layout of `switch` and `match`: one `| v1 | v2 => { ... }` clause
    per branch, always followed by the catch-all `_ => { ... }` clause.
    """
    indent1 = indent + indent_step
    indent2 = indent1 + indent_step
    clauses: List[str] = []
    for labels, body in branches:
        label = " ".join(f"| {lbl}" for lbl in labels)
        body_str = format_statement(fmt, indent2, indent_step, body)
        clauses.append(f"{indent1}{label} => {{\n{body_str}\n{indent1}}}")
    otherwise_str = format_statement(fmt, indent2, indent_step, otherwise)
    clauses.append(f"{indent1}_ => {{\n{otherwise_str}\n{indent1}}}")
    return f"{indent}{header} {{\n" + "\n".join(clauses) + f"\n{indent}}}"


# ==========================
# Declarations
# ==========================


def format_fun_decl(fmt: AstFormatter, indent: str, indent_step: str, decl: FunDecl) -> str:
    """
    Signature header, then (for transparent functions) the locals and the body:

        fn f<T>(x : T) -> T {
          var@0 : T;
          x : T;

          var@0 := move x;
          return
        }
    """
    sig = decl.signature
    name = format_name(decl.name) + format_generic_params(sig.region_params, sig.type_params)
    ret = format_ty(fmt, sig.output)

    if decl.body is None:
        args = ", ".join(format_ty(fmt, ty) for ty in sig.inputs)
        return f"{indent}opaque fn {name}({args}) -> {ret}"

    body = decl.body
    inputs = body.locals[1:body.arg_count + 1]
    args = ", ".join(f"{var_to_varname(var)} : {format_ty(fmt, ty)}" for var, ty in zip(inputs, sig.inputs))

    inner_indent = indent + indent_step
    locals_str = "".join(f"{inner_indent}{var_to_varname(var)} : {format_ty(fmt, var.ty)};\n" for var in body.locals)
    if locals_str:
        locals_str += "\n"
    body_str = format_statement(fmt, inner_indent, indent_step, body.body)
    return f"{indent}fn {name}({args}) -> {ret} {{\n{locals_str}{body_str}\n{indent}}}"


def format_global_decl(fmt: AstFormatter, indent: str, indent_step: str, decl: GlobalDecl) -> str:
    ty = format_ty(fmt, decl.ty)
    body_id = fmt.fun_decl_id_to_string(decl.body_id)
    return f"{indent}global {format_name(decl.name)} : {ty} = {body_id}"
