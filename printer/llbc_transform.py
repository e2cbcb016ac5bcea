"""
Statement-level rewrites over LLBC bodies.

- map_statements: bottom-up rebuild of a statement tree.
- remove_drop_never: replace `drop x` by `nop` when the local `x` has type `!`.
  Such drops appear in extracted code but are meaningless; dropping the unused
  `!` locals themselves is left to a separate cleanup.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import replace
from typing import Callable, Dict, Optional

from llbc_ast import (
    Drop,
    FunBody,
    FunDecl,
    If,
    Loop,
    Match,
    Nop,
    Sequence,
    Statement,
    Switch,
    SwitchInt,
    Var,
)
from llbc_ast_printer import format_statement
from llbc_context import LogLevel, PrinterContext
from llbc_crate import DeclContext
from llbc_formatter import formatter_for_fun_decl
from llbc_internal_error import ICELocation, InternalPrinterError
from llbc_logger import log_debug, log_stage
from llbc_meta import format_name
from llbc_types import FunDeclId, Never, VarId


def map_statements(f: Callable[[Statement], Statement], st: Statement) -> Statement:
    """
    Rewrite every statement of the tree with `f`, children first.
    Spans of rebuilt nodes are preserved.
    """
    content = st.content
    if isinstance(content, Sequence):
        content = Sequence(map_statements(f, content.first), map_statements(f, content.second))
    elif isinstance(content, Loop):
        content = Loop(map_statements(f, content.body))
    elif isinstance(content, Switch):
        sw = content.switch
        if isinstance(sw, If):
            sw = If(sw.operand, map_statements(f, sw.then_st), map_statements(f, sw.else_st))
        elif isinstance(sw, SwitchInt):
            branches = tuple((values, map_statements(f, body)) for values, body in sw.branches)
            sw = SwitchInt(sw.operand, sw.int_ty, branches, map_statements(f, sw.otherwise))
        elif isinstance(sw, Match):
            branches = tuple((variants, map_statements(f, body)) for variants, body in sw.branches)
            sw = Match(sw.place, branches, map_statements(f, sw.otherwise))
        content = Switch(sw)
    if content is not st.content:
        st = Statement(content, span=st.span)
    return f(st)


def _is_drop_of_never(locals_: Dict[VarId, Var], st: Statement) -> bool:
    content = st.content
    if not isinstance(content, Drop) or content.place.projection:
        return False
    var = locals_.get(content.place.var_id)
    if var is None:
        raise InternalPrinterError(
            f"[ICE-0010] unknown local variable id {content.place.var_id}", ICELocation(None, st.span)
        )
    return isinstance(var.ty, Never)


def remove_drop_never(decls: DeclContext, context: Optional[PrinterContext] = None) -> DeclContext:
    """
    Return a copy of `decls` where every `drop x` with `x : !` (and no
    projection) is replaced by `nop`. Global initializers are functions too,
    so they are covered by the same walk.
    """
    log_stage(context, "Removing drops of variables of type !")
    fun_decls: Dict[FunDeclId, FunDecl] = {}
    for fid, decl in decls.fun_decls.items():
        if decl.body is None:
            fun_decls[fid] = decl
            continue
        try:
            fun_decls[fid] = _remove_drop_never_in(decls, decl, context)
        except InternalPrinterError as e:
            located = e.with_location(ICELocation(format_name(decl.name), decl.span))
            if located is e:
                raise
            raise located from e

    return DeclContext(
        type_decls=dict(decls.type_decls),
        fun_decls=fun_decls,
        global_decls=dict(decls.global_decls),
        name=decls.name,
    )


def _remove_drop_never_in(decls: DeclContext, decl: FunDecl, context: Optional[PrinterContext]) -> FunDecl:
    if context is not None and context.log_level >= LogLevel.DEBUG:
        body_str = format_statement(formatter_for_fun_decl(decls, decl), "", context.indent_step, decl.body.body)
        log_debug(
            context,
            f"# About to remove drops of variables with type ! in decl: {format_name(decl.name)}:\n{body_str}",
        )

    locals_ = {v.index: v for v in decl.body.locals}

    def transform_st(st: Statement) -> Statement:
        if _is_drop_of_never(locals_, st):
            return Statement(Nop(), span=st.span)
        return st

    body = FunBody(decl.body.arg_count, decl.body.locals, map_statements(transform_st, decl.body.body))
    return replace(decl, body=body)
