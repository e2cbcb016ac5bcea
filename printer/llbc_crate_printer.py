#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import Callable, List, Optional, TypeVar

from llbc_ast import FunDecl, GlobalDecl
from llbc_ast_printer import format_fun_decl, format_global_decl
from llbc_context import PrinterContext
from llbc_crate import DeclContext
from llbc_formatter import formatter_for_fun_decl, formatter_for_global_decl, formatter_for_type_decl
from llbc_internal_error import ICELocation, InternalPrinterError
from llbc_logger import log_debug, log_error, log_info
from llbc_meta import format_name
from llbc_print_types import format_type_decl
from llbc_types import FunDeclId, GlobalDeclId, TypeDecl, TypeDeclId

D = TypeVar("D", TypeDecl, GlobalDecl, FunDecl)


def _render_decl(decl: D, render: Callable[[D], str]) -> str:
    """Render one declaration; internal errors are tagged with the declaration."""
    try:
        return render(decl)
    except InternalPrinterError as e:
        located = e.with_location(ICELocation(decl_name=format_name(decl.name), span=decl.span))
        if located is e:
            raise
        raise located from e


# --- one declaration, from the declaration itself ---

def _type_decl_to_string(decls: DeclContext, decl: TypeDecl, context: PrinterContext) -> str:
    return format_type_decl(formatter_for_type_decl(decls, decl), decl, context.indent_step)


def _global_decl_to_string(decls: DeclContext, decl: GlobalDecl, context: PrinterContext) -> str:
    fmt = formatter_for_global_decl(decls, decl)
    return format_global_decl(fmt, "", context.indent_step, decl)


def _fun_decl_to_string(decls: DeclContext, decl: FunDecl, context: PrinterContext) -> str:
    fmt = formatter_for_fun_decl(decls, decl)
    return format_fun_decl(fmt, "", context.indent_step, decl)


# --- one declaration, by id ---

def format_type_decl_by_id(decls: DeclContext, def_id: TypeDeclId, context: Optional[PrinterContext] = None) -> str:
    context = context or PrinterContext.default()
    decl = decls.type_decls.get(def_id)
    if decl is None:
        raise InternalPrinterError(f"[ICE-0040] unknown type declaration id {def_id}")
    return _render_decl(decl, lambda d: _type_decl_to_string(decls, d, context))


def format_global_decl_by_id(decls: DeclContext, def_id: GlobalDeclId, context: Optional[PrinterContext] = None) -> str:
    context = context or PrinterContext.default()
    decl = decls.global_decls.get(def_id)
    if decl is None:
        raise InternalPrinterError(f"[ICE-0060] unknown global declaration id {def_id}")
    return _render_decl(decl, lambda d: _global_decl_to_string(decls, d, context))


def format_fun_decl_by_id(decls: DeclContext, def_id: FunDeclId, context: Optional[PrinterContext] = None) -> str:
    context = context or PrinterContext.default()
    decl = decls.fun_decls.get(def_id)
    if decl is None:
        raise InternalPrinterError(f"[ICE-0050] unknown function declaration id {def_id}")
    return _render_decl(decl, lambda d: _fun_decl_to_string(decls, d, context))


# --- the whole crate ---

def format_crate(decls: DeclContext, context: Optional[PrinterContext] = None) -> str:
    """
    Pretty-print every declaration of the crate: types, then globals, then
    functions, each group in declaration order, separated by blank lines.

    Every declaration gets its own formatter. With `context.keep_going`, a
    declaration that fails with an internal error is logged and left out.
    """
    context = context or PrinterContext.default()
    log_info(context, f"Printing crate '{decls.name or '<anonymous>'}' ({len(decls)} declaration(s))")

    printed: List[str] = []

    def emit(decl: D, render: Callable[[DeclContext, D, PrinterContext], str]) -> None:
        log_debug(context, f"Printing '{format_name(decl.name)}'")
        try:
            printed.append(_render_decl(decl, lambda d: render(decls, d, context)))
        except InternalPrinterError as e:
            if not context.keep_going:
                raise
            log_error(context, e.format())

    for type_decl in decls.type_decls.values():
        emit(type_decl, _type_decl_to_string)
    for global_decl in decls.global_decls.values():
        emit(global_decl, _global_decl_to_string)
    for fun_decl in decls.fun_decls.values():
        emit(fun_decl, _fun_decl_to_string)

    return "\n\n".join(printed)
