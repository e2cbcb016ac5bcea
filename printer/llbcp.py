#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import argparse
from pathlib import Path
from typing import Callable, Optional, Tuple

from llbc_context import LogLevel, PrinterContext
from llbc_crate import DeclContext
from llbc_crate_printer import format_crate, format_fun_decl_by_id, format_global_decl_by_id, format_type_decl_by_id
from llbc_internal_error import InternalPrinterError
from llbc_logger import log_error, log_info
from llbc_meta import format_name
from llbc_of_json import LlbcLoadError, load_crate
from llbc_transform import remove_drop_never


def build_printer_context(args: argparse.Namespace) -> PrinterContext:
    """Build a PrinterContext from command-line arguments."""
    log_rich_format = getattr(args, 'log', False)

    # Convert verbosity count to LogLevel
    verbosity = getattr(args, 'verbosity', 0)
    if verbosity >= 3:
        log_level = LogLevel.DEBUG
    elif verbosity >= 1:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.ERROR

    return PrinterContext(
        indent_step=" " * getattr(args, 'indent', 2),
        keep_going=getattr(args, 'keep_going', False),
        log_rich_format=log_rich_format,
        log_level=log_level,
    )


def _load(args: argparse.Namespace) -> Tuple[Optional[DeclContext], PrinterContext]:
    """Load the crate named on the command line; returns (None, context) after logging on failure."""
    context = build_printer_context(args)
    try:
        decls = load_crate(args.file, context)
    except FileNotFoundError as e:
        log_error(context, f"error: [LLP-0010] {e}")
        return None, context
    except OSError as e:
        log_error(context, f"error: [LLP-0010] cannot read '{args.file}': {e.strerror}")
        return None, context
    except LlbcLoadError as e:
        log_error(context, e.format())
        return None, context

    if getattr(args, 'remove_drop_never', False):
        try:
            decls = remove_drop_never(decls, context)
        except InternalPrinterError as e:
            log_error(context, e.format())
            return None, context
    return decls, context


def _emit(args: argparse.Namespace, context: PrinterContext, text: str) -> int:
    if getattr(args, 'output', None):
        try:
            Path(args.output).write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            log_error(context, f"error: [LLP-0030] cannot write '{args.output}': {e.strerror}")
            return 1
        log_info(context, f"Wrote {args.output}")
    else:
        print(text)
    return 0


def _render(args: argparse.Namespace, context: PrinterContext, render: Callable[[], str]) -> int:
    try:
        text = render()
    except InternalPrinterError as e:
        log_error(context, e.format())
        return 1
    return _emit(args, context, text)


def cmd_crate(args: argparse.Namespace) -> int:
    """Pretty-print every declaration of the crate."""
    decls, context = _load(args)
    if decls is None:
        return 1
    return _render(args, context, lambda: format_crate(decls, context))


def _select(args: argparse.Namespace, kind: str, by_name: Callable[[str], object], table: dict):
    """
    Find a declaration by qualified name or, when the selector is all digits,
    by numeric id.
    """
    if args.name.isdigit():
        decl = table.get(int(args.name))
    else:
        decl = by_name(args.name)
    if decl is None:
        raise LookupError(f"[LLP-0020] no {kind} declaration named '{args.name}'")
    return decl


def _cmd_one(args: argparse.Namespace, kind: str) -> int:
    decls, context = _load(args)
    if decls is None:
        return 1

    if kind == "function":
        by_name, table, render = decls.find_fun_decl, decls.fun_decls, format_fun_decl_by_id
    elif kind == "global":
        by_name, table, render = decls.find_global_decl, decls.global_decls, format_global_decl_by_id
    else:
        by_name, table, render = decls.find_type_decl, decls.type_decls, format_type_decl_by_id

    try:
        decl = _select(args, kind, by_name, table)
    except LookupError as e:
        log_error(context, f"error: {e.args[0]}")
        return 1

    return _render(args, context, lambda: render(decls, decl.def_id, context))


def cmd_fun(args: argparse.Namespace) -> int:
    return _cmd_one(args, "function")


def cmd_global(args: argparse.Namespace) -> int:
    return _cmd_one(args, "global")


def cmd_type(args: argparse.Namespace) -> int:
    return _cmd_one(args, "type")


def cmd_sym(args: argparse.Namespace) -> int:
    """
    List the declarations of the crate, grouped by kind, with their ids.
    Opaque functions are marked.
    """
    decls, context = _load(args)
    if decls is None:
        return 1

    lines = [f"=== crate {decls.name or '<anonymous>'} ==="]

    lines.append("  types:")
    for decl in decls.type_decls.values():
        lines.append(f"    {decl.def_id:<4} {format_name(decl.name)}")
    if not decls.type_decls:
        lines.append("    <none>")

    lines.append("  globals:")
    for decl in decls.global_decls.values():
        lines.append(f"    {decl.def_id:<4} {format_name(decl.name)}")
    if not decls.global_decls:
        lines.append("    <none>")

    lines.append("  functions:")
    for decl in decls.fun_decls.values():
        suffix = " (opaque)" if decl.is_opaque else ""
        lines.append(f"    {decl.def_id:<4} {format_name(decl.name)}{suffix}")
    if not decls.fun_decls:
        lines.append("    <none>")

    return _emit(args, context, "\n".join(lines))


def _add_file_arg(parser: argparse.ArgumentParser) -> None:
    """Add the crate file argument."""
    parser.add_argument("file", help="Crate file (JSON export)")


def _add_name_arg(parser: argparse.ArgumentParser, kind: str) -> None:
    parser.add_argument("name", help=f"Qualified {kind} name (e.g. 'demo::f') or numeric id")


def _add_print_args(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by the printing commands."""
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--remove-drop-never",
        action="store_true",
        help="Replace drops of variables of type ! by nop before printing",
    )
    parser.add_argument(
        "--keep-going", "-k",
        action="store_true",
        help="Skip declarations that fail to print instead of aborting",
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="llbcp", description="LLBC pretty-printer")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parser.add_argument("-v", "--verbose",
                        action='count',
                        default=0,
                        dest='verbosity',
                        help="Increase verbosity: -v=INFO, -vvv=DEBUG")
    parser.add_argument("-l", "--log",
                        action='store_true',
                        default=False,
                        help="Enable rich log formatting (timestamps, levels)")
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Number of spaces per indentation level (default: 2)",
    )

    ###########################
    # crate command
    ###########################
    p_crate = subparsers.add_parser("crate", help="Print every declaration", aliases=["all"])
    _add_print_args(p_crate)
    _add_file_arg(p_crate)
    p_crate.set_defaults(func=cmd_crate)

    ###########################
    # fun command
    ###########################
    p_fun = subparsers.add_parser("fun", help="Print one function")
    _add_print_args(p_fun)
    _add_file_arg(p_fun)
    _add_name_arg(p_fun, "function")
    p_fun.set_defaults(func=cmd_fun)

    ###########################
    # global command
    ###########################
    p_global = subparsers.add_parser("global", help="Print one global")
    _add_print_args(p_global)
    _add_file_arg(p_global)
    _add_name_arg(p_global, "global")
    p_global.set_defaults(func=cmd_global)

    ###########################
    # type command
    ###########################
    p_type = subparsers.add_parser("type", help="Print one type declaration")
    _add_print_args(p_type)
    _add_file_arg(p_type)
    _add_name_arg(p_type, "type")
    p_type.set_defaults(func=cmd_type)

    ###########################
    # sym command
    ###########################
    p_sym = subparsers.add_parser("sym", help="List declarations with their ids", aliases=["symbols"])
    p_sym.add_argument("--output", "-o", help="Output file (default: stdout)")
    _add_file_arg(p_sym)
    p_sym.set_defaults(func=cmd_sym)

    args = parser.parse_args(argv)

    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
