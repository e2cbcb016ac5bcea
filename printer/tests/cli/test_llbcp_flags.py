#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

import llbcp
from llbc_context import LogLevel


def _patch_handlers(monkeypatch):
    calls = []

    def _mk_handler(name):
        def _handler(args):
            calls.append((name, args))
            return 0

        return _handler

    monkeypatch.setattr(llbcp, "cmd_crate", _mk_handler("crate"))
    monkeypatch.setattr(llbcp, "cmd_fun", _mk_handler("fun"))
    monkeypatch.setattr(llbcp, "cmd_global", _mk_handler("global"))
    monkeypatch.setattr(llbcp, "cmd_type", _mk_handler("type"))
    monkeypatch.setattr(llbcp, "cmd_sym", _mk_handler("sym"))
    return calls


def _run_main(argv):
    with pytest.raises(SystemExit) as exc:
        llbcp.main(argv)
    return exc.value.code


def test_crate_command(monkeypatch):
    calls = _patch_handlers(monkeypatch)

    rc = _run_main(["crate", "demo.json"])

    assert rc == 0
    name, args = calls[0]
    assert name == "crate"
    assert args.file == "demo.json"
    assert args.output is None
    assert not args.remove_drop_never
    assert not args.keep_going


def test_all_is_an_alias_of_crate(monkeypatch):
    calls = _patch_handlers(monkeypatch)

    assert _run_main(["all", "demo.json"]) == 0
    assert calls[0][0] == "crate"


def test_fun_command_takes_a_name(monkeypatch):
    calls = _patch_handlers(monkeypatch)

    rc = _run_main(["fun", "-k", "--remove-drop-never", "-o", "out.txt", "demo.json", "demo::id"])

    assert rc == 0
    name, args = calls[0]
    assert name == "fun"
    assert args.name == "demo::id"
    assert args.output == "out.txt"
    assert args.remove_drop_never
    assert args.keep_going


def test_missing_name_is_a_usage_error(monkeypatch):
    calls = _patch_handlers(monkeypatch)

    assert _run_main(["global", "demo.json"]) == 2
    assert calls == []


def test_command_is_required(monkeypatch):
    _patch_handlers(monkeypatch)

    assert _run_main([]) == 2


def test_build_printer_context_defaults(monkeypatch):
    calls = _patch_handlers(monkeypatch)
    _run_main(["sym", "demo.json"])

    context = llbcp.build_printer_context(calls[0][1])

    assert context.log_level == LogLevel.ERROR
    assert context.indent_step == "  "
    assert not context.keep_going
    assert not context.log_rich_format


@pytest.mark.parametrize(
    "flags, level",
    [
        (["-v"], LogLevel.INFO),
        (["-vv"], LogLevel.INFO),
        (["-vvv"], LogLevel.DEBUG),
    ],
)
def test_verbosity(monkeypatch, flags, level):
    calls = _patch_handlers(monkeypatch)
    _run_main(flags + ["crate", "demo.json"])

    assert llbcp.build_printer_context(calls[0][1]).log_level == level


def test_indent_log_and_keep_going_reach_the_context(monkeypatch):
    calls = _patch_handlers(monkeypatch)
    _run_main(["-l", "--indent", "4", "type", "--keep-going", "demo.json", "demo::Pair"])

    context = llbcp.build_printer_context(calls[0][1])

    assert context.indent_step == "    "
    assert context.log_rich_format
    assert context.keep_going
