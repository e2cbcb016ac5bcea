#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from llbc_internal_error import ICELocation, InternalPrinterError
from llbc_meta import Span


def test_format_without_location():
    ice = InternalPrinterError("boom")

    assert ice.format() == "internal printer error: [ICE-9999] boom"


def test_format_with_declaration_only():
    ice = InternalPrinterError("boom", ICELocation(decl_name="demo::f"))

    assert ice.format() == "in 'demo::f': internal printer error: [ICE-9999] boom"


def test_format_with_span_and_declaration():
    span = Span(start_line=3, start_column=15, end_line=3, end_column=20, filename="demo.rs")
    ice = InternalPrinterError("boom", ICELocation(decl_name="demo::f", span=span))

    assert ice.format() == "demo.rs:3:15: in 'demo::f': internal printer error: [ICE-9999] boom"


def test_span_without_filename_is_not_shown():
    span = Span(start_line=3, start_column=15, end_line=3, end_column=20)
    ice = InternalPrinterError("boom", ICELocation(decl_name="demo::f", span=span))

    assert ice.format() == "in 'demo::f': internal printer error: [ICE-9999] boom"


def test_format_keeps_explicit_code():
    ice = InternalPrinterError("[ICE-0010] unknown local variable id 4")

    assert ice.format() == "internal printer error: [ICE-0010] unknown local variable id 4"


def test_with_location_fills_missing_location():
    ice = InternalPrinterError("boom")

    located = ice.with_location(ICELocation(decl_name="demo::g"))

    assert located is not ice
    assert located.loc.decl_name == "demo::g"
    assert located.message == "boom"


def test_with_location_adds_span_to_known_declaration():
    span = Span(1, 1, 4, 2, filename="demo.rs")
    ice = InternalPrinterError("boom", ICELocation(decl_name="demo::inner"))

    located = ice.with_location(ICELocation(decl_name="demo::outer", span=span))

    assert located.loc == ICELocation(decl_name="demo::inner", span=span)


def test_with_location_keeps_complete_location():
    span = Span(1, 1, 4, 2, filename="demo.rs")
    ice = InternalPrinterError("boom", ICELocation(decl_name="demo::f", span=span))

    assert ice.with_location(ICELocation(decl_name="demo::g")) is ice


def test_with_location_adds_declaration_to_known_span():
    span = Span(7, 3, 7, 9, filename="demo.rs")
    ice = InternalPrinterError("boom", ICELocation(decl_name=None, span=span))

    located = ice.with_location(ICELocation(decl_name="demo::g"))

    assert located.loc == ICELocation(decl_name="demo::g", span=span)
    assert located.format() == "demo.rs:7:3: in 'demo::g': internal printer error: [ICE-9999] boom"
