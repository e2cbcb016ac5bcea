#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

# llbc_internal_error.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from llbc_meta import Span


@dataclass(frozen=True)
class ICELocation:
    decl_name: Optional[str]
    span: Optional[Span] = None


class InternalPrinterError(RuntimeError):
    """
    ICE = printer bug or inconsistent declaration table (e.g. an id with no entry).
    Not for malformed input files (those are LlbcLoadError).
    """

    def __init__(self, message: str, loc: ICELocation | None = None):
        super().__init__(message)
        self.message = message
        self.loc = loc

    def with_location(self, loc: ICELocation) -> InternalPrinterError:
        """Return a copy located at `loc`, keeping whatever location parts are already known."""
        if self.loc is None:
            return InternalPrinterError(self.message, loc)
        decl_name = self.loc.decl_name or loc.decl_name
        span = self.loc.span if self.loc.span is not None else loc.span
        if decl_name == self.loc.decl_name and span is self.loc.span:
            return self
        return InternalPrinterError(self.message, ICELocation(decl_name, span))

    def format(self) -> str:
        message = self.message
        if "[ICE-" not in message:
            message = f"[ICE-9999] {message}"
        prefix = ""
        if self.loc is not None:
            span = self.loc.span
            if span is not None and span.filename:
                prefix = f"{span.filename}:{span.start_line}:{span.start_column}: "
            if self.loc.decl_name:
                prefix += f"in '{self.loc.decl_name}': "
        return f"{prefix}internal printer error: {message}"
