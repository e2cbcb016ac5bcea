"""
Printer context for cross-cutting options.

This module defines the PrinterContext dataclass which holds options that
affect several layers of the printer (layout, error policy, logging).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Hierarchical logging levels for the LLBC printer."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages
    INFO = 10       # General progress messages (-v)
    DEBUG = 30      # Detailed diagnostic information (-vvv)


@dataclass
class PrinterContext:
    """
    Holds cross-cutting options that affect multiple printing stages.

    Attributes:
        indent_step:        String appended to the indentation for each nested block.
        keep_going:         If True, the crate printer skips declarations whose rendering
                            fails with an internal error instead of aborting.
        log_rich_format:    If True, emit logs in rich format: may include log level, timestamps, etc.
        log_level:          Current logging level.
    """
    indent_step: str = "  "
    keep_going: bool = False
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'PrinterContext':
        """Create a PrinterContext with default settings."""
        return PrinterContext(log_level=LogLevel.WARNING)
