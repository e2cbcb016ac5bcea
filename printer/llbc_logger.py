"""
Logging utilities for the LLBC printer.

Messages go to stderr so that printed IR on stdout stays clean; they are
filtered by the PrinterContext log level.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import sys
import time
from typing import Optional

from llbc_context import LogLevel, PrinterContext


def log(context: Optional[PrinterContext], log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context's level admits it.

    Args:
        context:    The printer context holding the logging level; None means defaults.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        context = PrinterContext.default()
    if context.log_level < log_level:
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    print(f"{prefix}{message}", file=sys.stderr)


def log_error(context: Optional[PrinterContext], message: str) -> None:
    log(context, LogLevel.ERROR, message)


def log_warning(context: Optional[PrinterContext], message: str) -> None:
    log(context, LogLevel.WARNING, message)


def log_info(context: Optional[PrinterContext], message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: Optional[PrinterContext], message: str) -> None:
    log(context, LogLevel.DEBUG, message)


def log_stage(context: Optional[PrinterContext], stage: str, item: Optional[str] = None) -> None:
    """
    Log the start of a processing stage.

    Args:
        context: The printer context containing logging flags.
        stage: The name of the stage (e.g., "Loading", "Printing").
        item: Optional name of the file or declaration being processed.
    """
    if item:
        log(context, LogLevel.INFO, f"{stage} '{item}'")
    else:
        log(context, LogLevel.INFO, f"{stage}...")
