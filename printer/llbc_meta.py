#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from typing import Optional, Tuple


# ==========================
# Source metadata and names
# ==========================


@dataclass(frozen=True)
class Span:
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    filename: Optional[str] = None


@dataclass(frozen=True)
class Node:
    span: Optional[Span] = field(default=None, repr=False, compare=False, kw_only=True)


# A declaration name is its path, e.g. ("core", "option", "Option").
Name = Tuple[str, ...]


def format_name(name: Name) -> str:
    return "::".join(name)
