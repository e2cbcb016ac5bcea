#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from llbc_ast import FunDecl, GlobalDecl
from llbc_meta import format_name
from llbc_types import FunDeclId, GlobalDeclId, TypeDecl, TypeDeclId


@dataclass
class DeclContext:
    """
    The whole-program declaration table.

    - type_decls / fun_decls / global_decls: id -> declaration, iterated in
      declaration order (dict insertion order).
    - name: optional crate name, for display only.

    Printers only read from it; the loader (or a test) owns it.
    """
    type_decls: Dict[TypeDeclId, TypeDecl] = field(default_factory=dict)
    fun_decls: Dict[FunDeclId, FunDecl] = field(default_factory=dict)
    global_decls: Dict[GlobalDeclId, GlobalDecl] = field(default_factory=dict)
    name: Optional[str] = None

    @staticmethod
    def from_decls(
        types: Iterable[TypeDecl] = (),
        globals: Iterable[GlobalDecl] = (),
        functions: Iterable[FunDecl] = (),
        name: Optional[str] = None,
    ) -> "DeclContext":
        """Build the id maps from declaration lists, preserving their order."""
        return DeclContext(
            type_decls={d.def_id: d for d in types},
            fun_decls={d.def_id: d for d in functions},
            global_decls={d.def_id: d for d in globals},
            name=name,
        )

    def __len__(self) -> int:
        return len(self.type_decls) + len(self.fun_decls) + len(self.global_decls)

    # --- lookup by qualified name (used by the CLI) ---

    def find_type_decl(self, name: str) -> Optional[TypeDecl]:
        return next((d for d in self.type_decls.values() if format_name(d.name) == name), None)

    def find_fun_decl(self, name: str) -> Optional[FunDecl]:
        return next((d for d in self.fun_decls.values() if format_name(d.name) == name), None)

    def find_global_decl(self, name: str) -> Optional[GlobalDecl]:
        return next((d for d in self.global_decls.values() if format_name(d.name) == name), None)
