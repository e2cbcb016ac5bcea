#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, NoReturn, Optional, Tuple

from llbc_ast import FunDecl, GlobalDecl, Var
from llbc_crate import DeclContext
from llbc_internal_error import ICELocation, InternalPrinterError
from llbc_meta import format_name
from llbc_types import (
    EnumKind,
    FieldDecl,
    FieldId,
    FunDeclId,
    GlobalDeclId,
    RegionVar,
    RegionVarId,
    StructKind,
    TypeDecl,
    TypeDeclId,
    TypeParam,
    TypeVarId,
    VarId,
    VariantId,
)


def var_to_varname(var: Var) -> str:
    """Display name of a local: its source name, or `var@<id>` for temporaries."""
    if var.name is not None:
        return var.name
    return f"var@{var.index}"


@dataclass(frozen=True)
class AstFormatter:
    """
    Per-declaration name resolver used by every printing function.

    - locals, region_params, type_params: the scope of the declaration being
      printed (owned by this formatter).
    - decls: the shared, read-only declaration table used for cross-declaration
      references (callees, ADTs, globals).

    Lookups never fall back to placeholders: an id that is neither in the
    declaration's scope nor in the table raises InternalPrinterError.
    """
    decls: DeclContext
    decl_name: Optional[str] = None
    locals: Mapping[VarId, Var] = field(default_factory=dict)
    region_params: Mapping[RegionVarId, RegionVar] = field(default_factory=dict)
    type_params: Mapping[TypeVarId, TypeParam] = field(default_factory=dict)

    # --- scope of the declaration ---

    def var_id_to_string(self, vid: VarId) -> str:
        var = self.locals.get(vid)
        if var is None:
            self._lookup_failure("[ICE-0010] unknown local variable", vid)
        return var_to_varname(var)

    def type_var_to_string(self, vid: TypeVarId) -> str:
        param = self.type_params.get(vid)
        if param is None:
            self._lookup_failure("[ICE-0020] unknown type parameter", vid)
        return param.name

    def region_var_to_string(self, rid: RegionVarId) -> str:
        region = self.region_params.get(rid)
        if region is None:
            self._lookup_failure("[ICE-0030] unknown region parameter", rid)
        if region.name is None:
            return f"'_{region.index}"
        return region.name

    # --- cross-declaration references ---

    def type_decl_id_to_string(self, def_id: TypeDeclId) -> str:
        return format_name(self._type_decl(def_id).name)

    def fun_decl_id_to_string(self, def_id: FunDeclId) -> str:
        decl = self.decls.fun_decls.get(def_id)
        if decl is None:
            self._lookup_failure("[ICE-0050] unknown function declaration", def_id)
        return format_name(decl.name)

    def global_decl_id_to_string(self, def_id: GlobalDeclId) -> str:
        decl = self.decls.global_decls.get(def_id)
        if decl is None:
            self._lookup_failure("[ICE-0060] unknown global declaration", def_id)
        return format_name(decl.name)

    def adt_variant_to_string(self, def_id: TypeDeclId, variant_id: VariantId) -> str:
        decl = self._type_decl(def_id)
        if not isinstance(decl.kind, EnumKind) or not 0 <= variant_id < len(decl.kind.variants):
            self._lookup_failure(
                f"[ICE-0070] unknown variant of '{format_name(decl.name)}'", variant_id
            )
        return decl.kind.variants[variant_id].name

    def adt_field_names(self, def_id: TypeDeclId, variant_id: Optional[VariantId]) -> Optional[Tuple[str, ...]]:
        """
        Names of the fields of a struct (variant_id is None) or of an enum variant.
        Returns None when the fields are positional.
        """
        fields = self._adt_fields(def_id, variant_id)
        if not fields or any(f.name is None for f in fields):
            return None
        return tuple(f.name for f in fields)

    def adt_field_to_string(self, def_id: TypeDeclId, variant_id: Optional[VariantId], field_id: FieldId) -> str:
        fields = self._adt_fields(def_id, variant_id)
        if not 0 <= field_id < len(fields):
            self._lookup_failure(
                f"[ICE-0080] unknown field of '{self.type_decl_id_to_string(def_id)}'", field_id
            )
        name = fields[field_id].name
        return name if name is not None else str(field_id)

    # --- internal helpers ---

    def _type_decl(self, def_id: TypeDeclId) -> TypeDecl:
        decl = self.decls.type_decls.get(def_id)
        if decl is None:
            self._lookup_failure("[ICE-0040] unknown type declaration", def_id)
        return decl

    def _adt_fields(self, def_id: TypeDeclId, variant_id: Optional[VariantId]) -> Tuple[FieldDecl, ...]:
        decl = self._type_decl(def_id)
        if variant_id is None:
            if not isinstance(decl.kind, StructKind):
                self._lookup_failure(
                    f"[ICE-0080] field projection without variant on non-struct '{format_name(decl.name)}'",
                    def_id,
                )
            return decl.kind.fields
        if not isinstance(decl.kind, EnumKind) or not 0 <= variant_id < len(decl.kind.variants):
            self._lookup_failure(
                f"[ICE-0070] unknown variant of '{format_name(decl.name)}'", variant_id
            )
        return decl.kind.variants[variant_id].fields

    def _lookup_failure(self, what: str, ident: int) -> NoReturn:
        raise InternalPrinterError(f"{what} id {ident}", ICELocation(decl_name=self.decl_name))


# --- constructors, one per kind of declaration ---

def _index_locals(vars_: Tuple[Var, ...]) -> Dict[VarId, Var]:
    return {v.index: v for v in vars_}


def formatter_for_fun_decl(decls: DeclContext, decl: FunDecl) -> AstFormatter:
    """
    Formatter for a function: its locals (if it has a body) and the generic
    parameters of its signature.
    """
    sig = decl.signature
    locals_ = _index_locals(decl.body.locals) if decl.body is not None else {}
    return AstFormatter(
        decls=decls,
        decl_name=format_name(decl.name),
        locals=locals_,
        region_params={r.index: r for r in sig.region_params},
        type_params={t.index: t for t in sig.type_params},
    )


def formatter_for_global_decl(decls: DeclContext, decl: GlobalDecl) -> AstFormatter:
    """Globals are not generic and have no locals of their own."""
    return AstFormatter(decls=decls, decl_name=format_name(decl.name))


def formatter_for_type_decl(decls: DeclContext, decl: TypeDecl) -> AstFormatter:
    return AstFormatter(
        decls=decls,
        decl_name=format_name(decl.name),
        region_params={r.index: r for r in decl.region_params},
        type_params={t.index: t for t in decl.type_params},
    )
