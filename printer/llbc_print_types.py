#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import Sequence

from llbc_formatter import AstFormatter
from llbc_internal_error import InternalPrinterError
from llbc_meta import format_name
from llbc_print_values import format_integer_ty
from llbc_types import (
    Adt,
    AdtId,
    Array,
    AssumedTy,
    Bool,
    Char,
    EnumKind,
    EnumVariant,
    FieldDecl,
    Integer,
    Never,
    OpaqueKind,
    Ref,
    RefKind,
    Region,
    RegionVar,
    RErased,
    RStatic,
    RVar,
    Slice,
    Str,
    StructKind,
    TupleId,
    Ty,
    TypeDecl,
    TypeParam,
    TypeVar,
)


def format_region(fmt: AstFormatter, r: Region) -> str:
    if isinstance(r, RStatic):
        return "'static"
    elif isinstance(r, RErased):
        return "'_"
    elif isinstance(r, RVar):
        return fmt.region_var_to_string(r.id)
    raise InternalPrinterError(f"[ICE-0090] unexpected region {r!r}")


def format_generic_args(fmt: AstFormatter, regions: Sequence[Region], types: Sequence[Ty]) -> str:
    """`<'a, T>`, or the empty string when there are no arguments."""
    args = [format_region(fmt, r) for r in regions] + [format_ty(fmt, t) for t in types]
    if not args:
        return ""
    return "<" + ", ".join(args) + ">"


def format_generic_params(region_params: Sequence[RegionVar], type_params: Sequence[TypeParam]) -> str:
    params = [r.name if r.name is not None else f"'_{r.index}" for r in region_params]
    params += [t.name for t in type_params]
    if not params:
        return ""
    return "<" + ", ".join(params) + ">"


def format_ty(fmt: AstFormatter, ty: Ty) -> str:
    if isinstance(ty, Adt):
        type_id = ty.type_id
        if isinstance(type_id, TupleId):
            return "(" + ", ".join(format_ty(fmt, t) for t in ty.types) + ")"
        if isinstance(type_id, AdtId):
            name = fmt.type_decl_id_to_string(type_id.def_id)
        elif isinstance(type_id, AssumedTy):
            name = type_id.value
        else:
            raise InternalPrinterError(f"[ICE-0090] unexpected type constructor {type_id!r}")
        return name + format_generic_args(fmt, ty.regions, ty.types)
    elif isinstance(ty, TypeVar):
        return fmt.type_var_to_string(ty.id)
    elif isinstance(ty, Bool):
        return "bool"
    elif isinstance(ty, Char):
        return "char"
    elif isinstance(ty, Never):
        return "!"
    elif isinstance(ty, Integer):
        return format_integer_ty(ty.int_ty)
    elif isinstance(ty, Str):
        return "str"
    elif isinstance(ty, Array):
        return f"[{format_ty(fmt, ty.ty)}; ?]"
    elif isinstance(ty, Slice):
        return f"[{format_ty(fmt, ty.ty)}]"
    elif isinstance(ty, Ref):
        mut = "mut " if ty.kind is RefKind.MUT else ""
        return f"&{format_region(fmt, ty.region)} {mut}{format_ty(fmt, ty.ty)}"
    raise InternalPrinterError(f"[ICE-0090] unexpected type {ty!r}")


# --- type declarations ---

def _format_field(fmt: AstFormatter, f: FieldDecl) -> str:
    ty = format_ty(fmt, f.ty)
    if f.name is None:
        return ty
    return f"{f.name} : {ty}"


def _format_variant(fmt: AstFormatter, v: EnumVariant) -> str:
    if not v.fields:
        return v.name
    return v.name + "(" + ", ".join(_format_field(fmt, f) for f in v.fields) + ")"


def format_type_decl(fmt: AstFormatter, decl: TypeDecl, indent_step: str = "  ") -> str:
    """
    Pretty-print a type declaration. Struct fields are indented by `indent_step`.

    struct Pair<T> =
    {
      fst : T,
      snd : T,
    }

    enum List<T> =
    |  Cons(T, Box<List<T>>)
    |  Nil
    """
    name = format_name(decl.name) + format_generic_params(decl.region_params, decl.type_params)
    kind = decl.kind
    if isinstance(kind, StructKind):
        if not kind.fields:
            return f"struct {name} = {{}}"
        fields = "".join(f"\n{indent_step}{_format_field(fmt, f)}," for f in kind.fields)
        return f"struct {name} =\n{{{fields}\n}}"
    elif isinstance(kind, EnumKind):
        variants = "\n".join(f"|  {_format_variant(fmt, v)}" for v in kind.variants)
        if not variants:
            return f"enum {name} = !"
        return f"enum {name} =\n{variants}"
    elif isinstance(kind, OpaqueKind):
        return f"opaque type {name}"
    raise InternalPrinterError(f"[ICE-0090] unexpected type declaration kind {kind!r}")
