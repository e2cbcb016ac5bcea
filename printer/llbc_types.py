#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Optional, Tuple, Union

from llbc_meta import Name, Node

# ========================================
# Identifiers
# ========================================

TypeDeclId = NewType("TypeDeclId", int)
FunDeclId = NewType("FunDeclId", int)
GlobalDeclId = NewType("GlobalDeclId", int)
VarId = NewType("VarId", int)
TypeVarId = NewType("TypeVarId", int)
RegionVarId = NewType("RegionVarId", int)
VariantId = NewType("VariantId", int)
FieldId = NewType("FieldId", int)


# ========================================
# Regions
# ========================================

class Region:
    """Base class for regions (lifetimes)."""
    pass


@dataclass(frozen=True)
class RStatic(Region):
    pass


@dataclass(frozen=True)
class RVar(Region):
    id: RegionVarId


@dataclass(frozen=True)
class RErased(Region):
    pass


# ========================================
# Types
# ========================================

class IntegerTy(Enum):
    ISIZE = "isize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    USIZE = "usize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"

    @property
    def is_signed(self) -> bool:
        return self.value.startswith("i")


class RefKind(Enum):
    MUT = "mut"
    SHARED = "shared"


class AssumedTy(Enum):
    BOX = "Box"
    VEC = "Vec"
    OPTION = "Option"


@dataclass(frozen=True)
class AdtId:
    """A user-defined type, referenced by declaration id."""
    def_id: TypeDeclId


@dataclass(frozen=True)
class TupleId:
    pass


TypeCtorId = Union[AdtId, TupleId, AssumedTy]


class Ty:
    """
    Base class for all IR types.
    Used only as a common marker; concrete types are dataclasses below.
    """
    pass


@dataclass(frozen=True)
class Adt(Ty):
    type_id: TypeCtorId
    regions: Tuple[Region, ...] = ()
    types: Tuple[Ty, ...] = ()


@dataclass(frozen=True)
class TypeVar(Ty):
    id: TypeVarId


@dataclass(frozen=True)
class Bool(Ty):
    pass


@dataclass(frozen=True)
class Char(Ty):
    pass


@dataclass(frozen=True)
class Never(Ty):
    pass


@dataclass(frozen=True)
class Integer(Ty):
    int_ty: IntegerTy


@dataclass(frozen=True)
class Str(Ty):
    pass


@dataclass(frozen=True)
class Array(Ty):
    ty: Ty


@dataclass(frozen=True)
class Slice(Ty):
    ty: Ty


@dataclass(frozen=True)
class Ref(Ty):
    region: Region
    ty: Ty
    kind: RefKind


UNIT_TY = Adt(TupleId())


# ========================================
# Generic parameters and type declarations
# ========================================

@dataclass(frozen=True)
class RegionVar:
    index: RegionVarId
    name: Optional[str] = None


@dataclass(frozen=True)
class TypeParam:
    index: TypeVarId
    name: str


@dataclass(frozen=True)
class FieldDecl:
    name: Optional[str]
    ty: Ty


@dataclass(frozen=True)
class EnumVariant:
    name: str
    fields: Tuple[FieldDecl, ...] = ()


@dataclass(frozen=True)
class StructKind:
    fields: Tuple[FieldDecl, ...] = ()


@dataclass(frozen=True)
class EnumKind:
    variants: Tuple[EnumVariant, ...] = ()


@dataclass(frozen=True)
class OpaqueKind:
    pass


TypeDeclKind = Union[StructKind, EnumKind, OpaqueKind]


@dataclass(frozen=True)
class TypeDecl(Node):
    def_id: TypeDeclId
    name: Name
    kind: TypeDeclKind
    region_params: Tuple[RegionVar, ...] = ()
    type_params: Tuple[TypeParam, ...] = ()
