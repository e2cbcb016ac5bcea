"""
Loader for crates exported as JSON.

The format follows serde's default ("externally tagged") enum encoding:
unit variants are plain strings ("Return"), other variants are one-entry
objects ({"Break": 0}, {"Assign": [place, rvalue]}); tuple payloads are
arrays, record payloads are objects.

Top level:

    {"name": "demo", "types": [...], "globals": [...], "functions": [...]}
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import json
import typing
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, NoReturn, Optional, Tuple

from llbc_ast import (
    Assert,
    Assign,
    Break,
    Call,
    Continue,
    Drop,
    FakeRead,
    FunBody,
    FunDecl,
    FunSig,
    GlobalDecl,
    If,
    Loop,
    Match,
    Nop,
    Panic,
    RawStatement,
    Return,
    Sequence,
    SetDiscriminant,
    Statement,
    Switch,
    SwitchInt,
    SwitchKind,
    Var,
)
from llbc_context import PrinterContext
from llbc_crate import DeclContext
from llbc_expressions import (
    Aggregate,
    AggregatedAdt,
    AggregatedOption,
    AggregatedTuple,
    AggregateKind,
    Assertion,
    Assumed,
    AssumedFunId,
    BinaryOp,
    BinOp,
    BorrowKind,
    Cast,
    Constant,
    Copy,
    Deref,
    DerefBox,
    Discriminant,
    Field,
    FieldProjKind,
    FnCall,
    FunId,
    Global,
    Move,
    Neg,
    Not,
    Operand,
    Place,
    ProjAdt,
    ProjectionElem,
    ProjTuple,
    Regular,
    Rvalue,
    RvRef,
    UnaryOp,
    UnOp,
    Use,
)
from llbc_logger import log_debug, log_info, log_stage
from llbc_meta import Name, Span
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
    FieldId,
    FunDeclId,
    GlobalDeclId,
    Integer,
    IntegerTy,
    Never,
    OpaqueKind,
    Ref,
    RefKind,
    Region,
    RegionVar,
    RegionVarId,
    RErased,
    RStatic,
    RVar,
    Slice,
    Str,
    StructKind,
    TupleId,
    Ty,
    TypeCtorId,
    TypeDecl,
    TypeDeclId,
    TypeDeclKind,
    TypeParam,
    TypeVar,
    TypeVarId,
    VarId,
    VariantId,
)
from llbc_values import ConstAdt, ConstantValue, ConstBool, ConstChar, ConstGlobal, ConstScalar, ConstString, ScalarValue

T = typing.TypeVar("T")


@dataclass
class LlbcLoadError(Exception):
    message: str
    filename: Optional[str] = None

    def format(self) -> str:
        if self.filename:
            return f"{self.filename}: error: {self.message}"
        return f"error: {self.message}"


_REF_KINDS = {"Mut": RefKind.MUT, "Shared": RefKind.SHARED}

_BORROW_KINDS = {
    "Shared": BorrowKind.SHARED,
    "Mut": BorrowKind.MUT,
    "TwoPhaseMut": BorrowKind.TWO_PHASE_MUT,
    "Shallow": BorrowKind.SHALLOW,
}

_BIN_OPS = {
    "BitXor": BinOp.BIT_XOR,
    "BitAnd": BinOp.BIT_AND,
    "BitOr": BinOp.BIT_OR,
    "Eq": BinOp.EQ,
    "Lt": BinOp.LT,
    "Le": BinOp.LE,
    "Ne": BinOp.NE,
    "Ge": BinOp.GE,
    "Gt": BinOp.GT,
    "Div": BinOp.DIV,
    "Rem": BinOp.REM,
    "Add": BinOp.ADD,
    "Sub": BinOp.SUB,
    "Mul": BinOp.MUL,
    "Shl": BinOp.SHL,
    "Shr": BinOp.SHR,
}


class CrateLoader:
    """
    Builds a DeclContext from decoded JSON.

    Entry points:
      - load(data): the whole crate, from an already decoded JSON value.
      - statement(js), ty(js), ...: single nodes (handy in tests).
    """

    def __init__(self, filename: Optional[str] = None, context: Optional[PrinterContext] = None) -> None:
        self.filename = filename
        self.context = context or PrinterContext.default()

    # --- public API ---

    def load(self, data: Any) -> DeclContext:
        obj = self._expect_object(data, "crate")
        name = obj.get("name")
        if name is not None and not isinstance(name, str):
            self._error("[JSN-0020] crate name must be a string", name)

        types = [self.type_decl(js) for js in self._expect_list(obj.get("types", []), "types")]
        log_debug(self.context, f"Loaded {len(types)} type declaration(s)")
        globals_ = [self.global_decl(js) for js in self._expect_list(obj.get("globals", []), "globals")]
        log_debug(self.context, f"Loaded {len(globals_)} global declaration(s)")
        functions = [self.fun_decl(js) for js in self._expect_list(obj.get("functions", []), "functions")]
        log_debug(self.context, f"Loaded {len(functions)} function declaration(s)")

        return DeclContext.from_decls(types, globals_, functions, name=name)

    # --- declarations ---

    def type_decl(self, js: Any) -> TypeDecl:
        obj = self._expect_object(js, "type declaration")
        return TypeDecl(
            TypeDeclId(self._expect_int(self._field(obj, "def_id"), "def_id")),
            self.name(self._field(obj, "name")),
            self.type_decl_kind(self._field(obj, "kind")),
            region_params=tuple(self.region_var(r) for r in self._expect_list(obj.get("region_params", []), "region_params")),
            type_params=tuple(self.type_param(t) for t in self._expect_list(obj.get("type_params", []), "type_params")),
            span=self.span(obj.get("span")),
        )

    def type_decl_kind(self, js: Any) -> TypeDeclKind:
        tag, payload = self._tag(js, "type declaration kind")
        if tag == "Struct":
            return StructKind(tuple(self.field_decl(f) for f in self._expect_list(payload, "fields")))
        elif tag == "Enum":
            return EnumKind(tuple(self.enum_variant(v) for v in self._expect_list(payload, "variants")))
        elif tag == "Opaque":
            return OpaqueKind()
        self._unknown_tag(tag, "type declaration kind")

    def field_decl(self, js: Any) -> FieldDecl:
        obj = self._expect_object(js, "field")
        return FieldDecl(self._optional_str(obj.get("name"), "field name"), self.ty(self._field(obj, "ty")))

    def enum_variant(self, js: Any) -> EnumVariant:
        obj = self._expect_object(js, "variant")
        fields = tuple(self.field_decl(f) for f in self._expect_list(obj.get("fields", []), "fields"))
        return EnumVariant(self._expect_str(self._field(obj, "name"), "variant name"), fields)

    def fun_decl(self, js: Any) -> FunDecl:
        obj = self._expect_object(js, "function declaration")
        body_js = obj.get("body")
        return FunDecl(
            FunDeclId(self._expect_int(self._field(obj, "def_id"), "def_id")),
            self.name(self._field(obj, "name")),
            self.fun_sig(self._field(obj, "signature")),
            body=self.fun_body(body_js) if body_js is not None else None,
            span=self.span(obj.get("span")),
        )

    def fun_sig(self, js: Any) -> FunSig:
        obj = self._expect_object(js, "signature")
        return FunSig(
            tuple(self.ty(t) for t in self._expect_list(self._field(obj, "inputs"), "inputs")),
            self.ty(self._field(obj, "output")),
            region_params=tuple(self.region_var(r) for r in self._expect_list(obj.get("region_params", []), "region_params")),
            type_params=tuple(self.type_param(t) for t in self._expect_list(obj.get("type_params", []), "type_params")),
        )

    def fun_body(self, js: Any) -> FunBody:
        obj = self._expect_object(js, "function body")
        return FunBody(
            self._expect_int(self._field(obj, "arg_count"), "arg_count"),
            tuple(self.var(v) for v in self._expect_list(self._field(obj, "locals"), "locals")),
            self.statement(self._field(obj, "body")),
        )

    def var(self, js: Any) -> Var:
        obj = self._expect_object(js, "local")
        return Var(
            VarId(self._expect_int(self._field(obj, "index"), "local index")),
            self._optional_str(obj.get("name"), "local name"),
            self.ty(self._field(obj, "ty")),
        )

    def global_decl(self, js: Any) -> GlobalDecl:
        obj = self._expect_object(js, "global declaration")
        return GlobalDecl(
            GlobalDeclId(self._expect_int(self._field(obj, "def_id"), "def_id")),
            self.name(self._field(obj, "name")),
            self.ty(self._field(obj, "ty")),
            FunDeclId(self._expect_int(self._field(obj, "body_id"), "body_id")),
            span=self.span(obj.get("span")),
        )

    def name(self, js: Any) -> Name:
        return tuple(self._expect_str(elem, "name element") for elem in self._expect_list(js, "name"))

    def span(self, js: Any) -> Optional[Span]:
        if js is None:
            return None
        obj = self._expect_object(js, "span")
        beg = self._expect_object(self._field(obj, "beg"), "span start")
        end = self._expect_object(self._field(obj, "end"), "span end")
        return Span(
            self._expect_int(self._field(beg, "line"), "line"),
            self._expect_int(self._field(beg, "col"), "column"),
            self._expect_int(self._field(end, "line"), "line"),
            self._expect_int(self._field(end, "col"), "column"),
            filename=self._optional_str(obj.get("file"), "file"),
        )

    # --- types ---

    def region_var(self, js: Any) -> RegionVar:
        obj = self._expect_object(js, "region parameter")
        return RegionVar(
            RegionVarId(self._expect_int(self._field(obj, "index"), "region index")),
            self._optional_str(obj.get("name"), "region name"),
        )

    def type_param(self, js: Any) -> TypeParam:
        obj = self._expect_object(js, "type parameter")
        return TypeParam(
            TypeVarId(self._expect_int(self._field(obj, "index"), "type parameter index")),
            self._expect_str(self._field(obj, "name"), "type parameter name"),
        )

    def region(self, js: Any) -> Region:
        tag, payload = self._tag(js, "region")
        if tag == "Static":
            return RStatic()
        elif tag == "Erased":
            return RErased()
        elif tag == "Var":
            return RVar(RegionVarId(self._expect_int(payload, "region id")))
        self._unknown_tag(tag, "region")

    def integer_ty(self, js: Any) -> IntegerTy:
        name = self._expect_str(js, "integer type")
        try:
            return IntegerTy(name.lower())
        except ValueError:
            self._unknown_tag(name, "integer type")

    def type_ctor_id(self, js: Any) -> TypeCtorId:
        tag, payload = self._tag(js, "type id")
        if tag == "Adt":
            return AdtId(TypeDeclId(self._expect_int(payload, "type declaration id")))
        elif tag == "Tuple":
            return TupleId()
        elif tag == "Assumed":
            name = self._expect_str(payload, "assumed type")
            try:
                return AssumedTy(name)
            except ValueError:
                self._unknown_tag(name, "assumed type")
        self._unknown_tag(tag, "type id")

    def ty(self, js: Any) -> Ty:
        tag, payload = self._tag(js, "type")
        if tag == "Adt":
            type_id, regions, types = self._expect_tuple(payload, 3, "Adt")
            return Adt(
                self.type_ctor_id(type_id),
                tuple(self.region(r) for r in self._expect_list(regions, "regions")),
                tuple(self.ty(t) for t in self._expect_list(types, "types")),
            )
        elif tag == "TypeVar":
            return TypeVar(TypeVarId(self._expect_int(payload, "type variable id")))
        elif tag == "Bool":
            return Bool()
        elif tag == "Char":
            return Char()
        elif tag == "Never":
            return Never()
        elif tag == "Integer":
            return Integer(self.integer_ty(payload))
        elif tag == "Str":
            return Str()
        elif tag == "Array":
            return Array(self.ty(payload))
        elif tag == "Slice":
            return Slice(self.ty(payload))
        elif tag == "Ref":
            region, ty, kind = self._expect_tuple(payload, 3, "Ref")
            return Ref(self.region(region), self.ty(ty), self._lookup(_REF_KINDS, kind, "reference kind"))
        self._unknown_tag(tag, "type")

    # --- values ---

    def scalar_value(self, js: Any) -> ScalarValue:
        tag, payload = self._tag(js, "scalar value")
        int_ty = self.integer_ty(tag)
        # large values may be exported as strings
        if isinstance(payload, str):
            try:
                value = int(payload)
            except ValueError:
                self._error(f"[JSN-0020] invalid integer literal '{payload}'", payload)
        else:
            value = self._expect_int(payload, "scalar value")
        return ScalarValue(value, int_ty)

    def constant_value(self, js: Any) -> ConstantValue:
        tag, payload = self._tag(js, "constant value")
        if tag == "Scalar":
            return ConstScalar(self.scalar_value(payload))
        elif tag == "Bool":
            if not isinstance(payload, bool):
                self._error("[JSN-0020] expected a boolean", payload)
            return ConstBool(payload)
        elif tag == "Char":
            return ConstChar(self._expect_str(payload, "character"))
        elif tag == "String":
            return ConstString(self._expect_str(payload, "string"))
        elif tag == "Adt":
            variant_id, fields = self._expect_tuple(payload, 2, "constant Adt")
            return ConstAdt(
                self._optional_variant_id(variant_id),
                tuple(self.constant_value(f) for f in self._expect_list(fields, "constant fields")),
            )
        elif tag == "Global":
            return ConstGlobal(GlobalDeclId(self._expect_int(payload, "global id")))
        self._unknown_tag(tag, "constant value")

    # --- places, operands and r-values ---

    def place(self, js: Any) -> Place:
        obj = self._expect_object(js, "place")
        return Place(
            VarId(self._expect_int(self._field(obj, "var_id"), "var_id")),
            tuple(self.projection_elem(pe) for pe in self._expect_list(obj.get("projection", []), "projection")),
        )

    def projection_elem(self, js: Any) -> ProjectionElem:
        tag, payload = self._tag(js, "projection element")
        if tag == "Deref":
            return Deref()
        elif tag == "DerefBox":
            return DerefBox()
        elif tag == "Field":
            kind, field_id = self._expect_tuple(payload, 2, "Field")
            return Field(self.field_proj_kind(kind), FieldId(self._expect_int(field_id, "field id")))
        self._unknown_tag(tag, "projection element")

    def field_proj_kind(self, js: Any) -> FieldProjKind:
        tag, payload = self._tag(js, "field projection kind")
        if tag == "ProjAdt":
            def_id, variant_id = self._expect_tuple(payload, 2, "ProjAdt")
            return ProjAdt(TypeDeclId(self._expect_int(def_id, "type declaration id")), self._optional_variant_id(variant_id))
        elif tag == "ProjTuple":
            return ProjTuple(self._expect_int(payload, "tuple arity"))
        self._unknown_tag(tag, "field projection kind")

    def operand(self, js: Any) -> Operand:
        tag, payload = self._tag(js, "operand")
        if tag == "Copy":
            return Copy(self.place(payload))
        elif tag == "Move":
            return Move(self.place(payload))
        elif tag == "Const":
            ty, value = self._expect_tuple(payload, 2, "Const")
            return Constant(self.ty(ty), self.constant_value(value))
        self._unknown_tag(tag, "operand")

    def unop(self, js: Any) -> UnOp:
        tag, payload = self._tag(js, "unary operator")
        if tag == "Not":
            return Not()
        elif tag == "Neg":
            return Neg()
        elif tag == "Cast":
            src, tgt = self._expect_tuple(payload, 2, "Cast")
            return Cast(self.integer_ty(src), self.integer_ty(tgt))
        self._unknown_tag(tag, "unary operator")

    def aggregate_kind(self, js: Any) -> AggregateKind:
        tag, payload = self._tag(js, "aggregate kind")
        if tag == "AggregatedTuple":
            return AggregatedTuple()
        elif tag == "AggregatedOption":
            variant_id, ty = self._expect_tuple(payload, 2, "AggregatedOption")
            return AggregatedOption(VariantId(self._expect_int(variant_id, "variant id")), self.ty(ty))
        elif tag == "AggregatedAdt":
            def_id, variant_id, regions, types = self._expect_tuple(payload, 4, "AggregatedAdt")
            return AggregatedAdt(
                TypeDeclId(self._expect_int(def_id, "type declaration id")),
                self._optional_variant_id(variant_id),
                tuple(self.region(r) for r in self._expect_list(regions, "regions")),
                tuple(self.ty(t) for t in self._expect_list(types, "types")),
            )
        self._unknown_tag(tag, "aggregate kind")

    def rvalue(self, js: Any) -> Rvalue:
        tag, payload = self._tag(js, "rvalue")
        if tag == "Use":
            return Use(self.operand(payload))
        elif tag == "Ref":
            place, kind = self._expect_tuple(payload, 2, "Ref")
            return RvRef(self.place(place), self._lookup(_BORROW_KINDS, kind, "borrow kind"))
        elif tag == "UnaryOp":
            op, operand = self._expect_tuple(payload, 2, "UnaryOp")
            return UnaryOp(self.unop(op), self.operand(operand))
        elif tag == "BinaryOp":
            op, left, right = self._expect_tuple(payload, 3, "BinaryOp")
            return BinaryOp(self._lookup(_BIN_OPS, op, "binary operator"), self.operand(left), self.operand(right))
        elif tag == "Discriminant":
            return Discriminant(self.place(payload))
        elif tag == "Aggregate":
            kind, operands = self._expect_tuple(payload, 2, "Aggregate")
            return Aggregate(self.aggregate_kind(kind), tuple(self.operand(op) for op in self._expect_list(operands, "operands")))
        elif tag == "Global":
            return Global(GlobalDeclId(self._expect_int(payload, "global id")))
        self._unknown_tag(tag, "rvalue")

    def fun_id(self, js: Any) -> FunId:
        tag, payload = self._tag(js, "function id")
        if tag == "Regular":
            return Regular(FunDeclId(self._expect_int(payload, "function id")))
        elif tag == "Assumed":
            name = self._expect_str(payload, "assumed function")
            try:
                return Assumed(AssumedFunId(name))
            except ValueError:
                self._unknown_tag(name, "assumed function")
        self._unknown_tag(tag, "function id")

    def fn_call(self, js: Any) -> FnCall:
        obj = self._expect_object(js, "call")
        return FnCall(
            self.fun_id(self._field(obj, "func")),
            tuple(self.operand(op) for op in self._expect_list(obj.get("args", []), "args")),
            self.place(self._field(obj, "dest")),
            region_args=tuple(self.region(r) for r in self._expect_list(obj.get("region_args", []), "region_args")),
            type_args=tuple(self.ty(t) for t in self._expect_list(obj.get("type_args", []), "type_args")),
        )

    # --- statements ---

    def statement(self, js: Any) -> Statement:
        obj = self._expect_object(js, "statement")
        return Statement(self.raw_statement(self._field(obj, "content")), span=self.span(obj.get("span")))

    def raw_statement(self, js: Any) -> RawStatement:
        tag, payload = self._tag(js, "statement")
        if tag == "Assign":
            place, rvalue = self._expect_tuple(payload, 2, "Assign")
            return Assign(self.place(place), self.rvalue(rvalue))
        elif tag == "FakeRead":
            return FakeRead(self.place(payload))
        elif tag == "SetDiscriminant":
            place, variant_id = self._expect_tuple(payload, 2, "SetDiscriminant")
            return SetDiscriminant(self.place(place), VariantId(self._expect_int(variant_id, "variant id")))
        elif tag == "Drop":
            return Drop(self.place(payload))
        elif tag == "Assert":
            obj = self._expect_object(payload, "assertion")
            expected = self._field(obj, "expected")
            if not isinstance(expected, bool):
                self._error("[JSN-0020] assertion 'expected' must be a boolean", expected)
            return Assert(Assertion(self.operand(self._field(obj, "cond")), expected))
        elif tag == "Call":
            return Call(self.fn_call(payload))
        elif tag == "Panic":
            return Panic()
        elif tag == "Return":
            return Return()
        elif tag == "Break":
            return Break(self._expect_int(payload, "break depth"))
        elif tag == "Continue":
            return Continue(self._expect_int(payload, "continue depth"))
        elif tag == "Nop":
            return Nop()
        elif tag == "Sequence":
            first, second = self._expect_tuple(payload, 2, "Sequence")
            return Sequence(self.statement(first), self.statement(second))
        elif tag == "Switch":
            return Switch(self.switch(payload))
        elif tag == "Loop":
            return Loop(self.statement(payload))
        self._unknown_tag(tag, "statement")

    def switch(self, js: Any) -> SwitchKind:
        tag, payload = self._tag(js, "switch")
        if tag == "If":
            op, then_st, else_st = self._expect_tuple(payload, 3, "If")
            return If(self.operand(op), self.statement(then_st), self.statement(else_st))
        elif tag == "SwitchInt":
            op, int_ty, branches, otherwise = self._expect_tuple(payload, 4, "SwitchInt")
            return SwitchInt(
                self.operand(op),
                self.integer_ty(int_ty),
                self._branches(branches, self.scalar_value),
                self.statement(otherwise),
            )
        elif tag == "Match":
            place, branches, otherwise = self._expect_tuple(payload, 3, "Match")
            return Match(
                self.place(place),
                self._branches(branches, lambda v: VariantId(self._expect_int(v, "variant id"))),
                self.statement(otherwise),
            )
        self._unknown_tag(tag, "switch")

    def _branches(self, js: Any, label: Callable[[Any], T]) -> Tuple[Tuple[Tuple[T, ...], Statement], ...]:
        branches = []
        for branch in self._expect_list(js, "branches"):
            labels, body = self._expect_tuple(branch, 2, "branch")
            branches.append((tuple(label(lbl) for lbl in self._expect_list(labels, "branch labels")), self.statement(body)))
        return tuple(branches)

    # --- internal helpers ---

    def _error(self, message: str, js: Any = None) -> NoReturn:
        if js is not None:
            shown = json.dumps(js)
            if len(shown) > 60:
                shown = shown[:57] + "..."
            message = f"{message}, got {shown}"
        raise LlbcLoadError(message, self.filename)

    def _unknown_tag(self, tag: str, what: str) -> NoReturn:
        raise LlbcLoadError(f"[JSN-0030] unknown {what} '{tag}'", self.filename)

    def _tag(self, js: Any, what: str) -> Tuple[str, Any]:
        if isinstance(js, str):
            return js, None
        if isinstance(js, dict) and len(js) == 1:
            ((tag, payload),) = js.items()
            return tag, payload
        self._error(f"[JSN-0020] expected a tagged {what}", js)

    def _lookup(self, table: Dict[str, T], js: Any, what: str) -> T:
        name = self._expect_str(js, what)
        if name not in table:
            self._unknown_tag(name, what)
        return table[name]

    def _field(self, obj: Dict[str, Any], key: str) -> Any:
        if key not in obj:
            self._error(f"[JSN-0020] missing field '{key}'", obj)
        return obj[key]

    def _expect_object(self, js: Any, what: str) -> Dict[str, Any]:
        if not isinstance(js, dict):
            self._error(f"[JSN-0020] expected an object for {what}", js)
        return js

    def _expect_list(self, js: Any, what: str) -> List[Any]:
        if not isinstance(js, list):
            self._error(f"[JSN-0020] expected an array for {what}", js)
        return js

    def _expect_tuple(self, js: Any, arity: int, what: str) -> List[Any]:
        items = self._expect_list(js, what)
        if len(items) != arity:
            self._error(f"[JSN-0020] expected {arity} element(s) for {what}", js)
        return items

    def _expect_int(self, js: Any, what: str) -> int:
        if not isinstance(js, int) or isinstance(js, bool):
            self._error(f"[JSN-0020] expected an integer for {what}", js)
        return js

    def _expect_str(self, js: Any, what: str) -> str:
        if not isinstance(js, str):
            self._error(f"[JSN-0020] expected a string for {what}", js)
        return js

    def _optional_str(self, js: Any, what: str) -> Optional[str]:
        if js is None:
            return None
        return self._expect_str(js, what)

    def _optional_variant_id(self, js: Any) -> Optional[VariantId]:
        if js is None:
            return None
        return VariantId(self._expect_int(js, "variant id"))


def crate_of_json(data: Any, filename: Optional[str] = None, context: Optional[PrinterContext] = None) -> DeclContext:
    return CrateLoader(filename=filename, context=context).load(data)


def load_crate(path: str | Path, context: Optional[PrinterContext] = None) -> DeclContext:
    """
    Read and decode a crate file. Raises FileNotFoundError when the file is
    missing and LlbcLoadError when its content is not a valid crate.
    """
    path = Path(path)
    log_stage(context, "Loading crate", str(path))
    if not path.exists():
        raise FileNotFoundError(f"crate file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LlbcLoadError(f"[JSN-0010] invalid UTF-8 at byte {e.start}: {e.reason}", str(path)) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LlbcLoadError(f"[JSN-0010] invalid JSON at {e.lineno}:{e.colno}: {e.msg}", str(path)) from e

    decls = crate_of_json(data, filename=str(path), context=context)
    log_info(context, f"Loaded {len(decls)} declaration(s) from {path}")
    return decls
