# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Host type universe seen by the resolver.

TypeIds are opaque ints indexing into a TypeTable. The table knows just enough
about each type for call-site resolution: its kind, its name, the base/interface
edges of classes (for visibility and conversion checks) and the element type of
arrays (for variadic parameters).

Three kinds are reserved for implicit parameters injected by the runtime:
CONTEXT (the execution context handle), TYPE_TOKEN (the late static bound
class) and LOCALS (the table of enclosing locals).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple


TypeId = int  # opaque handle into the TypeTable


class TypeKind(Enum):
	"""Kinds of host types understood by the resolver."""

	SCALAR = auto()
	CLASS = auto()
	ARRAY = auto()
	CONTEXT = auto()
	TYPE_TOKEN = auto()
	LOCALS = auto()
	MIXED = auto()


@dataclass(frozen=True)
class TypeDef:
	"""Definition of a type stored in the TypeTable."""

	kind: TypeKind
	name: str
	param_types: Tuple[TypeId, ...] = ()  # ARRAY: (element,)
	base: Optional[TypeId] = None  # only meaningful for TypeKind.CLASS
	interfaces: Tuple[TypeId, ...] = ()


class TypeTable:
	"""
	Simple type table that owns TypeIds.

	Populated once by the host before resolution starts; lookups afterwards are
	read-only and may run from any thread.
	"""

	def __init__(self) -> None:
		self._defs: Dict[TypeId, TypeDef] = {}
		self._next_id: TypeId = 1  # reserve 0 for "invalid"
		self._well_known: Dict[str, TypeId] = {}
		self._array_cache: Dict[TypeId, TypeId] = {}

	def new_scalar(self, name: str) -> TypeId:
		"""Register a scalar type (e.g., Int, Bool) and return its TypeId."""
		return self._add(TypeDef(TypeKind.SCALAR, name))

	def new_class(
		self,
		name: str,
		base: Optional[TypeId] = None,
		interfaces: Iterable[TypeId] = (),
	) -> TypeId:
		"""Register a class type deriving from `base` and implementing `interfaces`."""
		ifaces = tuple(interfaces)
		for parent in ((base,) if base is not None else ()) + ifaces:
			if self.get(parent).kind is not TypeKind.CLASS:
				raise ValueError(f"class {name!r} cannot derive from non-class type {self.name_of(parent)!r}")
		return self._add(TypeDef(TypeKind.CLASS, name, base=base, interfaces=ifaces))

	def ensure_array(self, elem: TypeId) -> TypeId:
		"""Return a stable array TypeId over `elem`, creating it once."""
		if elem not in self._array_cache:
			elem_name = self.name_of(elem)
			self._array_cache[elem] = self._add(TypeDef(TypeKind.ARRAY, f"{elem_name}[]", (elem,)))
		return self._array_cache[elem]

	def _ensure(self, key: str, kind: TypeKind) -> TypeId:
		if key not in self._well_known:
			self._well_known[key] = self._add(TypeDef(kind, key))
		return self._well_known[key]

	def ensure_int(self) -> TypeId:
		"""Return a stable Int TypeId, creating it once."""
		return self._ensure("Int", TypeKind.SCALAR)

	def ensure_float(self) -> TypeId:
		"""Return a stable Float TypeId, creating it once."""
		return self._ensure("Float", TypeKind.SCALAR)

	def ensure_bool(self) -> TypeId:
		"""Return a stable Bool TypeId, creating it once."""
		return self._ensure("Bool", TypeKind.SCALAR)

	def ensure_string(self) -> TypeId:
		"""Return a stable String TypeId, creating it once."""
		return self._ensure("String", TypeKind.SCALAR)

	def ensure_mixed(self) -> TypeId:
		"""Return the top type every other type converts to."""
		return self._ensure("Mixed", TypeKind.MIXED)

	def ensure_context(self) -> TypeId:
		"""Return the execution-context type of implicit `ctx` parameters."""
		return self._ensure("Context", TypeKind.CONTEXT)

	def ensure_type_token(self) -> TypeId:
		"""Return the runtime type-token type carried by `<static>` parameters."""
		return self._ensure("Type", TypeKind.TYPE_TOKEN)

	def ensure_locals(self) -> TypeId:
		"""Return the locals-table type carried by `<locals>` parameters."""
		return self._ensure("Locals", TypeKind.LOCALS)

	def get(self, ty: TypeId) -> TypeDef:
		"""Fetch the TypeDef for a given TypeId."""
		try:
			return self._defs[ty]
		except KeyError:
			raise KeyError(f"unknown TypeId {ty}") from None

	def name_of(self, ty: TypeId) -> str:
		return self.get(ty).name

	def is_array(self, ty: TypeId) -> bool:
		return self.get(ty).kind is TypeKind.ARRAY

	def element_type(self, ty: TypeId) -> TypeId:
		"""Element type of an array type."""
		td = self.get(ty)
		if td.kind is not TypeKind.ARRAY:
			raise ValueError(f"type {td.name!r} is not an array type")
		return td.param_types[0]

	def is_subtype(self, sub: TypeId, sup: TypeId) -> bool:
		"""
		True when a value of `sub` is usable where `sup` is declared.

		Reflexive; follows class bases and interfaces transitively. Every type is
		a subtype of Mixed.
		"""
		if sub == sup:
			return True
		if self.get(sup).kind is TypeKind.MIXED:
			return True
		pending: List[TypeId] = [sub]
		seen = set()
		while pending:
			cur = pending.pop()
			if cur in seen:
				continue
			seen.add(cur)
			td = self.get(cur)
			if td.kind is not TypeKind.CLASS:
				continue
			parents = ((td.base,) if td.base is not None else ()) + td.interfaces
			if sup in parents:
				return True
			pending.extend(parents)
		return False

	def base_chain(self, ty: TypeId) -> List[TypeId]:
		"""`ty` followed by its base classes, most-derived first."""
		chain: List[TypeId] = []
		cur: Optional[TypeId] = ty
		while cur is not None:
			chain.append(cur)
			td = self.get(cur)
			cur = td.base if td.kind is TypeKind.CLASS else None
		return chain

	def _add(self, td: TypeDef) -> TypeId:
		ty_id = self._next_id
		self._next_id += 1
		self._defs[ty_id] = td
		return ty_id


__all__ = ["TypeId", "TypeKind", "TypeDef", "TypeTable"]
