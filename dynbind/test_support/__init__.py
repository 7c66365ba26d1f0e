# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Shared helpers for tests that need a populated host type universe.

These helpers avoid re-spelling TypeTable/MethodTable setup in every test and
provide short ParamSpec builders so signatures in tests read close to the host
declarations they stand for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from dynbind.bound_ir import ActualArgument
from dynbind.conversion import TypeTableConverter
from dynbind.core.types_core import TypeId, TypeTable
from dynbind.method_table import NO_DEFAULT, MethodTable, ParamSpec


@dataclass
class World:
	"""A small host type universe: Base <- Derived, plus an unrelated Other."""

	types: TypeTable
	table: MethodTable
	converter: TypeTableConverter
	int_ty: TypeId
	float_ty: TypeId
	bool_ty: TypeId
	str_ty: TypeId
	ctx_ty: TypeId
	type_token_ty: TypeId
	locals_ty: TypeId
	base: TypeId
	derived: TypeId
	other: TypeId

	def ctx_param(self) -> ParamSpec:
		return ParamSpec("ctx", self.ctx_ty)

	def static_param(self) -> ParamSpec:
		return ParamSpec("<static>", self.type_token_ty)

	def locals_param(self) -> ParamSpec:
		return ParamSpec("<locals>", self.locals_ty)

	def param(self, name: str, type_id: TypeId, default: Any = NO_DEFAULT) -> ParamSpec:
		return ParamSpec(name, type_id, default=default)

	def params_of(self, name: str, elem_type: TypeId) -> ParamSpec:
		return ParamSpec(name, self.types.ensure_array(elem_type), is_params=True)

	def ints(self, *values: int) -> List[ActualArgument]:
		return [ActualArgument.of(v, self.int_ty) for v in values]

	def args(self, *pairs: Sequence[Any]) -> List[ActualArgument]:
		"""Build arguments from (value, type_id) pairs."""
		return [ActualArgument.of(v, ty) for v, ty in pairs]


def make_world() -> World:
	types = TypeTable()
	base = types.new_class("Base")
	derived = types.new_class("Derived", base=base)
	other = types.new_class("Other")
	return World(
		types=types,
		table=MethodTable(types),
		converter=TypeTableConverter(types),
		int_ty=types.ensure_int(),
		float_ty=types.ensure_float(),
		bool_ty=types.ensure_bool(),
		str_ty=types.ensure_string(),
		ctx_ty=types.ensure_context(),
		type_token_ty=types.ensure_type_token(),
		locals_ty=types.ensure_locals(),
		base=base,
		derived=derived,
		other=other,
	)


__all__ = ["World", "make_world"]
