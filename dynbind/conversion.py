# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Argument conversion: the host hook the binder calls for every argument.

The binder only needs `convert`; overload selection additionally asks `rank`
how good a conversion would be without building it. TypeTableConverter is the
reference implementation over a TypeTable; hosts with richer coercion rules
provide their own object with the same two methods.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Protocol, Tuple

from .bound_ir import ActualArgument, BConvert, BExpr
from .core.errors import ConversionFailed
from .core.types_core import TypeId, TypeKind, TypeTable


class ConversionRank(IntEnum):
	"""Quality of a conversion; lower is better."""

	EXACT = 0
	WIDENING = 1
	IMPLICIT = 2
	NONE = 3


class Converter(Protocol):
	def rank(self, source: TypeId, target: TypeId) -> ConversionRank:
		...

	def convert(self, arg: ActualArgument, target: TypeId) -> BExpr:
		...


# (source name, target name) -> rank for scalar coercions the guest allows implicitly.
_SCALAR_COERCIONS: Dict[Tuple[str, str], ConversionRank] = {
	("Int", "Float"): ConversionRank.IMPLICIT,
	("Bool", "Int"): ConversionRank.IMPLICIT,
	("Int", "String"): ConversionRank.IMPLICIT,
	("Float", "String"): ConversionRank.IMPLICIT,
	("Bool", "String"): ConversionRank.IMPLICIT,
}

_SCALAR_CTORS = {
	"Int": int,
	"Float": float,
	"Bool": bool,
	"String": str,
}


class TypeTableConverter:
	"""Conversions derived from TypeTable subtyping plus a fixed scalar table."""

	def __init__(self, types: TypeTable) -> None:
		self.types = types

	def rank(self, source: TypeId, target: TypeId) -> ConversionRank:
		if source == target:
			return ConversionRank.EXACT
		if self.types.is_subtype(source, target):
			return ConversionRank.WIDENING
		src, dst = self.types.get(source), self.types.get(target)
		if src.kind is TypeKind.SCALAR and dst.kind is TypeKind.SCALAR:
			return _SCALAR_COERCIONS.get((src.name, dst.name), ConversionRank.NONE)
		return ConversionRank.NONE

	def convert(self, arg: ActualArgument, target: TypeId) -> BExpr:
		"""Exact matches pass through; anything else is wrapped in BConvert."""
		rank = self.rank(arg.type_id, target)
		if rank is ConversionRank.NONE:
			raise ConversionFailed(self.types.name_of(arg.type_id), self.types.name_of(target))
		if rank is ConversionRank.EXACT:
			return arg.expr
		return BConvert(arg.expr, target)

	def coerce(self, value: Any, target: TypeId) -> Any:
		"""Runtime side of a BConvert, for `bound_ir.evaluate`."""
		td = self.types.get(target)
		if td.kind is TypeKind.SCALAR and td.name in _SCALAR_CTORS:
			return _SCALAR_CTORS[td.name](value)
		return value


__all__ = ["ConversionRank", "Converter", "TypeTableConverter"]
