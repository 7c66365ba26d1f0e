# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Bound-call IR: the target-neutral output of the argument binder.

Pipeline placement:
  MethodTable → candidate filters → overload selection → binder → BoundCall (this file)

A BoundCall is an ordered list of BExpr nodes, one per formal parameter of the
chosen method. A compiling host lowers the nodes to its own expression trees;
an interpreting host calls `evaluate` to get plain values.

Guiding rules:
- Nodes are immutable; the binder never reuses or mutates its inputs.
- BValue is opaque: it may hold a concrete value or a host expression handle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Tuple

from .core.types_core import TypeId

if TYPE_CHECKING:
	from .method_table import MethodCandidate


class BExpr:
	"""Base class for all bound expressions."""
	pass


@dataclass(frozen=True)
class BValue(BExpr):
	"""Host value (or host expression) supplied by the call site."""
	value: Any
	type_id: TypeId


@dataclass(frozen=True)
class BConst(BExpr):
	"""Declared default of an optional parameter, typed as the parameter."""
	value: Any
	type_id: TypeId


@dataclass(frozen=True)
class BConvert(BExpr):
	"""Conversion of `operand` to `target` inserted by a converter."""
	operand: BExpr
	target: TypeId


@dataclass(frozen=True)
class BNewArray(BExpr):
	"""Sequence constructed for a variadic parameter."""
	elem_type: TypeId
	items: Tuple[BExpr, ...]


@dataclass(frozen=True)
class ActualArgument:
	"""One argument at the call site: an expression plus its runtime type."""

	expr: BExpr
	type_id: TypeId

	@staticmethod
	def of(value: Any, type_id: TypeId) -> "ActualArgument":
		return ActualArgument(BValue(value, type_id), type_id)


@dataclass(frozen=True)
class BoundCall:
	"""Ordered parameter expressions for `method`; one entry per parameter."""

	method: "MethodCandidate"
	args: Tuple[BExpr, ...]

	def __len__(self) -> int:
		return len(self.args)


def evaluate(expr: BExpr, coerce: Callable[[Any, TypeId], Any]) -> Any:
	"""
	Reduce a bound expression to a host value.

	`coerce(value, target)` performs the runtime side of a BConvert; it is the
	interpreting counterpart of the converter that inserted the node.
	"""
	if isinstance(expr, (BValue, BConst)):
		return expr.value
	if isinstance(expr, BConvert):
		return coerce(evaluate(expr.operand, coerce), expr.target)
	if isinstance(expr, BNewArray):
		return [evaluate(item, coerce) for item in expr.items]
	raise TypeError(f"unsupported bound expression {type(expr).__name__}")


def evaluate_call(call: BoundCall, coerce: Callable[[Any, TypeId], Any]) -> list:
	"""Evaluate every parameter expression of `call`, in order."""
	return [evaluate(arg, coerce) for arg in call.args]


__all__ = [
	"BExpr",
	"BValue",
	"BConst",
	"BConvert",
	"BNewArray",
	"ActualArgument",
	"BoundCall",
	"evaluate",
	"evaluate_call",
]
