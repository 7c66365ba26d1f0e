# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Bind actual call-site arguments to the formal parameters of one candidate.

The binder walks the formal parameters left to right with a read cursor into
the actual arguments:
- While nothing has been consumed yet, implicit parameters (context,
  `<static>`, `<locals>`) are filled from the call site's own values.
- A trailing variadic parameter swallows every remaining argument.
- Regular parameters take the next argument, else their default, else the
  binding fails.
Excess arguments nobody consumed are dropped (the guest may read them through
other means).

The result has exactly one expression per formal parameter. Failure yields an
Err and no partial output.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from .bound_ir import ActualArgument, BConst, BExpr, BNewArray, BoundCall
from .conversion import Converter
from .core import logs as ls
from .core.errors import (
	ConversionFailed,
	Err,
	MissingImplicitParameter,
	MissingRequiredArgument,
	Ok,
	Result,
)
from .core.types_core import TypeTable
from .method_table import MethodCandidate, SpecialKind


def try_bind_arguments(
	m: MethodCandidate,
	args: Sequence[ActualArgument],
	ctx: BExpr,
	converter: Converter,
	types: TypeTable,
	static_opt: Optional[BExpr] = None,
	locals_opt: Optional[BExpr] = None,
) -> Result[BoundCall]:
	"""
	Bind `args` to `m`'s parameters.

	Returns Ok(BoundCall) or Err carrying MissingImplicitParameter,
	MissingRequiredArgument, or the ConversionFailed raised by `converter`.
	"""
	try:
		bound = _bind(m, args, ctx, converter, types, static_opt, locals_opt)
	except (MissingImplicitParameter, MissingRequiredArgument, ConversionFailed) as err:
		logger.debug(ls.BIND_FAILED.format(name=m.name, error=err))
		return Err(err)
	logger.debug(ls.BIND_OK.format(name=m.name, count=len(bound), args=len(args)))
	return Ok(BoundCall(m, tuple(bound)))


def bind_arguments(
	m: MethodCandidate,
	args: Sequence[ActualArgument],
	ctx: BExpr,
	converter: Converter,
	types: TypeTable,
	static_opt: Optional[BExpr] = None,
	locals_opt: Optional[BExpr] = None,
) -> BoundCall:
	"""Raising form of `try_bind_arguments`."""
	return try_bind_arguments(m, args, ctx, converter, types, static_opt, locals_opt).unwrap()


def _bind(
	m: MethodCandidate,
	args: Sequence[ActualArgument],
	ctx: BExpr,
	converter: Converter,
	types: TypeTable,
	static_opt: Optional[BExpr],
	locals_opt: Optional[BExpr],
) -> List[BExpr]:
	result: List[BExpr] = []
	arg_index = 0

	for p in m.params:
		if arg_index == 0:
			if p.special is SpecialKind.CONTEXT:
				result.append(ctx)
				continue
			if p.special is SpecialKind.STATIC_BOUND:
				if static_opt is None:
					raise MissingImplicitParameter("static")
				result.append(static_opt)
				continue
			if p.special is SpecialKind.LOCALS:
				if locals_opt is None:
					raise MissingImplicitParameter("locals")
				result.append(locals_opt)
				continue

		if p.is_params:
			elem_type = types.element_type(p.type_id)
			items = [converter.convert(a, elem_type) for a in args[arg_index:]]
			arg_index = len(args)
			result.append(BNewArray(elem_type, tuple(items)))
		elif arg_index < len(args):
			result.append(converter.convert(args[arg_index], p.type_id))
			arg_index += 1
		elif p.is_optional:
			result.append(BConst(p.default, p.type_id))
		else:
			raise MissingRequiredArgument(p.position)

	if arg_index < len(args):
		logger.debug(ls.BIND_EXCESS_DROPPED.format(count=len(args) - arg_index, name=m.name))
	return result


__all__ = ["try_bind_arguments", "bind_arguments"]
