# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Overload selection atop MethodTable, and the composed call-site pipeline.

Rules applied to choose among same-named candidates:
- A candidate is applicable when the arguments can be bound to it: every
  mandatory regular parameter gets an argument and every consumed argument has
  some conversion to its parameter type.
- Applicable candidates are ranked by arity fit (exact, defaults filled,
  variadic, excess arguments dropped), then by their worst argument
  conversion, then by the sum of conversion ranks.
- Ties go to the most specific candidate: the one whose regular parameter
  types are subtypes of every other tied candidate's. Otherwise the call is
  ambiguous and reported as such; no arbitrary pick.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .argument_binder import try_bind_arguments
from .bound_ir import ActualArgument, BExpr, BoundCall
from .candidate_filters import select_by_name, select_static, select_visible
from .conversion import ConversionRank, Converter
from .core import logs as ls
from .core.errors import AmbiguousOverload, Err, NoApplicableOverload, Ok, Result
from .core.types_core import TypeId, TypeTable
from .method_table import MethodCandidate, MethodTable


class ArityFit(IntEnum):
	"""How the argument count lines up with the parameters; lower is better."""

	EXACT = 0
	DEFAULTS = 1
	VARIADIC = 2
	EXCESS = 3


@dataclass(frozen=True)
class OverloadScore:
	arity: ArityFit
	worst: ConversionRank
	total: int

	def key(self) -> Tuple[int, int, int]:
		return (int(self.arity), int(self.worst), self.total)


def score_candidate(
	m: MethodCandidate,
	args: Sequence[ActualArgument],
	converter: Converter,
	types: TypeTable,
) -> Optional[OverloadScore]:
	"""Score `m` for `args`, or None when `m` cannot accept them."""
	ranks: List[ConversionRank] = []
	arg_index = 0
	used_default = False
	used_variadic = False
	for p in m.params:
		if p.is_implicit:
			continue
		if p.is_params:
			elem_type = types.element_type(p.type_id)
			ranks.extend(converter.rank(a.type_id, elem_type) for a in args[arg_index:])
			arg_index = len(args)
			used_variadic = True
		elif arg_index < len(args):
			ranks.append(converter.rank(args[arg_index].type_id, p.type_id))
			arg_index += 1
		elif p.is_optional:
			used_default = True
		else:
			return None
	if ConversionRank.NONE in ranks:
		return None

	if arg_index < len(args):
		arity = ArityFit.EXCESS
	elif used_variadic:
		arity = ArityFit.VARIADIC
	elif used_default:
		arity = ArityFit.DEFAULTS
	else:
		arity = ArityFit.EXACT
	return OverloadScore(arity, max(ranks, default=ConversionRank.EXACT), sum(int(r) for r in ranks))


def is_applicable(
	m: MethodCandidate,
	args: Sequence[ActualArgument],
	converter: Converter,
	types: TypeTable,
) -> bool:
	return score_candidate(m, args, converter, types) is not None


def select_with_arguments(
	candidates: Iterable[MethodCandidate],
	args: Sequence[ActualArgument],
	converter: Converter,
	types: TypeTable,
) -> List[MethodCandidate]:
	"""Keep candidates applicable to `args`, in input order."""
	kept: List[MethodCandidate] = []
	for m in candidates:
		if is_applicable(m, args, converter, types):
			kept.append(m)
		else:
			logger.debug(ls.SELECT_NOT_APPLICABLE.format(name=m.name, method_id=m.method_id, args=len(args)))
	return kept


def _more_specific(a: MethodCandidate, b: MethodCandidate, types: TypeTable) -> bool:
	if len(a.regular_params) != len(b.regular_params):
		return False
	pairs = list(zip(a.regular_params, b.regular_params))
	a_le_b = all(types.is_subtype(pa.type_id, pb.type_id) for pa, pb in pairs)
	b_le_a = all(types.is_subtype(pb.type_id, pa.type_id) for pa, pb in pairs)
	return a_le_b and not b_le_a


def select_best(
	candidates: Iterable[MethodCandidate],
	args: Sequence[ActualArgument],
	converter: Converter,
	types: TypeTable,
	name: str = "",
) -> Result[MethodCandidate]:
	"""Pick the single best applicable candidate for `args`."""
	scored: List[Tuple[MethodCandidate, OverloadScore]] = []
	for m in candidates:
		score = score_candidate(m, args, converter, types)
		if score is None:
			logger.debug(ls.SELECT_NOT_APPLICABLE.format(name=m.name, method_id=m.method_id, args=len(args)))
			continue
		scored.append((m, score))
	if not scored:
		return Err(NoApplicableOverload(name))

	best_key = min(score.key() for _, score in scored)
	tied = [m for m, score in scored if score.key() == best_key]
	if len(tied) == 1:
		winner = tied[0]
	else:
		winners = [a for a in tied if all(_more_specific(a, b, types) for b in tied if b is not a)]
		if len(winners) != 1:
			logger.warning(ls.SELECT_AMBIGUOUS.format(name=name or tied[0].name, count=len(tied)))
			return Err(AmbiguousOverload(name or tied[0].name, len(tied)))
		winner = winners[0]
	logger.debug(ls.SELECT_WINNER.format(name=winner.name, method_id=winner.method_id, count=len(scored)))
	return Ok(winner)


def resolve_call(
	table: MethodTable,
	type_id: TypeId,
	name: str,
	args: Sequence[ActualArgument],
	*,
	ctx: BExpr,
	converter: Converter,
	class_ctx: Optional[TypeId] = None,
	static_call: bool = False,
	static_opt: Optional[BExpr] = None,
	locals_opt: Optional[BExpr] = None,
) -> Result[BoundCall]:
	"""
	Resolve `type_id::name(args)` as a call site would.

	Name filter, visibility filter from `class_ctx`, static filter for static
	call sites, overload selection, then argument binding.
	"""
	types = table.types
	candidates = select_by_name(table.select_candidates(type_id), name)
	candidates = select_visible(candidates, class_ctx, types)
	if static_call:
		candidates = select_static(candidates)
	if not candidates:
		logger.debug(ls.RESOLVE_UNDEFINED.format(type_name=types.name_of(type_id), name=name))
		return Err(NoApplicableOverload(name))

	chosen = select_best(candidates, args, converter, types, name=name)
	if not chosen.is_ok:
		return chosen
	return try_bind_arguments(chosen.unwrap(), args, ctx, converter, types, static_opt, locals_opt)


__all__ = [
	"ArityFit",
	"OverloadScore",
	"score_candidate",
	"is_applicable",
	"select_with_arguments",
	"select_best",
	"resolve_call",
]
