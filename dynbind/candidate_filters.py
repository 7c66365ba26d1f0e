# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Candidate filters applied at a dynamic call site.

Each filter is a pure function from a candidate list to a new candidate list,
preserving input order. Call sites compose them in whatever order they need;
the name filter is usually first because it is the most selective.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from loguru import logger

from .core import logs as ls
from .core.types_core import TypeId, TypeTable
from .method_table import MethodCandidate, Visibility


def _upper_char(c: str) -> str:
	up = c.upper()
	return up if len(up) == 1 else c


def names_match(a: str, b: str) -> bool:
	"""
	Ordinal case-insensitive comparison (guest method names ignore case).

	Characters are compared one to one; a character whose upper case expands
	to several characters (e.g. 'ß') only matches itself.
	"""
	if a == b:
		return True
	if len(a) != len(b):
		return False
	return all(ca == cb or _upper_char(ca) == _upper_char(cb) for ca, cb in zip(a, b))


def select_by_name(candidates: Iterable[MethodCandidate], name: str) -> List[MethodCandidate]:
	"""Keep candidates named `name`, ignoring case."""
	pool = list(candidates)
	kept = [m for m in pool if names_match(m.name, name)]
	logger.debug(ls.FILTER_BY_NAME.format(name=name, kept=len(kept), total=len(pool)))
	return kept


def is_visible(m: MethodCandidate, class_ctx: Optional[TypeId], types: TypeTable) -> bool:
	"""
	Is `m` callable from code running in `class_ctx`?

	`class_ctx` is None for top-level code. Private members are visible only
	from their exact declaring type. Protected members need a class context
	related to the declaring type in either direction: a derived class calling
	a base member, or a base class calling a member declared further down the
	hierarchy and reached through polymorphism.
	"""
	if m.visibility is Visibility.PRIVATE and m.declaring_type != class_ctx:
		logger.debug(
			ls.FILTER_REJECT_PRIVATE.format(
				name=m.name, declaring=types.name_of(m.declaring_type), class_ctx=_ctx_name(class_ctx, types)
			)
		)
		return False

	if m.visibility is Visibility.PROTECTED:
		if class_ctx is None or not (
			types.is_subtype(class_ctx, m.declaring_type) or types.is_subtype(m.declaring_type, class_ctx)
		):
			logger.debug(
				ls.FILTER_REJECT_PROTECTED.format(
					name=m.name, declaring=types.name_of(m.declaring_type), class_ctx=_ctx_name(class_ctx, types)
				)
			)
			return False

	return True


def select_visible(
	candidates: Iterable[MethodCandidate], class_ctx: Optional[TypeId], types: TypeTable
) -> List[MethodCandidate]:
	"""Keep candidates visible from `class_ctx`."""
	pool = list(candidates)
	kept = [m for m in pool if is_visible(m, class_ctx, types)]
	logger.debug(
		ls.FILTER_VISIBILITY.format(class_ctx=_ctx_name(class_ctx, types), kept=len(kept), total=len(pool))
	)
	return kept


def select_static(candidates: Iterable[MethodCandidate]) -> List[MethodCandidate]:
	"""Keep static methods only."""
	return [m for m in candidates if m.is_static]


def select_instance(candidates: Iterable[MethodCandidate]) -> List[MethodCandidate]:
	"""Keep instance methods only."""
	return [m for m in candidates if not m.is_static]


def _ctx_name(class_ctx: Optional[TypeId], types: TypeTable) -> str:
	return "<global>" if class_ctx is None else types.name_of(class_ctx)


__all__ = [
	"names_match",
	"select_by_name",
	"is_visible",
	"select_visible",
	"select_static",
	"select_instance",
]
