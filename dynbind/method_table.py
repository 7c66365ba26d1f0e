# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Method descriptor table: the metadata the resolver reads.

The host registers every method of every type once, up front. Each
registration produces an immutable MethodCandidate whose Parameter records
already carry their structural classification (implicit context/static/locals
parameter, variadic, optional with default), so resolution never has to
re-inspect host metadata.

The table does not filter or rank; `select_candidates` only enumerates what is
reachable on a type. Filters, overload selection and argument binding live in
their own modules and are composed by the call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Iterator, List, Optional, Protocol, Sequence, Tuple

from loguru import logger

from .core import logs as ls
from .core.config import BinderConfig
from .core.types_core import TypeId, TypeTable

MethodId = int


class Visibility(Enum):
	PUBLIC = auto()
	PROTECTED = auto()
	PRIVATE = auto()


class SpecialKind(Enum):
	"""Implicit parameters injected by the runtime instead of the caller."""

	NONE = auto()
	CONTEXT = auto()
	STATIC_BOUND = auto()
	LOCALS = auto()


class _NoDefault:
	def __repr__(self) -> str:
		return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True)
class ParamSpec:
	"""Declared parameter as supplied by the host, before classification."""

	name: str
	type_id: TypeId
	default: Any = NO_DEFAULT  # presence makes the parameter optional
	is_params: bool = False  # variadic marker; last parameter only


@dataclass(frozen=True)
class Parameter:
	"""Classified formal parameter of a MethodCandidate."""

	position: int
	name: str
	type_id: TypeId
	is_optional: bool
	default: Any
	is_params: bool
	special: SpecialKind = SpecialKind.NONE

	@property
	def is_implicit(self) -> bool:
		return self.special is not SpecialKind.NONE


@dataclass(frozen=True)
class MethodCandidate:
	"""Registry entry for a method on a host type."""

	method_id: MethodId
	name: str
	declaring_type: TypeId
	params: Tuple[Parameter, ...]
	is_static: bool
	visibility: Visibility
	return_type: Optional[TypeId] = None

	@property
	def arity(self) -> int:
		return len(self.params)

	@property
	def regular_params(self) -> Tuple[Parameter, ...]:
		"""Parameters filled from actual arguments (implicit ones excluded)."""
		return tuple(p for p in self.params if not p.is_implicit)

	@property
	def variadic(self) -> Optional[Parameter]:
		if self.params and self.params[-1].is_params:
			return self.params[-1]
		return None


class MetadataProvider(Protocol):
	"""Anything able to enumerate the methods reachable on a type."""

	def select_candidates(self, type_id: TypeId) -> List[MethodCandidate]:
		...


def classify_parameter(spec: ParamSpec, position: int, config: BinderConfig) -> SpecialKind:
	"""
	Structural implicit-parameter test.

	Context is recognised by type at position 0 only; `<static>` and `<locals>`
	by type plus reserved name.
	"""
	if position == 0 and spec.type_id == config.context_type:
		return SpecialKind.CONTEXT
	if spec.type_id == config.type_token_type and spec.name == config.static_marker:
		return SpecialKind.STATIC_BOUND
	if spec.type_id == config.locals_type and spec.name == config.locals_marker:
		return SpecialKind.LOCALS
	return SpecialKind.NONE


class MethodTable:
	"""
	Store method descriptors per declaring type and enumerate candidates.

	Populate once, then share: lookups do not mutate the table, so any number
	of call sites may resolve against it concurrently. Registration is not
	synchronised.
	"""

	def __init__(self, types: TypeTable, config: Optional[BinderConfig] = None) -> None:
		self.types = types
		self.config = config or BinderConfig.for_table(types)
		self._declared: Dict[TypeId, List[MethodCandidate]] = {}
		self._by_id: Dict[MethodId, MethodCandidate] = {}

	def register_method(
		self,
		*,
		method_id: MethodId,
		name: str,
		declaring_type: TypeId,
		params: Sequence[ParamSpec] = (),
		is_static: bool = False,
		visibility: Visibility = Visibility.PUBLIC,
		return_type: Optional[TypeId] = None,
	) -> MethodCandidate:
		if method_id in self._by_id:
			raise ValueError(f"duplicate method_id {method_id}")
		built = self._build_params(name, params)
		decl = MethodCandidate(
			method_id=method_id,
			name=name,
			declaring_type=declaring_type,
			params=built,
			is_static=is_static,
			visibility=visibility,
			return_type=return_type,
		)
		self._by_id[method_id] = decl
		self._declared.setdefault(declaring_type, []).append(decl)
		logger.debug(
			ls.METHOD_REGISTERED.format(
				type_name=self.types.name_of(declaring_type), name=name, arity=len(built), method_id=method_id
			)
		)
		return decl

	def _build_params(self, method_name: str, specs: Sequence[ParamSpec]) -> Tuple[Parameter, ...]:
		out: List[Parameter] = []
		seen_regular = False
		last = len(specs) - 1
		for pos, spec in enumerate(specs):
			special = classify_parameter(spec, pos, self.config)
			if special is not SpecialKind.NONE:
				# The binder only looks for implicit parameters before the first
				# argument is consumed.
				if seen_regular:
					raise ValueError(
						f"{method_name}: implicit parameter {spec.name!r} must precede regular parameters"
					)
				if spec.default is not NO_DEFAULT or spec.is_params:
					raise ValueError(f"{method_name}: implicit parameter {spec.name!r} cannot be optional or variadic")
			else:
				seen_regular = True
			if spec.is_params:
				if pos != last:
					raise ValueError(f"{method_name}: variadic parameter {spec.name!r} must be last")
				if not self.types.is_array(spec.type_id):
					raise ValueError(f"{method_name}: variadic parameter {spec.name!r} must have an array type")
				if spec.default is not NO_DEFAULT:
					raise ValueError(f"{method_name}: variadic parameter {spec.name!r} cannot have a default")
			is_optional = spec.default is not NO_DEFAULT
			out.append(
				Parameter(
					position=pos,
					name=spec.name,
					type_id=spec.type_id,
					is_optional=is_optional,
					default=spec.default,
					is_params=spec.is_params,
					special=special,
				)
			)
		return tuple(out)

	def declared_on(self, type_id: TypeId) -> List[MethodCandidate]:
		"""Methods declared directly on `type_id`, in registration order."""
		return list(self._declared.get(type_id, []))

	def select_candidates(self, type_id: TypeId) -> List[MethodCandidate]:
		"""
		All methods reachable on `type_id`: declared first, then inherited.

		A base method is hidden when a more-derived type declares a method with
		the same name and the same parameter types. Private methods are never
		overridden: they neither hide nor get hidden.
		"""
		result: List[MethodCandidate] = []
		seen_sigs: Dict[Tuple[str, Tuple[TypeId, ...]], MethodCandidate] = {}
		for owner in self.types.base_chain(type_id):
			for decl in self._declared.get(owner, []):
				if decl.visibility is Visibility.PRIVATE:
					result.append(decl)
					continue
				sig = (decl.name, tuple(p.type_id for p in decl.params))
				overrider = seen_sigs.get(sig)
				if overrider is not None and overrider.declaring_type != owner:
					logger.debug(
						ls.OVERRIDE_HIDDEN.format(
							type_name=self.types.name_of(owner),
							name=decl.name,
							derived_name=self.types.name_of(overrider.declaring_type),
						)
					)
					continue
				seen_sigs[sig] = decl
				result.append(decl)
		logger.debug(ls.CANDIDATES_ENUMERATED.format(count=len(result), type_name=self.types.name_of(type_id)))
		return result

	def get_by_id(self, method_id: MethodId) -> MethodCandidate:
		return self._by_id[method_id]

	def __iter__(self) -> Iterator[MethodCandidate]:
		return iter(self._by_id.values())


__all__ = [
	"MethodTable",
	"MethodCandidate",
	"MetadataProvider",
	"Parameter",
	"ParamSpec",
	"SpecialKind",
	"Visibility",
	"MethodId",
	"NO_DEFAULT",
	"classify_parameter",
]
