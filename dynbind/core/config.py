# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""Binder configuration: which parameters the runtime injects implicitly."""

from __future__ import annotations

from dataclasses import dataclass

from .types_core import TypeId, TypeTable

STATIC_MARKER = "<static>"
LOCALS_MARKER = "<locals>"


@dataclass(frozen=True)
class BinderConfig:
	"""
	Structural description of implicit parameters.

	A parameter is implicit when its declared type is one of the three
	well-known types below and (for `<static>`/`<locals>`) its name is the
	reserved marker. The markers are not valid guest identifiers, so a guest
	parameter can never collide with them.
	"""

	context_type: TypeId
	type_token_type: TypeId
	locals_type: TypeId
	static_marker: str = STATIC_MARKER
	locals_marker: str = LOCALS_MARKER

	@staticmethod
	def for_table(types: TypeTable) -> "BinderConfig":
		"""Config using the table's well-known implicit types."""
		return BinderConfig(
			context_type=types.ensure_context(),
			type_token_type=types.ensure_type_token(),
			locals_type=types.ensure_locals(),
		)


__all__ = ["BinderConfig", "STATIC_MARKER", "LOCALS_MARKER"]
