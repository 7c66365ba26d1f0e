# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
dynbind package: dynamic call-site resolution for a guest language hosted on
a statically typed method model.

Stages (composed by the call site, none calls the next):
  method_table: descriptor table, candidate enumeration
  candidate_filters: name / visibility / static filters
  overload_resolver: applicability, ranking, composed `resolve_call`
  argument_binder: arguments → BoundCall (bound_ir)

Logging goes through loguru and is disabled for this package until the host
calls `logger.enable("dynbind")`.
"""

from loguru import logger

logger.disable("dynbind")

__all__ = [
	"method_table",
	"candidate_filters",
	"overload_resolver",
	"argument_binder",
	"bound_ir",
	"conversion",
	"core",
]
