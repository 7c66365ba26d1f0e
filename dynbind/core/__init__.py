"""
dynbind.core: shared primitives used by every resolution stage.

Modules:
  - types_core: TypeId/TypeTable primitives
  - errors: BindingError taxonomy and the Ok/Err result type
  - config: BinderConfig (implicit parameter markers and types)
  - logs: log message templates
"""

__all__ = [
	"types_core",
	"errors",
	"config",
	"logs",
]
