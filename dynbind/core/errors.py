# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""
Binding failures and the result type that carries them.

Resolution never unwinds through the caller on an expected failure: binders
and selectors return `Ok(value)` or `Err(error)`. The error objects are
exception instances so a call site that prefers raising can `unwrap()`, and so
converters can signal failure with a plain `raise ConversionFailed(...)`.

`is_fatal` separates host integration errors (an implicit parameter the
signature needs was never supplied) from guest-program errors the call site
should turn into a guest-visible diagnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union


class BindingError(Exception):
	"""Base class for call-site resolution failures."""

	is_fatal = False


class MissingImplicitParameter(BindingError):
	"""The candidate needs an implicit parameter the call site did not provide."""

	is_fatal = True

	def __init__(self, kind: str) -> None:
		super().__init__(f"<{kind}> missing")
		self.kind = kind


class MissingRequiredArgument(BindingError):
	"""Too few actual arguments for a mandatory parameter."""

	def __init__(self, position: int) -> None:
		super().__init__(f"mandatory parameter {position} not provided")
		self.position = position


class ConversionFailed(BindingError):
	"""Raised by a converter when no conversion exists."""

	def __init__(self, source: str, target: str) -> None:
		super().__init__(f"cannot convert {source} to {target}")
		self.source = source
		self.target = target


class NoApplicableOverload(BindingError):
	"""No candidate survived filtering or could accept the arguments."""

	def __init__(self, name: str) -> None:
		super().__init__(f"call to undefined method {name}()")
		self.name = name


class NotSupported(BindingError):
	"""Overload selection could not decide between candidates."""


class AmbiguousOverload(NotSupported):
	def __init__(self, name: str, count: int) -> None:
		super().__init__(f"ambiguous call to {name}(): {count} equally good overloads")
		self.name = name
		self.count = count


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
	value: T

	@property
	def is_ok(self) -> bool:
		return True

	def unwrap(self) -> T:
		return self.value


@dataclass(frozen=True)
class Err:
	error: BindingError

	@property
	def is_ok(self) -> bool:
		return False

	def unwrap(self):
		raise self.error


Result = Union[Ok[T], Err]


__all__ = [
	"BindingError",
	"MissingImplicitParameter",
	"MissingRequiredArgument",
	"ConversionFailed",
	"NoApplicableOverload",
	"NotSupported",
	"AmbiguousOverload",
	"Ok",
	"Err",
	"Result",
]
