# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""Log message templates used across the resolver (loguru, `.format` style)."""

# method table
METHOD_REGISTERED = "Registered {type_name}::{name}/{arity} (id={method_id})"
CANDIDATES_ENUMERATED = "Enumerated {count} candidates on {type_name}"
OVERRIDE_HIDDEN = "{type_name}::{name} hidden by override on {derived_name}"

# filters
FILTER_BY_NAME = "Name filter '{name}': {kept}/{total} candidates kept"
FILTER_VISIBILITY = "Visibility filter from {class_ctx}: {kept}/{total} candidates kept"
FILTER_REJECT_PRIVATE = "Rejected private {name} declared on {declaring}: caller is {class_ctx}"
FILTER_REJECT_PROTECTED = "Rejected protected {name} declared on {declaring}: caller is {class_ctx}"

# binder
BIND_OK = "Bound {name}: {count} parameter expressions from {args} arguments"
BIND_FAILED = "Binding {name} failed: {error}"
BIND_EXCESS_DROPPED = "Dropped {count} excess arguments calling {name}"

# selection
SELECT_NOT_APPLICABLE = "Overload {name}#{method_id} not applicable to {args} arguments"
SELECT_WINNER = "Selected {name}#{method_id} out of {count} applicable overloads"
SELECT_AMBIGUOUS = "Ambiguous call to {name}: {count} overloads tie"
RESOLVE_UNDEFINED = "Call to undefined method {type_name}::{name}"
