# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""Overload selection and the composed call-site pipeline."""

from dynbind.bound_ir import BConst, BValue, evaluate_call
from dynbind.core.errors import AmbiguousOverload, Err, NoApplicableOverload, NotSupported
from dynbind.method_table import Visibility
from dynbind.overload_resolver import (
	ArityFit,
	resolve_call,
	score_candidate,
	select_best,
	select_with_arguments,
)


def _add(world, method_id, params, name="foo", declaring=None, **kw):
	return world.table.register_method(
		method_id=method_id, name=name, declaring_type=declaring or world.base, params=params, **kw
	)


def test_resolve_by_exact_types(world):
	int_foo = _add(world, 1, [world.param("x", world.int_ty)])
	_add(world, 2, [world.param("x", world.str_ty)])
	res = select_best(world.table.select_candidates(world.base), world.ints(1), world.converter, world.types)
	assert res.unwrap() is int_foo


def test_exact_arity_beats_defaults(world):
	_add(world, 1, [world.param("x", world.int_ty), world.param("y", world.int_ty, default=0)])
	one = _add(world, 2, [world.param("x", world.int_ty)])
	res = select_best(world.table.select_candidates(world.base), world.ints(1), world.converter, world.types)
	assert res.unwrap() is one


def test_better_conversion_wins(world):
	_add(world, 1, [world.param("x", world.float_ty)])
	exact = _add(world, 2, [world.param("x", world.int_ty)], name="Foo")
	res = select_best(world.table.select_candidates(world.base), world.ints(1), world.converter, world.types)
	assert res.unwrap() is exact


def test_most_specific_parameter_types_win(world):
	base_arg = BValue("obj", world.derived)
	_add(world, 1, [world.param("o", world.base)])
	specific = _add(world, 2, [world.param("o", world.derived)])
	args = world.args((base_arg.value, world.derived))
	res = select_best(world.table.select_candidates(world.base), args, world.converter, world.types)
	assert res.unwrap() is specific


def test_widening_ties_resolved_by_specificity(world):
	leaf = world.types.new_class("Leaf", base=world.derived)
	_add(world, 1, [world.param("o", world.base)])
	mid = _add(world, 2, [world.param("o", world.derived)])
	res = select_best(world.table.select_candidates(world.base), world.args(("x", leaf)), world.converter, world.types)
	assert res.unwrap() is mid


def test_ambiguous_call(world):
	_add(world, 1, [world.param("x", world.int_ty)])
	_add(world, 2, [world.param("y", world.int_ty)])
	res = select_best(world.table.select_candidates(world.base), world.ints(1), world.converter, world.types, name="foo")
	assert isinstance(res, Err)
	assert isinstance(res.error, AmbiguousOverload)
	assert isinstance(res.error, NotSupported)
	assert res.error.count == 2


def test_no_applicable_overload(world):
	_add(world, 1, [world.param("x", world.int_ty), world.param("y", world.int_ty)])
	res = select_best(world.table.select_candidates(world.base), world.ints(1), world.converter, world.types, name="foo")
	assert isinstance(res.error, NoApplicableOverload)


def test_select_with_arguments_filters_inapplicable(world):
	a = _add(world, 1, [world.param("x", world.int_ty)])
	_add(world, 2, [world.param("x", world.bool_ty)])
	c = _add(world, 3, [world.ctx_param(), world.params_of("xs", world.float_ty)])
	kept = select_with_arguments(world.table.select_candidates(world.base), world.ints(1), world.converter, world.types)
	assert kept == [a, c]


def test_scores(world):
	m = _add(world, 1, [world.ctx_param(), world.param("x", world.int_ty)])
	v = _add(world, 2, [world.params_of("xs", world.int_ty)])
	assert score_candidate(m, world.ints(1), world.converter, world.types).arity is ArityFit.EXACT
	assert score_candidate(m, world.ints(1, 2), world.converter, world.types).arity is ArityFit.EXCESS
	assert score_candidate(m, [], world.converter, world.types) is None
	assert score_candidate(v, [], world.converter, world.types).arity is ArityFit.VARIADIC


def test_resolve_call_end_to_end(world, ctx):
	_add(world, 1, [world.ctx_param(), world.param("x", world.int_ty), world.param("y", world.int_ty, default=5)], name="Add")
	res = resolve_call(world.table, world.derived, "add", world.ints(3), ctx=ctx, converter=world.converter)
	call = res.unwrap()
	assert call.method.method_id == 1
	assert call.args == (ctx, BValue(3, world.int_ty), BConst(5, world.int_ty))
	assert evaluate_call(call, world.converter.coerce) == ["ctx", 3, 5]


def test_resolve_call_respects_visibility(world, ctx):
	_add(world, 1, [], name="hook", visibility=Visibility.PROTECTED)
	assert resolve_call(world.table, world.derived, "hook", [], ctx=ctx, converter=world.converter, class_ctx=world.derived).is_ok
	res = resolve_call(world.table, world.derived, "hook", [], ctx=ctx, converter=world.converter, class_ctx=world.other)
	assert isinstance(res.error, NoApplicableOverload)
	res = resolve_call(world.table, world.derived, "hook", [], ctx=ctx, converter=world.converter)
	assert isinstance(res.error, NoApplicableOverload)


def test_resolve_static_call(world, ctx):
	_add(world, 1, [world.param("x", world.int_ty)], name="make")
	static = _add(world, 2, [world.static_param(), world.param("x", world.int_ty)], name="make", is_static=True)
	tok = BValue("Derived", world.type_token_ty)
	res = resolve_call(
		world.table, world.derived, "make", world.ints(1), ctx=ctx, converter=world.converter, static_call=True, static_opt=tok
	)
	call = res.unwrap()
	assert call.method is static
	assert call.args == (tok, BValue(1, world.int_ty))


def test_resolve_call_undefined_method(world, ctx):
	res = resolve_call(world.table, world.base, "nope", [], ctx=ctx, converter=world.converter)
	assert isinstance(res, Err)
	assert str(res.error) == "call to undefined method nope()"


def test_method_and_inherited_overloads_resolve_together(world, ctx):
	"""An overload declared on Derived and one inherited from Base compete on equal terms."""
	_add(world, 1, [world.param("s", world.str_ty)], name="put")
	int_put = _add(world, 2, [world.param("x", world.int_ty)], name="put", declaring=world.derived)
	res = resolve_call(world.table, world.derived, "PUT", world.ints(4), ctx=ctx, converter=world.converter)
	assert res.unwrap().method is int_put
	res = resolve_call(world.table, world.derived, "put", world.args(("s", world.str_ty)), ctx=ctx, converter=world.converter)
	assert res.unwrap().method.method_id == 1


def test_prefix_match_is_not_more_specific(world):
	"""Tied overloads with different parameter counts are ambiguous, not decided on a shared prefix."""
	leaf = world.types.new_class("Leaf", base=world.derived)
	_add(world, 1, [world.param("o", world.derived)])
	_add(world, 2, [world.param("o", world.base), world.param("x", world.int_ty)])
	args = world.args(("obj", leaf), (1, world.int_ty), (2, world.int_ty))
	res = select_best(world.table.select_candidates(world.base), args, world.converter, world.types, name="foo")
	assert isinstance(res, Err)
	assert isinstance(res.error, AmbiguousOverload)
