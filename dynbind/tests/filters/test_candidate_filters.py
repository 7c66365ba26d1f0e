# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: dynbind maintainers; created: 2026-10-19
"""Name, visibility and static filters."""

import pytest
from hypothesis import given, strategies as st

from dynbind.candidate_filters import (
	is_visible,
	names_match,
	select_by_name,
	select_instance,
	select_static,
	select_visible,
)
from dynbind.method_table import Visibility
from dynbind.test_support import make_world


def _register(world, method_id, name, declaring, visibility=Visibility.PUBLIC, is_static=False):
	return world.table.register_method(
		method_id=method_id, name=name, declaring_type=declaring, visibility=visibility, is_static=is_static
	)


def test_name_filter_ignores_case(world):
	a = _register(world, 1, "GetName", world.base)
	b = _register(world, 2, "getname", world.base)
	_register(world, 3, "getName2", world.base)
	assert select_by_name(world.table.select_candidates(world.base), "GETNAME") == [a, b]


@given(
	names=st.lists(st.sampled_from(["foo", "Foo", "FOO", "bar", "fOo", "baz", "foo_"]), max_size=12),
	requested=st.sampled_from(["foo", "FOO", "Bar", "qux"]),
)
def test_name_filter_matches_ordinal_ignore_case(names, requested):
	w = make_world()
	for i, name in enumerate(names):
		_register(w, i, name, w.base)
	kept = select_by_name(w.table.select_candidates(w.base), requested)
	assert [m.name for m in kept] == [n for n in names if n.upper() == requested.upper()]


def test_names_match():
	assert names_match("strlen", "StrLen")
	assert not names_match("strlen", "strlen_")


def test_private_visible_only_from_declaring_type(world):
	m = _register(world, 1, "secret", world.base, Visibility.PRIVATE)
	assert is_visible(m, world.base, world.types)
	assert not is_visible(m, world.derived, world.types)
	assert not is_visible(m, world.other, world.types)
	assert not is_visible(m, None, world.types)


def test_protected_visible_from_related_types(world):
	m = _register(world, 1, "hook", world.base, Visibility.PROTECTED)
	assert is_visible(m, world.derived, world.types)
	assert is_visible(m, world.base, world.types)
	assert not is_visible(m, world.other, world.types)
	assert not is_visible(m, None, world.types)


def test_protected_on_derived_visible_from_base_context(world):
	m = _register(world, 1, "hook", world.derived, Visibility.PROTECTED)
	assert is_visible(m, world.base, world.types)


def test_protected_through_interface(world):
	iface = world.types.new_class("Countable")
	impl = world.types.new_class("Impl", base=world.base, interfaces=[iface])
	m = _register(world, 1, "count", iface, Visibility.PROTECTED)
	assert is_visible(m, impl, world.types)


@pytest.mark.parametrize("class_ctx_attr", ["base", "derived", "other", None])
def test_public_always_visible(world, class_ctx_attr):
	m = _register(world, 1, "run", world.base)
	class_ctx = getattr(world, class_ctx_attr) if class_ctx_attr else None
	assert is_visible(m, class_ctx, world.types)


def test_select_visible_keeps_order(world):
	pub = _register(world, 1, "a", world.base)
	_register(world, 2, "b", world.base, Visibility.PRIVATE)
	prot = _register(world, 3, "c", world.base, Visibility.PROTECTED)
	cands = world.table.select_candidates(world.base)
	assert select_visible(cands, world.derived, world.types) == [pub, prot]
	assert select_visible(cands, None, world.types) == [pub]


def test_static_and_instance_filters(world):
	s = _register(world, 1, "make", world.base, is_static=True)
	i = _register(world, 2, "make", world.base)
	cands = world.table.select_candidates(world.base)
	assert select_static(cands) == [s]
	assert select_instance(cands) == [i]


def test_filters_do_not_mutate_input(world):
	_register(world, 1, "a", world.base, Visibility.PRIVATE)
	cands = world.table.select_candidates(world.base)
	before = list(cands)
	select_visible(cands, None, world.types)
	select_static(cands)
	select_by_name(cands, "zzz")
	assert cands == before


@pytest.mark.parametrize(
	"a, b, expected",
	[
		("größe", "GRÖSSE", False),
		("straße", "STRASSE", False),
		("ﬁnd", "FInd", False),
		("über", "ÜBER", True),
		("Schließen", "schließen", True),
		("ﬁnd", "ﬁnd", True),
	],
)
def test_names_match_is_per_character(a, b, expected):
	assert names_match(a, b) is expected


def test_name_filter_keeps_non_ascii_lengths_apart(world):
	eszett = _register(world, 1, "maß", world.base)
	_register(world, 2, "mass", world.base)
	assert select_by_name(world.table.select_candidates(world.base), "MAß") == [eszett]
	assert select_by_name(world.table.select_candidates(world.base), "MASS")[0].method_id == 2
