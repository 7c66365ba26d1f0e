# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from dynbind.bound_ir import BValue
from dynbind.test_support import World, make_world


@pytest.fixture
def world() -> World:
	return make_world()


@pytest.fixture
def ctx(world: World) -> BValue:
	"""The execution context handle passed by every call site."""
	return BValue("ctx", world.ctx_ty)
