from dataclasses import dataclass

import pytest

from voxplay.ecs import ALL, Entity, Registry


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Health:
    value: int = 100


@pytest.fixture
def registry():
    return Registry()


def test_entity_ids_start_after_all_and_increase(registry):
    first = registry.create_entity("a")
    second = registry.create_entity("b")
    assert first.id == ALL + 1
    assert second.id == first.id + 1
    assert registry.entities() == [first, second]


def test_add_and_get(registry):
    e = registry.create_entity("player")
    pos = e.add(Position, 1.0, y=2.0)
    assert e.get(Position) is pos
    assert pos == Position(1.0, 2.0)
    assert e.get(Health) is None


def test_has_checks_component_type(registry):
    e = registry.create_entity("player")
    assert not e.has(Position)
    e.add(Position)
    assert e.has(Position)
    assert not e.has(Health)


def test_registry_accepts_entity_or_id(registry):
    e = registry.create_entity("x")
    registry.add(e.id, Health, 5)
    assert registry.get(e, Health).value == 5


def test_collect_returns_tuple_in_order(registry):
    e = registry.create_entity("x")
    hp = e.add(Health, 7)
    assert e.collect(Health, Position) == (hp, None)


def test_get_all_and_collect_all(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    pa = a.add(Position)
    pb = b.add(Position, 3.0)
    hb = b.add(Health)
    assert registry.get_all(Position) == [pa, pb]
    positions, healths = registry.collect_all(Position, Health)
    assert positions == [pa, pb]
    assert healths == [hb]


def test_free_specific_type(registry):
    e = registry.create_entity("x")
    e.add(Position)
    hp = e.add(Health)
    registry.free(e, Position)
    assert not e.has(Position)
    assert e.get(Health) is hp


def test_free_without_types_drops_everything(registry):
    e = registry.create_entity("x")
    e.add(Position)
    e.add(Health)
    registry.free(e)
    assert e.collect(Position, Health) == (None, None)


def test_free_unknown_entity_is_harmless(registry):
    registry.free(42, Position)
    assert registry.get_all(Position) == []


def test_free_all(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    a.add(Position)
    b.add(Position)
    hb = b.add(Health)
    registry.free_all(Position)
    assert registry.get_all(Position) == []
    assert registry.get_all(Health) == [hb]


def test_entity_free_removes_entity(registry):
    a = registry.create_entity("a")
    b = registry.create_entity("b")
    a.add(Position)
    a.free()
    assert registry.entities() == [b]
    assert registry.get_all(Position) == []


def test_entity_identity_and_name(registry):
    e = registry.create_entity("camera")
    same = Entity("other", e.id, registry)
    assert e == same
    assert int(e) == e.id
    assert e.is_named("camera")
    assert not e.is_named("other")