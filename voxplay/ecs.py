"""A small entity-component registry."""

from __future__ import annotations

import operator
from typing import Any

ALL = 0
"""Id before the first entity; real entity ids start at 1."""


def _entity_id(entity) -> int:
    return operator.index(entity)


class Registry:
    """Owns entities and the components attached to them."""

    def __init__(self) -> None:
        self._next_id = ALL
        self._entities: list[Entity] = []
        self._storage: dict[int, list[Any]] = {}

    def create_entity(self, name: str) -> "Entity":
        self._next_id += 1
        entity = Entity(name, self._next_id, self)
        self._entities.append(entity)
        return entity

    def add(self, entity, component_type, *args, **kwargs):
        """Construct a component and attach it to ``entity``."""
        component = component_type(*args, **kwargs)
        self._storage.setdefault(_entity_id(entity), []).append(component)
        return component

    def has(self, entity, component_type) -> bool:
        return any(
            isinstance(c, component_type)
            for c in self._storage.get(_entity_id(entity), ())
        )

    def get(self, entity, component_type):
        """Return the first component of the type on ``entity``, or None."""
        for component in self._storage.get(_entity_id(entity), ()):
            if isinstance(component, component_type):
                return component
        return None

    def collect(self, entity, *component_types) -> tuple:
        return tuple(self.get(entity, t) for t in component_types)

    def get_all(self, component_type) -> list:
        """Every component of the type across all entities."""
        return [
            c
            for components in self._storage.values()
            for c in components
            if isinstance(c, component_type)
        ]

    def collect_all(self, *component_types) -> tuple:
        return tuple(self.get_all(t) for t in component_types)

    def entities(self) -> list["Entity"]:
        return list(self._entities)

    def free(self, entity, *component_types) -> None:
        """Drop the given component types from ``entity``; all of them if none given."""
        key = _entity_id(entity)
        components = self._storage.get(key)
        if components is None:
            return
        kept = (
            [c for c in components if not isinstance(c, component_types)]
            if component_types
            else []
        )
        if kept:
            self._storage[key] = kept
        else:
            del self._storage[key]

    def free_all(self, *component_types) -> None:
        """Drop the given component types from every entity."""
        for key in list(self._storage):
            self.free(key, *component_types)

    def _forget(self, entity: "Entity") -> None:
        self._entities = [e for e in self._entities if e.id != entity.id]


class Entity:
    """A named id bound to the registry that holds its components."""

    __slots__ = ("_id", "_name", "_registry")

    def __init__(self, name: str, entity_id: int, registry: Registry) -> None:
        self._id = entity_id
        self._name = name
        self._registry = registry

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def add(self, component_type, *args, **kwargs):
        return self._registry.add(self, component_type, *args, **kwargs)

    def has(self, component_type) -> bool:
        return self._registry.has(self, component_type)

    def get(self, component_type):
        return self._registry.get(self, component_type)

    def collect(self, *component_types) -> tuple:
        return self._registry.collect(self, *component_types)

    def is_named(self, name: str) -> bool:
        return self._name == name

    def free(self, *component_types) -> None:
        """Drop components (all if none given) and remove this entity from its registry."""
        self._registry.free(self, *component_types)
        self._registry._forget(self)

    def __index__(self) -> int:
        return self._id

    def __int__(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._id == other._id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Entity(name={self._name!r}, id={self._id})"