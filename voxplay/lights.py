"""Light sources identified by id."""

from __future__ import annotations


class Light:
    """Base class for all lights."""

    def __init__(self, light_id: int) -> None:
        self._id = light_id

    @property
    def id(self) -> int:
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"


class DirectionalLight(Light):
    """A light shining in one direction from infinitely far away."""


class PointLight(Light):
    """A light radiating from a single point."""