"""Models built from OBJ files, their instances, and a registry of loaded models."""

from __future__ import annotations

import os

from voxplay.obj_loader import load_obj
from voxplay.types import Instance, Mesh, Vertex


class Model:
    """Meshes loaded from one file plus the instances placed in the scene."""

    def __init__(self, model_id: int, path: str | os.PathLike) -> None:
        self._id = model_id
        self._meshes: list[Mesh] = load_obj(path)
        self._instances: list[Instance] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def meshes(self) -> list[Mesh]:
        return self._meshes

    @property
    def instances(self) -> list[Instance]:
        return self._instances

    def create_instance(self) -> int:
        """Add a default instance and return its index."""
        self._instances.append(Instance())
        return len(self._instances) - 1

    def get_instance(self, index: int) -> Instance:
        if not 0 <= index < len(self._instances):
            raise IndexError(f"instance {index} does not exist")
        return self._instances[index]

    def vertices(self) -> list[Vertex]:
        """All vertices of all meshes, in mesh order."""
        return [v for mesh in self._meshes for v in mesh.vertices]

    def indices(self) -> list[int]:
        """All indices of all meshes, in mesh order."""
        return [i for mesh in self._meshes for i in mesh.indices]


class ResourceManager:
    """Owns loaded models, identified by their load order."""

    def __init__(self) -> None:
        self._models: list[Model] = []

    @property
    def models(self) -> list[Model]:
        return list(self._models)

    def load_model(self, path: str | os.PathLike) -> Model:
        model = Model(len(self._models), path)
        self._models.append(model)
        return model

    def get_model(self, model_id: int) -> Model:
        if not 0 <= model_id < len(self._models):
            raise IndexError(f"model {model_id} does not exist")
        return self._models[model_id]