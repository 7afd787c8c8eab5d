"""Voxel chunk meshing, cameras, transforms, OBJ loading and small engine helpers."""

__version__ = "0.1.0"