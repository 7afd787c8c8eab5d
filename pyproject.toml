[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxplay"
version = "0.1.0"
description = "Voxel chunk meshing, cameras, OBJ loading and a small entity registry for 3D rendering experiments"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "3d", "rendering", "camera", "obj", "meshing", "ecs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxplay = "voxplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["voxplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
