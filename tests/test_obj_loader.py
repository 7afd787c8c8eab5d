import pytest

from voxplay.obj_loader import load_obj, parse_obj
from voxplay.types import Vertex

TRIANGLE = """\
# a single triangle
o tri
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vn 0 0 1
f 1/1/1 2/1/1 3/1/1
"""

QUAD = """\
o quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vn 0 0 1
f 1/1/1 2/1/1 3/1/1 4/1/1
"""


def test_triangle_mesh():
    meshes = parse_obj(TRIANGLE.splitlines())
    assert len(meshes) == 1
    mesh = meshes[0]
    assert mesh.name == "tri"
    assert mesh.indices == [0, 1, 2]
    assert mesh.vertices[1] == Vertex((1, 0, 0), (0, 0, 1), (0, 0))


def test_quad_is_split_into_two_triangles():
    mesh = parse_obj(QUAD.splitlines())[0]
    assert len(mesh.vertices) == 4
    assert mesh.indices == [0, 1, 2, 0, 2, 3]


def test_shared_corners_are_deduplicated():
    text = TRIANGLE + "v 1 1 0\nf 2/1/1 4/1/1 3/1/1\n"
    mesh = parse_obj(text.splitlines())[0]
    assert len(mesh.vertices) == 4
    assert mesh.indices[3:] == [1, 3, 2]


def test_second_mesh_indices_are_offset():
    text = TRIANGLE + "o other\nv 5 5 5\nf 4/1/1 2/1/1 3/1/1\n"
    first, second = parse_obj(text.splitlines())
    assert second.name == "other"
    assert len(second.vertices) == 1
    # The new vertex follows the first mesh's vertices; reused ones keep their index.
    assert second.indices == [len(first.vertices), 1, 2]


def test_comments_and_blank_lines_are_ignored():
    text = "\n# comment\n\n" + TRIANGLE
    assert parse_obj(text.splitlines())[0].indices == [0, 1, 2]


def test_face_before_object_rejected():
    with pytest.raises(ValueError):
        parse_obj(["v 0 0 0", "vt 0 0", "vn 0 0 1", "f 1/1/1 1/1/1 1/1/1"])


def test_index_out_of_range_rejected():
    with pytest.raises(ValueError):
        parse_obj(TRIANGLE.splitlines() + ["f 1/1/1 2/1/1 9/1/1"])


def test_missing_component_rejected():
    with pytest.raises(ValueError):
        parse_obj(TRIANGLE.splitlines() + ["f 1//1 2//1 3//1"])


def test_too_many_position_components_rejected():
    with pytest.raises(ValueError):
        parse_obj(["o x", "v 1 2 3 4"])


def test_load_obj_reads_file(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD, encoding="utf-8")
    meshes = load_obj(path)
    assert [m.name for m in meshes] == ["quad"]
    assert meshes[0].indices == parse_obj(QUAD.splitlines())[0].indices


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "missing.obj")