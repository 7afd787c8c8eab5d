import pytest

from voxplay.cli import main
from voxplay.world import World


def _report(capsys):
    lines = capsys.readouterr().out.strip().splitlines()
    values = dict(line.split(": ") for line in lines if ": " in line)
    return int(values["vertices"]), int(values["triangles"])


def test_noise_scene_matches_world(capsys):
    assert main(["--seed", "3"]) == 0
    vertices, triangles = _report(capsys)
    assert vertices == len(World(seed=3).vertices)
    assert triangles * 3 == vertices


def test_same_seed_same_mesh(capsys):
    main(["--seed", "11"])
    first = _report(capsys)
    main(["--seed", "11"])
    second = _report(capsys)
    assert first == second


@pytest.mark.parametrize("shape", ["fill", "plane", "sphere"])
def test_shapes_match_direct_world(capsys, shape):
    assert main(["--seed", "1", "--shape", shape]) == 0
    vertices, _ = _report(capsys)
    world = World(seed=1)
    world.grid.clear()
    getattr(world, f"fill_{shape}" if shape != "fill" else "fill")(world.grid.size())
    world.update()
    assert vertices == len(world.vertices)
    assert vertices % 6 == 0


def test_full_chunk_has_fewer_vertices_than_plane_layers(capsys):
    main(["--seed", "1", "--shape", "plane"])
    plane, _ = _report(capsys)
    main(["--seed", "1", "--shape", "fill"])
    full, _ = _report(capsys)
    assert full > plane > 0


def test_benchmark_reports_iterations(capsys):
    assert main(["--seed", "2", "--shape", "plane", "--benchmark", "2"]) == 0
    out = capsys.readouterr().out
    assert "generate_vertex_buffer() took" in out
    assert "over 2 iterations." in out


def test_unknown_shape_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--shape", "cube"])
    assert excinfo.value.code == 2


def test_negative_benchmark_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--seed", "1", "--benchmark", "-1"])
    assert excinfo.value.code == 2