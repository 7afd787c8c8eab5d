import pytest

from voxplay.debug import benchmark, log


def test_log_format(capsys):
    log("world.py", 12, "update", "vertices", 3)
    assert capsys.readouterr().out == "LOG world.py:12 (update): vertices 3\n"


def test_log_without_arguments(capsys):
    log("a.py", 1, "f")
    assert capsys.readouterr().out == "LOG a.py:1 (f):\n"


def test_benchmark_calls_function_each_iteration(capsys):
    calls = []
    average = benchmark("work()", lambda: calls.append(1), 5)
    out = capsys.readouterr().out
    assert len(calls) == 5
    assert average >= 0.0
    assert out.startswith("work() took ")
    assert out.endswith(" ms (average) over 5 iterations.\n")


def test_benchmark_rejects_zero_iterations():
    with pytest.raises(ValueError):
        benchmark("noop", lambda: None, 0)