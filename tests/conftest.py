"""Shared test fixtures for parallel curve tests."""
import pytest


def assert_curve_close(actual, expected, tol=1e-9):
    """Point-by-point comparison of two curves."""
    assert len(actual) == len(expected), f"{len(actual)} points != {len(expected)}"
    for i, (p, q) in enumerate(zip(actual, expected)):
        assert abs(p[0] - q[0]) < tol, f"point {i} x: {p[0]} != {q[0]}"
        assert abs(p[1] - q[1]) < tol, f"point {i} y: {p[1]} != {q[1]}"


@pytest.fixture
def l_curve():
    """East 10, then north 10: a left turn, concave on the left side."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]


@pytest.fixture
def u_curve():
    """Two left turns: east, north, then back west."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


@pytest.fixture
def s_curve():
    """Left turn then right turn."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (20.0, 10.0)]
