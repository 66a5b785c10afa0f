import math

import numpy as np
import pytest

from voxel_raytrace._core import _delta, _distance_to_boundary, _march, _prepare, _sign


@pytest.mark.parametrize("x, expected", [(-2.5, -1.0), (0.0, 0.0), (3.0, 1.0)])
def test_sign(x, expected):
    assert _sign(x) == expected


def test_distance_to_boundary_positive():
    assert _distance_to_boundary(0.25, 0.5) == pytest.approx(1.5)
    # on a boundary going up: a whole voxel away
    assert _distance_to_boundary(2.0, 1.0) == pytest.approx(1.0)


def test_distance_to_boundary_negative():
    assert _distance_to_boundary(0.25, -0.5) == pytest.approx(0.5)
    assert _distance_to_boundary(-1.75, -1.0) == pytest.approx(0.25)


def test_distance_to_boundary_negative_on_boundary_is_zero():
    assert _distance_to_boundary(2.0, -1.0) == 0.0
    assert _distance_to_boundary(-3.0, -0.25) == 0.0


def test_distance_to_boundary_parallel():
    assert math.isinf(_distance_to_boundary(0.5, 0.0))


def test_delta():
    assert _delta(0.0, 0.0) == 0.0
    assert _delta(0.5, 1.0) == pytest.approx(2.0)
    assert _delta(-0.25, -1.0) == pytest.approx(4.0)


def test_prepare_state():
    o = np.array([1.5, -0.5, 2.0])
    d = np.array([0.6, 0.0, -0.8])
    voxel, step, t_next, t_delta = _prepare(o, d)
    assert voxel.tolist() == [1, -1, 2]
    assert step.tolist() == [1, 0, -1]
    assert t_next[0] == pytest.approx(0.5 / 0.6)
    assert math.isinf(t_next[1])
    assert t_next[2] == 0.0
    assert t_delta.tolist() == pytest.approx([1 / 0.6, 0.0, 1 / 0.8])


def test_march_resumes_after_full_buffer():
    o = np.array([0.5, 0.5, 0.5])
    d = np.array([1.0, 0.0, 0.0])
    voxel, step, t_next, t_delta = _prepare(o, d)
    out_ix = np.empty((2, 3), dtype=np.int64)
    out_t0 = np.empty(2, dtype=np.float64)
    out_t1 = np.empty(2, dtype=np.float64)

    count, t_enter, finished = _march(voxel, step, t_next, t_delta, 3.0, 0.0,
                                      out_ix, out_t0, out_t1)
    assert (count, finished) == (2, False)
    assert out_ix.tolist() == [[0, 0, 0], [1, 0, 0]]
    assert t_enter == pytest.approx(1.5)

    count, t_enter, finished = _march(voxel, step, t_next, t_delta, 3.0, t_enter,
                                      out_ix, out_t0, out_t1)
    assert (count, finished) == (2, True)
    assert out_ix.tolist() == [[2, 0, 0], [3, 0, 0]]
    assert out_t1.tolist() == pytest.approx([2.5, 3.0])
