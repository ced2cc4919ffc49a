import numpy as np
import pytest
from core.selection import rank_responses, num_corners_for, select_corners

def _separated(corners, block_size=4):
    for i in range(len(corners)):
        for j in range(i + 1, len(corners)):
            du = abs(corners[i][0] - corners[j][0])
            dv = abs(corners[i][1] - corners[j][1])
            if du < block_size and dv < block_size:
                return False
    return True

def test_rank_descending():
    r = np.array([[0.1, 5.0], [2.0, 3.0]])
    assert rank_responses(r).tolist() == [1, 3, 2, 0]

def test_rank_non_finite_last_and_stable_ties():
    r = np.array([[np.nan, 1.0, 1.0], [np.inf, 0.0, 1.0]])
    ranking = rank_responses(r).tolist()
    assert ranking[:3] == [1, 2, 5]
    assert ranking[3] == 4
    assert set(ranking[4:]) == {0, 3}

def test_num_corners_floor():
    assert num_corners_for((8, 8), 0.1) == 6
    assert num_corners_for((5, 5), 0.04) == 1
    assert num_corners_for((5, 5), 0.2) == 5
    assert num_corners_for((3, 3), 0.1) == 0
    assert num_corners_for((4, 4), 1.0) == 16

@pytest.mark.parametrize("q", [0.0, -0.1, 1.5, float("nan")])
def test_quantile_validation(q):
    with pytest.raises(ValueError):
        num_corners_for((4, 4), q)

def test_suppression_window():
    r = np.zeros((10, 10))
    r[5, 5] = 10.0
    r[5, 8] = 9.0   # |dv| = 3 -> suppressed
    r[1, 9] = 8.0   # |du| = 4 -> kept
    r[8, 2] = 7.0   # |du| = 3, |dv| = 3 -> suppressed
    corners = select_corners(r, 0.03)
    assert corners.tolist()[:2] == [[5, 5], [1, 9]]
    assert [5, 8] not in corners.tolist()
    assert [8, 2] not in corners.tolist()

def test_random_response_is_separated_and_strongest_first():
    r = np.random.rand(40, 50)
    corners = select_corners(r, 0.02)
    assert len(corners) == num_corners_for(r.shape, 0.02)
    assert _separated(corners.tolist())
    scores = r[corners[:, 0], corners[:, 1]]
    assert np.all(np.diff(scores) <= 0)
    assert tuple(corners[0]) == np.unravel_index(np.argmax(r), r.shape)

def test_exhausted_ranking_returns_fewer():
    corners = select_corners(np.zeros((5, 5)), 0.2)
    assert corners.tolist() == [[0, 0], [0, 4], [4, 0], [4, 4]]

def test_block_size_one_disables_suppression():
    r = np.arange(16, dtype=float).reshape(4, 4)
    corners = select_corners(r, 0.25, block_size=1)
    assert corners.tolist() == [[3, 3], [3, 2], [3, 1], [3, 0]]

def test_zero_requested_returns_empty():
    corners = select_corners(np.random.rand(3, 3), 0.1)
    assert corners.shape == (0, 2)

def test_invalid_block_size():
    with pytest.raises(ValueError):
        select_corners(np.zeros((4, 4)), 0.5, block_size=0)
