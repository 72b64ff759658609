# SPDX-License-Identifier: MIT
import math

import pytest

from evosim.core.exceptions import ConfigurationError
from evosim.sim import Eye, Food

FOV_RANGE = 0.25
FOV_ANGLE = math.pi + math.pi / 4
CELLS = 9


@pytest.fixture
def eye():
    return Eye(FOV_RANGE, FOV_ANGLE, CELLS)


@pytest.mark.parametrize("count", [0, 1, 5, 40])
def test_output_width_is_fixed(eye, count):
    foods = [Food(0.5, 0.5 + 0.001 * (i + 1)) for i in range(count)]
    assert len(eye.process(0.5, 0.5, 0.0, foods)) == CELLS


def test_food_straight_ahead_hits_middle_cell(eye):
    vision = eye.process(0.5, 0.5, 0.0, [Food(0.5, 0.6)])
    expected = [0.0] * CELLS
    expected[CELLS // 2] = (FOV_RANGE - 0.1) / FOV_RANGE
    assert list(vision) == pytest.approx(expected)


def test_food_out_of_range_is_invisible(eye):
    assert not any(eye.process(0.5, 0.5, 0.0, [Food(0.5, 0.8)]))


def test_food_behind_is_invisible(eye):
    assert not any(eye.process(0.5, 0.5, 0.0, [Food(0.5, 0.4)]))


def test_food_on_each_side_lands_in_outer_cells(eye):
    left = eye.process(0.5, 0.5, 0.0, [Food(0.4, 0.5)])
    right = eye.process(0.5, 0.5, 0.0, [Food(0.6, 0.5)])
    assert left[CELLS - 1] > 0.0 and sum(left) == left[CELLS - 1]
    assert right[0] > 0.0 and sum(right) == right[0]


def test_heading_rotates_the_field_of_view(eye):
    # heading pi/2 faces -x
    vision = eye.process(0.5, 0.5, math.pi / 2, [Food(0.4, 0.5)])
    assert vision[CELLS // 2] == pytest.approx((FOV_RANGE - 0.1) / FOV_RANGE)


def test_closer_food_is_brighter_and_energies_accumulate(eye):
    near = eye.process(0.5, 0.5, 0.0, [Food(0.5, 0.55)])
    far = eye.process(0.5, 0.5, 0.0, [Food(0.5, 0.7)])
    both = eye.process(0.5, 0.5, 0.0, [Food(0.5, 0.55), Food(0.5, 0.7)])
    assert near[CELLS // 2] > far[CELLS // 2]
    assert both[CELLS // 2] == pytest.approx(near[CELLS // 2] + far[CELLS // 2])


@pytest.mark.parametrize(
    "fov_range, fov_angle, cells",
    [(0.0, 1.0, 3), (0.2, 0.0, 3), (0.2, 7.0, 3), (0.2, 1.0, 0)],
)
def test_invalid_parameters(fov_range, fov_angle, cells):
    with pytest.raises(ConfigurationError):
        Eye(fov_range, fov_angle, cells)
