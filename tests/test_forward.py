import logging
import math

import pytest

from plotclock import ForwardKinematics, LinkageConfig, Point2D
from plotclock.plotclock_triangle import angle_from_three_sides, side_from_two_sides_and_angle


@pytest.mark.parametrize('servo1, servo2, x, y', [
    (90, 90, 41.20511694496703, 89.57565171047857),
    (120, 60, 46.83896722633242, 76.74611539459788),
    (60, 30, 84.11703178324932, 75.226015060601),
    (150, 100, 11.339762560475716, 72.0231516695752),
    (180, 140, -15.954773582999266, 52.55901859661582),
])
def test_golden_positions(forward, servo1, servo2, x, y):
    position = forward.solve(servo1, servo2)
    assert isinstance(position, Point2D)
    assert position.x == pytest.approx(x, abs=1e-9)
    assert position.y == pytest.approx(y, abs=1e-9)


@pytest.mark.parametrize('servo1, servo2', [
    (-1, 90),
    (90, -1),
    (181, 90),
    (90, 180.5),
])
def test_servo_out_of_range(forward, servo1, servo2):
    assert forward.solve(servo1, servo2) is None


@pytest.mark.parametrize('servo1, servo2', [
    (0, 0),
    (180, 180),
    (0, 180),
    (180, 0),
])
def test_unreachable_poses(forward, servo1, servo2):
    assert forward.solve(servo1, servo2) is None


def test_offsets_translate_marker(forward):
    shifted = ForwardKinematics(LinkageConfig.from_config(LK=10.0, OL=5.0))
    base = forward.solve(90, 90)
    moved = shifted.solve(90, 90)
    assert moved.x == pytest.approx(base.x + 10.0)
    assert moved.y == pytest.approx(base.y + 5.0)


# At (90, 90): FCG ~33.1, CFA ~163.5, CGB ~163.5
# At (150, 100): FCG ~71.6, CFA ~103.0, CGB ~135.4
@pytest.mark.parametrize('servo1, servo2, limit, value, gate', [
    (90, 90, 'max_FCG', 30.0, 'FCG > max_FCG'),
    (90, 90, 'max_CFA', 160.0, 'CFA > max_CFA'),
    (90, 90, 'max_CGB', 160.0, 'CGB > max_CGB'),
    (150, 100, 'max_FCG', 70.0, 'FCG > max_FCG'),
    (150, 100, 'max_CFA', 100.0, 'CFA > max_CFA'),
    (150, 100, 'max_CGB', 130.0, 'CGB > max_CGB'),
])
def test_tighter_limit_rejects_pose(forward, caplog, servo1, servo2, limit, value, gate):
    strict = ForwardKinematics(LinkageConfig.from_config(**{limit: value}))
    with caplog.at_level(logging.DEBUG, logger='plotclock.plotclock_forward'):
        assert strict.solve(servo1, servo2) is None
    assert f'({gate})' in caplog.text
    assert forward.solve(servo1, servo2) is not None


def test_marker_elbow_on_motor_elbow_is_unreachable(forward, config, caplog):
    # servo1 == GAB and AG == AF put F exactly on G
    servo2 = 180 - math.degrees(math.acos(config.AB / (2 * config.BG)))
    AG = side_from_two_sides_and_angle(config.AB, config.BG, 180 - servo2)
    servo1 = angle_from_three_sides(AG, config.AB, config.BG)
    with caplog.at_level(logging.DEBUG, logger='plotclock.plotclock_forward'):
        assert forward.solve(servo1, servo2) is None
    assert '(F on G)' in caplog.text


def test_uneven_coupler_sweep_never_raises():
    # With FC != CG the coupler also fails to close when FG < |FC - CG|
    uneven = ForwardKinematics(LinkageConfig.from_config(CG=40.0))
    reachable = 0
    for servo1 in range(0, 181, 2):
        for servo2 in range(0, 181, 2):
            if uneven.solve(servo1, servo2) is not None:
                reachable += 1
    assert reachable > 0


def test_solve_is_pure(forward):
    assert forward.solve(90, 90) == forward.solve(90, 90)
