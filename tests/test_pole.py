import pytest

from puttsim.ground import Ground
from puttsim.math3d import Vector3
from puttsim.pole import Pole


class _World:
    def __init__(self, *objects):
        self.objects = list(objects)

    def get_objects(self, cls):
        return [o for o in self.objects if isinstance(o, cls)]


def _ground(heightmap=None):
    ground = Ground(heightmap=heightmap)
    ground.init()
    return ground


def test_init_sets_scale():
    pole = Pole()
    pole.init()
    assert pole.scale == Vector3(3.0, 3.0, 3.0)


def test_set_position_without_terrain_keeps_height():
    pole = Pole()
    pole.set_position(1.0, 2.0, 3.0)
    assert pole.position == Vector3(1.0, 2.0, 3.0)


def test_set_position_accepts_vector():
    pole = Pole()
    pole.set_position(Vector3(4.0, 5.0, 6.0))
    assert pole.position == Vector3(4.0, 5.0, 6.0)


def test_pole_settles_on_flat_ground():
    pole = Pole(_World(_ground()))
    pole.set_position(0.0, 0.0, -3.0)
    assert pole.position.x == 0.0
    assert pole.position.z == -3.0
    assert pole.position.y == pytest.approx(-0.1)


def test_pole_lifted_onto_raised_ground_from_below():
    heightmap = [[150] * 30 for _ in range(30)]
    ground = _ground(heightmap)
    pole = Pole(_World(ground))
    pole.set_position(0.0, -50.0, -3.0)
    ys = [v.position.y for v in ground.get_vertices()]
    assert min(ys) <= pole.position.y <= max(ys)
    assert pole.position.y > -0.1


def test_pole_off_terrain_keeps_height():
    pole = Pole(_World(_ground()))
    pole.set_position(1000.0, 7.0, 1000.0)
    assert pole.position == Vector3(1000.0, 7.0, 1000.0)


def test_update_leaves_pole_in_place():
    pole = Pole()
    pole.set_position(1.0, 2.0, 3.0)
    pole.update()
    assert pole.position == Vector3(1.0, 2.0, 3.0)