import math

import pytest

from blobmesh.fields import (MetaBall, MetaBallField, as_field, constant_field,
                             sphere_field)


def test_sphere_sign_convention():
    field = sphere_field(2.0, center=(1.0, 0.0, 0.0))
    assert field(1.0, 0.0, 0.0) == pytest.approx(2.0)
    assert field(3.0, 0.0, 0.0) == pytest.approx(0.0)
    assert field(4.0, 0.0, 0.0) < 0


def test_constant_field():
    assert constant_field(0.25)(10.0, -3.0, 7.0) == 0.25


def test_as_field_accepts_callables_and_evaluators():
    def plain(x, y, z):
        return x

    class Evaluator:
        def evaluate(self, x, y, z):
            return y

    assert as_field(plain) is plain
    assert as_field(Evaluator())(1.0, 2.0, 3.0) == 2.0


def test_as_field_rejects_other_objects():
    with pytest.raises(TypeError):
        as_field(3.0)


def test_single_metaball_is_a_sphere():
    field = MetaBallField([MetaBall((0.0, 0.0, 0.0), 1.5)])
    assert field.evaluate(1.5, 0.0, 0.0) == pytest.approx(0.0)
    assert field.evaluate(0.0, 1.0, 0.0) > 0
    assert field.evaluate(0.0, 0.0, 2.0) < 0
    assert field(0.0, 0.0, 2.0) == field.evaluate(0.0, 0.0, 2.0)


def test_metaball_center_stays_finite():
    field = MetaBallField([MetaBall((0.0, 0.0, 0.0), 1.0)])
    assert math.isfinite(field.evaluate(0.0, 0.0, 0.0))


def test_metaballs_blend():
    balls = [MetaBall((-1.0, 0.0, 0.0), 0.8), MetaBall((1.0, 0.0, 0.0), 0.8)]
    # Neither ball alone reaches the origin, together they do
    assert MetaBallField(balls[:1]).evaluate(0.0, 0.0, 0.0) < 0
    assert MetaBallField(balls).evaluate(0.0, 0.0, 0.0) > 0


def test_update_moves_balls():
    field = MetaBallField()
    before = field.evaluate(0.5, 0.5, 0.5)
    assert field.evaluate(0.5, 0.5, 0.5) == before
    field.update(1.0)
    assert field.time == 1.0
    assert field.evaluate(0.5, 0.5, 0.5) != before


def test_update_is_a_function_of_time():
    first, second = MetaBallField(), MetaBallField()
    first.update(0.3)
    first.update(2.0)
    second.update(2.0)
    assert [b.center for b in first.balls] == [b.center for b in second.balls]


def test_static_ball_does_not_move():
    ball = MetaBall((1.0, 2.0, 3.0), 1.0)
    ball.move(5.0)
    assert ball.center == (1.0, 2.0, 3.0)
