import pytest

from pe2d.motion import (
    ExplicitEulerIntegration,
    ImplicitEulerIntegration,
    IntegrationMethod,
    IterationMethod,
    NewtonRaphsonIteration,
    Parameter,
    RungeKuttaIntegration,
    SemiImplicitEulerIntegration,
    VerletIntegration,
)
from pe2d.vector import Vector2D


def _sample(**overrides):
    values = dict(
        position=Vector2D(1.0, -2.0),
        velocity=Vector2D(3.0, 0.5),
        force=Vector2D(4.0, -6.0),
        impulse=Vector2D(0.0, 0.0),
        torque=Vector2D(0.0, 0.0),
        angular_velocity=Vector2D(0.0, 0.0),
        mass=2.0,
        inertia=3.0,
        delta_time=0.1,
    )
    values.update(overrides)
    return Parameter(**values)


def test_explicit_euler_without_force_moves_by_velocity():
    params = Parameter(velocity=Vector2D(2.0, 4.0), delta_time=0.5)
    result = ExplicitEulerIntegration()(params)
    assert result.position == Vector2D(1.0, 2.0)
    assert result.velocity == Vector2D(2.0, 4.0)


def test_integrator_does_not_mutate_input():
    params = _sample()
    before = _sample()
    ExplicitEulerIntegration()(params)
    RungeKuttaIntegration()(params)
    assert params == before


def test_explicit_and_semi_implicit_agree():
    params = _sample(impulse=Vector2D(1.0, 1.0), torque=Vector2D(0.5, 0.0))
    assert ExplicitEulerIntegration()(params) == SemiImplicitEulerIntegration()(params)


def test_impulse_changes_velocity_directly():
    params = Parameter(velocity=Vector2D(1.0, 1.0), impulse=Vector2D(2.0, -3.0), delta_time=0.2)
    result = SemiImplicitEulerIntegration()(params)
    assert tuple(result.velocity) == pytest.approx((3.0, -2.0))


def test_no_torque_keeps_angular_velocity():
    params = _sample(angular_velocity=Vector2D(0.3, 0.7))
    result = ExplicitEulerIntegration()(params)
    assert result.angular_velocity == Vector2D(0.3, 0.7)


@pytest.mark.parametrize(
    "integrator",
    [
        ExplicitEulerIntegration(),
        SemiImplicitEulerIntegration(),
        RungeKuttaIntegration(),
        VerletIntegration(),
        ImplicitEulerIntegration(NewtonRaphsonIteration()),
    ],
)
def test_zero_mass_raises(integrator):
    with pytest.raises(ZeroDivisionError):
        integrator(_sample(mass=0.0))


def test_runge_kutta_velocity_matches_euler_under_constant_force():
    params = _sample(impulse=Vector2D(0.5, 0.5))
    rk = RungeKuttaIntegration()(params)
    euler = ExplicitEulerIntegration()(params)
    assert tuple(rk.velocity) == pytest.approx(tuple(euler.velocity))


def test_runge_kutta_position_is_midway_between_drift_and_semi_implicit():
    params = _sample()
    rk = RungeKuttaIntegration()(params)
    semi = SemiImplicitEulerIntegration()(params)
    drift = ExplicitEulerIntegration()(_sample(force=Vector2D(0.0, 0.0)))
    midway = (semi.position + drift.position) * 0.5
    assert tuple(rk.position) == pytest.approx(tuple(midway))


def test_runge_kutta_spin_is_added_equally_to_both_components():
    params = _sample(torque=Vector2D(3.0, 4.0), angular_velocity=Vector2D(1.0, -1.0))
    result = RungeKuttaIntegration()(params)
    gain_x = result.angular_velocity.x - 1.0
    gain_y = result.angular_velocity.y + 1.0
    assert gain_x > 0
    assert gain_x == pytest.approx(gain_y)


def test_newton_without_damping_converges_to_euler_velocity():
    params = _sample()
    solved = NewtonRaphsonIteration()(params.velocity, params)
    euler = ExplicitEulerIntegration()(params)
    assert tuple(solved) == pytest.approx(tuple(euler.velocity))


def test_newton_with_damping_solves_implicit_equation():
    params = _sample(damping=0.2, delta_time=0.5)
    g = NewtonRaphsonIteration()(Vector2D(0.0, 0.0), params)
    d = params.delta_time * params.damping / params.mass
    residual = g - params.velocity - (params.force / params.mass + g * d) * params.delta_time
    assert residual.magnitude() < 1e-5


def test_verlet_at_rest_only_gains_impulse():
    params = Parameter(
        position=Vector2D(5.0, 5.0),
        prev_position=Vector2D(5.0, 5.0),
        impulse=Vector2D(1.0, 2.0),
        delta_time=0.1,
    )
    result = VerletIntegration()(params)
    assert result.position == Vector2D(5.0, 5.0)
    assert tuple(result.velocity) == pytest.approx((1.0, 2.0))


def test_verlet_records_previous_position():
    params = _sample(prev_position=Vector2D(0.0, 0.0))
    result = VerletIntegration()(params)
    assert result.prev_position == params.position


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        IntegrationMethod()
    with pytest.raises(TypeError):
        IterationMethod()