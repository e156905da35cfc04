"""Integration state and numerical integrators for body motion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from typing import Optional

from .geometry import Shape
from .vector import Vector2D

_NEWTON_MAX_ITERATIONS = 100
_NEWTON_TOLERANCE = 1e-6


@dataclass
class Parameter:
    """Snapshot of a body's state that an integrator advances by one step."""

    position: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)
    acceleration: Vector2D = field(default_factory=Vector2D)
    force: Vector2D = field(default_factory=Vector2D)
    impulse: Vector2D = field(default_factory=Vector2D)
    torque: Vector2D = field(default_factory=Vector2D)
    angular_velocity: Vector2D = field(default_factory=Vector2D)
    angular_acceleration: Vector2D = field(default_factory=Vector2D)
    mass: float = 1.0
    inertia: float = 1.0
    friction: float = 0.0
    damping: float = 0.0
    angular_damping: float = 0.0
    restitution: float = 0.0
    delta_time: float = 0.0
    prev_position: Vector2D = field(default_factory=Vector2D)
    shape: Optional[Shape] = None


def _clone(params: Parameter) -> Parameter:
    """Copy of the parameters whose vectors are independent of the original."""
    vectors = {
        f.name: Vector2D(value.x, value.y)
        for f in fields(params)
        if isinstance(value := getattr(params, f.name), Vector2D)
    }
    return replace(params, **vectors)


class IntegrationMethod(ABC):
    """Advances a Parameter snapshot by its time step."""

    @abstractmethod
    def __call__(self, params: Parameter) -> Parameter:
        """Return the state after one step; the input is left untouched."""


class IterationMethod(ABC):
    """Solves for a vector quantity starting from an initial guess."""

    @abstractmethod
    def __call__(self, initial_guess: Vector2D, params: Parameter) -> Vector2D:
        """Return the solution found from the initial guess."""


class ExplicitEulerIntegration(IntegrationMethod):
    def __call__(self, params: Parameter) -> Parameter:
        p = _clone(params)
        inv_mass = 1.0 / p.mass
        inv_inertia = 1.0 / p.inertia
        p.acceleration = p.force * inv_mass
        p.angular_acceleration = p.torque * inv_inertia
        p.velocity = p.velocity + p.acceleration * p.delta_time + p.impulse * inv_mass
        p.angular_velocity = p.angular_velocity + p.angular_acceleration * p.delta_time
        p.position = p.position + p.velocity * p.delta_time
        return p


class SemiImplicitEulerIntegration(IntegrationMethod):
    """Updates velocity first, then moves with the new velocity."""

    def __call__(self, params: Parameter) -> Parameter:
        p = _clone(params)
        inv_mass = 1.0 / p.mass
        inv_inertia = 1.0 / p.inertia
        p.acceleration = p.force * inv_mass
        p.angular_acceleration = p.torque * inv_inertia
        p.velocity = p.velocity + p.acceleration * p.delta_time + p.impulse * inv_mass
        p.angular_velocity = p.angular_velocity + p.angular_acceleration * p.delta_time
        p.position = p.position + p.velocity * p.delta_time
        return p


class NewtonRaphsonIteration(IterationMethod):
    """Newton iteration for the damped implicit velocity equation."""

    def __call__(self, initial_guess: Vector2D, params: Parameter) -> Vector2D:
        inv_mass = 1.0 / params.mass
        dt_damping = params.delta_time * params.damping * inv_mass
        derivative = 1.0 - dt_damping
        guess = Vector2D(initial_guess.x, initial_guess.y)
        for _ in range(_NEWTON_MAX_ITERATIONS):
            residual = (
                guess
                - params.velocity
                - (params.force * inv_mass + guess * dt_damping) * params.delta_time
            )
            if residual.magnitude() < _NEWTON_TOLERANCE:
                break
            guess = Vector2D(guess.x - residual.x / derivative, guess.y - residual.y / derivative)
        return guess


class ImplicitEulerIntegration(IntegrationMethod):
    """Backward Euler; the new velocity comes from an iteration method."""

    def __init__(self, iteration_method: IterationMethod) -> None:
        self.iteration_method = iteration_method

    def __call__(self, params: Parameter) -> Parameter:
        p = _clone(params)
        inv_mass = 1.0 / p.mass
        inv_inertia = 1.0 / p.inertia
        new_velocity = self.iteration_method(p.velocity, p)
        p.acceleration = (p.force - new_velocity * p.damping) * inv_mass
        p.angular_acceleration = p.torque * inv_inertia
        p.position = p.position + new_velocity * p.delta_time
        p.velocity = new_velocity + p.impulse * inv_mass
        p.angular_velocity = p.angular_velocity + p.angular_acceleration * p.delta_time
        return p


class RungeKuttaIntegration(IntegrationMethod):
    """Fourth-order Runge-Kutta under a force held constant over the step.

    The angular velocity grows by the torque magnitude over the inertia,
    added equally to both of its components.
    """

    def __call__(self, params: Parameter) -> Parameter:
        p = _clone(params)
        inv_mass = 1.0 / p.mass
        inv_inertia = 1.0 / p.inertia
        dt = p.delta_time
        half_dt = dt * 0.5

        k1_v = k2_v = k3_v = k4_v = p.force * inv_mass

        k1_r = p.velocity
        k2_r = p.velocity + k1_v * half_dt
        k3_r = p.velocity + k2_v * half_dt
        k4_r = p.velocity + k3_v * dt

        k_omega = p.torque.magnitude() * inv_inertia

        p.velocity = (
            p.velocity + (k1_v + k2_v * 2 + k3_v * 2 + k4_v) * (dt / 6.0) + p.impulse * inv_mass
        )
        p.position = p.position + (k1_r + k2_r * 2 + k3_r * 2 + k4_r) * (dt / 6.0)
        spin = (k_omega + 2 * k_omega + 2 * k_omega + k_omega) * (dt / 6.0)
        p.angular_velocity = p.angular_velocity + Vector2D(spin, spin)
        return p


class VerletIntegration(IntegrationMethod):
    """Position Verlet using the previous position stored in the parameters."""

    def __call__(self, params: Parameter) -> Parameter:
        p = _clone(params)
        dt = p.delta_time
        p.acceleration = p.force / p.mass
        current = p.position
        p.position = 2 * p.position - p.prev_position + p.acceleration * dt * dt
        p.prev_position = current
        p.velocity = (p.position - p.prev_position) / dt + p.impulse / p.mass
        p.angular_acceleration = p.torque / p.inertia
        p.angular_velocity = p.angular_velocity + p.angular_acceleration * dt
        return p