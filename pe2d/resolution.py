"""Collision response: impulses and positional correction."""

from __future__ import annotations

import math

from .aabb import CollisionInfo
from .body import Body


def combined_restitution(body_a: Body, body_b: Body) -> float:
    """The larger of the two restitution coefficients."""
    return max(body_a.restitution, body_b.restitution)


def combined_friction(body_a: Body, body_b: Body) -> float:
    """Geometric mean of the two friction coefficients."""
    return math.sqrt(body_a.friction * body_b.friction)


def apply_impulse(body_a: Body, body_b: Body, info: CollisionInfo) -> None:
    """Record collision and friction impulses on both bodies.

    Nothing happens if the bodies are not colliding or are already moving
    apart along the normal.
    """
    if not info.is_colliding:
        return

    normal = info.normal
    contact = info.contact_point
    relative = body_b.velocity - body_a.velocity
    along_normal = relative.dot(normal)
    if along_normal > 0:
        return

    restitution = combined_restitution(body_a, body_b)
    denominator = body_a.inv_mass + body_b.inv_mass
    magnitude = -(1 + restitution) * along_normal / denominator
    impulse = normal * magnitude
    body_a.apply_impulse(-impulse, contact)
    body_b.apply_impulse(impulse, contact)

    friction = combined_friction(body_a, body_b)
    # The tangent is the tangential relative velocity itself, not a unit vector.
    tangent = relative - normal * along_normal
    tangent_magnitude = -relative.dot(tangent) / denominator
    if abs(tangent_magnitude) < magnitude * friction:
        friction_impulse = tangent * tangent_magnitude
    else:
        friction_impulse = tangent * (magnitude * friction)
    body_a.apply_impulse(-friction_impulse, contact)
    body_b.apply_impulse(friction_impulse, contact)


def resolve_penetration(body_a: Body, body_b: Body, info: CollisionInfo) -> None:
    """Push the bodies apart along the normal, the lighter one moving further."""
    if not info.is_colliding:
        return
    separation = info.normal * info.penetration
    total_mass = body_a.mass + body_b.mass
    ratio_a = body_b.mass / total_mass
    ratio_b = body_a.mass / total_mass
    body_a.set_position(body_a.position - separation * ratio_a)
    body_b.set_position(body_b.position + separation * ratio_b)