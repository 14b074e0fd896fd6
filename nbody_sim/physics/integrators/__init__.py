"""Numerical integrators for N-body simulations."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import SemiImplicitEulerIntegrator, ExplicitEulerIntegrator

INTEGRATORS = {
    "semi_implicit_euler": SemiImplicitEulerIntegrator,
    "euler": ExplicitEulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator instance by name."""
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS)}")
    return integrator_class()


__all__ = [
    "Integrator",
    "SemiImplicitEulerIntegrator",
    "ExplicitEulerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
