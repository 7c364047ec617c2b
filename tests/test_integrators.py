"""Tests for numerical integrators."""

import numpy as np
from gravity_sim.physics.integrators import SemiImplicitEulerIntegrator


def test_semi_implicit_euler_integrator():
    """Test semi-implicit Euler integrator."""
    integrator = SemiImplicitEulerIntegrator()
    
    positions = np.array([[0.0, 0.0], [1.0, 0.0]], dtype=np.float32)
    velocities = np.array([[0.0, 0.0], [0.0, 1.0]], dtype=np.float32)
    accelerations = np.array([[1.0, 0.0], [0.0, -2.0]], dtype=np.float32)
    dt = 0.5
    
    new_pos, new_vel = integrator.step(positions, velocities, accelerations, dt)
    
    np.testing.assert_allclose(new_vel, [[0.5, 0.0], [0.0, 0.0]])
    # Positions use the updated velocity
    np.testing.assert_allclose(new_pos, [[0.25, 0.0], [1.0, 0.0]])
    assert new_pos.dtype == np.float32
    assert new_vel.dtype == np.float32
    assert integrator.name == "semi_implicit_euler"
    assert integrator.order == 1


def test_stages_do_not_mutate_inputs():
    """Test that both stages return new arrays."""
    integrator = SemiImplicitEulerIntegrator()
    velocities = np.array([[1.0, 1.0]], dtype=np.float32)
    positions = np.array([[0.0, 0.0]], dtype=np.float32)
    
    integrator.update_velocities(velocities, np.array([[1.0, 0.0]], dtype=np.float32), 1.0)
    integrator.update_positions(positions, velocities, 1.0)
    
    assert np.array_equal(velocities, [[1.0, 1.0]])
    assert np.array_equal(positions, [[0.0, 0.0]])


def test_zero_acceleration_keeps_velocity_exact():
    """Test that a force-free body keeps its velocity bit for bit."""
    integrator = SemiImplicitEulerIntegrator()
    velocities = np.array([[0.1, -0.3]], dtype=np.float32)
    new_vel = integrator.update_velocities(velocities, np.zeros((1, 2), dtype=np.float32), 1.5)
    assert np.array_equal(new_vel, velocities)
