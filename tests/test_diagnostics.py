"""Tests for conserved-quantity diagnostics."""

import numpy as np
import pytest
from gravity_sim.physics.diagnostics import Diagnostics


def test_potential_energy_two_bodies():
    """Test U = -G m1 m2 / r for a single pair."""
    diagnostics = Diagnostics()
    positions = np.array([[0.0, 0.0], [5.0, 0.0]])
    velocities = np.zeros((2, 2))
    masses = np.array([100.0, 1.0])
    
    K, U, E = diagnostics.compute_energies(positions, velocities, masses)
    
    assert U == pytest.approx(-100.0 / 5.0)
    assert K == 0.0
    assert E == pytest.approx(U)


def test_potential_energy_skips_coincident_pair():
    """Test that coincident bodies add no potential energy."""
    diagnostics = Diagnostics()
    positions = np.array([[1.0, 1.0], [1.0, 1.0]])
    
    assert diagnostics.potential_energy(positions, np.array([1.0, 1.0])) == 0.0


def test_potential_energy_respects_clamp():
    """Test that the separation clamp matches the force calculation."""
    positions = np.array([[0.0, 0.0], [0.5, 0.0]])
    masses = np.array([1.0, 1.0])
    
    assert Diagnostics().potential_energy(positions, masses) == pytest.approx(-2.0)
    assert Diagnostics(min_distance=2.0).potential_energy(positions, masses) == pytest.approx(-0.5)


def test_kinetic_energy_and_momentum():
    """Test kinetic energy, momentum and center of mass."""
    diagnostics = Diagnostics()
    positions = np.array([[0.0, 0.0], [100.0, 0.0]])
    velocities = np.array([[0.0, 0.0], [0.0, -1.0]])
    masses = np.array([200.0, 50.0])
    
    assert diagnostics.kinetic_energy(velocities, masses) == pytest.approx(25.0)
    assert np.allclose(diagnostics.total_momentum(velocities, masses), [0.0, -50.0])
    assert np.allclose(diagnostics.center_of_mass(positions, masses), [20.0, 0.0])


def test_angular_momentum():
    """Test L_z sign convention (counter-clockwise positive)."""
    diagnostics = Diagnostics()
    positions = np.array([[100.0, 0.0], [-100.0, 0.0]])
    velocities = np.array([[0.0, -1.0], [0.0, 1.0]])
    masses = np.array([50.0, 50.0])
    
    assert diagnostics.angular_momentum(positions, velocities, masses) == pytest.approx(-10000.0)
