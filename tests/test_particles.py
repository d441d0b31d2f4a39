#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Heat Particle Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from thermal_contact.particles import ContactGeometry, HeatParticles, advance_particles


class TestContactGeometry:
    """Tests for the container layout."""

    def test_default_layout(self):
        geometry = ContactGeometry()
        assert geometry.left_x == 150.0
        assert geometry.max_gap == 240.0
        assert geometry.center_y == 112.0

    def test_containers_close_with_progress(self):
        geometry = ContactGeometry()
        assert geometry.right_x(0.0) == 570.0
        assert geometry.right_x(0.5) == 450.0
        assert geometry.right_x(1.0) == 330.0

    def test_flow_band_minimum_width(self):
        """At full contact the band keeps a 22 px minimum width."""
        x0, x1 = ContactGeometry().flow_band(1.0)
        assert x0 == 324.0
        assert x1 == 346.0

    def test_flow_band_spans_gap(self):
        x0, x1 = ContactGeometry().flow_band(0.0)
        assert x0 == 324.0
        assert x1 == 576.0


class TestAdvanceParticles:
    """Tests for the compiled advection kernel."""

    def test_moves_horizontally(self):
        positions = np.array([[100.0, 50.0], [120.0, 55.0]])
        speeds = np.array([200.0, 100.0])
        advance_particles(positions, speeds, 0.1, 0.0, 500.0, 0.0, 100.0)
        assert np.allclose(positions, [[120.0, 50.0], [130.0, 55.0]])

    def test_clamps_to_band(self):
        positions = np.array([[0.0, 500.0]])
        speeds = np.array([100.0])
        advance_particles(positions, speeds, 0.05, 10.0, 20.0, 0.0, 50.0)
        assert positions[0, 0] == 10.0
        assert positions[0, 1] == 50.0

    def test_empty_array(self):
        positions = np.zeros((0, 2))
        advance_particles(positions, np.zeros(0), 0.1, 0.0, 1.0, 0.0, 1.0)
        assert positions.shape == (0, 2)


class TestHeatParticles:
    """Tests for particle spawning and removal."""

    def test_spawn_count(self):
        particles = HeatParticles()
        assert particles.spawn_count(60.0) == 2
        assert particles.spawn_count(10.0) == 1
        assert particles.spawn_count(0.5) == 1

    def test_emit_with_certain_probability(self):
        """Every spawn attempt succeeds when the probability is 1."""
        particles = HeatParticles(np.random.default_rng(3), spawn_probability=1.0)
        created = particles.emit(66.0, 324.0, 346.0, 112.0, 10.0)

        assert created == 3
        assert len(particles) == 3
        assert np.all(particles.positions[:, 0] == 326.0)
        assert np.all(np.abs(particles.positions[:, 1] - 112.0) <= 10.0)
        assert np.all((particles.speeds >= 170.0) & (particles.speeds <= 260.0))
        assert np.all(particles.targets == 344.0)

    def test_emit_with_zero_probability(self):
        particles = HeatParticles(np.random.default_rng(3), spawn_probability=0.0)
        assert particles.emit(80.0, 324.0, 346.0, 112.0, 10.0) == 0
        assert len(particles) == 0

    def test_no_emission_below_threshold(self):
        particles = HeatParticles(np.random.default_rng(0), spawn_probability=1.0)
        particles.update(0.02, 0.1, True, ContactGeometry(), 1.0)
        assert len(particles) == 0

    def test_no_emission_when_not_emitting(self):
        particles = HeatParticles(np.random.default_rng(0), spawn_probability=1.0)
        particles.update(0.02, 60.0, False, ContactGeometry(), 1.0)
        assert len(particles) == 0

    def test_particles_reach_target_and_vanish(self):
        """Particles cross the 22 px band in well under half a second."""
        geometry = ContactGeometry()
        particles = HeatParticles(np.random.default_rng(5), spawn_probability=1.0)
        particles.update(0.033, 60.0, True, geometry, 1.0)
        assert len(particles) > 0

        start_x = particles.positions[:, 0].copy()
        particles.update(0.01, 60.0, False, geometry, 1.0)
        assert np.all(particles.positions[:, 0] > start_x)

        for _ in range(15):
            particles.update(0.033, 60.0, False, geometry, 1.0)
        assert len(particles) == 0

    def test_seeded_generators_agree(self):
        a = HeatParticles(np.random.default_rng(42))
        b = HeatParticles(np.random.default_rng(42))
        geometry = ContactGeometry()
        for _ in range(20):
            a.update(0.016, 70.0, True, geometry, 1.0)
            b.update(0.016, 70.0, True, geometry, 1.0)
        assert np.array_equal(a.positions, b.positions)
        assert np.array_equal(a.speeds, b.speeds)

    def test_clear(self):
        particles = HeatParticles(np.random.default_rng(1), spawn_probability=1.0)
        particles.emit(60.0, 324.0, 346.0, 112.0, 10.0)
        particles.clear()
        assert len(particles) == 0
        assert particles.positions.shape == (0, 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
