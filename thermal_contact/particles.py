#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Heat Particle Animation
================================================================================

Project:        Thermal Contact Canvas
Module:         particles.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Cosmetic "heat particles" that stream from the hot container to the cold
one while they are in contact. Particles carry no energy: they only
illustrate the direction and rough magnitude of the heat flow and never
feed back into the temperatures.

Also holds the container layout, since the particle band is defined by the
gap between the two containers as they slide together.
"""

import numpy as np
from numba import jit
from typing import Tuple, Optional
from dataclasses import dataclass


@dataclass
class ContactGeometry:
    """
    Layout of the two containers on the drawing canvas (pixel units).

    The hot container is fixed on the left; the cold one slides in from
    the right as contact progress goes from 0 to 1.
    """
    canvas_width: float = 900.0
    canvas_height: float = 260.0
    container_width: float = 180.0
    container_height: float = 120.0
    base_y: float = 52.0
    side_margin: float = 150.0
    band_half: float = 10.0

    @property
    def left_x(self) -> float:
        """Left edge of the hot container."""
        return self.side_margin

    @property
    def max_gap(self) -> float:
        """Gap between containers before contact starts."""
        right_base_x = self.canvas_width - self.side_margin - self.container_width
        return right_base_x - (self.left_x + self.container_width)

    @property
    def center_y(self) -> float:
        """Vertical centre of the containers and the flow band."""
        return self.base_y + self.container_height / 2

    def right_x(self, contact_progress: float) -> float:
        """Left edge of the cold container at the given contact progress."""
        gap = self.max_gap * (1.0 - contact_progress)
        return self.left_x + self.container_width + gap

    def flow_band(self, contact_progress: float) -> Tuple[float, float]:
        """
        Horizontal extent (x0, x1) of the band particles travel along.

        The band never collapses below 22 px, even when the containers touch.
        """
        x0 = self.left_x + self.container_width - 6
        x1 = max(self.right_x(contact_progress) + 6, x0 + 22)
        return x0, x1


@jit(nopython=True, cache=True)
def advance_particles(
    positions: np.ndarray,
    speeds: np.ndarray,
    dt: float,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float
) -> np.ndarray:
    """
    Move particles horizontally and clamp them into the flow band.

    Args:
        positions: Nx2 array of particle positions (modified in place)
        speeds: N array of horizontal speeds (px/s)
        dt: Time step in seconds
        x_min, x_max: Horizontal band limits
        y_min, y_max: Vertical band limits

    Returns:
        The updated positions array
    """
    for i in range(positions.shape[0]):
        x = positions[i, 0] + speeds[i] * dt
        positions[i, 0] = min(max(x, x_min), x_max)
        positions[i, 1] = min(max(positions[i, 1], y_min), y_max)
    return positions


class HeatParticles:
    """
    Particle system for the heat flow animation.

    Spawning is randomized through an injectable numpy Generator so that
    tests can seed it.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        spawn_probability: float = 0.35,
        spawn_divisor: float = 22.0,
        speed_range: Tuple[float, float] = (170.0, 260.0),
        emission_threshold: float = 0.15
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.spawn_probability = spawn_probability
        self.spawn_divisor = spawn_divisor
        self.speed_range = speed_range
        self.emission_threshold = emission_threshold

        self.positions = np.zeros((0, 2))
        self.speeds = np.zeros(0)
        self.targets = np.zeros(0)

    def __len__(self) -> int:
        return self.positions.shape[0]

    def clear(self) -> None:
        """Remove every particle."""
        self.positions = np.zeros((0, 2))
        self.speeds = np.zeros(0)
        self.targets = np.zeros(0)

    def spawn_count(self, delta: float) -> int:
        """Number of spawn attempts per frame for a temperature difference."""
        return max(1, int(np.floor(delta / self.spawn_divisor)))

    def emit(self, delta: float, x0: float, x1: float, center_y: float, band_half: float) -> int:
        """
        Attempt to spawn new particles at the hot edge of the band.

        Args:
            delta: Current temperature difference (hot - cold)
            x0, x1: Horizontal extent of the flow band
            center_y: Vertical centre of the band
            band_half: Half height of the band

        Returns:
            Number of particles actually created
        """
        lo, hi = self.speed_range
        new_positions = []
        new_speeds = []

        for _ in range(self.spawn_count(delta)):
            if self.rng.random() < self.spawn_probability:
                y = center_y + (self.rng.random() - 0.5) * band_half * 2
                new_positions.append((x0 + 2, y))
                new_speeds.append(lo + self.rng.random() * (hi - lo))

        if new_positions:
            n_new = len(new_positions)
            self.positions = np.vstack([self.positions, np.array(new_positions)])
            self.speeds = np.concatenate([self.speeds, np.array(new_speeds)])
            self.targets = np.concatenate([self.targets, np.full(n_new, x1 - 2)])

        return len(new_positions)

    def update(
        self,
        dt: float,
        delta: float,
        emitting: bool,
        geometry: ContactGeometry,
        contact_progress: float
    ) -> None:
        """
        Advance the particle system by one frame.

        New particles appear only while `emitting` is set and the
        temperature difference exceeds the emission threshold. Existing
        particles always move, and are dropped once they reach their
        target x.

        Args:
            dt: Time step in seconds
            delta: Temperature difference (hot - cold)
            emitting: Whether the bodies are running and in full contact
            geometry: Container layout
            contact_progress: Current contact progress in [0, 1]
        """
        x0, x1 = geometry.flow_band(contact_progress)
        center_y = geometry.center_y
        band_half = geometry.band_half

        if emitting and delta > self.emission_threshold:
            self.emit(delta, x0, x1, center_y, band_half)

        if len(self) == 0:
            return

        advance_particles(
            self.positions, self.speeds, dt,
            x0, x1, center_y - band_half, center_y + band_half
        )

        keep = self.positions[:, 0] < self.targets
        self.positions = self.positions[keep]
        self.speeds = self.speeds[keep]
        self.targets = self.targets[keep]
