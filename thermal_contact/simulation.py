#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermal Contact Simulation Engine
================================================================================

Project:        Thermal Contact Canvas
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Core simulation of a hot and a cold body reaching thermal equilibrium.

A run moves through the states

    Ready -> closing contact -> exchanging heat -> equilibrium -> completed

The state object owns every quantity the renderer reads; the stepper is
the only thing that advances it in time. Both are driven from a single
frame loop, so no locking is involved.
"""

import logging
import numpy as np
from typing import Tuple, Optional, List, NamedTuple
from dataclasses import dataclass, field
from enum import Enum

from .physics import (
    TRANSFER_RATE,
    clamp,
    sanitize_dt,
    exchange_step,
    equilibrium_temperature
)
from .particles import ContactGeometry, HeatParticles


logger = logging.getLogger(__name__)


class Status(Enum):
    """Coarse run status shown to the user."""
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    EQUILIBRIUM = "equilibrium"
    COMPLETED = "completed"


class HistorySample(NamedTuple):
    """One plotted (time, temperature) point."""
    time: float
    temperature: float


@dataclass
class SimulationConfig:
    """Configuration for the thermal contact simulation."""
    # Heat exchange
    transfer_rate: float = TRANSFER_RATE   # k in flow = k·ΔT·dt (1/s)

    # Timing (seconds)
    contact_duration: float = 1.0          # Ramp of the containers closing in
    post_equilibrium_hold: float = 2.5     # Run continues this long after equilibrium
    max_dt: float = 0.033                  # Largest frame delta accepted per step
    sample_interval: float = 0.05          # Minimum spacing of history samples

    # Equilibrium detection
    equilibrium_tolerance: float = 0.2     # |ΔT| below this counts as equilibrium

    # Heat particles (cosmetic)
    particle_threshold: float = 0.15
    spawn_divisor: float = 22.0
    spawn_probability: float = 0.35
    particle_speed_range: Tuple[float, float] = (170.0, 260.0)

    def __post_init__(self):
        positive = (
            "transfer_rate", "contact_duration", "max_dt",
            "sample_interval", "equilibrium_tolerance", "spawn_divisor"
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.post_equilibrium_hold < 0:
            raise ValueError("post_equilibrium_hold must be non-negative")
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError("spawn_probability must be within [0, 1]")


@dataclass
class SimulationState:
    """
    Current state of the two-body system.

    Constructing a state performs a reset with the given inputs, so a new
    state is always in the Ready status.
    """
    init_hot: float
    init_cold: float
    particles: HeatParticles = field(default_factory=HeatParticles, repr=False)

    hot_temp: float = field(init=False, default=0.0)
    cold_temp: float = field(init=False, default=0.0)
    elapsed_time: float = field(init=False, default=0.0)
    contact_progress: float = field(init=False, default=0.0)
    equilibrium_reached: bool = field(init=False, default=False)
    equilibrium_time: Optional[float] = field(init=False, default=None)
    running: bool = field(init=False, default=False)
    settled: bool = field(init=False, default=False)
    hot_history: List[HistorySample] = field(init=False, default_factory=list, repr=False)
    cold_history: List[HistorySample] = field(init=False, default_factory=list, repr=False)

    # Latest slider values; any reset starts from these
    pending_hot: float = field(init=False, default=0.0)
    pending_cold: float = field(init=False, default=0.0)

    def __post_init__(self):
        self.reset(self.init_hot, self.init_cold)

    @property
    def contact_complete(self) -> bool:
        return self.contact_progress >= 1.0

    @property
    def temperature_difference(self) -> float:
        return self.hot_temp - self.cold_temp

    @property
    def equilibrium_temperature(self) -> float:
        """Temperature both bodies converge to."""
        return equilibrium_temperature(self.init_hot, self.init_cold)

    @property
    def status(self) -> Status:
        if self.running:
            return Status.EQUILIBRIUM if self.equilibrium_reached else Status.RUNNING
        if self.settled:
            return Status.COMPLETED
        if self.elapsed_time == 0.0:
            return Status.READY
        return Status.PAUSED

    def reset(self, init_hot: Optional[float] = None, init_cold: Optional[float] = None) -> None:
        """
        Restore the initial state.

        The hot body must start strictly hotter than the cold one; if it
        does not, it is raised to one degree above the cold body.

        Args:
            init_hot: Starting hot temperature (defaults to pending input)
            init_cold: Starting cold temperature (defaults to pending input)
        """
        hot = self.pending_hot if init_hot is None else float(init_hot)
        cold = self.pending_cold if init_cold is None else float(init_cold)

        if hot <= cold:
            logger.debug("Hot input %.2f not above cold %.2f, using %.2f", hot, cold, cold + 1)
            hot = cold + 1

        self.pending_hot = hot
        self.pending_cold = cold
        self.init_hot = hot
        self.init_cold = cold
        self.hot_temp = hot
        self.cold_temp = cold
        self.elapsed_time = 0.0
        self.contact_progress = 0.0
        self.equilibrium_reached = False
        self.equilibrium_time = None
        self.running = False
        self.settled = False
        self.hot_history = [HistorySample(0.0, hot)]
        self.cold_history = [HistorySample(0.0, cold)]
        self.particles.clear()

        logger.debug("Reset: hot=%.2f cold=%.2f", hot, cold)

    def start(self) -> None:
        """
        Start or resume the run.

        A run that already completed is reset from the pending inputs
        before starting again. Calling start on a running simulation does
        nothing.
        """
        if self.running:
            return
        if self.settled:
            logger.info("Previous run completed, restarting from inputs")
            self.reset()
        self.running = True
        logger.debug("Started at t=%.3f", self.elapsed_time)

    def pause(self) -> None:
        """Stop advancing without losing any progress."""
        if self.running:
            logger.debug("Paused at t=%.3f", self.elapsed_time)
        self.running = False

    def toggle(self) -> None:
        """Single start/pause button: pause when running, start otherwise."""
        if self.running:
            self.pause()
        else:
            self.start()

    def set_inputs(self, init_hot: float, init_cold: float) -> None:
        """
        Record new slider values.

        While stopped, the state is reset to them immediately; while running
        they are kept for the next reset.
        """
        self.pending_hot = float(init_hot)
        self.pending_cold = float(init_cold)
        if not self.running:
            self.reset()

    def record_sample(self, min_interval: float) -> bool:
        """
        Append the current temperatures to the histories if enough time
        has passed since the last sample.

        Returns:
            True if a sample was recorded
        """
        last = self.hot_history[-1] if self.hot_history else None
        if last is not None and self.elapsed_time - last.time < min_interval:
            return False
        self.hot_history.append(HistorySample(self.elapsed_time, self.hot_temp))
        self.cold_history.append(HistorySample(self.elapsed_time, self.cold_temp))
        return True


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the state handed to the renderer each frame."""
    hot_temp: float
    cold_temp: float
    elapsed_time: float
    contact_progress: float
    equilibrium_reached: bool
    equilibrium_time: Optional[float]
    equilibrium_temperature: float
    hot_history: Tuple[HistorySample, ...]
    cold_history: Tuple[HistorySample, ...]
    particles: np.ndarray
    running: bool
    status: Status

    def history_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Histories as (times, hot, cold) arrays for plotting."""
        if not self.hot_history:
            return np.zeros(0), np.zeros(0), np.zeros(0)
        times = np.array([s.time for s in self.hot_history])
        hot = np.array([s.temperature for s in self.hot_history])
        cold = np.array([s.temperature for s in self.cold_history])
        return times, hot, cold


class Stepper:
    """
    Advances a SimulationState by one frame at a time.

    The host frame loop calls `step(dt)` once per frame and then renders
    `snapshot()`. The stepper is the only place the temperatures change.
    """

    def __init__(
        self,
        state: SimulationState,
        config: Optional[SimulationConfig] = None,
        geometry: Optional[ContactGeometry] = None
    ):
        self.state = state
        self.config = config or SimulationConfig()
        self.geometry = geometry or ContactGeometry()

    def step(self, dt: float) -> SimulationState:
        """
        Advance the simulation by one frame.

        Order of operations:
        1. Move heat particles (cosmetic)
        2. Advance time and contact progress
        3. Exchange heat once contact is complete
        4. Record a history sample (decimated)
        5. Detect equilibrium
        6. Stop the run once the post-equilibrium hold has elapsed

        Args:
            dt: Frame delta in seconds; clamped into [0, max_dt]

        Returns:
            The (mutated) simulation state
        """
        state = self.state
        cfg = self.config

        if not state.running:
            return state

        safe_dt = sanitize_dt(dt, cfg.max_dt)
        if safe_dt != dt:
            logger.debug("Frame delta %r clamped to %.4f s", dt, safe_dt)
        if safe_dt == 0.0:
            return state

        state.particles.update(
            safe_dt,
            state.temperature_difference,
            state.contact_complete,
            self.geometry,
            state.contact_progress
        )

        state.elapsed_time += safe_dt
        state.contact_progress = clamp(
            state.contact_progress + safe_dt / cfg.contact_duration, 0.0, 1.0
        )

        if state.contact_complete:
            state.hot_temp, state.cold_temp = exchange_step(
                state.hot_temp, state.cold_temp, cfg.transfer_rate, safe_dt
            )

        state.record_sample(cfg.sample_interval)

        if (not state.equilibrium_reached
                and state.contact_complete
                and abs(state.temperature_difference) < cfg.equilibrium_tolerance):
            state.equilibrium_reached = True
            state.equilibrium_time = state.elapsed_time
            logger.info(
                "Thermal equilibrium at t=%.2f s (%.2f / %.2f °C)",
                state.elapsed_time, state.hot_temp, state.cold_temp
            )

        if (state.equilibrium_reached
                and state.elapsed_time - state.equilibrium_time >= cfg.post_equilibrium_hold):
            state.running = False
            state.settled = True
            logger.info("Run completed at t=%.2f s", state.elapsed_time)

        return state

    def run(self, n_steps: int, dt: float) -> SimulationState:
        """Advance n_steps frames of size dt."""
        for _ in range(n_steps):
            self.step(dt)
        return self.state

    def run_until_settled(self, dt: float, max_time: float = 120.0) -> SimulationState:
        """
        Start the run and step until it completes or max_time is reached.

        Args:
            dt: Frame delta in seconds
            max_time: Upper bound on simulated time

        Returns:
            Final simulation state
        """
        self.state.start()
        while self.state.running and self.state.elapsed_time < max_time:
            self.step(dt)
        return self.state

    def snapshot(self) -> Snapshot:
        """Copy of everything the renderer needs for the current frame."""
        state = self.state
        return Snapshot(
            hot_temp=state.hot_temp,
            cold_temp=state.cold_temp,
            elapsed_time=state.elapsed_time,
            contact_progress=state.contact_progress,
            equilibrium_reached=state.equilibrium_reached,
            equilibrium_time=state.equilibrium_time,
            equilibrium_temperature=state.equilibrium_temperature,
            hot_history=tuple(state.hot_history),
            cold_history=tuple(state.cold_history),
            particles=state.particles.positions.copy(),
            running=state.running,
            status=state.status
        )


class FrameClock:
    """
    Converts host timestamps into bounded frame deltas.

    The first tick after construction or reset yields a zero delta.
    """

    def __init__(self, max_dt: float = 0.033, scale: float = 1.0):
        self.max_dt = max_dt
        self.scale = scale  # 1.0 for seconds, 1e-3 for milliseconds
        self._last: Optional[float] = None

    def reset(self) -> None:
        self._last = None

    def tick(self, timestamp: float) -> float:
        if self._last is None:
            self._last = timestamp
        dt = (timestamp - self._last) * self.scale
        self._last = timestamp
        return sanitize_dt(dt, self.max_dt)


def create_simulation(
    init_hot: float = 80.0,
    init_cold: float = 20.0,
    seed: Optional[int] = None,
    config: Optional[SimulationConfig] = None,
    geometry: Optional[ContactGeometry] = None
) -> Stepper:
    """
    Create a ready-to-start simulation.

    Args:
        init_hot: Starting hot temperature (°C)
        init_cold: Starting cold temperature (°C)
        seed: Seed for the heat particle generator
        config: Simulation configuration
        geometry: Container layout

    Returns:
        Stepper owning a freshly reset SimulationState
    """
    config = config or SimulationConfig()
    particles = HeatParticles(
        rng=np.random.default_rng(seed),
        spawn_probability=config.spawn_probability,
        spawn_divisor=config.spawn_divisor,
        speed_range=config.particle_speed_range,
        emission_threshold=config.particle_threshold
    )
    state = SimulationState(init_hot, init_cold, particles=particles)
    return Stepper(state, config, geometry)
