#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Heat Exchange Physics
================================================================================

Project:        Thermal Contact Canvas
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module implements the heat exchange law between two bodies in thermal
contact. The model is a single linear relaxation (Newton's law of cooling
applied to both bodies with the same proportionality constant):

    dT_hot/dt  = -k (T_hot - T_cold)
    dT_cold/dt = +k (T_hot - T_cold)

Where:
    - k: Transfer rate constant (1/s)
    - T_hot, T_cold: Body temperatures (°C)

The difference ΔT = T_hot - T_cold decays as exp(-2kt) while the sum
T_hot + T_cold is conserved, so both bodies relax toward their mean.
Time integration is explicit Euler, stable as long as 2k·dt < 1.
"""

import math
import numpy as np
from typing import Tuple


# Default transfer rate constant (1/s)
TRANSFER_RATE = 0.42

# Display range of the temperature sliders (°C)
MIN_DISPLAY_TEMP = 0.0
MAX_DISPLAY_TEMP = 100.0

# Endpoint colors of the temperature scale (RGB, 0-255)
COLD_RGB = (35, 107, 255)
HOT_RGB = (226, 40, 46)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into [lower, upper]."""
    return max(lower, min(upper, value))


def sanitize_dt(dt: float, max_dt: float) -> float:
    """
    Coerce a frame delta into [0, max_dt].

    NaN and negative deltas become 0, anything above max_dt (including
    +inf) becomes max_dt.

    Args:
        dt: Raw frame delta in seconds
        max_dt: Largest delta allowed per step

    Returns:
        Bounded time step
    """
    if dt is None or math.isnan(dt) or dt <= 0.0:
        return 0.0
    return min(dt, max_dt)


def heat_flow(hot_temp: float, cold_temp: float, rate: float, dt: float) -> float:
    """
    Heat moved from the hot to the cold body during one step.

    flow = k · (T_hot - T_cold) · dt

    Returns:
        Temperature change subtracted from hot and added to cold
    """
    return rate * (hot_temp - cold_temp) * dt


def exchange_step(
    hot_temp: float,
    cold_temp: float,
    rate: float,
    dt: float
) -> Tuple[float, float]:
    """
    Advance both temperatures by one explicit Euler step.

    The same flow is removed from one body and added to the other, so
    the sum of temperatures is unchanged.

    Args:
        hot_temp: Hot body temperature
        cold_temp: Cold body temperature
        rate: Transfer rate constant k
        dt: Time step in seconds

    Returns:
        (new_hot_temp, new_cold_temp)
    """
    flow = heat_flow(hot_temp, cold_temp, rate, dt)
    return hot_temp - flow, cold_temp + flow


def equilibrium_temperature(hot_temp: float, cold_temp: float) -> float:
    """Common final temperature of the two bodies (their mean)."""
    return 0.5 * (hot_temp + cold_temp)


def analytical_temperatures(
    times: np.ndarray,
    initial_hot: float,
    initial_cold: float,
    rate: float = TRANSFER_RATE
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Exact solution of the exchange law from the moment of contact.

    T_hot(t)  = T_eq + (ΔT₀/2) · exp(-2kt)
    T_cold(t) = T_eq - (ΔT₀/2) · exp(-2kt)

    Args:
        times: Times since contact (s)
        initial_hot: Hot temperature at contact
        initial_cold: Cold temperature at contact
        rate: Transfer rate constant k

    Returns:
        (hot_curve, cold_curve) arrays with the same shape as times
    """
    times = np.asarray(times, dtype=float)
    t_eq = equilibrium_temperature(initial_hot, initial_cold)
    half_delta = 0.5 * (initial_hot - initial_cold) * np.exp(-2.0 * rate * times)
    return t_eq + half_delta, t_eq - half_delta


def time_to_equilibrium(
    initial_delta: float,
    tolerance: float,
    rate: float = TRANSFER_RATE
) -> float:
    """
    Time after contact until |ΔT| drops below the tolerance.

    Solves ΔT₀ · exp(-2kt) = tol for t. Returns 0 when the bodies already
    start within tolerance.
    """
    if initial_delta <= tolerance:
        return 0.0
    return math.log(initial_delta / tolerance) / (2.0 * rate)


def temperature_to_color(temp: float) -> Tuple[int, int, int]:
    """
    Map a temperature onto the blue-to-red display scale.

    Temperatures outside the slider range are clamped to its ends.

    Returns:
        (r, g, b) integers in 0-255
    """
    span = MAX_DISPLAY_TEMP - MIN_DISPLAY_TEMP
    t = (clamp(temp, MIN_DISPLAY_TEMP, MAX_DISPLAY_TEMP) - MIN_DISPLAY_TEMP) / span
    return tuple(
        int(math.floor(c + (h - c) * t + 0.5)) for c, h in zip(COLD_RGB, HOT_RGB)
    )
