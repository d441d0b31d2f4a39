#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module
================================================================================

Project:        Thermal Contact Canvas
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Rendering of a simulation snapshot with Matplotlib:
- The two containers, filled with their temperature color
- The heat flow band, arrow and particles
- The temperature vs time graph
- PNG export for Streamlit and GIF animation for the CLI

Nothing here writes to the simulation; everything reads a Snapshot.
"""

import io
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.patches import FancyBboxPatch, Polygon
from typing import Tuple, Optional
from dataclasses import dataclass

from .physics import (
    MIN_DISPLAY_TEMP,
    MAX_DISPLAY_TEMP,
    temperature_to_color
)
from .particles import ContactGeometry
from .simulation import Snapshot, Status, Stepper


STATUS_LABELS = {
    Status.READY: "Ready",
    Status.RUNNING: "Running",
    Status.PAUSED: "Paused",
    Status.EQUILIBRIUM: "Thermal equilibrium",
    Status.COMPLETED: "Completed",
}


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    background_color: str = "#eef4ff"
    graph_background: str = "#f9fbff"
    container_edge: str = "#9ab0c9"
    text_color: str = "#12213d"
    flow_color: str = "#f59e0b"
    hot_line_color: str = "#d90429"
    cold_line_color: str = "#1d4ed8"
    axis_color: str = "#b9cbe0"
    hot_title: str = "Hot container"
    cold_title: str = "Cold container"
    min_graph_time: float = 8.0
    graph_time_padding: float = 0.8
    particle_size: float = 22.0
    figsize: Tuple[int, int] = (10, 7)


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    """Format an (r, g, b) tuple as a hex color string."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def status_label(status: Status) -> str:
    """Display text for a run status."""
    return STATUS_LABELS[status]


def _draw_container(
    ax: plt.Axes,
    x: float,
    y: float,
    geometry: ContactGeometry,
    temp: float,
    title: str,
    config: VisualizationConfig
) -> None:
    w = geometry.container_width
    h = geometry.container_height

    ax.add_patch(FancyBboxPatch(
        (x, y), w, h,
        boxstyle="round,pad=0,rounding_size=16",
        facecolor="white", edgecolor=config.container_edge, linewidth=3
    ))

    # Liquid fill, 70% of the container height
    fill_h = h * 0.7
    ax.add_patch(FancyBboxPatch(
        (x + 10, y + h - fill_h - 8), w - 20, fill_h,
        boxstyle="round,pad=0,rounding_size=10",
        facecolor=rgb_to_hex(temperature_to_color(temp)),
        edgecolor="none", alpha=0.9
    ))

    ax.text(x + 12, y + 24, title, color=config.text_color,
            fontsize=11, fontweight="bold")
    ax.text(x + 12, y + h - 14, f"{temp:.1f} °C", color=config.text_color,
            fontsize=12, fontweight="bold")


def _draw_heat_flow(
    ax: plt.Axes,
    snapshot: Snapshot,
    geometry: ContactGeometry,
    config: VisualizationConfig
) -> None:
    x0, x1 = geometry.flow_band(snapshot.contact_progress)
    cy = geometry.center_y
    band_half = geometry.band_half + 1

    ax.add_patch(FancyBboxPatch(
        (x0, cy - band_half), x1 - x0, band_half * 2,
        boxstyle="round,pad=0,rounding_size=10",
        facecolor=config.flow_color, edgecolor="none", alpha=0.13
    ))
    ax.plot([x0, x1], [cy, cy], color=config.flow_color, linewidth=3)

    arrow_x = x1 - 8
    ax.add_patch(Polygon(
        [(arrow_x, cy), (arrow_x - 14, cy - 8), (arrow_x - 14, cy + 8)],
        closed=True, facecolor=config.flow_color, edgecolor="none"
    ))

    if len(snapshot.particles) > 0:
        ax.scatter(
            snapshot.particles[:, 0], snapshot.particles[:, 1],
            s=config.particle_size, c=config.flow_color, alpha=0.9,
            edgecolors="none", zorder=5
        )


def render_containers(
    snapshot: Snapshot,
    geometry: Optional[ContactGeometry] = None,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Draw both containers, the flow band and the heat particles.

    Args:
        snapshot: Simulation snapshot
        geometry: Container layout (canvas pixel units, y pointing down)
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if geometry is None:
        geometry = ContactGeometry()
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(config.figsize[0], 3))
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)

    left_x = geometry.left_x
    right_x = geometry.right_x(snapshot.contact_progress)
    _draw_container(ax, left_x, geometry.base_y, geometry, snapshot.hot_temp,
                    config.hot_title, config)
    _draw_container(ax, right_x, geometry.base_y, geometry, snapshot.cold_temp,
                    config.cold_title, config)

    if snapshot.contact_progress >= 0.02:
        _draw_heat_flow(ax, snapshot, geometry, config)

    ax.text(34, 34, "Heat flows from hot to cold", color=config.text_color,
            fontsize=11, fontweight="bold")

    ax.set_xlim(0, geometry.canvas_width)
    ax.set_ylim(geometry.canvas_height, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def render_temperature_graph(
    snapshot: Snapshot,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render both temperatures against time.

    The time axis spans at least `min_graph_time` seconds and grows with
    the run; the temperature axis is fixed to the slider range.

    Args:
        snapshot: Simulation snapshot
        config: Visualization configuration
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(config.figsize[0], 4))
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.graph_background)

    times, hot, cold = snapshot.history_arrays()
    ax.plot(times, hot, color=config.hot_line_color, linewidth=2.6, label="Hot")
    ax.plot(times, cold, color=config.cold_line_color, linewidth=2.6, label="Cold")

    if snapshot.equilibrium_time is not None:
        ax.axvline(snapshot.equilibrium_time, color=config.axis_color,
                   linestyle="--", linewidth=1)
    ax.axhline(snapshot.equilibrium_temperature, color=config.axis_color,
               linestyle=":", linewidth=1)

    max_time = max(config.min_graph_time, snapshot.elapsed_time + config.graph_time_padding)
    ax.set_xlim(0, max_time)
    ax.set_ylim(MIN_DISPLAY_TEMP, MAX_DISPLAY_TEMP)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Temperature (°C)")
    ax.legend(loc="upper right")
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)

    return fig


def render_dashboard(
    snapshot: Snapshot,
    geometry: Optional[ContactGeometry] = None,
    config: Optional[VisualizationConfig] = None
) -> plt.Figure:
    """
    Render the containers above the temperature graph in one figure.

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    fig, (ax_scene, ax_graph) = plt.subplots(
        2, 1, figsize=config.figsize, gridspec_kw={"height_ratios": [1, 1.3]}
    )
    render_containers(snapshot, geometry, config, ax=ax_scene)
    render_temperature_graph(snapshot, config, ax=ax_graph)
    ax_graph.set_title(
        f"{status_label(snapshot.status)}  |  t = {snapshot.elapsed_time:.2f} s  |  "
        f"T_eq = {snapshot.equilibrium_temperature:.2f} °C",
        fontsize=10
    )

    fig.patch.set_facecolor(config.background_color)
    plt.tight_layout()

    return fig


def figure_to_png(fig: plt.Figure, dpi: int = 100) -> bytes:
    """
    Render a figure to PNG bytes and close it.

    Returns:
        PNG image as bytes
    """
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, facecolor=fig.get_facecolor(),
                edgecolor="none", bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()


def create_animation(
    stepper: Stepper,
    n_frames: int,
    dt: float = 1 / 30,
    geometry: Optional[ContactGeometry] = None,
    config: Optional[VisualizationConfig] = None,
    fps: int = 30
) -> animation.FuncAnimation:
    """
    Animate a run frame by frame.

    The stepper is started and advanced by one `dt` per animation frame,
    so the animation drives the simulation the same way the app does.

    Args:
        stepper: Simulation to animate
        n_frames: Number of frames
        dt: Simulated seconds per frame
        geometry: Container layout
        config: Visualization configuration
        fps: Frames per second of the output

    Returns:
        Matplotlib animation
    """
    if config is None:
        config = VisualizationConfig()

    fig, (ax_scene, ax_graph) = plt.subplots(
        2, 1, figsize=config.figsize, gridspec_kw={"height_ratios": [1, 1.3]}
    )
    fig.patch.set_facecolor(config.background_color)
    stepper.state.start()

    def update(frame):
        stepper.step(dt)
        snapshot = stepper.snapshot()
        render_containers(snapshot, geometry, config, ax=ax_scene)
        render_temperature_graph(snapshot, config, ax=ax_graph)
        return ax_scene, ax_graph

    ani = animation.FuncAnimation(
        fig, update, frames=n_frames, interval=1000 / fps, blit=False
    )

    return ani
