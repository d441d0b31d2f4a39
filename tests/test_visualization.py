#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import matplotlib.animation as animation
import pytest
from thermal_contact.simulation import Status, create_simulation
from thermal_contact.visualization import (
    STATUS_LABELS, VisualizationConfig, rgb_to_hex, status_label,
    render_containers, render_temperature_graph, render_dashboard,
    figure_to_png, create_animation
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def running_simulation(n_steps: int = 80):
    sim = create_simulation(80.0, 20.0, seed=0)
    sim.state.start()
    sim.run(n_steps, 0.02)
    return sim


class TestHelpers:
    """Tests for small formatting helpers."""

    def test_rgb_to_hex(self):
        assert rgb_to_hex((35, 107, 255)) == "#236bff"
        assert rgb_to_hex((0, 0, 0)) == "#000000"

    def test_every_status_has_label(self):
        for status in Status:
            assert status_label(status) == STATUS_LABELS[status]
        assert status_label(Status.COMPLETED) == "Completed"


class TestRenderContainers:
    """Tests for drawing the containers."""

    def test_before_contact_no_flow_band(self):
        """At rest only the two containers and their fills are drawn."""
        snap = create_simulation(80.0, 20.0).snapshot()
        fig = render_containers(snap)
        ax = fig.axes[0]
        assert len(ax.patches) == 4
        assert len(ax.lines) == 0

    def test_flow_drawn_after_contact(self):
        sim = running_simulation()
        fig = render_containers(sim.snapshot(), sim.geometry)
        ax = fig.axes[0]
        # Containers, fills, flow band and arrow head
        assert len(ax.patches) == 6
        assert len(ax.lines) == 1

    def test_axes_follow_canvas(self):
        sim = running_simulation(10)
        fig = render_containers(sim.snapshot(), sim.geometry)
        ax = fig.axes[0]
        assert ax.get_xlim() == (0.0, sim.geometry.canvas_width)
        assert ax.get_ylim() == (sim.geometry.canvas_height, 0.0)

    def test_draws_on_existing_axes(self):
        fig, ax = plt.subplots()
        result = render_containers(create_simulation().snapshot(), ax=ax)
        assert result is fig


class TestRenderTemperatureGraph:
    """Tests for the temperature vs time graph."""

    def test_two_curves(self):
        sim = running_simulation()
        fig = render_temperature_graph(sim.snapshot())
        ax = fig.axes[0]
        labels = [line.get_label() for line in ax.lines]
        assert "Hot" in labels and "Cold" in labels

    def test_minimum_time_axis(self):
        fig = render_temperature_graph(create_simulation().snapshot())
        assert fig.axes[0].get_xlim() == (0.0, 8.0)
        assert fig.axes[0].get_ylim() == (0.0, 100.0)

    def test_time_axis_grows(self):
        sim = create_simulation(80.0, 20.0)
        sim.run_until_settled(0.02)
        snap = sim.snapshot()
        fig = render_temperature_graph(snap, VisualizationConfig())
        assert fig.axes[0].get_xlim()[1] == pytest.approx(snap.elapsed_time + 0.8)


class TestExport:
    """Tests for dashboard, PNG and animation output."""

    def test_dashboard_has_two_panels(self):
        sim = running_simulation()
        fig = render_dashboard(sim.snapshot(), sim.geometry)
        assert len(fig.axes) == 2

    def test_png_bytes(self):
        sim = running_simulation(10)
        data = figure_to_png(render_containers(sim.snapshot(), sim.geometry))
        assert data[:8] == b"\x89PNG\r\n\x1a\n"

    def test_animation_drives_simulation(self):
        sim = create_simulation(80.0, 20.0, seed=0)
        ani = create_animation(sim, n_frames=5, dt=0.02)
        assert isinstance(ani, animation.FuncAnimation)
        assert sim.state.running is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
