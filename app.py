#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermal Contact Canvas - Interactive Streamlit Application
================================================================================

Project:        Thermal Contact Canvas
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This is the Streamlit application for the Thermal Contact Canvas.
Users can:
- Choose the starting temperatures of a hot and a cold container
- Bring the containers into contact and watch heat flow between them
- Pause, resume and reset the run
- Follow both temperatures on a live graph
"""

import streamlit as st
import matplotlib.pyplot as plt
import time

from thermal_contact.logging_config import setup_logging
from thermal_contact.simulation import FrameClock, Status, create_simulation
from thermal_contact.visualization import (
    VisualizationConfig, render_containers, render_temperature_graph,
    figure_to_png, status_label
)


# Page configuration
st.set_page_config(
    page_title="Thermal Contact Canvas",
    page_icon="🌡️",
    layout="wide",
    initial_sidebar_state="expanded"
)

STATUS_ICONS = {
    Status.READY: "⚪",
    Status.RUNNING: "🟠",
    Status.PAUSED: "⏸️",
    Status.EQUILIBRIUM: "🟢",
    Status.COMPLETED: "✅",
}


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'simulation' not in st.session_state:
        setup_logging()
        st.session_state.simulation = create_simulation(80.0, 20.0)
    if 'clock' not in st.session_state:
        st.session_state.clock = FrameClock(max_dt=st.session_state.simulation.config.max_dt)
    if 'inputs' not in st.session_state:
        st.session_state.inputs = (80.0, 20.0)
    if 'vis_config' not in st.session_state:
        st.session_state.vis_config = VisualizationConfig()


def render_sidebar():
    """Render the sidebar with the temperature sliders."""
    st.sidebar.title("🌡️ Thermal Contact Canvas")

    st.sidebar.markdown("""
    ---
    ### About This Simulation

    Two containers at different temperatures are brought into contact.
    Heat flows from the hot one to the cold one at a rate proportional to
    their temperature difference:

    $$\\frac{dT_{hot}}{dt} = -k\\,(T_{hot} - T_{cold})$$

    Both temperatures relax toward their **mean**, the equilibrium temperature.

    ---
    """)

    st.sidebar.subheader("⚙️ Initial Temperatures")

    hot = st.sidebar.slider(
        "Hot container (°C)",
        min_value=0, max_value=100, value=80, step=1,
        help="Starting temperature of the left container"
    )
    cold = st.sidebar.slider(
        "Cold container (°C)",
        min_value=0, max_value=100, value=20, step=1,
        help="Starting temperature of the right container"
    )

    sim = st.session_state.simulation
    if (float(hot), float(cold)) != st.session_state.inputs:
        st.session_state.inputs = (float(hot), float(cold))
        sim.state.set_inputs(hot, cold)
        if not sim.state.running:
            st.session_state.clock.reset()

    if hot <= cold:
        st.sidebar.warning(
            f"The hot container must be hotter; it will start at {cold + 1} °C."
        )

    st.sidebar.markdown("---")
    st.sidebar.markdown("""
    ### 👤 Author
    **Ryan Kamp**
    University of Cincinnati
    Department of Computer Science
    📧 kamprj@mail.uc.edu
    🔗 [GitHub](https://github.com/ryanjosephkamp)
    """)


def render_main_content():
    """Render the containers, controls and graph."""
    sim = st.session_state.simulation
    state = sim.state

    st.title("🌡️ Thermal Contact Canvas")

    btn_col1, btn_col2, btn_col3, btn_col4 = st.columns(4)

    with btn_col1:
        run_label = "⏸️ Pause" if state.running else "▶️ Start"
        if st.button(run_label, use_container_width=True, key="start_pause_btn"):
            state.toggle()
            st.rerun()

    with btn_col2:
        if st.button("🔄 Reset", use_container_width=True):
            state.reset()
            st.session_state.clock.reset()
            st.rerun()

    with btn_col3:
        st.metric("Time (s)", f"{state.elapsed_time:.2f}")

    with btn_col4:
        st.metric("Equilibrium (°C)", f"{state.equilibrium_temperature:.2f}")

    if state.running:
        sim.step(st.session_state.clock.tick(time.perf_counter()))

    snapshot = sim.snapshot()
    vis_config = st.session_state.vis_config

    st.markdown(f"**Status:** {STATUS_ICONS[snapshot.status]} {status_label(snapshot.status)}")

    fig = render_containers(snapshot, sim.geometry, vis_config)
    st.image(figure_to_png(fig), use_container_width=True)

    col1, col2 = st.columns([3, 1])

    with col1:
        fig, ax = plt.subplots(figsize=(10, 4))
        render_temperature_graph(snapshot, vis_config, ax=ax)
        plt.tight_layout()
        st.pyplot(fig)
        plt.close(fig)

    with col2:
        st.metric("Hot", f"{snapshot.hot_temp:.2f} °C")
        st.metric("Cold", f"{snapshot.cold_temp:.2f} °C")
        st.metric("ΔT", f"{snapshot.hot_temp - snapshot.cold_temp:.2f} °C")
        if snapshot.equilibrium_time is not None:
            st.metric("Equilibrium at", f"{snapshot.equilibrium_time:.2f} s")

    # Auto-refresh while running
    if snapshot.running:
        time.sleep(0.02)
        st.rerun()


def main():
    """Main application entry point."""
    initialize_session_state()
    render_sidebar()
    render_main_content()


if __name__ == "__main__":
    main()
