#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermal Contact Canvas - Command Line Interface
================================================================================

Project:        Thermal Contact Canvas
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Command line interface for running the thermal contact simulation headless,
exporting its temperature graph and animation, or launching the web app.
"""

import argparse
import logging
import numpy as np
import matplotlib.pyplot as plt
import time

from thermal_contact.logging_config import setup_logging
from thermal_contact.physics import analytical_temperatures, time_to_equilibrium
from thermal_contact.simulation import create_simulation
from thermal_contact.visualization import (
    VisualizationConfig, render_dashboard, create_animation, status_label
)


def run_equilibrium_report(
    init_hot: float = 80.0,
    init_cold: float = 20.0,
    dt: float = 1 / 60,
    seed: int = 0
):
    """
    Run one complete simulation and compare it with the exact solution.

    Args:
        init_hot: Starting hot temperature
        init_cold: Starting cold temperature
        dt: Frame delta in seconds
        seed: Particle generator seed
    """
    print("=" * 60)
    print("Thermal Contact Canvas - Equilibrium Run")
    print("=" * 60)

    sim = create_simulation(init_hot, init_cold, seed=seed)
    state = sim.state
    config = sim.config

    print(f"\nHot body:  {state.init_hot:.2f} °C")
    print(f"Cold body: {state.init_cold:.2f} °C")
    print(f"Expected equilibrium temperature: {state.equilibrium_temperature:.2f} °C")

    predicted = config.contact_duration + time_to_equilibrium(
        state.init_hot - state.init_cold,
        config.equilibrium_tolerance,
        config.transfer_rate
    )

    t_start = time.time()
    sim.run_until_settled(dt)
    t_end = time.time()

    print(f"\nSimulated {state.elapsed_time:.2f} s in {t_end - t_start:.3f} s wall time")
    print(f"Status:               {status_label(state.status)}")
    if state.equilibrium_reached:
        print(f"Equilibrium reached:  {state.equilibrium_time:.2f} s (predicted {predicted:.2f} s)")
    else:
        print(f"Equilibrium not reached (predicted {predicted:.2f} s)")
    print(f"Final temperatures:   {state.hot_temp:.3f} / {state.cold_temp:.3f} °C")
    print(f"History samples:      {len(state.hot_history)}")

    # Compare the integrated curve to the exact relaxation after contact
    times, hot, cold = sim.snapshot().history_arrays()
    after = times >= config.contact_duration
    exact_hot, _ = analytical_temperatures(
        times[after] - config.contact_duration,
        state.init_hot, state.init_cold, config.transfer_rate
    )
    max_error = float(np.max(np.abs(hot[after] - exact_hot))) if np.any(after) else 0.0
    print(f"\n  Max deviation from exact solution: {max_error:.4f} °C")

    if max_error < 0.5:
        print("  ✓ Integration agrees with the exact solution")
    else:
        print("  ⚠ Consider using a smaller time step")

    return sim


def run_plot(init_hot: float, init_cold: float, dt: float, seed: int, output: str):
    """Run to completion and save the dashboard figure."""
    sim = run_equilibrium_report(init_hot, init_cold, dt, seed)
    fig = render_dashboard(sim.snapshot(), sim.geometry, VisualizationConfig())
    fig.savefig(output, dpi=150)
    print(f"\nPlot saved to {output}")
    plt.show()


def run_animation(init_hot: float, init_cold: float, seed: int, n_frames: int = 360, fps: int = 30):
    """
    Create an animation of a full run.

    Args:
        init_hot: Starting hot temperature
        init_cold: Starting cold temperature
        seed: Particle generator seed
        n_frames: Number of animation frames
        fps: Frames per second (one simulation step per frame)
    """
    print("=" * 60)
    print("Thermal Contact Canvas - Animation")
    print("=" * 60)

    sim = create_simulation(init_hot, init_cold, seed=seed)

    print(f"Creating animation with {n_frames} frames...")
    ani = create_animation(sim, n_frames=n_frames, dt=1 / fps, geometry=sim.geometry, fps=fps)

    print("Saving animation (this may take a while)...")
    ani.save('thermal_contact.gif', writer='pillow', fps=fps)
    print("Animation saved to thermal_contact.gif")

    plt.show()


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Thermal Contact Canvas - Two-body heat exchange",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --run                 Run to equilibrium and print a report
  python main.py --plot                Also save the temperature graph
  python main.py --animate             Create animation
  python main.py --app                 Launch Streamlit app
        """
    )

    parser.add_argument('--run', action='store_true',
                       help='Run to equilibrium and print a report')
    parser.add_argument('--plot', action='store_true',
                       help='Run and save the dashboard figure')
    parser.add_argument('--animate', action='store_true',
                       help='Create animation')
    parser.add_argument('--app', action='store_true',
                       help='Launch Streamlit web app')
    parser.add_argument('--hot', type=float, default=80.0,
                       help='Initial hot temperature in °C (default: 80)')
    parser.add_argument('--cold', type=float, default=20.0,
                       help='Initial cold temperature in °C (default: 20)')
    parser.add_argument('--dt', type=float, default=1 / 60,
                       help='Frame delta in seconds, capped at 0.033 (default: 1/60)')
    parser.add_argument('--seed', type=int, default=0,
                       help='Seed for the heat particles (default: 0)')
    parser.add_argument('--output', '-o', default='thermal_contact.png',
                       help='Output file for --plot')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Enable debug logging')

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.run:
        run_equilibrium_report(args.hot, args.cold, args.dt, args.seed)
    elif args.plot:
        run_plot(args.hot, args.cold, args.dt, args.seed, args.output)
    elif args.animate:
        run_animation(args.hot, args.cold, args.seed)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --run, --plot, --animate, or --app")


if __name__ == "__main__":
    main()
