#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermal Contact Canvas
================================================================================

Project:        Thermal Contact Canvas
Description:    Interactive visualization of a hot and a cold body reaching
                thermal equilibrium through heat conduction

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This package implements a two-body heat exchange demonstration featuring:
- Linear relaxation of two temperatures toward their mean
- A run state machine: ready, contact, exchange, equilibrium, completed
- Decimated temperature histories for plotting
- Cosmetic heat particles streaming from hot to cold

Modules:
    - physics: Heat exchange law and analytical solution
    - particles: Container layout and heat particle animation
    - simulation: Simulation state, transitions and the frame stepper
    - visualization: Matplotlib rendering of containers and graphs
    - logging_config: Logger setup for the entry points
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
