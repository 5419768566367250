#!/usr/bin/env python3
"""
Sleep Tracker Application.

A desktop application for recording nights of sleep and rating their quality.
"""

__version__ = "0.1.0"
__author__ = "Sleep Research Team"
__description__ = "Desktop sleep tracker with night history and quality ratings"
