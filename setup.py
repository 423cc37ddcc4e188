#!/usr/bin/env python3
"""
Setup script for Grave Finder.
Uses pyproject.toml for configuration.
"""

from setuptools import setup

setup()
