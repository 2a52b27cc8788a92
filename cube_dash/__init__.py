"""Cube Dash - a grid maze arcade game."""

__version__ = "0.1.0"
