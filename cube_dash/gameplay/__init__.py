"""
Simulation core for Cube Dash.
NO UI DEPENDENCIES.
"""
