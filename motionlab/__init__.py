"""
Motion Lab - IMU visualization toolkit

Reads a 3-axis accelerometer/gyroscope and renders a set of small
visualizations on a 240x135 display: wireframe cube, bubble level, tilt
game, G-force peak meter, scrolling graph and raw readout.
"""

__version__ = "0.5.0"
