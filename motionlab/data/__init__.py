"""
Sensor data structures
"""
