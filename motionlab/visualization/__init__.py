"""
Projection and frame description
"""
