"""
Shared constants and helpers
"""
