"""
Persistent storage for Motion Lab
"""

from .preferences import Preferences, default_prefs_dir

__all__ = ['Preferences', 'default_prefs_dir']
