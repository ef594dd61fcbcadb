"""
Desktop GUI shell
"""
