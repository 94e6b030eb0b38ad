"""
MongoDB-backed demo portals: employee management, banking and student enrollment.
"""

__version__ = "1.0.0"
