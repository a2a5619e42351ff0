"""
schedule-sync: tolerant schedule import and merge for the admin console.
"""

__version__ = "0.1.0"
