"""
Settings and seed-data configuration.
"""

from .loader import SettingsLoader, load_owners
from .settings import ImportSettings

__all__ = ["ImportSettings", "SettingsLoader", "load_owners"]
