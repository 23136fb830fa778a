"""
Configuration loading for the Swedish holiday calculator.
"""

from swedish_holidays.config.manager import ConfigManager

__all__ = ["ConfigManager"]
