"""Configuration package."""

from small_step_simple.config.settings import MachineSettings, load_settings

__all__ = [
    "MachineSettings",
    "load_settings",
]
