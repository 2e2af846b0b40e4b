"""Meshes, materials, vehicle and floor settings, driver input and race clock for a vehicle driving demo."""

__version__ = "0.1.0"
__all__ = ["geometry", "timer", "materials", "controls", "vehicle", "chrono"]