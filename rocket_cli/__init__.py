"""Rocket CLI -- generate new Cargo projects with Rocket dependencies."""

__version__ = "0.1.0"
