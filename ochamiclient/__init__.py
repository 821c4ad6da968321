"""Async client for the OpenCHAMI power control and hardware state manager services."""

__version__ = "0.5.0"