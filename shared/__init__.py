"""
PinPoint Shared Module
======================

Common utilities and configuration management shared across the
PinPoint toolkit: TOML configuration, structured logging, the Rich
console wrapper and numeric helpers.
"""

from shared.config import PinpointConfig

__all__ = ["PinpointConfig"]
