"""
Keysmith Shared Module
=======================

Configuration, logging, console and result-envelope utilities used by
every Keysmith command.
"""

from shared.config import ForgeConfig

__all__ = ["ForgeConfig"]
