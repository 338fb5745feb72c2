# -*- coding: utf-8 -*-
"""
Set of configuration for this project.
"""
from .config import DEFAULT_SIDE_SIZE, LOG_FORMAT, BoardConfiguration

__all__ = ["BoardConfiguration", "DEFAULT_SIDE_SIZE", "LOG_FORMAT"]
