"""\
Core
====

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Saturday, August 09 2025

This module acts as an entry point for combining the access guard, the
field registry, the logger and observer capabilities, and the
configurations used throughout this package.
"""

from __future__ import annotations

from .base import *
from .config import *
from .error import *
from .events import *
from .guard import *
from .loggers import *
from .model import *
from .observers import *
from .registry import *


__all__: tuple[str, ...] = (
    *base.__all__,
    *config.__all__,
    *error.__all__,
    *events.__all__,
    *guard.__all__,
    *loggers.__all__,
    *model.__all__,
    *observers.__all__,
    *registry.__all__,
)
