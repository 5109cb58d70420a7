"""\
Utilities
=========

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Thursday, August 07 2025

This module acts as an entry point for combining various utilities used
throughout the package. The `OpenTelemetry` helpers live in
`strictprops.utils.opentelemetry` and are imported explicitly.
"""

from __future__ import annotations

from .logging import *


__all__: tuple[str, ...] = tuple(logging.__all__)
