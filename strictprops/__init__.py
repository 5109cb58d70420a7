"""\
strictprops
===========

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Saturday, August 09 2025

Strict property access for Python objects.

This package (strictprops) closes the set of fields of a class. Reading
an attribute the class never declared, or assigning one that would
create a new field, is a violation. Violations are recorded, announced
to a pluggable observer, and reported through a layered pipeline: an
optional override hook on the class, then either a raised error or a
printed and logged report.

.. code-block:: python

    from strictprops import StrictModel

    class User(StrictModel):
        name: str
        email: str

    user = User(name="Mikasa", email="mikasa@paradis.io")
    user.age
    # Prop 'age' does not exist!!!
    user.get_invalid_accesses()
    # ['age']
"""

from __future__ import annotations

from .core import *
from .utils import *


__all__: tuple[str, ...] = ("__version__",)
__all__ += core.__all__
__all__ += utils.__all__

__version__: str = "9.8.2025"
