"""
Built-in functions and constants.

Each module exposes ``register(registry)``; ``get_registry()`` calls every
module listed in ``BUILTIN_MODULES``.
"""

from . import constants, elementary, linalg, special, statistics

BUILTIN_MODULES = (
    constants,
    elementary,
    statistics,
    linalg,
    special,
)
