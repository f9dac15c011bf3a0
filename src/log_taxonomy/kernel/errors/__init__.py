"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── GenerationError          (generation.py)
    │   ├── EmptySourceError
    │   ├── InvalidEventValueError
    │   ├── InvalidFacadeNameError
    │   └── StructuralMisuseError
    └── ConfigError              (log_taxonomy.config.validation)
"""

from log_taxonomy.kernel.errors.base import BaseError
from log_taxonomy.kernel.errors.generation import (
    EmptySourceError,
    GenerationError,
    InvalidEventValueError,
    InvalidFacadeNameError,
    StructuralMisuseError,
)

__all__ = [
    "BaseError",
    "EmptySourceError",
    "GenerationError",
    "InvalidEventValueError",
    "InvalidFacadeNameError",
    "StructuralMisuseError",
]
