"""Kernel – error hierarchy and the immutable source/taxonomy model."""

from log_taxonomy.kernel.errors import (
    BaseError,
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
