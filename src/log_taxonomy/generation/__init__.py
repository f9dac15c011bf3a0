"""Generation – tokenize, normalise, build, compose paths, emit facades.

The end-to-end entry point lives in :mod:`log_taxonomy.generation.pipeline`.
"""

from log_taxonomy.generation.tokenizer import SEPARATOR, tokenize
from log_taxonomy.generation.naming import NameAllocator, normalize
from log_taxonomy.generation.paths import compose_path
from log_taxonomy.generation.builder import build
from log_taxonomy.generation.emitter import FacadeDescription, FacadeEmitter, emit

__all__ = [
    "SEPARATOR",
    "FacadeDescription",
    "FacadeEmitter",
    "NameAllocator",
    "build",
    "compose_path",
    "emit",
    "normalize",
    "tokenize",
]
