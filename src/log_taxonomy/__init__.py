"""
log_taxonomy – typed logging facades from flat event definitions.

Import path convention::

    from log_taxonomy.runtime.discovery import log_event_source, describe
    from log_taxonomy.generation.pipeline import generate
    from log_taxonomy.runtime.facades import materialize
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
