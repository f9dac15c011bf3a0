"""Kernel model – immutable event sources, taxonomy nodes and diagnostics."""

from log_taxonomy.kernel.model.diagnostics import Diagnostic, DiagnosticDescriptor, Severity
from log_taxonomy.kernel.model.source import EventDefinitionSource, Member
from log_taxonomy.kernel.model.taxonomy import AreaNode, EventNode, GroupNode, RootNode, TaxonomyNode

__all__ = [
    "AreaNode",
    "Diagnostic",
    "DiagnosticDescriptor",
    "EventDefinitionSource",
    "EventNode",
    "GroupNode",
    "Member",
    "RootNode",
    "Severity",
    "TaxonomyNode",
]
