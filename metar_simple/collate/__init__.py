"""
Consolidation of a report's groups into the six aggregates.

``ScopeTracker`` follows which part of the report a group is in;
``Consolidator`` drives the builders over the group sequence and
``simplify`` is the never-raising entry point.
"""

from .scope import GroupRole, Scope, ScopeTracker
from .driver import Consolidator, simplify

__all__ = [
    # Report parts
    'GroupRole',
    'Scope',
    'ScopeTracker',
    # Driver
    'Consolidator',
    'simplify',
]
