"""Root-candidate providers.

Providers resolve a user selection into candidate root resources.
"""

from scopectl.providers.base import RootCandidateProvider
from scopectl.providers.explicit import ExplicitRootProvider
from scopectl.providers.working_sets import WorkingSetProvider, sort_working_sets

__all__ = [
    "ExplicitRootProvider",
    "RootCandidateProvider",
    "WorkingSetProvider",
    "sort_working_sets",
]
