"""
Fake collaborators for testing the install flow without network, cache or
process side effects.
"""

from .collaborators import (
    FakeAcquirer,
    FakeProcessRunner,
    FakeSearchPath,
    FakeToolCache,
)

__all__ = [
    "FakeAcquirer",
    "FakeProcessRunner",
    "FakeSearchPath",
    "FakeToolCache",
]
