"""
Domain Interfaces (Ports)
"""

from .repositories import BranchRepository, CounterRepository, UserRepository

__all__ = [
    "BranchRepository",
    "CounterRepository",
    "UserRepository",
]
