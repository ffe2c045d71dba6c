"""
Storage Package

In-memory lookup of persons by ID. There is no persistent storage.
"""

from domain_model.storage.registry import PersonRegistry

__all__ = ["PersonRegistry"]
