"""Explore entity use case package."""

from .errors import ExpansionFailedError, StaleExpansionError
from .explore_entity_usecase import ExploreEntityUseCaseImpl

__all__ = [
    "ExploreEntityUseCaseImpl",
    "ExpansionFailedError",
    "StaleExpansionError",
]
