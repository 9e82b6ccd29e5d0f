"""Domain layer package exposing pure business abstractions."""

from . import interfaces
from . import entities
from . import repositories
from .value_objects import CVId, JobSpecId, UserId

__all__ = [
    "entities",
    "interfaces",
    "repositories",
    "CVId",
    "JobSpecId",
    "UserId",
]
