"""Domain layer package exposing pure business abstractions."""

from . import entities
from . import repositories
from .value_objects import CandidateId, CompanyId, TagId, UserId

__all__ = [
    "entities",
    "repositories",
    "CandidateId",
    "CompanyId",
    "TagId",
    "UserId",
]
