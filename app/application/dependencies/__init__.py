"""Application service dependencies and factories."""

from .candidate_profile_dependencies import CandidateProfileDependencies

__all__ = [
    "CandidateProfileDependencies",
]
