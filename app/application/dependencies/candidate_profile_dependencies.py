"""Dependency contracts for CandidateProfileApplicationService."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.repositories.candidate_profile_repository import ICandidateProfileRepository
from app.domain.repositories.profile_purchase_repository import IProfilePurchaseRepository
from app.domain.repositories.user_repository import IUserRepository
from app.domain.services.profile_completion_service import (
    IProfileCompletionService,
    ProfileCompletionService,
)
from app.domain.services.profile_redaction_service import ProfileRedactionService
from app.domain.services.profile_response_assembler import ProfileResponseAssembler
from app.domain.services.viewer_classifier import ViewerClassifier


@dataclass
class CandidateProfileDependencies:
    """Dependencies required by CandidateProfileApplicationService."""

    # Repositories
    profile_repository: ICandidateProfileRepository
    user_repository: IUserRepository
    purchase_repository: IProfilePurchaseRepository

    # Pure domain services
    completion_service: IProfileCompletionService = field(default_factory=ProfileCompletionService)
    viewer_classifier: ViewerClassifier = field(default_factory=ViewerClassifier)
    redaction_service: ProfileRedactionService = field(default_factory=ProfileRedactionService)
    response_assembler: ProfileResponseAssembler = field(default_factory=ProfileResponseAssembler)


__all__ = ["CandidateProfileDependencies"]
