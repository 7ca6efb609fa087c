"""Domain services package."""

from .profile_completion_service import (
    CompletionResult,
    IProfileCompletionService,
    ProfileCompletionService,
)
from .profile_redaction_service import ProfileRedactionService, PublicProfileView, SalaryView
from .profile_response_assembler import ProfileResponseAssembler
from .viewer_classifier import ViewerClassifier

__all__ = [
    "CompletionResult",
    "IProfileCompletionService",
    "ProfileCompletionService",
    "ProfileRedactionService",
    "ProfileResponseAssembler",
    "PublicProfileView",
    "SalaryView",
    "ViewerClassifier",
]
