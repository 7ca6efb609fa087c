"""Combines completion and redaction output into the public profile payload."""

from __future__ import annotations

from typing import Any, Dict

from app.domain.entities.candidate_profile import CandidateProfile
from app.domain.entities.viewer import ViewerContext
from app.domain.services.profile_completion_service import CompletionResult
from app.domain.services.profile_redaction_service import PublicProfileView


class ProfileResponseAssembler:
    """Straight merge of the redacted view with operational flags."""

    def assemble(
        self,
        profile: CandidateProfile,
        completion: CompletionResult,
        redacted: PublicProfileView,
        viewer: ViewerContext,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"id": str(profile.id)}
        payload.update(redacted.to_dict())
        payload.update(
            {
                # Operational metadata, never redacted for any viewer.
                "profileCompletion": {
                    "overallPercentage": completion.overall_percentage,
                    "isCompleted": completion.is_completed,
                },
                "isActive": profile.is_active,
                "isAnonymized": profile.is_anonymized,
                "isOwnProfile": viewer.is_profile_owner,
                "isUnlocked": viewer.has_purchased_access,
            }
        )
        return payload


__all__ = ["ProfileResponseAssembler"]
