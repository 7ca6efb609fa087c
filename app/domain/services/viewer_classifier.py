"""Derives the viewer class for a profile request."""

from __future__ import annotations

from app.domain.entities.candidate_profile import CandidateProfile
from app.domain.entities.viewer import RequestAuth, ViewerContext


class ViewerClassifier:
    """Builds a :class:`ViewerContext` from auth state and a purchase fact."""

    def classify(
        self,
        profile: CandidateProfile,
        request_auth: RequestAuth,
        has_purchased_access: bool = False,
    ) -> ViewerContext:
        viewer_user_id = request_auth.user_id if request_auth else None
        is_authenticated = viewer_user_id is not None

        # Ownership is decided on the joined owner record only; without it we fail closed.
        owner = profile.owner
        is_profile_owner = bool(
            is_authenticated
            and owner is not None
            and owner.user_id is not None
            and str(owner.user_id) == viewer_user_id
        )

        return ViewerContext(
            is_authenticated=is_authenticated,
            is_profile_owner=is_profile_owner,
            has_purchased_access=bool(has_purchased_access),
            viewer_user_id=viewer_user_id,
        )


__all__ = ["ViewerClassifier"]
