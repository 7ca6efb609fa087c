"""API layer converters for domain-to-API payload transformations.

This module contains helper functions for converting application results
into camelCase response payloads. These are API-layer concerns and kept
separate from the routers to maintain slim controllers.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from app.application.candidate_profile_service import (
    AnonymityToggleResult,
    OwnProfileResult,
    UnlockedProfileResult,
    VisibilityResult,
)
from app.domain.entities.candidate_profile import CandidateProfile, Tag
from app.domain.services.profile_redaction_service import DEFAULT_CURRENCY, parse_salary_amount

# NUMERIC columns other than salary follow the same parsing rules
_to_number = parse_salary_amount


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _tag_to_dict(tag: Tag) -> Dict[str, Any]:
    return {
        "id": str(tag.id),
        "name": tag.name,
        "category": tag.category,
        "proficiency": tag.proficiency,
        "yearsExperience": tag.years_experience,
        "isEndorsed": tag.is_endorsed,
    }


def _salary_to_dict(profile: CandidateProfile) -> Dict[str, Any]:
    return {
        "min": parse_salary_amount(profile.salary_min),
        "max": parse_salary_amount(profile.salary_max),
        "currency": profile.salary_currency or DEFAULT_CURRENCY,
    }


def own_profile_to_dict(result: OwnProfileResult) -> Dict[str, Any]:
    """
    Build the owner's unredacted profile payload.

    Args:
        result: Profile with children and the full completion breakdown

    Returns:
        camelCase payload including every editable field
    """
    profile = result.profile
    return {
        "id": str(profile.id),
        "userId": str(profile.user_id),
        "title": profile.title,
        "summary": profile.summary,
        "experience": profile.experience,
        "location": profile.location,
        "remotePreference": profile.remote_preference,
        "salaryMin": parse_salary_amount(profile.salary_min),
        "salaryMax": parse_salary_amount(profile.salary_max),
        "salaryCurrency": profile.salary_currency,
        "availability": profile.availability,
        "isAnonymized": profile.is_anonymized,
        "isActive": profile.is_active,
        "profileCompleted": profile.profile_completed,
        "linkedinUrl": profile.linkedin_url,
        "githubUrl": profile.github_url,
        "portfolioUrl": profile.portfolio_url,
        "resumeUrl": profile.resume_url,
        "skills": [_tag_to_dict(tag) for tag in profile.tags],
        "workExperiences": [item.to_dict() for item in profile.work_experiences],
        "education": [item.to_dict() for item in profile.education],
        "profileCompletion": result.completion.to_dict(),
        "createdAt": _iso(profile.created_at),
        "updatedAt": _iso(profile.updated_at),
    }


def visibility_to_dict(result: VisibilityResult) -> Dict[str, Any]:
    return {
        "isAnonymized": result.is_anonymized,
        "isActive": result.is_active,
        **result.settings.to_metadata(),
        "updatedAt": _iso(result.updated_at),
    }


def anonymity_toggle_to_dict(result: AnonymityToggleResult) -> Dict[str, Any]:
    return {
        "isAnonymized": result.is_anonymized,
        "previousState": result.previous_state,
        "updatedAt": _iso(result.updated_at),
    }


def unlocked_profile_to_dict(result: UnlockedProfileResult) -> Dict[str, Any]:
    """Full profile shown to a company after purchase; nothing is redacted."""
    profile = result.profile
    owner = profile.owner
    purchase = result.purchase
    return {
        "id": str(profile.id),
        "title": profile.title,
        "summary": profile.summary,
        "experience": profile.experience,
        "location": profile.location,
        "remotePreference": profile.remote_preference,
        "availability": profile.availability,
        "contact": {
            "firstName": owner.first_name if owner else None,
            "lastName": owner.last_name if owner else None,
            "email": owner.email if owner else None,
            "profileImage": owner.image_url if owner else None,
            "linkedinUrl": profile.linkedin_url,
            "githubUrl": profile.github_url,
            "portfolioUrl": profile.portfolio_url,
        },
        "salary": _salary_to_dict(profile),
        "skills": [_tag_to_dict(tag) for tag in profile.tags],
        "workExperience": [item.to_dict() for item in profile.work_experiences],
        "education": [
            {**item.to_dict(), "gpa": _to_number(item.gpa)} for item in profile.education
        ],
        "documents": {
            "resumeUrl": profile.resume_url,
            "portfolioUrl": profile.portfolio_url,
        },
        "profileCompletion": result.completion.to_dict(),
        "isAnonymized": False,
        "lastUpdated": _iso(profile.updated_at),
        "purchase": {
            "purchaseDate": _iso(purchase.created_at),
            "paymentId": purchase.payment_id,
            "amount": _to_number(purchase.payment_amount),
            "currency": purchase.currency,
        },
    }


__all__ = [
    "anonymity_toggle_to_dict",
    "own_profile_to_dict",
    "unlocked_profile_to_dict",
    "visibility_to_dict",
]
