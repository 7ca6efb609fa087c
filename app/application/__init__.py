"""Application layer entry points.

Holds use-case services that coordinate domain logic with adapters.

Services are imported directly from their modules to avoid circular imports:
    from app.application.candidate_profile_service import CandidateProfileApplicationService
"""
