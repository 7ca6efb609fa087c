"""
Domain-level exceptions for the hexagonal architecture.

These exceptions represent business rule violations and domain logic errors.
They should be mapped to appropriate HTTP responses in the API layer.
"""

from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-level errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation rules are violated."""
    pass


class NotFoundError(DomainException):
    """Base exception for entities not found."""
    pass


class CandidateProfileNotFoundError(NotFoundError):
    """Raised when a candidate profile is not found."""
    pass


class AuthenticationRequiredError(DomainException):
    """Raised when an operation needs an authenticated caller."""
    pass


class AuthorizationError(DomainException):
    """Base exception for authorization errors."""
    pass


class CandidateRoleRequiredError(AuthorizationError):
    """Raised when the caller is not an active candidate user."""
    pass


class CompanyMembershipRequiredError(AuthorizationError):
    """Raised when the caller does not belong to a hiring company."""
    pass


class ProfileAccessNotPurchasedError(DomainException):
    """Raised when a company requests a profile it has not purchased."""

    def __init__(self, candidate_id: Optional[str] = None, company_id: Optional[str] = None):
        self.candidate_id = candidate_id
        self.company_id = company_id
        super().__init__("Profile access not purchased. Please complete payment first.")


class ConfigurationError(DomainException):
    """Raised when configuration is invalid or missing."""
    pass


__all__ = [
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "CandidateProfileNotFoundError",
    "AuthenticationRequiredError",
    "AuthorizationError",
    "CandidateRoleRequiredError",
    "CompanyMembershipRequiredError",
    "ProfileAccessNotPurchasedError",
    "ConfigurationError",
]
