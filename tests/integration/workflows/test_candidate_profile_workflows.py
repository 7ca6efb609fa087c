"""
Integration tests for candidate profile HTTP workflows.

The full FastAPI app is exercised over an in-process ASGI transport with
in-memory repositories standing in for PostgreSQL. Bearer tokens are signed
with the configured secret so the real token verifier runs.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_candidate_profile_service
from app.application.candidate_profile_service import CandidateProfileApplicationService
from app.application.dependencies.candidate_profile_dependencies import CandidateProfileDependencies
from app.core.config import get_settings
from app.domain.entities.candidate_profile import UserRole
from app.domain.value_objects import CompanyId
from app.main import app
from tests.fixtures.candidate_fixtures import (
    CandidateProfileBuilder,
    make_education,
    make_owner,
    make_purchase,
    make_tag,
    make_work_experience,
)

OWNER_ID = "user_candidate"
COMPANY_USER_ID = "user_company"
STRANGER_ID = "user_stranger"


def bearer(user_id: str) -> dict:
    settings = get_settings()
    token = jwt.encode(
        {"sub": user_id, "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.SECRET_KEY,
        algorithm=settings.AUTH_JWT_ALGORITHM,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def candidate_owner():
    return make_owner(OWNER_ID)


@pytest.fixture
def profile(profile_repository, user_repository, candidate_owner):
    profile = (
        CandidateProfileBuilder()
        .with_owner(candidate_owner)
        .with_required_fields()
        .with_fields(
            salary_min="150000.00",
            salary_max="250000.00",
            linkedin_url="https://linkedin.com/in/jane",
            resume_url="https://files.example.com/jane.pdf",
        )
        .build()
    )
    profile_repository.add_test_profile(
        profile,
        tags=[make_tag("Audit", "skill", proficiency="expert"), make_tag("Fintech", "industry")],
        work_experiences=[make_work_experience()],
        education=[make_education()],
    )
    user_repository.add_test_user(candidate_owner)
    user_repository.add_test_user(make_owner(COMPANY_USER_ID, role=UserRole.COMPANY))
    return profile


@pytest.fixture
async def client(reset_provider_state, profile_repository, user_repository, purchase_repository):
    service = CandidateProfileApplicationService(
        CandidateProfileDependencies(
            profile_repository=profile_repository,
            user_repository=user_repository,
            purchase_repository=purchase_repository,
        )
    )
    app.dependency_overrides[get_candidate_profile_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def purchased(profile, purchase_repository):
    company_id = CompanyId(uuid4())
    purchase_repository.add_membership(COMPANY_USER_ID, company_id)
    purchase_repository.add_purchase(make_purchase(profile.id, company_id, COMPANY_USER_ID))
    return company_id


# ============================================================================
# Public profile view
# ============================================================================

class TestPublicProfileView:

    async def test_anonymous_visitor(self, client, profile):
        response = await client.get(f"/api/v1/search/profiles/{profile.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["id"] == str(profile.id)
        assert data["name"] == "Executive Profile"
        assert data["experience"] == "25+ years"
        assert data["availability"] == "3 months"
        assert "salary" not in data
        assert "linkedinUrl" not in data
        assert data["skills"] == ["Audit"]
        assert data["profileCompletion"] == {"overallPercentage": 88, "isCompleted": True}
        assert data["isOwnProfile"] is False

    async def test_signed_in_visitor_sees_salary_only(self, client, profile):
        response = await client.get(f"/api/v1/search/profiles/{profile.id}", headers=bearer(STRANGER_ID))

        data = response.json()["data"]
        assert data["salary"] == {"min": 150000.0, "max": 250000.0, "currency": "USD"}
        assert data["name"] == "Executive Profile"
        assert "email" not in data

    async def test_owner_sees_everything(self, client, profile):
        response = await client.get(f"/api/v1/search/profiles/{profile.id}", headers=bearer(OWNER_ID))

        data = response.json()["data"]
        assert data["isOwnProfile"] is True
        assert data["name"] == "Jane Doe"
        assert data["email"] == "jane@example.com"
        assert data["linkedinUrl"] == "https://linkedin.com/in/jane"

    async def test_purchasing_company_is_unlocked(self, client, profile, purchased):
        response = await client.get(f"/api/v1/search/profiles/{profile.id}", headers=bearer(COMPANY_USER_ID))

        data = response.json()["data"]
        assert data["isUnlocked"] is True

    async def test_unknown_profile(self, client):
        response = await client.get(f"/api/v1/search/profiles/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Profile not found", "status": 404}

    async def test_malformed_id_is_not_found(self, client):
        response = await client.get("/api/v1/search/profiles/not-a-uuid")

        assert response.status_code == 404

    async def test_invalid_token_is_rejected(self, client, profile):
        response = await client.get(
            f"/api/v1/search/profiles/{profile.id}",
            headers={"Authorization": "Bearer garbage"},
        )

        assert response.status_code == 401
        assert response.json()["success"] is False
        assert response.headers["www-authenticate"] == "Bearer"


# ============================================================================
# Candidate self-service
# ============================================================================

class TestCandidateSelfService:

    async def test_get_own_profile(self, client, profile):
        response = await client.get("/api/v1/candidates/profile", headers=bearer(OWNER_ID))

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile retrieved successfully"
        data = body["data"]
        assert data["salaryMin"] == 150000.0
        assert data["resumeUrl"] == "https://files.example.com/jane.pdf"
        assert data["skills"][0]["name"] == "Audit"
        assert data["skills"][0]["proficiency"] == "expert"
        assert data["profileCompletion"]["missingOptional"] == ["githubUrl", "portfolioUrl"]

    async def test_requires_authentication(self, client, profile):
        response = await client.get("/api/v1/candidates/profile")

        assert response.status_code == 401
        assert response.json()["error"] == "Authentication required"

    async def test_company_user_is_forbidden(self, client, profile):
        response = await client.get("/api/v1/candidates/profile", headers=bearer(COMPANY_USER_ID))

        assert response.status_code == 403

    async def test_update_profile(self, client, profile, profile_repository):
        response = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer(OWNER_ID),
            json={"title": "Non-Executive Director", "githubUrl": "https://github.com/jane"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile updated successfully"
        assert body["data"]["title"] == "Non-Executive Director"
        assert body["data"]["profileCompletion"]["overallPercentage"] == 94
        assert profile_repository.profiles[profile.id].github_url == "https://github.com/jane"

    async def test_update_replaces_tags(self, client, profile, profile_repository):
        governance = make_tag("Governance", "expertise")
        profile_repository.add_catalog_tag(governance)

        response = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer(OWNER_ID),
            json={"tags": [str(governance.id)]},
        )

        assert response.status_code == 200
        assert [tag["name"] for tag in response.json()["data"]["skills"]] == ["Governance"]

    async def test_unknown_tag_is_rejected_and_tags_kept(self, client, profile, profile_repository):
        response = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer(OWNER_ID),
            json={"title": "Chair", "tags": [str(uuid4())]},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Unknown tags")
        assert [tag.name for tag in profile_repository.tags[profile.id]] == ["Audit", "Fintech"]
        assert profile_repository.profiles[profile.id].title == "Chief Financial Officer"

    async def test_invalid_update_returns_validation_details(self, client, profile):
        response = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer(OWNER_ID),
            json={"summary": "short", "salaryCurrency": "dollars"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        fields = {detail["field"] for detail in body["details"]}
        assert {"summary", "salaryCurrency"} <= fields

    async def test_salary_range_checked_against_stored_values(self, client, profile):
        response = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer(OWNER_ID),
            json={"salaryMax": 100000},
        )

        assert response.status_code == 400
        assert "Minimum salary" in response.json()["error"]

    async def test_storage_failure_is_internal_error(self, client, profile, profile_repository):
        profile_repository.should_fail_on_save = True

        response = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer(OWNER_ID),
            json={"title": "Chair"},
        )

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to update profile", "status": 500}


REGISTRATION = {
    "title": "Non-Executive Director",
    "summary": "Board member with audit committee experience.",
    "experience": "executive",
    "location": "Edinburgh",
    "remotePreference": "flexible",
    "availability": "1month",
}


class TestRegistrationWorkflow:

    async def test_new_candidate_registers_then_edits(self, client, user_repository):
        user_repository.add_test_user(make_owner("user_new"))

        created = await client.post("/api/v1/candidates/register", headers=bearer("user_new"), json=REGISTRATION)

        assert created.status_code == 201
        body = created.json()
        assert body["message"] == "Profile created successfully"
        assert body["data"]["title"] == "Non-Executive Director"
        assert body["data"]["isAnonymized"] is True
        assert body["data"]["profileCompletion"]["isCompleted"] is True

        edited = await client.put(
            "/api/v1/candidates/profile",
            headers=bearer("user_new"),
            json={"location": "Glasgow"},
        )
        assert edited.status_code == 200
        assert edited.json()["data"]["location"] == "Glasgow"

        public = await client.get(f"/api/v1/search/profiles/{body['data']['id']}")
        assert public.json()["data"]["name"] == "Executive Profile"

    async def test_existing_candidate_reregisters(self, client, profile, profile_repository):
        response = await client.post(
            "/api/v1/candidates/register",
            headers=bearer(OWNER_ID),
            json=REGISTRATION,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile updated successfully"
        assert body["data"]["id"] == str(profile.id)
        assert body["data"]["linkedinUrl"] == "https://linkedin.com/in/jane"
        assert len(profile_repository.profiles) == 1

    async def test_incomplete_registration_is_rejected(self, client, user_repository):
        user_repository.add_test_user(make_owner("user_new"))
        payload = {key: value for key, value in REGISTRATION.items() if key != "availability"}

        response = await client.post("/api/v1/candidates/register", headers=bearer("user_new"), json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    async def test_anonymous_registration(self, client):
        response = await client.post("/api/v1/candidates/register", json=REGISTRATION)

        assert response.status_code == 401

    async def test_company_user_cannot_register(self, client, profile):
        response = await client.post(
            "/api/v1/candidates/register",
            headers=bearer(COMPANY_USER_ID),
            json=REGISTRATION,
        )

        assert response.status_code == 403

    async def test_registration_storage_failure(self, client, user_repository, profile_repository):
        user_repository.add_test_user(make_owner("user_new"))
        profile_repository.should_fail_on_save = True

        response = await client.post("/api/v1/candidates/register", headers=bearer("user_new"), json=REGISTRATION)

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error during registration"


class TestVisibilityWorkflow:

    async def test_visibility_round_trip(self, client, profile):
        initial = await client.get("/api/v1/candidates/profile/visibility", headers=bearer(OWNER_ID))
        assert initial.json()["data"]["isAnonymized"] is True
        assert initial.json()["data"]["showContact"] is False

        updated = await client.put(
            "/api/v1/candidates/profile/visibility",
            headers=bearer(OWNER_ID),
            json={"isAnonymized": False, "isActive": True, "showSalary": False},
        )

        assert updated.status_code == 200
        data = updated.json()["data"]
        assert data["isAnonymized"] is False
        assert data["showSalary"] is False

        public = await client.get(f"/api/v1/search/profiles/{profile.id}")
        assert public.json()["data"]["name"] == "Jane Doe"

    async def test_toggle_anonymity(self, client, profile):
        first = await client.post(
            "/api/v1/candidates/profile/visibility/toggle-anonymity",
            headers=bearer(OWNER_ID),
        )
        second = await client.post(
            "/api/v1/candidates/profile/visibility/toggle-anonymity",
            headers=bearer(OWNER_ID),
        )

        assert first.json()["message"] == "Profile de-anonymized successfully"
        assert first.json()["data"]["previousState"] is True
        assert second.json()["message"] == "Profile anonymized successfully"
        assert second.json()["data"]["isAnonymized"] is True


# ============================================================================
# Purchased unlock
# ============================================================================

class TestUnlockWorkflow:

    async def test_unlock_after_purchase(self, client, profile, purchased):
        response = await client.get(f"/api/v1/candidates/{profile.id}/unlock", headers=bearer(COMPANY_USER_ID))

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Full candidate profile retrieved successfully"
        data = body["data"]
        assert data["contact"]["email"] == "jane@example.com"
        assert data["contact"]["firstName"] == "Jane"
        assert data["documents"]["resumeUrl"] == "https://files.example.com/jane.pdf"
        assert data["education"][0]["gpa"] == 3.8
        assert data["isAnonymized"] is False
        assert data["purchase"]["amount"] == 99.0

    async def test_anonymous_unlock(self, client, profile):
        response = await client.get(f"/api/v1/candidates/{profile.id}/unlock")

        assert response.status_code == 401

    async def test_candidate_cannot_unlock(self, client, profile):
        response = await client.get(f"/api/v1/candidates/{profile.id}/unlock", headers=bearer(OWNER_ID))

        assert response.status_code == 403

    async def test_unpaid_unlock(self, client, profile, purchase_repository):
        purchase_repository.add_membership(COMPANY_USER_ID, CompanyId(uuid4()))

        response = await client.get(f"/api/v1/candidates/{profile.id}/unlock", headers=bearer(COMPANY_USER_ID))

        assert response.status_code == 402
        assert response.json()["error"] == "Profile access not purchased. Please complete payment first."


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
