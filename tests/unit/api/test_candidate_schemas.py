"""Tests for candidate request schemas."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.api.schemas.candidate_schemas import (
    MAX_TAGS,
    CandidateProfileCreate,
    CandidateProfileUpdate,
    VisibilityUpdate,
)
from app.domain.entities.candidate_profile import VisibilitySettings


REGISTRATION_PAYLOAD = {
    "title": "Chief Financial Officer",
    "summary": "Seasoned finance leader with board experience.",
    "experience": "executive",
    "location": "London",
    "remotePreference": "hybrid",
    "availability": "3months",
}


class TestCandidateProfileCreate:

    def test_defaults_are_always_included(self):
        create = CandidateProfileCreate.model_validate(REGISTRATION_PAYLOAD)

        assert create.to_profile_data() == {
            "title": "Chief Financial Officer",
            "summary": "Seasoned finance leader with board experience.",
            "experience": "executive",
            "location": "London",
            "remote_preference": "hybrid",
            "availability": "3months",
            "salary_currency": "USD",
            "is_anonymized": True,
        }

    def test_optional_fields_are_passed_when_sent(self):
        create = CandidateProfileCreate.model_validate(
            {**REGISTRATION_PAYLOAD, "salaryMin": 100000, "githubUrl": "https://github.com/jane", "isAnonymized": False}
        )

        data = create.to_profile_data()

        assert data["salary_min"] == 100000.0
        assert data["github_url"] == "https://github.com/jane"
        assert data["is_anonymized"] is False
        assert "portfolio_url" not in data

    @pytest.mark.parametrize(
        "field", ["title", "summary", "experience", "location", "remotePreference", "availability"]
    )
    def test_required_fields(self, field):
        payload = {key: value for key, value in REGISTRATION_PAYLOAD.items() if key != field}

        with pytest.raises(ValidationError):
            CandidateProfileCreate.model_validate(payload)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"summary": "too short"},
            {"experience": "guru"},
            {"salaryCurrency": "usd"},
            {"linkedinUrl": "linkedin.com/in/x"},
            {"salaryMin": 200000, "salaryMax": 100000},
            {"tags": [str(uuid4()) for _ in range(MAX_TAGS + 1)]},
        ],
    )
    def test_invalid_registrations(self, overrides):
        with pytest.raises(ValidationError):
            CandidateProfileCreate.model_validate({**REGISTRATION_PAYLOAD, **overrides})

    def test_tags_are_excluded_from_profile_data(self):
        tag_id = uuid4()
        create = CandidateProfileCreate.model_validate({**REGISTRATION_PAYLOAD, "tags": [str(tag_id)]})

        assert create.tags == [tag_id]
        assert "tags" not in create.to_profile_data()

class TestCandidateProfileUpdate:

    def test_camel_case_aliases(self):
        update = CandidateProfileUpdate.model_validate(
            {"remotePreference": "remote", "salaryMin": 100000, "linkedinUrl": "https://linkedin.com/in/x"}
        )

        assert update.to_update_data() == {
            "remote_preference": "remote",
            "salary_min": 100000.0,
            "linkedin_url": "https://linkedin.com/in/x",
        }

    def test_only_sent_fields_are_included(self):
        update = CandidateProfileUpdate.model_validate({"title": "Chair", "summary": None})

        assert update.to_update_data() == {"title": "Chair", "summary": None}

    def test_tags_are_excluded_from_update_data(self):
        tag_id = uuid4()
        update = CandidateProfileUpdate.model_validate({"tags": [str(tag_id)]})

        assert update.tags == [tag_id]
        assert update.to_update_data() == {}

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": ""},
            {"title": "x" * 101},
            {"summary": "too short"},
            {"experience": "guru"},
            {"availability": "tomorrow"},
            {"remotePreference": "moon"},
            {"salaryMin": -1},
            {"salaryMax": 10_000_001},
            {"salaryCurrency": "usd"},
            {"salaryCurrency": None},
            {"isAnonymized": None},
            {"linkedinUrl": "linkedin.com/in/x"},
            {"githubUrl": "ftp://github.com/x"},
            {"tags": ["not-a-uuid"]},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            CandidateProfileUpdate.model_validate(payload)

    def test_too_many_tags(self):
        with pytest.raises(ValidationError):
            CandidateProfileUpdate.model_validate({"tags": [str(uuid4()) for _ in range(MAX_TAGS + 1)]})

    def test_inverted_salary_range(self):
        with pytest.raises(ValidationError, match="Minimum salary"):
            CandidateProfileUpdate.model_validate({"salaryMin": 200000, "salaryMax": 100000})

    def test_urls_can_be_cleared(self):
        update = CandidateProfileUpdate.model_validate({"githubUrl": None})

        assert update.to_update_data() == {"github_url": None}

    def test_enums_are_dumped_as_values(self):
        update = CandidateProfileUpdate.model_validate({"experience": "senior", "availability": "2weeks"})

        assert update.to_update_data() == {"experience": "senior", "availability": "2weeks"}


class TestVisibilityUpdate:

    def test_flags_are_required(self):
        with pytest.raises(ValidationError):
            VisibilityUpdate.model_validate({"isAnonymized": True})

    def test_defaults_and_settings(self):
        update = VisibilityUpdate.model_validate({"isAnonymized": False, "isActive": True, "showContact": True})

        assert update.to_settings() == VisibilitySettings(show_contact=True)
