"""Unit tests for weighted profile completion scoring.

Pure domain tests: no persistence, no infrastructure.
"""

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from app.domain.services.field_weights import OPTIONAL_FIELDS, REQUIRED_FIELDS
from app.domain.services.profile_completion_service import (
    ProfileCompletionService,
    is_field_present,
)
from tests.fixtures.candidate_fixtures import CandidateProfileBuilder

ALL_REQUIRED = {
    "title": "CFO",
    "summary": "Finance executive",
    "experience": "executive",
    "location": "London",
    "remotePreference": "hybrid",
    "availability": "3months",
}
ALL_FIELDS = {
    **ALL_REQUIRED,
    "salaryMin": "150000",
    "salaryMax": "250000",
    "linkedinUrl": "https://linkedin.com/in/jane",
    "githubUrl": "https://github.com/jane",
    "portfolioUrl": "https://jane.example.com",
}

ascii_chars = st.characters(codec="ascii")

# Values a field may hold, from clearly missing to clearly present
field_values = st.one_of(
    st.none(),
    st.just(""),
    st.just("   "),
    st.text(ascii_chars, min_size=1, max_size=20),
    st.integers(min_value=-5, max_value=500000),
)


@pytest.fixture
def service() -> ProfileCompletionService:
    return ProfileCompletionService()


# ============================================================================
# Field presence
# ============================================================================

class TestFieldPresence:

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_missing_values(self, value):
        assert is_field_present(value) is False

    @pytest.mark.parametrize("value", ["x", 0, "0", 150000, " a "])
    def test_present_values(self, value):
        assert is_field_present(value) is True


# ============================================================================
# Worked examples
# ============================================================================

class TestCompletionExamples:

    def test_all_required_no_optional(self, service):
        result = service.score(ALL_REQUIRED)

        assert result.required_percentage == 100
        assert result.optional_percentage == 0
        assert result.overall_percentage == 70
        assert result.is_completed is True
        assert result.missing_required == []
        assert result.missing_optional == list(OPTIONAL_FIELDS)

    def test_missing_experience(self, service):
        fields = {**ALL_REQUIRED, "experience": None}

        result = service.score(fields)

        assert result.required_percentage == 83
        assert result.optional_percentage == 0
        assert result.overall_percentage == 58
        assert result.is_completed is False
        assert result.missing_required == ["experience"]

    def test_everything_present(self, service):
        result = service.score(ALL_FIELDS)

        assert result.overall_percentage == 100
        assert result.is_completed is True
        assert result.missing_required == []
        assert result.missing_optional == []

    def test_empty_and_none_inputs(self, service):
        for fields in ({}, None):
            result = service.score(fields)
            assert result.overall_percentage == 0
            assert result.required_percentage == 0
            assert result.optional_percentage == 0
            assert result.is_completed is False
            assert result.missing_required == list(REQUIRED_FIELDS)

    def test_whitespace_counts_as_missing(self, service):
        result = service.score({**ALL_REQUIRED, "title": "   "})

        assert "title" in result.missing_required
        assert result.is_completed is False

    def test_zero_salary_counts_as_present(self, service):
        result = service.score({"salaryMin": 0})

        assert "salaryMin" not in result.missing_optional
        assert result.optional_percentage == 20

    def test_partial_profile(self, service):
        # 3 of 6 required -> 50, 1 of 5 optional -> 20, overall 35 + 6 = 41
        fields = {"title": "a", "summary": "b", "experience": "mid", "githubUrl": "https://github.com/x"}

        result = service.score(fields)

        assert result.required_percentage == 50
        assert result.optional_percentage == 20
        assert result.overall_percentage == 41

    def test_unknown_keys_are_ignored(self, service):
        result = service.score({**ALL_REQUIRED, "favouriteColour": "green"})

        assert result.overall_percentage == 70

    def test_score_profile_uses_entity_fields(self, service):
        profile = (
            CandidateProfileBuilder()
            .with_required_fields()
            .with_fields(linkedin_url="https://linkedin.com/in/jane")
            .build()
        )

        result = service.score_profile(profile)

        assert result.is_completed is True
        assert result.optional_percentage == 20
        assert result.overall_percentage == 76

    def test_to_dict_uses_camel_case(self, service):
        payload = service.score(ALL_REQUIRED).to_dict()

        assert payload == {
            "isCompleted": True,
            "overallPercentage": 70,
            "requiredPercentage": 100,
            "optionalPercentage": 0,
            "missingRequired": [],
            "missingOptional": list(OPTIONAL_FIELDS),
        }


# ============================================================================
# Properties
# ============================================================================

class TestCompletionProperties:

    @given(st.dictionaries(st.sampled_from(REQUIRED_FIELDS + OPTIONAL_FIELDS), field_values))
    def test_scoring_is_total_and_bounded(self, fields):
        result = ProfileCompletionService().score(fields)

        assert 0 <= result.overall_percentage <= 100
        assert 0 <= result.required_percentage <= 100
        assert 0 <= result.optional_percentage <= 100
        assert result.is_completed == (len(result.missing_required) == 0)

    @given(
        st.dictionaries(st.sampled_from(REQUIRED_FIELDS + OPTIONAL_FIELDS), field_values),
        st.sampled_from(REQUIRED_FIELDS + OPTIONAL_FIELDS),
        st.text(ascii_chars, min_size=1, max_size=10).filter(lambda s: s.strip()),
    )
    def test_filling_a_field_never_lowers_score(self, fields, name, value):
        service = ProfileCompletionService()
        before = service.score(fields)

        after = service.score({**fields, name: value})

        assert after.overall_percentage >= before.overall_percentage

    @given(st.dictionaries(st.sampled_from(REQUIRED_FIELDS + OPTIONAL_FIELDS), field_values))
    def test_missing_lists_follow_table_order(self, fields):
        result = ProfileCompletionService().score(fields)

        assert result.missing_required == [f for f in REQUIRED_FIELDS if f in result.missing_required]
        assert result.missing_optional == [f for f in OPTIONAL_FIELDS if f in result.missing_optional]


def test_property_suite_tolerates_cold_example_cache():
    active = settings()

    assert HealthCheck.too_slow in active.suppress_health_check
    assert active.deadline is None
