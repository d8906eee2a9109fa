"""Tests for domain models."""

import dataclasses
import pytest
from pydantic import ValidationError
from passwordping.domain.consts import PasswordType
from passwordping.domain.models import (
    AccountResponse,
    ExposureDetail,
    ExposureSummary,
    HashRequest,
    PasswordHashSpecification,
)

LAST_FM_EXPOSURE = {
    "id": "5820469ffdb8780510b329cc",
    "title": "last.fm",
    "category": "Music",
    "date": "2012-03-01T00:00:00.000Z",
    "dateAdded": "2016-11-07T09:17:19.000Z",
    "passwordType": "MD5",
    "exposedData": ["Emails", "Passwords", "Usernames", "Website Activity"],
    "entries": 43570999,
    "domainsAffected": 1218513,
    "sourceURLs": [],
}


class TestHashRequest:
    """Tests for HashRequest."""

    def test_salt_defaults_to_none(self):
        """Test creating a HashRequest without a salt."""
        request = HashRequest(password="123456", password_type=PasswordType.MD5)
        assert request.salt is None

    def test_is_frozen(self):
        """Test that HashRequest cannot be mutated."""
        request = HashRequest(password="123456", password_type=PasswordType.MD5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.salt = "abc"


class TestExposureSummary:
    """Tests for ExposureSummary model."""

    def test_from_api_response(self):
        """Test parsing an exposures response keeps ID order."""
        summary = ExposureSummary.model_validate({
            "count": 2,
            "exposures": ["58258f5efdb8780be88c2c5d", "5820469ffdb8780510b329cc"],
        })
        assert summary.count == 2
        assert summary.exposures == ["58258f5efdb8780be88c2c5d", "5820469ffdb8780510b329cc"]

    def test_empty(self):
        """Test the summary used for unknown usernames."""
        summary = ExposureSummary.empty()
        assert summary.count == 0
        assert summary.exposures == []

    def test_negative_count_rejected(self):
        """Test that count must be >= 0."""
        with pytest.raises(ValidationError):
            ExposureSummary(count=-1, exposures=[])

    def test_is_frozen(self):
        """Test that responses are read-only."""
        summary = ExposureSummary.empty()
        with pytest.raises(ValidationError):
            summary.count = 5


class TestExposureDetail:
    """Tests for ExposureDetail model."""

    def test_from_api_response(self):
        """Test parsing camelCase API fields."""
        detail = ExposureDetail.model_validate(LAST_FM_EXPOSURE)

        assert detail.id == "5820469ffdb8780510b329cc"
        assert detail.title == "last.fm"
        assert detail.category == "Music"
        assert detail.date == "2012-03-01T00:00:00.000Z"
        assert detail.date_added == "2016-11-07T09:17:19.000Z"
        assert detail.password_type == "MD5"
        assert detail.exposed_data == ["Emails", "Passwords", "Usernames", "Website Activity"]
        assert detail.entries == 43570999
        assert detail.domains_affected == 1218513
        assert detail.source_urls == []

    def test_dump_by_alias_round_trips_api_shape(self):
        """Test that dumping by alias gives back the API document."""
        detail = ExposureDetail.model_validate(LAST_FM_EXPOSURE)
        assert detail.model_dump(by_alias=True) == LAST_FM_EXPOSURE

    def test_accepts_field_names(self):
        """Test that snake_case field names are accepted too."""
        detail = ExposureDetail(id="abc", title="Example", date_added="2017-01-01T00:00:00.000Z")
        assert detail.date_added == "2017-01-01T00:00:00.000Z"
        assert detail.exposed_data == []

    def test_unknown_fields_ignored(self):
        """Test that extra API fields do not break parsing."""
        detail = ExposureDetail.model_validate({**LAST_FM_EXPOSURE, "newField": 1})
        assert detail.id == LAST_FM_EXPOSURE["id"]

    def test_missing_id_rejected(self):
        """Test that id is required."""
        with pytest.raises(ValidationError):
            ExposureDetail.model_validate({"title": "No ID"})


class TestAccountResponse:
    """Tests for AccountResponse model."""

    def test_from_api_response(self):
        """Test parsing an accounts response."""
        account = AccountResponse.model_validate({
            "salt": "5a8c2b1e9f3d4c7a",
            "passwordHashesRequired": [
                {"hashType": 1},
                {"hashType": 8, "salt": "$2a$12$2bULeXwv2H34SXkT1giCZe"},
            ],
        })

        assert account.salt == "5a8c2b1e9f3d4c7a"
        assert len(account.password_hashes_required) == 2
        assert account.password_hashes_required[0].hash_type == PasswordType.MD5
        assert account.password_hashes_required[0].salt is None
        assert account.password_hashes_required[1].hash_type == PasswordType.BCrypt
        assert account.password_hashes_required[1].salt == "$2a$12$2bULeXwv2H34SXkT1giCZe"

    def test_no_hashes_required(self):
        """Test that passwordHashesRequired defaults to empty."""
        account = AccountResponse.model_validate({"salt": "5a8c2b1e9f3d4c7a"})
        assert account.password_hashes_required == []


class TestPasswordHashSpecification:
    """Tests for PasswordHashSpecification model."""

    def test_hash_type_required(self):
        """Test that hashType is required."""
        with pytest.raises(ValidationError):
            PasswordHashSpecification.model_validate({"salt": "abc"})

    def test_unknown_hash_type_number_accepted(self):
        """Test that hash types this library cannot compute still parse."""
        spec = PasswordHashSpecification.model_validate({"hashType": 12, "salt": "abc"})
        assert spec.hash_type == 12
