"""Domain models for hash requests and API responses."""

from dataclasses import dataclass
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from passwordping.domain.consts import PasswordType


@dataclass(frozen=True)
class HashRequest:
    """A password to hash in one of the supported formats."""
    password: str
    password_type: PasswordType
    salt: Optional[str] = None  # required by every salted format


class ApiModel(BaseModel):
    """Base for read-only API payloads (camelCase on the wire)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ExposureSummary(ApiModel):
    """Exposure IDs a username appears in."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "count": 2,
                "exposures": ["5820469ffdb8780510b329cc", "58258f5efdb8780be88c2c5d"],
            }
        }
    )

    count: int = Field(0, ge=0, description="Number of exposures")
    exposures: List[str] = Field(default_factory=list, description="Exposure IDs, in API order")

    @classmethod
    def empty(cls) -> "ExposureSummary":
        """Summary returned for usernames the service does not know."""
        return cls(count=0, exposures=[])


class ExposureDetail(ApiModel):
    """Metadata about one breach."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
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
        }
    )

    id: str
    title: str
    category: Optional[str] = None
    # Dates are kept as the ISO strings the API serves
    date: Optional[str] = None
    date_added: Optional[str] = Field(None, alias="dateAdded")
    password_type: Optional[str] = Field(None, alias="passwordType")
    exposed_data: List[str] = Field(default_factory=list, alias="exposedData")
    entries: int = 0
    domains_affected: int = Field(0, alias="domainsAffected")
    source_urls: List[str] = Field(default_factory=list, alias="sourceURLs")


class PasswordHashSpecification(ApiModel):
    """One password hash the service needs to look up a credential."""
    hash_type: int = Field(..., alias="hashType", description="PasswordType number")
    salt: Optional[str] = Field(None, description="Salt for the password hash, if any")


class AccountResponse(ApiModel):
    """Account lookup result: argon2 salt plus the hashes to compute."""
    salt: str = Field(..., description="Salt for the argon2 credential hash")
    password_hashes_required: List[PasswordHashSpecification] = Field(
        default_factory=list, alias="passwordHashesRequired"
    )
