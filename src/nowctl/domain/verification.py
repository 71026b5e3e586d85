"""Domain verification state as reported by the platform."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DomainVerificationStatus(BaseModel):
    """Ownership proof state for a domain.

    Accepts the API's camelCase keys (``intendedNameservers``,
    ``verificationRecord``) as well as field names.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str | None = None
    verified: bool = False
    nameservers: list[str] = Field(default_factory=list)
    intended_nameservers: list[str] = Field(default_factory=list)
    verification_record: str = ""
