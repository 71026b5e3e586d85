"""Error codes and platform constants shared across layers."""

from __future__ import annotations

from enum import StrEnum

# Parent domain owned by the platform; names under it need no ownership proof.
PLATFORM_SUFFIX = ".now.sh"

# Fixed name of the TXT record used to prove domain ownership.
VERIFICATION_RECORD_NAME = "_now"

VERIFICATION_DOCS_URL = "https://err.sh/now/domain-verification"


class ErrorCode(StrEnum):
    """Error codes surfaced in ServiceError.code by this client."""

    ALIAS_DOMAIN_EXIST = "ALIAS_DOMAIN_EXIST"
    UNBIND_FAILED = "UNBIND_FAILED"
    REBIND_FAILED = "REBIND_FAILED"
    UNEXPECTED_RESPONSE = "UNEXPECTED_RESPONSE"
    DOMAIN_NOT_FOUND = "DOMAIN_NOT_FOUND"
    DOMAIN_PERMISSION_DENIED = "DOMAIN_PERMISSION_DENIED"
    INVALID_DOMAIN = "INVALID_DOMAIN"


def is_platform_domain(domain: str) -> bool:
    """Whether *domain* is a platform-managed subdomain."""
    return domain.lower().endswith(PLATFORM_SUFFIX)
