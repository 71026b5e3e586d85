"""Verification reporting after a domain has been attached.

Platform-managed names are assigned right away. Every other domain is
looked up and, if its ownership is not proven yet, the user gets two
ways to prove it: delegate the nameservers, or add a TXT record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nowctl.domain.types import (
    VERIFICATION_DOCS_URL,
    VERIFICATION_RECORD_NAME,
    is_platform_domain,
)
from nowctl.domain.verification import DomainVerificationStatus
from nowctl.output.formatters import format_dns_table, format_ns_table

if TYPE_CHECKING:
    from nowctl.output.console import Output
    from nowctl.services.domains import DomainService
    from nowctl.services.scope import ScopeContext

AUTO_ASSIGN_MESSAGE = (
    "The domain will automatically get assigned to your latest production deployment."
)

_INDENT = "     "


def render_unverified(output: Output, status: DomainVerificationStatus) -> None:
    """Print both remediation paths for an unverified domain."""
    output.warn("The domain was added but it is not verified. To verify it, you should either:")
    output.print(
        "  a) Change your domain nameservers to the following intended set: [recommended]\n"
    )
    output.print(
        "\n"
        + format_ns_table(
            status.intended_nameservers,
            status.nameservers,
            extra_space=_INDENT,
        )
        + "\n\n"
    )
    output.print("  b) Add a DNS TXT record with the name and value shown below.\n")
    output.print(
        "\n"
        + format_dns_table(
            [[VERIFICATION_RECORD_NAME, "TXT", status.verification_record]],
            extra_space=_INDENT,
        )
        + "\n\n"
    )
    output.print(
        "  We will run a verification for you and you will receive an email upon completion.\n"
    )
    output.print(f"  Read more: {VERIFICATION_DOCS_URL}\n\n")


def report_verification(
    output: Output,
    service: DomainService,
    scope: ScopeContext,
    domain: str,
) -> int:
    """Report the verification state of a freshly attached *domain*.

    Returns the process exit code.
    """
    if is_platform_domain(domain):
        output.log(AUTO_ASSIGN_MESSAGE)
        return 0

    result = service.get_status(scope.context_name, domain)
    if not result.ok:
        output.error(result.error.message if result.error else "Unknown error")
        return 1

    status = DomainVerificationStatus.model_validate(result.data)
    if not status.verified:
        render_unverified(output, status)
    else:
        output.log(AUTO_ASSIGN_MESSAGE)
    return 0
