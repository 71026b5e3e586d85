"""DomainService — attach domains to projects and read verification state.

The attach workflow::

    bind ──ok──────────────────────────────────────────▶ done
      │
      └─ALIAS_DOMAIN_EXIST + owning project id
            ├─ no force ─────────────────────────────▶ failed (original error)
            └─ force ─▶ unbind(owner) ─fail─────────▶ failed (UNBIND_FAILED)
                             │
                             └─ok─▶ bind ─fail──────▶ failed (REBIND_FAILED)
                                      └─ok──────────▶ done

INVARIANT: at most one forced unbind and one rebind per call. A second
conflict after the unbind is reported, never retried.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from nowctl.domain.types import ErrorCode
from nowctl.domain.verification import DomainVerificationStatus
from nowctl.infrastructure.api import APIError
from nowctl.services.base import BaseService
from nowctl.services.projects import ProjectService
from nowctl.services.result import UNKNOWN_ERROR, ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def conflicting_project_id(error: ServiceError | None) -> str | None:
    """Return the owning project's id if *error* is a resolvable conflict.

    Only ``ALIAS_DOMAIN_EXIST`` errors that name the owning project qualify;
    a conflict without a project id is treated as a plain failure.
    """
    if error is None or error.code != ErrorCode.ALIAS_DOMAIN_EXIST:
        return None
    project: Any = error.detail.get("project")
    if not isinstance(project, dict):
        return None
    project_id = project.get("id")
    return str(project_id) if project_id else None


class DomainService(BaseService):
    """Domain attachment and verification lookups."""

    def attach(self, project: str, domain: str, *, force: bool = False) -> ServiceResult:
        """Bind *domain* to *project*, reassigning it from its owner if *force*."""
        op = "attach_domain"
        projects = ProjectService(self._client)

        result = projects.add_domain(project, domain)
        if result.ok:
            return ServiceResult.success(
                op, domain=domain, project=project, forced=False, previous_project_id=None
            )

        owner_id = conflicting_project_id(result.error)
        if owner_id is None or not force:
            return result.model_copy(update={"op": op})

        logger.info("Domain %s belongs to project %s, removing it", domain, owner_id)
        removed = projects.remove_domain(owner_id, domain)
        if not removed.ok:
            error = removed.error or UNKNOWN_ERROR
            return ServiceResult.failure(
                op,
                ErrorCode.UNBIND_FAILED,
                error.message,
                detail={"code": error.code, "project_id": owner_id},
            )

        retried = projects.add_domain(project, domain)
        if not retried.ok:
            error = retried.error or UNKNOWN_ERROR
            return ServiceResult.failure(
                op,
                ErrorCode.REBIND_FAILED,
                error.message,
                detail={"code": error.code, **error.detail},
            )

        return ServiceResult.success(
            op, domain=domain, project=project, forced=True, previous_project_id=owner_id
        )

    def get_status(self, context_name: str, domain: str) -> ServiceResult:
        """Fetch the verification state of *domain* within *context_name*."""
        op = "get_domain"
        try:
            body = self._client.fetch(f"/v4/domains/{quote(domain, safe='')}")
        except APIError as exc:
            if exc.status == 404:
                return ServiceResult.failure(
                    op,
                    ErrorCode.DOMAIN_NOT_FOUND,
                    f'Domain not found by "{domain}" under {context_name}',
                )
            if exc.status == 403:
                return ServiceResult.failure(
                    op,
                    ErrorCode.DOMAIN_PERMISSION_DENIED,
                    f"You don't have access to the domain {domain} under {context_name}",
                )
            return self._api_failure(op, exc)

        payload = body.get("domain") if isinstance(body, dict) else None
        if not isinstance(payload, dict):
            return ServiceResult.failure(
                op,
                ErrorCode.UNEXPECTED_RESPONSE,
                f"Unexpected response when fetching the domain {domain}.",
            )
        status = DomainVerificationStatus.model_validate(payload)
        return ServiceResult.success(op, **status.model_dump())
