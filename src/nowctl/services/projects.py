"""ProjectService — bind and unbind domains on projects."""

from __future__ import annotations

from urllib.parse import quote

from nowctl.domain.types import ErrorCode
from nowctl.infrastructure.api import APIError
from nowctl.services.base import BaseService
from nowctl.services.result import ServiceResult


class ProjectService(BaseService):
    """Association client for project aliases."""

    def add_domain(self, project: str, domain: str) -> ServiceResult:
        """Bind *domain* to *project* (name or id) as a production alias.

        A conflict is returned as ``ALIAS_DOMAIN_EXIST``; when the API names
        the owning project it is in ``error.detail["project"]``.
        """
        op = "add_domain"
        try:
            body = self._client.fetch(
                f"/projects/{quote(project, safe='')}/alias",
                method="POST",
                json={"target": "PRODUCTION", "domain": domain},
            )
        except APIError as exc:
            return self._api_failure(op, exc)

        targets = body if isinstance(body, list) else []
        alias_target = next((t for t in targets if t.get("domain") == domain), None)
        if alias_target is None:
            return ServiceResult.failure(
                op,
                ErrorCode.UNEXPECTED_RESPONSE,
                f'Unexpected error when adding the domain "{domain}" '
                f'to the project "{project}".',
            )
        return ServiceResult.success(
            op, domain=domain, project=project, alias_target=alias_target
        )

    def remove_domain(self, project_id: str, domain: str) -> ServiceResult:
        """Unbind *domain* from the project with id *project_id*."""
        op = "remove_domain"
        try:
            self._client.fetch(
                f"/projects/{quote(project_id, safe='')}/alias",
                method="DELETE",
                params={"domain": domain},
            )
        except APIError as exc:
            return self._api_failure(op, exc)
        return ServiceResult.success(op, domain=domain, project_id=project_id)
