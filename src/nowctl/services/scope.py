"""Scope resolution — who the API calls are made as.

The scope is the personal account, or the team configured as
``current_team``. It is resolved once per invocation and never mutated.

Recognized failures raise :class:`NotAuthorized` or :class:`TeamDeleted`;
commands report those and exit. Everything else (including
:class:`InvalidToken`) propagates to the caller unhandled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel

from nowctl.infrastructure.api import APIError

if TYPE_CHECKING:
    from nowctl.infrastructure.api import ApiClient

logger = logging.getLogger(__name__)


class ScopeError(Exception):
    """Base class for scope resolution failures."""

    code = "SCOPE_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotAuthorized(ScopeError):
    code = "NOT_AUTHORIZED"


class TeamDeleted(ScopeError):
    code = "TEAM_DELETED"


class InvalidToken(ScopeError):
    code = "INVALID_TOKEN"


class User(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    uid: str | None = None
    username: str | None = None
    email: str | None = None


class Team(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    id: str
    slug: str
    name: str | None = None


class ScopeContext(BaseModel):
    """Resolved identity for one invocation."""

    model_config = {"frozen": True}

    context_name: str
    user: User
    team: Team | None = None


def get_user(client: ApiClient) -> User:
    """Fetch the user the token belongs to."""
    try:
        body = client.fetch("/www/user")
    except APIError as exc:
        if exc.status == 403:
            raise InvalidToken(
                "The specified token is not valid. Use `nowctl login` to generate a new one."
            ) from exc
        raise
    return User.model_validate((body or {}).get("user") or {})


def get_team(client: ApiClient, team_id: str) -> Team:
    """Fetch a team by id."""
    try:
        body = client.fetch(f"/teams/{team_id}")
    except APIError as exc:
        if exc.status == 403:
            raise NotAuthorized(
                f"You do not have access to the specified team {team_id}."
            ) from exc
        if exc.status == 404:
            raise TeamDeleted(
                f"Your team {team_id} was deleted or you were removed from it. "
                "Switch to another team or your personal account."
            ) from exc
        raise
    return Team.model_validate(body)


def get_scope(client: ApiClient) -> ScopeContext:
    """Resolve the caller's scope.

    Raises:
        NotAuthorized: The token cannot access the configured team.
        TeamDeleted: The configured team no longer exists.
        InvalidToken: The token itself was rejected.
    """
    user = get_user(client)
    context_name = user.username or user.email or ""
    team: Team | None = None

    if client.current_team:
        team = get_team(client, client.current_team)
        context_name = team.slug

    logger.debug("Resolved scope %s", context_name)
    return ScopeContext(context_name=context_name, user=user, team=team)
