"""Command group: custom domain management."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import click
from rich.text import Text

from nowctl.domain.names import InvalidDomain, parse_domain
from nowctl.output.formatters import stamp
from nowctl.output.reporter import report_verification
from nowctl.services.domains import DomainService
from nowctl.services.scope import NotAuthorized, TeamDeleted, get_scope

if TYPE_CHECKING:
    from nowctl.commands._context import AppContext

logger = logging.getLogger(__name__)

ADD_USAGE = "nowctl domains add <domain> <project>"


def add_domain(app: AppContext, args: Sequence[str], *, force: bool = False) -> int:
    """Attach a domain to a project and report its verification state.

    Returns the process exit code: 0 once the domain is attached (verified
    or not), 1 on the first unrecoverable failure.
    """
    output = app.output

    if len(args) != 2:
        output.error(f"`{ADD_USAGE}` expects two arguments.")
        return 1

    domain_name = str(args[0])
    project_name = str(args[1])

    try:
        parsed = parse_domain(domain_name)
    except InvalidDomain as exc:
        output.error(exc.message)
        return 1
    logger.debug(
        "Parsed %s as domain=%s subdomain=%s", domain_name, parsed.domain, parsed.subdomain
    )

    client = app.client
    try:
        scope = get_scope(client)
    except (NotAuthorized, TeamDeleted) as exc:
        output.error(exc.message)
        return 1

    service = DomainService(client)
    add_stamp = stamp()
    result = service.attach(project_name, domain_name, force=force)
    if not result.ok:
        output.error(result.error.message if result.error else "Unknown error")
        return 1

    if result.data.get("forced"):
        logger.info(
            "Moved %s from project %s", domain_name, result.data.get("previous_project_id")
        )

    output.success(
        Text.assemble(
            "Domain ",
            (domain_name, "now.param"),
            " added to project ",
            (project_name, "now.param"),
            f". {add_stamp()}",
        )
    )
    return report_verification(output, service, scope, domain_name)


@click.group()
def domains() -> None:
    """Manage custom domains."""


@domains.command()
@click.argument("args", nargs=-1)
@click.option(
    "--force",
    is_flag=True,
    help="Move the domain here if another project already uses it.",
)
@click.option("--debug", is_flag=True, help="Trace API requests to stderr.")
@click.pass_obj
def add(app: AppContext, args: tuple[str, ...], force: bool, debug: bool) -> None:
    """Add a domain to a project: DOMAIN PROJECT."""
    if debug:
        app.enable_debug()
    code = add_domain(app, args, force=force)
    if code:
        raise SystemExit(code)
