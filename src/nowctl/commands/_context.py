"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Holds the settings, the injected Output, and a
lazily built API client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nowctl.config.logging import configure_logging
from nowctl.output.console import Output

if TYPE_CHECKING:
    from nowctl.config.settings import NowSettings
    from nowctl.infrastructure.api import ApiClient


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The API client is created on first use so ``--help``, ``--version``
    and argument errors never need a token.
    """

    def __init__(
        self,
        settings: NowSettings,
        *,
        output: Output | None = None,
        client: ApiClient | None = None,
    ) -> None:
        self.settings = settings
        self.output = output or Output()
        self._client = client

        configure_logging(debug=settings.debug, log_json=settings.log_json)

    @property
    def client(self) -> ApiClient:
        """The API client (created lazily on first access)."""
        if self._client is None:
            from nowctl.infrastructure.api import ApiClient

            try:
                self._client = ApiClient.from_settings(self.settings)
            except ValueError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._client

    def enable_debug(self) -> None:
        """Turn on request tracing after the context was built."""
        if self.settings.debug:
            return
        self.settings = self.settings.model_copy(update={"debug": True})
        configure_logging(debug=True, log_json=self.settings.log_json)
        if self._client is not None:
            self._client.debug = True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
