"""AppContext — the object every subcommand receives via ``@click.pass_obj``.

It holds the resolved settings, opens the store on first use, and owns
the exit-code contract: accepted results go to stdout with exit 0,
rejections go to stderr with exit 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from edugraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from edugraph.config.settings import EduSettings
    from edugraph.infrastructure.store import Store
    from edugraph.services.result import ServiceResult


class AppContext:
    """Per-invocation state built by the root group.

    Logging is configured here so it happens once per run. The store is
    opened lazily, which keeps ``--help`` and ``--examples`` from
    creating a database.
    """

    def __init__(self, settings: EduSettings) -> None:
        from edugraph.config.logging import configure_logging
        from edugraph.services.telemetry import enable_telemetry

        self.settings = settings
        self._store: Store | None = None
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def store(self) -> Store:
        if self._store is None:
            from edugraph.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    def emit(self, result: ServiceResult) -> None:
        """Print *result* in the selected output mode and exit 1 if it was rejected."""
        text = format_result(result, settings=self.output)
        click.echo(text, err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
