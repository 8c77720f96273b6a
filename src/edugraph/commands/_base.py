"""Click base classes shared by every edugraph command.

``examples=`` on a command or group adds an eager ``--examples`` flag
that prints the given usage text and exits. :class:`EduGroup` also
turns a :class:`StoreError` raised by a subcommand into a ``STORE
ERROR`` line on stderr and exit code 2. Validation rejections exit
with 1 from :meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import Any

import click

from edugraph.infrastructure.errors import StoreError

STORE_ERROR_EXIT_CODE = 2


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and registers the ``--examples`` option."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class EduCommand(_ExamplesMixin, click.Command):
    """Command accepting an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class EduGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples`` whose subcommands default to :class:`EduCommand`."""

    command_class = EduCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except StoreError as exc:
            click.echo(f"STORE ERROR: {exc}", err=True)
            ctx.exit(STORE_ERROR_EXIT_CODE)
