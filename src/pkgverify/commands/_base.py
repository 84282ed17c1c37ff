"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints a few real invocations
and exits.  Groups use :class:`VerifyCommand` for their subcommands.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Append an eager ``--examples`` option when examples are given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value:
                click.echo(f"Examples for '{ctx.command_path}':\n")
                click.echo(examples)
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples.",
            )
        )


class VerifyCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class VerifyGroup(_ExamplesMixin, click.Group):
    command_class = VerifyCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
