# SPDX-License-Identifier: MIT
"""Show build information for the afversion tool."""

from __future__ import annotations

import json

import click

from ..buildinfo import format_build_info, get_build_info
from ..main import Context, pass_context


@click.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print build information as JSON.",
)
@pass_context
def info(ctx: Context, as_json: bool) -> None:
    """Show the afversion version, build metadata and platform.

    Build date and commit come from AFVERSION_BUILD_DATE and
    AFVERSION_GIT_COMMIT when set.

    \b
    Examples:
        afversion info
        afversion info --json
    """
    build_info = get_build_info(ctx.load_config())

    if as_json:
        click.echo(json.dumps(build_info.to_dict(), indent=2))
        return

    click.echo(format_build_info(build_info))
