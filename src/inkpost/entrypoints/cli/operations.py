"""Commands that run blog operations from the shell.

``inkpost call OPERATION`` feeds a JSON object to the named operation and
prints the JSON result on stdout. Failures are reported on stderr as
``CODE: message`` and exit with status 1.

Examples
    $ inkpost call categories.create --input '{"name": "Web Development"}'
    $ inkpost call posts.list --input '{"published": true}'
    $ echo '{"id": 3}' | inkpost call posts.delete --input-file -
"""

from __future__ import annotations

import json
import logging
from typing import IO

import click
import click_extra as clickx

from inkpost.bootstrap import bootstrap
from inkpost.entrypoints.rpc import OPERATIONS, RpcError, dispatch

from .db import get_migrated_url
from .helpers import error

logger = logging.getLogger(__name__)


def _parse_payload(raw: str, source: str) -> dict:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON ({e.msg})", param_hint=source) from e
    if not isinstance(payload, dict):
        raise click.BadParameter("must be a JSON object", param_hint=source)
    return payload


@click.command(cls=clickx.ExtraCommand)
@click.argument("operation", type=click.Choice(sorted(OPERATIONS)), metavar="OPERATION")
@click.option(
    "--input",
    "-i",
    "raw_input",
    default=None,
    help="Operation input as a JSON object.",
)
@click.option(
    "--input-file",
    type=click.File("r"),
    default=None,
    help="Read the JSON input from a file ('-' for stdin).",
)
@click.option(
    "--compact/--pretty",
    default=False,
    help="Print the result on one line instead of indented.",
)
@click.pass_context
def call(
    ctx: click.Context,
    operation: str,
    raw_input: str | None,
    input_file: IO[str] | None,
    compact: bool,
) -> None:
    """Run OPERATION and print its result as JSON."""
    if raw_input is not None and input_file is not None:
        raise click.UsageError("Use either --input or --input-file, not both.")

    payload: dict = {}
    if raw_input is not None:
        payload = _parse_payload(raw_input, "--input")
    elif input_file is not None:
        payload = _parse_payload(input_file.read(), "--input-file")

    container = bootstrap(get_migrated_url())
    logger.info("Calling %s", operation)
    try:
        result = dispatch(container.message_bus, operation, payload)
    except RpcError as e:
        error(f"{e.code}: {e.message}")
        ctx.exit(1)
    finally:
        container.message_bus.uow.close()

    click.echo(json.dumps(result, indent=None if compact else 2, ensure_ascii=False))


@click.command(name="ops", cls=clickx.ExtraCommand)
def list_operations() -> None:
    """List the available operations."""
    width = max(len(name) for name in OPERATIONS)
    for name, op in OPERATIONS.items():
        click.echo(f"{name:<{width}}  {op.summary}")
