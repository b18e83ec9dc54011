"""
Command-line entry point: roll every dice token given as an argument.

Examples:
  rollcmd 2d6 d20 4
  rollcmd --seed 7 3d8 1d12

Tokens that are not roll commands are skipped without output.
"""
from __future__ import annotations

import click
import structlog

from Rollcmd.config import load_settings
from Rollcmd.errors import InvalidDieError, RandomSourceUnavailable
from Rollcmd.logging import redact_settings, setup_logging
from Rollcmd.metrics import get_counters
from Rollcmd.rng import make_roll_one, open_random_source
from Rollcmd.roller import roll_tokens


@click.command(name="rollcmd", context_settings={"ignore_unknown_options": True})
@click.option("--seed", type=int, default=None, help="Seed the RNG for reproducible rolls.")
@click.argument("tokens", nargs=-1)
def cli(seed: int | None, tokens: tuple[str, ...]) -> None:
    """Roll dice written as COUNTdSIDES (e.g. 2d6) or SIDES (e.g. 20)."""
    settings = load_settings()
    setup_logging(settings)
    log = structlog.get_logger()
    log.debug("cli.startup", env=settings.env, config=redact_settings(settings))

    if seed is None:
        seed = settings.rng_seed

    try:
        source = open_random_source(seed)
    except RandomSourceUnavailable as exc:
        log.error("cli.rng.unavailable", error=str(exc))
        raise click.ClickException(str(exc)) from exc

    try:
        results = roll_tokens(tokens, make_roll_one(source))
    except InvalidDieError as exc:
        log.warning("cli.roll.invalid_die", sides=exc.sides)
        raise click.ClickException(str(exc)) from exc

    for result in results:
        click.echo(str(result))

    log.debug("cli.metrics", counters=get_counters())


def main() -> None:  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
