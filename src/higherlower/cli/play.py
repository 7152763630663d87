"""CLI command for playing Higher or Lower in the terminal."""

from __future__ import annotations

import logging

import click

from higherlower.terminal.session import PlaySession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--show-rules/--no-rules", default=True, help="Display rules at start")
@click.option("--color/--no-color", default=True, help="Colour red cards")
@click.option("--debug", is_flag=True, help="Show the next card and game status")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    show_rules: bool,
    color: bool,
    debug: bool,
    verbose: bool,
):
    """Guess whether the next card is higher or lower than the current one."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    config = SessionConfig(
        seed=seed,
        show_rules=show_rules,
        color=color,
        debug=debug,
    )
    session = PlaySession(config)

    try:
        summary = session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        summary = None

    if summary:
        logger.debug(f"Session seed {summary.seed}: {summary.games_played} games")
        click.echo(f"\nGames played: {summary.games_played} | Best score: {summary.best_score}")

    click.echo("\nThanks for playing!")


if __name__ == "__main__":
    main()
