#!/usr/bin/env python3
"""Letter Slide — a 4×4 sliding-tile puzzle for the terminal.

Usage::

    python main.py                   # play a shuffled board
    python main.py --seed 42         # reproducible shuffle
    python main.py --solvable        # scramble with legal moves only
    python main.py --mode reduced    # solved start, no win check
    python main.py --preview         # print the board and exit
"""

import sys
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.logging_config import setup_logging  # noqa: E402
from frontend.cli.terminal.app import Mode, new_game, run  # noqa: E402


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    mode: Mode = typer.Option(
        Mode.full, "-m", "--mode",
        help="full: shuffled board with win check. reduced: solved board, no win check.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Shuffle seed. Defaults to the current time.",
    ),
    solvable: bool = typer.Option(
        False, "--solvable",
        help="Scramble with random legal moves so the board can be solved.",
    ),
    preview: bool = typer.Option(
        False, "--preview",
        help="Print the starting board and exit.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False,
        help="Write log records to this file.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log at DEBUG level.",
    ),
) -> None:
    """Slide the letter tiles back into order with the arrow keys. ESC quits."""
    if mode is Mode.reduced and (seed is not None or solvable):
        raise typer.BadParameter(
            "--seed and --solvable only apply to --mode full.",
            param_hint="--mode",
        )

    setup_logging(log_file=log_file, verbose=verbose, to_console=preview)

    if preview:
        from frontend.cli.rich.app import run_preview

        run_preview(new_game(mode, seed=seed, solvable=solvable).board)
        return

    code = run(mode=mode, seed=seed, solvable=solvable)
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
