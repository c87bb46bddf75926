# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
guessgrid command line front end.

Each input line is replayed as key presses: every character is a key, ``<``
is Backspace, spaces are skipped, and the end of the line is Enter.
"""

import asyncio
from typing import Annotated, Iterator, Optional

import typer
from rich.console import Console
from rich.text import Text
from rich.traceback import install

from .client import GradingClient
from .config import DEFAULT_ALLOWED_CHARS, GuessGridConfig
from .errors import GradingServiceError
from .game import Game
from .logging import configure_logging
from .models import Grade, GuessRecord
from .router import BACKSPACE, ENTER

console = Console()
install(show_locals=False)

app = typer.Typer(
    help="Play a word-guessing game against a grading server",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
)

GRADE_STYLES = {
    Grade.CORRECT: "bold white on green",
    Grade.WRONG_PLACE: "bold black on yellow",
    Grade.INCORRECT: "white on grey37",
}

BACKSPACE_CHAR = "<"


def keys_from_line(line: str) -> Iterator[str]:
    """Key identifiers typed by one input line, excluding the final Enter."""
    for ch in line.rstrip("\r\n"):
        if ch == " ":
            continue
        yield BACKSPACE if ch == BACKSPACE_CHAR else ch


def render_record(record: GuessRecord) -> Text:
    text = Text()
    for i, word in enumerate(record):
        if i:
            text.append("  ")
        for letter, grade in zip(word.text, word.grades):
            text.append(f" {letter.upper()} ", style=GRADE_STYLES[grade])
    return text


def _make_client(config: GuessGridConfig) -> GradingClient:
    return GradingClient.from_config(config)


def _read_line() -> Optional[str]:
    try:
        return console.input("[bold]guess>[/bold] ")
    except EOFError:
        return None


async def _play(config: GuessGridConfig) -> int:
    async with _make_client(config) as client:
        try:
            game = await Game.start(client, config)
        except GradingServiceError as e:
            console.print(f"[red]Could not start a game: {e.message}[/red]")
            return 1

        lengths = ", ".join(str(n) for n in game.word_lengths)
        console.print(f"New game [cyan]{game.game_id}[/cyan], word lengths: {lengths}")

        while not game.solved:
            line = await asyncio.to_thread(_read_line)
            if line is None:
                break
            for key in keys_from_line(line):
                game.press(key)

            task = game.press(ENTER)
            if task is None:
                console.print(
                    f"[yellow]Fill all {game.grid.total_slots} letters before submitting[/yellow]"
                )
                while game.grid.cursor > 0:
                    game.press(BACKSPACE)
                continue

            await task
            if game.error:
                console.print(f"[red]{game.error}[/red]")
                while game.grid.cursor > 0:
                    game.press(BACKSPACE)
                continue
            for record in game.history:
                console.print(render_record(record))

        if game.solved:
            console.print(f"[green]Solved in {len(game.history)} guesses![/green]")
        return 0


@app.callback()
def callback(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (overridden by GUESSGRID_LOG_LEVEL)"),
    ] = "WARNING",
) -> None:
    """guessgrid command line interface."""
    configure_logging(log_level)


@app.command("play")
def play(
    url: Annotated[
        Optional[str],
        typer.Option("--url", help="Grading API base URL (default: $GUESSGRID_BACKEND_URL)"),
    ] = None,
    user: Annotated[
        Optional[str],
        typer.Option("--user", help="User whose library seeds the game"),
    ] = None,
    allowed_chars: Annotated[
        Optional[str],
        typer.Option("--allowed-chars", help=f"Accepted key class (default: {DEFAULT_ALLOWED_CHARS})"),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="Seconds to wait for the grading service"),
    ] = None,
) -> None:
    """Start a new game and play it line by line."""
    overrides = {
        "backend_url": url,
        "user": user,
        "allowed_chars": allowed_chars,
        "request_timeout_s": timeout,
    }
    try:
        config = GuessGridConfig(**{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2) from e

    code = asyncio.run(_play(config))
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    """Main entry point for the guessgrid CLI."""
    app()


if __name__ == "__main__":
    main()
