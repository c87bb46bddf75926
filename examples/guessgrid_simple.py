#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Simple example of driving a guessgrid game from code.

This demonstrates:
1. Starting a game on the grading server
2. Typing keys into the grid
3. Submitting a guess and waiting for its grades
4. Reading the history and keyboard hints

Usage:
    python examples/guessgrid_simple.py [guess ...]
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from guessgrid import ENTER, Game, GradingClient, GuessGridConfig


async def run(guesses):
    print("🔤 Simple guessgrid example")
    print("=" * 60)

    # Ensure a grading server is running at $GUESSGRID_BACKEND_URL
    config = GuessGridConfig()
    async with GradingClient.from_config(config) as client:
        game = await Game.start(client, config)
        print(f"\n📍 Game {game.game_id}: word lengths {list(game.word_lengths)}")

        for guess in guesses:
            if game.solved:
                break
            for key in guess.replace(" ", ""):
                game.press(key)
            task = game.press(ENTER)
            if task is None:
                print(f"   {guess!r} does not fill the grid, skipping")
                while game.grid.cursor:
                    game.press("Backspace")
                continue

            await task
            if game.error:
                print(f"   ❌ {guess!r}: {game.error}")
                while game.grid.cursor:
                    game.press("Backspace")
                continue
            record = game.history.latest
            for word in record:
                print(f"   {word.text}: {[g.value for g in word.grades]}")

        hints = game.history.letter_grades()
        print(f"\n✅ {len(game.history)} guesses, solved={game.solved}")
        print(f"   Letter hints: {dict(sorted((k, v.value) for k, v in hints.items()))}")


def main():
    guesses = sys.argv[1:] or ["crane", "slate"]
    asyncio.run(run(guesses))


if __name__ == "__main__":
    main()
