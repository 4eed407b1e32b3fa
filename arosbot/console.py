"""Play hangman in the terminal."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from .hangman import (
    DEFAULT_ATTEMPTS,
    DEFAULT_WORD,
    GuessResult,
    HangmanError,
    HangmanGame,
)


def play(
    game: Optional[HangmanGame] = None,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], object] = print,
) -> bool:
    """Run a game to its end; True if it was won, False if lost or input ran out."""
    game = game if game is not None else HangmanGame()
    while True:
        output_func(f"\nСлово: {game.masked()}")
        output_func(f"Использованные буквы: {game.used_letters_text()}")

        if game.is_won():
            output_func("\nПоздравляем! Вы выиграли!")
            return True
        if game.is_lost():
            output_func(f"\nИгра окончена! Загаданное слово было: {game.word}")
            return False

        try:
            text = input_func("Введите букву: ")
        except EOFError:
            return False

        try:
            result = game.guess(text)
        except HangmanError as exc:
            output_func(str(exc))
            continue

        if result in (GuessResult.MISS, GuessResult.LOST):
            output_func(f"Такой буквы нет! Осталось попыток: {game.attempts}")
        else:
            output_func("Верно! Буква есть в слове.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play hangman in the terminal.")
    parser.add_argument("--word", default=DEFAULT_WORD, help="word to guess")
    parser.add_argument("--attempts", type=int, default=DEFAULT_ATTEMPTS, help="wrong guesses allowed")
    args = parser.parse_args(argv)
    if not args.word:
        parser.error("the word must not be empty")
    won = play(HangmanGame(args.word, args.attempts))
    return 0 if won else 1


if __name__ == "__main__":
    raise SystemExit(main())