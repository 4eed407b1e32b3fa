"""The hangman word-guessing game."""

from __future__ import annotations

from enum import Enum

DEFAULT_WORD = "вылысыпыдыстычкы"
DEFAULT_ATTEMPTS = 6


class GuessResult(Enum):
    """Outcome of a single accepted guess."""

    HIT = "hit"
    MISS = "miss"
    WON = "won"
    LOST = "lost"


class HangmanError(Exception):
    """Base class for hangman errors."""


class InvalidGuessError(HangmanError):
    """The guess is not exactly one character."""

    def __init__(self, message: str = "Пожалуйста, введите только одну букву!") -> None:
        super().__init__(message)


class LetterAlreadyUsedError(HangmanError):
    """The letter has been tried before."""

    def __init__(self, message: str = "Эта буква уже была использована!") -> None:
        super().__init__(message)


class HangmanGame:
    """State of one hangman round: the hidden word, revealed letters and attempts left."""

    def __init__(self, word: str = DEFAULT_WORD, attempts: int = DEFAULT_ATTEMPTS) -> None:
        self.word = word
        self.attempts = attempts
        self.used_letters: list[str] = []
        self._revealed = [False] * len(word)

    def masked(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return "".join(
            char if revealed else "_" for char, revealed in zip(self.word, self._revealed)
        )

    def used_letters_text(self) -> str:
        """The letters tried so far, comma separated, in the order they were tried."""
        return ", ".join(self.used_letters)

    def status(self) -> str:
        """A multi-line summary of the current state."""
        return (
            f"Слово: {self.masked()}\n"
            f"Использованные буквы: {self.used_letters_text()}\n"
            f"Осталось попыток: {self.attempts}"
        )

    def is_won(self) -> bool:
        """True once every letter of the word is revealed."""
        return all(self._revealed)

    def is_lost(self) -> bool:
        """True once no attempts remain."""
        return self.attempts <= 0

    def guess(self, text: str) -> GuessResult:
        """Try one letter; surrounding whitespace is ignored and case does not matter."""
        if self.is_won() or self.is_lost():
            raise HangmanError("Игра окончена")

        letter = text.strip()
        if len(letter) != 1:
            raise InvalidGuessError()
        if letter in self.used_letters:
            raise LetterAlreadyUsedError()
        self.used_letters.append(letter)

        wanted = letter.lower()
        found = False
        for position, char in enumerate(self.word):
            if char.lower() == wanted:
                self._revealed[position] = True
                found = True

        if not found:
            self.attempts -= 1
            return GuessResult.LOST if self.is_lost() else GuessResult.MISS
        return GuessResult.WON if self.is_won() else GuessResult.HIT