"""A chat bot offering hangman and a calculator over the Telegram Bot API."""

from __future__ import annotations

import argparse
import logging
import os
import re
import time
from typing import Any, Optional, Sequence

import requests

from .calculator import ERROR_PREFIX, ExpressionError, evaluate, format_value
from .hangman import (
    DEFAULT_ATTEMPTS,
    DEFAULT_WORD,
    GuessResult,
    HangmanError,
    HangmanGame,
)

logger = logging.getLogger(__name__)

API_URL = "https://api.telegram.org"
TOKEN_ENV = "TELEGRAM_BOT_TOKEN"
POLL_TIMEOUT = 30

START_TEXT = "Привет! Я бот!\nКоманды:\n/game - игра в виселицу\n/calc - калькулятор"
CALC_PROMPT = "Пожалуйста, введите выражение после /calc"

_COMMAND_RE = re.compile(r"/([A-Za-z0-9_]{1,64})(?:@[A-Za-z0-9_]+)?")


class Command:
    """A bot command: its name and the text that follows it."""

    __slots__ = ("name", "arguments")

    def __init__(self, name: str, arguments: str) -> None:
        self.name = name
        self.arguments = arguments

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Command):
            return (self.name, self.arguments) == (other.name, other.arguments)
        if isinstance(other, tuple):
            return (self.name, self.arguments) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, arguments={self.arguments!r})"


def parse_command(text: str) -> Optional[Command]:
    """Split a message starting with '/name' into a command, or return None."""
    match = _COMMAND_RE.match(text)
    if match is None:
        return None
    rest = text[match.end():]
    return Command(match.group(1), rest[1:])


def _calculate(expression: str) -> str:
    try:
        return f"Результат: {format_value(evaluate(expression))}"
    except ExpressionError as exc:
        return f"{ERROR_PREFIX}: {exc}"


def _play_turn(game: HangmanGame, text: str) -> str:
    try:
        result = game.guess(text)
    except HangmanError as exc:
        return str(exc)
    if result is GuessResult.LOST:
        return f"Игра окончена! Загаданное слово было: {game.word}"
    if result is GuessResult.MISS:
        return f"Такой буквы нет! Осталось попыток: {game.attempts}"
    if result is GuessResult.WON:
        return f"Поздравляем! Вы выиграли!\nЗагаданное слово: {game.word}"
    return game.status()


class ChatBot:
    """Replies to chat messages, keeping one hangman game per chat."""

    def __init__(self, word: str = DEFAULT_WORD, attempts: int = DEFAULT_ATTEMPTS) -> None:
        self.word = word
        self.attempts = attempts
        self._games: dict[int, HangmanGame] = {}

    def handle(self, chat_id: int, text: str) -> str:
        """Return the reply to one message from the given chat."""
        command = parse_command(text)
        name = command.name if command is not None else None

        if name == "start":
            return START_TEXT
        if name == "game":
            game = HangmanGame(self.word, self.attempts)
            self._games[chat_id] = game
            return game.status()
        if name == "calc":
            if not command.arguments:
                return CALC_PROMPT
            return _calculate(command.arguments)

        game = self._games.get(chat_id)
        if game is not None and not (game.is_won() or game.is_lost()):
            return _play_turn(game, text)
        return text


class TelegramError(RuntimeError):
    """The Bot API reported a failure or answered with something unreadable."""


class TelegramClient:
    """A minimal Bot API client: long polling and sending text messages."""

    def __init__(self, token: str, session: Optional[Any] = None) -> None:
        self._base = f"{API_URL}/bot{token}/"
        self._session = session if session is not None else requests.Session()

    def _call(self, method: str, payload: dict, timeout: float) -> Any:
        response = self._session.post(self._base + method, json=payload, timeout=timeout)
        try:
            data = response.json()
        except ValueError as exc:
            raise TelegramError(f"{method}: response is not JSON") from exc
        if not data.get("ok"):
            raise TelegramError(f"{method}: {data.get('description', 'request failed')}")
        return data.get("result")

    def get_me(self) -> dict:
        """Describe the bot account."""
        return self._call("getMe", {}, 10)

    def get_updates(self, offset: int = 0, timeout: int = POLL_TIMEOUT) -> list:
        """Fetch pending updates starting at `offset`, waiting up to `timeout` seconds."""
        return self._call("getUpdates", {"offset": offset, "timeout": timeout}, timeout + 10)

    def send_message(self, chat_id: int, text: str) -> dict:
        """Send a text message to a chat."""
        return self._call("sendMessage", {"chat_id": chat_id, "text": text}, 10)


def run(client: Any, bot: ChatBot) -> None:
    """Poll for messages forever, answering each one."""
    offset = 0
    while True:
        try:
            updates = client.get_updates(offset, POLL_TIMEOUT)
        except (TelegramError, requests.RequestException) as exc:
            logger.warning("Failed to get updates: %s", exc)
            time.sleep(3)
            continue
        for update in updates:
            offset = max(offset, update.get("update_id", 0) + 1)
            message = update.get("message")
            if message is None:
                continue
            chat_id = message["chat"]["id"]
            text = message.get("text", "")
            sender = message.get("from", {}).get("id")
            logger.info("Received message from user %s: %s", sender, text)
            reply = bot.handle(chat_id, text)
            if not reply:
                continue
            try:
                client.send_message(chat_id, reply)
            except (TelegramError, requests.RequestException) as exc:
                logger.warning("Failed to send message: %s", exc)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Hangman and calculator chat bot.")
    parser.add_argument("--token", default=os.environ.get(TOKEN_ENV), help=f"bot token (default: ${TOKEN_ENV})")
    parser.add_argument("--word", default=DEFAULT_WORD, help="word to guess in hangman")
    parser.add_argument("--attempts", type=int, default=DEFAULT_ATTEMPTS, help="wrong guesses allowed")
    args = parser.parse_args(argv)
    if not args.token:
        parser.error(f"a bot token is required (--token or ${TOKEN_ENV})")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    client = TelegramClient(args.token)
    try:
        me = client.get_me()
    except (TelegramError, requests.RequestException) as exc:
        logger.error("Cannot start the bot: %s", exc)
        return 1
    logger.info("Бот успешно запущен! Имя бота: %s", me.get("username"))
    try:
        run(client, ChatBot(args.word, args.attempts))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())