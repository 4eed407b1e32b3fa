import pytest

from arosbot.bot import (
    CALC_PROMPT,
    START_TEXT,
    ChatBot,
    TelegramClient,
    TelegramError,
    parse_command,
    run,
)
from arosbot.calculator import ERROR_PREFIX


class _FakeResponse:
    def __init__(self, data):
        self._data = data

    def json(self):
        if isinstance(self._data, Exception):
            raise self._data
        return self._data


class _FakeSession:
    def __init__(self, data):
        self.data = data
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append((url, json, timeout))
        return _FakeResponse(self.data)


class _Done(Exception):
    pass


class _FakeClient:
    def __init__(self, batches):
        self.batches = list(batches)
        self.offsets = []
        self.sent = []

    def get_updates(self, offset, timeout):
        self.offsets.append(offset)
        if not self.batches:
            raise _Done()
        return self.batches.pop(0)

    def send_message(self, chat_id, text):
        self.sent.append((chat_id, text))


def _message(update_id, chat_id, text):
    return {"update_id": update_id, "message": {"chat": {"id": chat_id}, "from": {"id": chat_id}, "text": text}}


def test_parse_command_with_arguments():
    assert parse_command("/calc 2+2") == ("calc", "2+2")


def test_parse_command_strips_bot_name():
    assert parse_command("/calc@SomeBot 1+2") == ("calc", "1+2")


def test_parse_command_without_arguments():
    assert parse_command("/start") == ("start", "")


def test_parse_command_plain_text():
    assert parse_command("hello") is None


def test_start_reply():
    assert ChatBot().handle(1, "/start") == START_TEXT


def test_calc_without_expression_prompts():
    assert ChatBot().handle(1, "/calc") == CALC_PROMPT


def test_calc_result():
    assert ChatBot().handle(1, "/calc 2+2") == "Результат: 4"


def test_calc_error():
    reply = ChatBot().handle(1, "/calc 1+")
    assert reply.startswith(ERROR_PREFIX + ": ")


def test_echo_without_game():
    assert ChatBot().handle(1, "привет") == "привет"


def test_game_starts_with_hidden_word():
    bot = ChatBot(word="кот", attempts=3)
    reply = bot.handle(1, "/game")
    assert reply.splitlines()[0] == "Слово: ___"
    assert reply.splitlines()[-1] == "Осталось попыток: 3"


def test_game_hit_shows_status():
    bot = ChatBot(word="кот", attempts=3)
    bot.handle(1, "/game")
    reply = bot.handle(1, "к")
    assert reply.startswith("Слово: к__")


def test_game_win():
    bot = ChatBot(word="да", attempts=3)
    bot.handle(1, "/game")
    bot.handle(1, "д")
    assert bot.handle(1, "А") == "Поздравляем! Вы выиграли!\nЗагаданное слово: да"
    assert bot.handle(1, "после") == "после"


def test_game_miss_and_loss():
    bot = ChatBot(word="да", attempts=2)
    bot.handle(1, "/game")
    assert bot.handle(1, "x") == "Такой буквы нет! Осталось попыток: 1"
    assert bot.handle(1, "y") == "Игра окончена! Загаданное слово было: да"


def test_game_invalid_and_repeated_input():
    bot = ChatBot(word="да", attempts=2)
    bot.handle(1, "/game")
    assert bot.handle(1, "дa дa") == "Пожалуйста, введите только одну букву!"
    bot.handle(1, "x")
    assert bot.handle(1, " x ") == "Эта буква уже была использована!"


def test_games_are_per_chat():
    bot = ChatBot(word="да", attempts=2)
    bot.handle(1, "/game")
    assert bot.handle(2, "д") == "д"


def test_client_sends_message():
    session = _FakeSession({"ok": True, "result": {"message_id": 7}})
    client = TelegramClient("token", session)
    result = client.send_message(5, "hi")
    assert result == {"message_id": 7}
    url, payload, _ = session.calls[0]
    assert url == "https://api.telegram.org/bottoken/sendMessage"
    assert payload == {"chat_id": 5, "text": "hi"}


def test_client_get_updates_payload():
    session = _FakeSession({"ok": True, "result": []})
    client = TelegramClient("token", session)
    assert client.get_updates(3, 0) == []
    url, payload, _ = session.calls[0]
    assert url.endswith("/getUpdates")
    assert payload == {"offset": 3, "timeout": 0}


def test_client_raises_on_failure():
    session = _FakeSession({"ok": False, "description": "Unauthorized"})
    with pytest.raises(TelegramError, match="Unauthorized"):
        TelegramClient("token", session).get_me()


def test_client_raises_on_non_json():
    session = _FakeSession(ValueError("bad"))
    with pytest.raises(TelegramError):
        TelegramClient("token", session).get_me()


def test_run_answers_messages_and_advances_offset():
    client = _FakeClient([
        [_message(10, 1, "/start"), {"update_id": 11}],
        [_message(12, 1, "/calc 1+1")],
    ])
    with pytest.raises(_Done):
        run(client, ChatBot())
    assert client.sent[0] == (1, START_TEXT)
    assert client.sent[1][1].startswith("Результат: ")
    assert client.offsets == [0, 12, 13]