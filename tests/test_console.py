import pytest

from arosbot.console import main, play
from arosbot.hangman import HangmanGame


def _scripted(answers):
    replies = iter(answers)
    prompts = []

    def input_func(prompt):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return input_func, prompts


def test_win():
    output = []
    input_func, prompts = _scripted(["д", "а"])
    assert play(HangmanGame("да", 3), input_func, output.append) is True
    assert output[-1] == "\nПоздравляем! Вы выиграли!"
    assert output.count("Верно! Буква есть в слове.") == 2
    assert prompts == ["Введите букву: "] * 2


def test_loss():
    output = []
    input_func, _ = _scripted(["x", "y"])
    assert play(HangmanGame("да", 2), input_func, output.append) is False
    assert output[-1] == "\nИгра окончена! Загаданное слово было: да"
    assert "Такой буквы нет! Осталось попыток: 0" in output


def test_invalid_and_repeated_letters_cost_nothing():
    output = []
    game = HangmanGame("да", 1)
    input_func, _ = _scripted(["", "дд", "д", "д", "а"])
    assert play(game, input_func, output.append) is True
    assert "Пожалуйста, введите только одну букву!" in output
    assert "Эта буква уже была использована!" in output
    assert game.attempts == 1


def test_status_shows_progress_and_used_letters():
    output = []
    input_func, _ = _scripted(["д"])
    play(HangmanGame("да", 3), input_func, output.append)
    assert output[0] == "\nСлово: __"
    assert "\nСлово: д_" in output
    assert "Использованные буквы: д" in output


def test_end_of_input_stops_game():
    output = []
    input_func, _ = _scripted([])
    assert play(HangmanGame("да", 3), input_func, output.append) is False


def test_main_rejects_empty_word():
    with pytest.raises(SystemExit):
        main(["--word", ""])