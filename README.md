# arosbot

A small chat bot with two features, and two console games. All messages are in Russian.

- **Hangman**: guess a hidden word one letter at a time. Six wrong guesses are allowed by default.
- **Calculator**: send `/calc 2+2` and the bot replies with the value.
- **Quiz**: addition questions with single-digit numbers, answered in the terminal.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Commands

### `arosbot`

Starts the chat bot. It long-polls the Telegram Bot API and answers each incoming message.

```
arosbot --token token
```

Options:

- `--token`: the bot token. The default comes from the `TELEGRAM_BOT_TOKEN` environment variable. One of the two is required.
- `--word`: the word to guess in hangman.
- `--attempts`: the number of wrong guesses allowed.

The bot replies to messages as follows:

| Message          | Reply                                                           |
|------------------|-----------------------------------------------------------------|
| `/start`         | A greeting and the list of commands                             |
| `/game`          | Starts a new hangman game in this chat and shows its status     |
| `/calc <expr>`   | `Результат: <value>`, or an error message                       |
| `/calc` alone    | A prompt asking for an expression                               |
| any other text   | Taken as a guess while a game in this chat is still running     |

Any other message is echoed back. Commands may carry a bot name, as in `/calc@somebot 1+1`. Failed requests to the API are logged, and the bot keeps polling.

### `arosbot-hangman`

Plays hangman in the terminal. Type one letter per turn.

Options:

- `--word`: the word to guess. It must not be empty.
- `--attempts`: the number of wrong guesses allowed.

The exit status is 0 if you win. It is 1 if you lose or the input ends.

### `arosbot-quiz`

Asks random `a + b` questions and shows the score at the end. An answer that cannot be read as a whole number counts as 0.

Options:

- `--rounds`: the number of questions. The default is 5.
- `--seed`: a seed for the question generator, so that a run can be repeated.
- `--warmup`: prints a short warm-up greeting and exits.

## Hangman rules

- A guess is one character. Surrounding whitespace is ignored.
- Case does not matter when a letter is matched against the word.
- A letter typed exactly as before is refused, and it does not cost an attempt.
- A wrong letter costs one attempt. The game is lost when no attempts remain.
- The game is won when every letter is revealed.

## Calculator

The calculator accepts the following:

- **Values**:
  - Numbers, held as floats.
  - `true` and `false`.
  - Quoted strings (`"..."` or `'...'`).
- **Arithmetic**: `+ - * / %` and `**`. The `**` operator is right-associative.
- **Comparisons**: `== != < <= > >=`.
- **Logic**: `&& || !`.
- **Bitwise operators** on 64-bit integers: `& | ^ ~ << >>`.
- **Grouping**: parentheses.

Using `+` with a string joins text.

Division by zero does not raise an error. It gives `+Inf`, `-Inf` or `NaN`.

Whole numbers are shown without a fraction. Very large and very small values are shown in exponent notation. Names other than `true` and `false` are rejected, because there are no variables.

## Using it as a library

```python
from arosbot.hangman import HangmanGame, GuessResult, InvalidGuessError
from arosbot.calculator import calculate, evaluate

game = HangmanGame("mouse", 6)
print(game.status())
assert game.guess("o") is GuessResult.HIT
print(game.masked())        # _o___

print(calculate("2 + 2 * 3"))   # 8
print(evaluate("1 < 2"))        # True
```

**Hangman** (`arosbot.hangman`):

- `HangmanGame.guess` returns a `GuessResult`: `HIT`, `MISS`, `WON` or `LOST`.
- It raises `InvalidGuessError` when the input is not exactly one character.
- It raises `LetterAlreadyUsedError` when the letter was already tried.
- It raises `HangmanError` when the game is already over.
- `InvalidGuessError` and `LetterAlreadyUsedError` are subclasses of `HangmanError`.

**Calculator** (`arosbot.calculator`):

- `evaluate` raises `ExpressionError`.
- `calculate` returns the error as text instead of raising it.

**Chat bot** (`arosbot.bot`):

- `ChatBot` keeps one game per chat. Its `handle(chat_id, text)` method returns the reply text, so you can connect it to any transport.
- `TelegramClient` provides `get_updates` and `send_message`.
- `run(client, bot)` polls the client and answers messages until it is interrupted.

**Console games**:

- `arosbot.console.play` runs one game.
- `arosbot.quiz.run_quiz` runs the quiz.
- Both take input and output functions, so you can use them without a terminal.

## What it does not do

- Games are kept in memory only. They are lost when the bot stops.
- Every game in a run uses the same word. No word list or random choice is offered.
- The bot sends plain text only. It has no keyboards, no inline buttons and no webhook mode.