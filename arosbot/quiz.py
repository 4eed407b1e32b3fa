"""A quick mental-arithmetic quiz and a warm-up greeting."""

from __future__ import annotations

import argparse
import random
from typing import Callable, Optional, Sequence

DEFAULT_ROUNDS = 5


def _read_answer(text: str) -> int:
    fields = text.split()
    if not fields:
        return 0
    try:
        return int(fields[0])
    except ValueError:
        return 0


def run_quiz(
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], object] = print,
    rng: Optional[random.Random] = None,
    rounds: int = DEFAULT_ROUNDS,
) -> int:
    """Ask `rounds` sums of two digits; unreadable answers count as 0. Returns the score."""
    rng = rng if rng is not None else random.Random()
    score = 0
    for _ in range(rounds):
        a, b = rng.randrange(10), rng.randrange(10)
        try:
            reply = input_func(f"{a} + {b} = ")
        except EOFError:
            reply = ""
        if _read_answer(reply) == a + b:
            score += 1
            output_func("✅ Верно!")
        else:
            output_func("❌ Неверно!")
    output_func(f"Твой счет: {score}/{rounds}")
    return score


def warmup(output_func: Callable[[str], object] = print) -> None:
    """Print the warm-up greeting."""
    output_func("Стартуем интенсив! 🚀")
    output_func(f"2 + 2 = {2 + 2}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Quick addition quiz.")
    parser.add_argument("--warmup", action="store_true", help="print the warm-up greeting and exit")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS, help="number of questions")
    parser.add_argument("--seed", type=int, default=None, help="seed for the question generator")
    args = parser.parse_args(argv)

    if args.warmup:
        warmup()
        return 0
    run_quiz(rng=random.Random(args.seed), rounds=args.rounds)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())