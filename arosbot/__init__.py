"""Chat bot with hangman and a calculator, plus console hangman and an addition quiz."""

__version__ = "0.1.0"