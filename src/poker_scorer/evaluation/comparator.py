"""Three-way comparison of two hand scores."""

from enum import Enum


class Outcome(str, Enum):
    FIRST_WINS = "first"
    SECOND_WINS = "second"
    TIE = "tie"

    def swapped(self) -> "Outcome":
        """The outcome seen from the other hand's side."""
        if self is Outcome.FIRST_WINS:
            return Outcome.SECOND_WINS
        if self is Outcome.SECOND_WINS:
            return Outcome.FIRST_WINS
        return Outcome.TIE


def compare_scores(first: int, second: int) -> Outcome:
    if first > second:
        return Outcome.FIRST_WINS
    if first < second:
        return Outcome.SECOND_WINS
    return Outcome.TIE
