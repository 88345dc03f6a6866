from __future__ import annotations

import sys
from typing import List, Optional, Protocol, Sequence, TextIO, Tuple

class Prompter(Protocol):
    def choose_one(self, prompt: str, options: Sequence[str], default_index: int = 0) -> int:
        ...

    def confirm(self, prompt: str, default: bool = True) -> bool:
        ...

_YES = {"y", "yes"}
_NO = {"n", "no"}

class ConsolePrompter:
    """
    Numbered menu / yes-no questions on a text stream pair.
    Blocks until a valid answer is given; EOF on input propagates as EOFError.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _ask(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("no answer on input")
        return line.strip()

    def choose_one(self, prompt: str, options: Sequence[str], default_index: int = 0) -> int:
        if not options:
            raise ValueError("choose_one needs at least one option")
        self.stdout.write(f"{prompt}\n")
        for i, opt in enumerate(options, start=1):
            marker = ">" if i - 1 == default_index else " "
            self.stdout.write(f" {marker} {i}) {opt}\n")
        while True:
            answer = self._ask(f"Choice [{default_index + 1}]: ")
            if not answer:
                return default_index
            if answer.isdecimal() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            self.stdout.write(f"Please enter a number between 1 and {len(options)}.\n")

    def confirm(self, prompt: str, default: bool = True) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._ask(f"{prompt} [{hint}] ").lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self.stdout.write("Please answer 'y' or 'n'.\n")

class ScriptedPrompter:
    """Replays fixed answers in order and records what was asked."""

    def __init__(self, choices: Sequence[int] = (), confirmations: Sequence[bool] = ()) -> None:
        self.choices: List[int] = list(choices)
        self.confirmations: List[bool] = list(confirmations)
        self.menus: List[Tuple[str, List[str], int]] = []
        self.questions: List[Tuple[str, bool]] = []

    def choose_one(self, prompt: str, options: Sequence[str], default_index: int = 0) -> int:
        self.menus.append((prompt, list(options), default_index))
        if not self.choices:
            raise AssertionError(f"unexpected menu: {prompt}")
        return self.choices.pop(0)

    def confirm(self, prompt: str, default: bool = True) -> bool:
        self.questions.append((prompt, default))
        if not self.confirmations:
            raise AssertionError(f"unexpected confirmation: {prompt}")
        return self.confirmations.pop(0)
