"""
utils/console.py
----------------
Thin wrapper around stdin/stdout used by every console handler.
Tests drive handlers by passing scripted ``read``/``write`` callables.
"""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from models.result import Result


class Console:
    """Prompt/print helpers with retry-on-parse-failure."""

    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self._read = read
        self._write = write

    def say(self, text: str = "") -> None:
        self._write(text)

    def ask(self, prompt: str, default: str = "") -> str:
        """Read a line; blank input (or end of input) yields ``default``."""
        try:
            answer = self._read(prompt).strip()
        except EOFError:
            return default
        return answer or default

    def ask_int(
        self,
        prompt: str,
        accept: Optional[Callable[[int], bool]] = None,
        retry_prompt: str = "Invalid input. Please enter a number: ",
    ) -> int:
        """Read an integer, re-asking until one parses (and passes ``accept``)."""
        answer = self._read(prompt)
        while True:
            try:
                value = int(answer.strip())
                if accept is None or accept(value):
                    return value
            except ValueError:
                pass
            answer = self._read(retry_prompt)

    def ask_decimal(
        self,
        prompt: str,
        accept: Optional[Callable[[Decimal], bool]] = None,
        retry_prompt: str = "Invalid amount. Please enter a positive number: ",
    ) -> Decimal:
        """Read a decimal amount, re-asking until one parses (and passes ``accept``)."""
        answer = self._read(prompt)
        while True:
            try:
                value = Decimal(answer.strip())
                if value.is_finite() and (accept is None or accept(value)):
                    return value
            except InvalidOperation:
                pass
            answer = self._read(retry_prompt)

    def report(self, result: Result, success_text: str = "") -> None:
        """Print a result: ``success_text`` on success, the error message otherwise."""
        if result.success:
            if success_text or result.message:
                self.say(success_text or result.message)
        else:
            self.say(f"Error: {result.message}")
