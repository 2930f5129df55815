"""The interactive read-tokenize loop."""

from __future__ import annotations

import signal
import sys
from typing import Callable, TextIO

from minish.prompt import Prompt
from minish.tokens import Token, format_token_indices, format_tokens, tokenize

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platform without readline
    _readline = None


def sigint_handler(signum: int, frame: object) -> None:
    """Start a fresh, empty prompt line on Ctrl-C."""
    sys.stdout.write("\n")
    sys.stdout.flush()
    raise KeyboardInterrupt


def setup_signals() -> None:
    """Install the Ctrl-C handler and ignore SIGQUIT."""
    signal.signal(signal.SIGINT, sigint_handler)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)


class Shell:
    """Reads lines, keeps their history and prints their tokens."""

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._input = input if input_func is None else input_func
        self._out = out
        self._err = err
        self.history: list[str] = []

    @property
    def out(self) -> TextIO:
        return sys.stdout if self._out is None else self._out

    @property
    def err(self) -> TextIO:
        return sys.stderr if self._err is None else self._err

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _add_history(self, line: str) -> None:
        self.history.append(line)
        if _readline is not None:
            _readline.add_history(line)

    def _clear_history(self) -> None:
        self.history.clear()
        clear = getattr(_readline, "clear_history", None)
        if clear is not None:
            clear()

    def handle_input(self, line: str | None) -> bool:
        """Record ``line``; return False when input has ended."""
        if line is None:
            self._write("exit\n")
            return False
        if line:
            self._add_history(line)
        if line == "history -c":
            self._clear_history()
            self._write("history cleared\n")
        return True

    def process(self, line: str) -> list[Token]:
        """Tokenize ``line``, print the tokens and return them."""
        tokens = tokenize(line, self.err)
        self._write(format_token_indices(tokens))
        self._write(format_tokens(tokens))
        return tokens

    def _read(self, prompt: str) -> str | None:
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def run(self) -> None:
        """Prompt for lines until end of input."""
        while True:
            try:
                prompt = Prompt.from_environment()
                line = self._read(prompt.colored() or "")
                if not self.handle_input(line):
                    break
                self.process(line)  # type: ignore[arg-type]
            except KeyboardInterrupt:
                continue


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell; command-line arguments are ignored."""
    setup_signals()
    Shell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())