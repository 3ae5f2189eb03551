"""Line-oriented input/output used by `log` and the REPL.

Evaluation never touches the console directly; it writes through whichever
handler the root environment was built with.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol


class IOHandler(Protocol):
    def write_line(self, text: str) -> None: ...

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        ...


class ConsoleIO:
    """Standard input/output."""

    def write_line(self, text: str) -> None:
        print(text)

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except EOFError:
            return None


class BufferedIO:
    """Records output and replays scripted input."""

    def __init__(self, lines: Iterable[str] = ()):
        self.pending: list[str] = list(lines)
        self.output: list[str] = []

    def write_line(self, text: str) -> None:
        self.output.append(text)

    def read_line(self, prompt: str = "") -> Optional[str]:
        if not self.pending:
            return None
        return self.pending.pop(0)

    def getvalue(self) -> str:
        return "".join(line + "\n" for line in self.output)
