"""Read-eval-print loop for Chipmunk.

Each line is evaluated on its own; an error aborts that line only and the
session (and every definition made so far) carries on.
"""

from __future__ import annotations

import logging

from chipmunk import config
from chipmunk.errors import ChipmunkError
from chipmunk.interpreter import Interpreter
from chipmunk.io_handler import ConsoleIO, IOHandler

logger = logging.getLogger(__name__)


class Repl:
    def __init__(self, interpreter: Interpreter, io: IOHandler, prompt: str | None = None):
        self.interpreter = interpreter
        self.io = io
        self.prompt = prompt if prompt is not None else config.get_prompt()

    def step(self, line: str) -> None:
        """Evaluate one line and write its result or its error."""
        if not line.strip():
            return
        try:
            value = self.interpreter.eval(line)
        except ChipmunkError as e:
            logger.debug("error evaluating %r: %s", line, e)
            self.io.write_line(f"error: {e}")
            return
        self.io.write_line(self.interpreter.render(value))

    def run(self) -> None:
        while (line := self.io.read_line(self.prompt)) is not None:
            self.step(line)


def main() -> None:
    level = config.get_log_level()
    if level is not None:
        logging.basicConfig(level=level)
    io = ConsoleIO()
    Repl(Interpreter(io), io).run()


if __name__ == "__main__":
    main()
