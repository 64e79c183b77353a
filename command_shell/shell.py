import logging
import sys
from typing import Callable, Dict, TextIO

from sortedseq.models.exceptions import ValidationError
from sortedseq.security.validator import InputValidator

from .request import CommandRequest
from .response import Reply, reply

logger = logging.getLogger()

Handler = Callable[[CommandRequest], "Reply | str"]


class CommandShell:
    def __init__(
        self,
        input: TextIO | None = None,
        output: TextIO | None = None,
        validator: InputValidator | None = None,
        prompt: str = "> ",
    ):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.validator = validator or InputValidator()
        self.prompt = prompt
        self.commands: Dict[str, Handler] = {}
        self._running = False

    def command(self, name: str):
        """Decorator for registering command handlers"""
        def decorator(handler):
            self.commands[name.lower()] = handler
            return handler
        return decorator

    @property
    def running(self) -> bool:
        return self._running

    def handle_line(self, line: str) -> Reply:
        """Validate one input line and route it to its handler"""
        try:
            sanitized = self.validator.validate_input(line)
        except ValidationError as e:
            return reply(str(e), success=False)

        request = CommandRequest.parse(sanitized)

        if request.name == "quit":
            self._running = False
            return reply("Goodbye!")

        try:
            self.validator.validate_command(request.name)
        except ValidationError as e:
            return reply(str(e), success=False)

        return self.dispatch(request)

    def dispatch(self, request: CommandRequest) -> Reply:
        handler = self.commands.get(request.name)

        if handler is None:
            available = ", ".join(self.validator.ALLOWED_COMMANDS)
            return reply(
                f"Unknown command: {request.name}\nAvailable commands: {available}"
            )

        try:
            result = handler(request)

            if isinstance(result, Reply):
                return result
            elif isinstance(result, str):
                return reply(result)

            raise TypeError("Handler result cannot be converted to a reply")
        except Exception as e:
            logger.error(f"Handler error for {request.name!r}: {e}")
            return reply(f"Internal error: {e}", success=False)

    def write(self, text: str) -> None:
        self.output.write(text + "\n")
        self.output.flush()

    def run(self) -> None:
        """Read commands until quit or end of input"""
        self.write("=== sortedseq shell ===")
        self.write("Commands: insert <value>, remove <value>, contains <value>, stats, clear, quit\n")
        logger.info("Shell started")

        self._running = True
        while self._running:
            self.output.write(self.prompt)
            self.output.flush()

            line = self.input.readline()
            if line == "":
                self._running = False
                self.write("Goodbye!")
                break

            logger.debug(f"--> {line.strip()!r}")
            self.write(self.handle_line(line).render())

        logger.info("Shell stopped")
