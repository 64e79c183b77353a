import math
import re
from dataclasses import dataclass

# Plain ASCII decimal notation only; int()/float() also take "1_000" and non-ASCII digits
NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass
class CommandRequest:
    name: str
    argument: str | None

    @classmethod
    def parse(cls, line: str) -> "CommandRequest":
        """Split a sanitized line into command name and first argument."""
        parts = line.split()
        return cls(
            name=parts[0] if parts else "",
            argument=parts[1] if len(parts) > 1 else None,
        )

    def has_argument(self) -> bool:
        return self.argument is not None

    def value(self) -> int | str:
        """
        Interpret the argument as a sequence value.

        Numeric-looking arguments become ints (fractions truncated toward
        zero); anything else is returned as text.
        """
        if self.argument is None:
            raise ValueError("Missing value")

        trimmed = self.argument.strip()
        if len(trimmed) == 0:
            raise ValueError("Value cannot be empty")

        if not NUMBER_RE.fullmatch(trimmed):
            return trimmed

        try:
            return int(trimmed)
        except ValueError:
            pass

        number = float(trimmed)
        # Exponents past the float range overflow to inf
        if not math.isfinite(number):
            return trimmed
        return int(number)
