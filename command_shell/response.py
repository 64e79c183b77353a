from dataclasses import dataclass

SUCCESS_MARK = "✓"
FAILURE_MARK = "✗"


@dataclass
class Reply:
    text: str
    success: bool | None = None

    def render(self) -> str:
        """Prefix the text with a success/failure mark; informational replies stay bare."""
        if self.success is None:
            return self.text
        mark = SUCCESS_MARK if self.success else FAILURE_MARK
        return f"{mark} {self.text}"


def reply(text: str, success: bool | None = None) -> Reply:
    return Reply(text=text, success=success)
