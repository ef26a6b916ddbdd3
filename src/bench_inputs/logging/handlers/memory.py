from bench_inputs.logging.handlers.base import BaseLogHandler


class MemoryLogHandler(BaseLogHandler):
    """A log handler that keeps every pushed message in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[str] = []
        self.pushes = 0

    def push(self, buffer: list[str]) -> None:
        self.records.extend(buffer)
        self.pushes += 1

    def clear(self) -> None:
        """Forget all recorded messages."""
        self.records.clear()
        self.pushes = 0
