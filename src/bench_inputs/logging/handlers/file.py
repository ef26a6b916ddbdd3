import os
from typing import TextIO

from bench_inputs.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """Writes flushed log batches to a file held open until ``close``.

    Args:
        filepath: Destination path. Existing content is kept; new lines are
            appended.
        create: Create missing parent directories. Without it, a missing
            directory raises ``FileNotFoundError``.
        encoding: Text encoding of the file.
    """

    def __init__(
        self,
        filepath: str | os.PathLike[str],
        create: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        super().__init__()
        self.filepath = os.fspath(filepath)

        if create:
            directory = os.path.dirname(self.filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)

        self._file: TextIO = open(self.filepath, "a", encoding=encoding)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def push(self, buffer: list[str]) -> None:
        if self._file.closed:
            raise ValueError(f"FileLogHandler for {self.filepath!r} is closed")
        self._file.writelines(line + "\n" for line in buffer)
        self._file.flush()

    def close(self) -> None:
        self._file.close()
