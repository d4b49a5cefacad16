"""Error raised when a scan root is missing or not a directory."""

from pathlib import Path


class RootNotFoundError(FileNotFoundError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Directory not found: {self.path}")
