"""Loading of puzzle inputs from disk."""

from pathlib import Path


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8").strip()


def load_input(day: int, directory: str | Path = "inputs") -> str:
    """Return the trimmed puzzle input for ``day``."""
    return _read(Path(directory) / f"input-{day}.txt")


def load_test_input(day: int, directory: str | Path = "inputs") -> str:
    """Return the trimmed example input for ``day``."""
    return _read(Path(directory) / f"input-{day}-test.txt")