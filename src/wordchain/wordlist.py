"""Module for reading word lists and writing chains."""

from os import PathLike
from pathlib import Path


def load_words(words_path: str | PathLike) -> list[str]:
    """Load whitespace-separated words from a text file.

    Args:
        words_path: Path to the word list.

    Returns:
        The words, in file order.  Empty tokens are dropped.
    """
    path = Path(words_path)
    if not path.is_file():
        raise FileNotFoundError(f"Word list file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return f.read().split()


def write_words(output_path: str | PathLike, words: list[str]) -> None:
    """Write words to a file, one per line."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write("\n".join(words))


def output_path(input_path: str | PathLike, mode: str) -> Path:
    """Get the output path for a chain: `<stem>-<mode><suffix>`, beside the input file.

    A leading "--" is dropped from `mode`, so "--circular" gives e.g. `words-circular.txt`.
    """
    path = Path(input_path)
    return path.with_name(f"{path.stem}-{mode.removeprefix('--')}{path.suffix}")
