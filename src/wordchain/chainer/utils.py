"""Utility functions for the word chain builder."""

from collections.abc import Sequence

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def first_letter(word: str) -> str:
    """Return the case-folded first letter of a non-empty word."""
    return word[0].lower()


def last_letter(word: str) -> str:
    """Return the case-folded last letter of a non-empty word."""
    return word[-1].lower()


def is_valid_chain(chain: Sequence[str]) -> bool:
    """Returns whether each word starts with the last letter of the previous word.

    Args:
        chain (Sequence[str]): The ordered words to check.
    """
    return all(last_letter(a) == first_letter(b) for a, b in zip(chain, chain[1:]))


def is_circular_chain(chain: Sequence[str]) -> bool:
    """Returns whether the chain is valid and its last word leads back to its first word.

    An empty chain is considered circular.
    """
    if not chain:
        return True
    return is_valid_chain(chain) and last_letter(chain[-1]) == first_letter(chain[0])


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
