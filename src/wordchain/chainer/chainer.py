"""Main driver module: read a word list, chain the words, and write the chain out."""

import sys
from datetime import datetime
from os import PathLike
from pathlib import Path
from time import time
from typing import TextIO

from wordchain.chainer.config import config as chainer_config
from wordchain.chainer.policies import (
    ChainMode,
    NoChainExistsError,
    UnknownModeError,
    WordChainError,
    get_policy,
    parse_mode,
)
from wordchain.chainer.utils import TIMESTAMP_FMT, int_comma, is_circular_chain, time_str
from wordchain.wordlist import load_words, output_path, write_words

SEPARATOR = "─" * 40


def _log(logf: TextIO | None, *lines: str) -> None:
    """Write lines to the log file, if there is one."""
    if logf is None:
        return
    for line in lines:
        print(line, file=logf, flush=True)


def build_word_chain(
    words_path: str | PathLike,
    mode: ChainMode | str,
    *,
    logf: TextIO | None = None,
) -> list[str]:
    """Read a word list and arrange all of its words into a chain.

    Args:
        words_path: Path to a file of whitespace-separated words.
        mode (ChainMode | str): The chaining mode, or a mode code such as "circuit".
        logf: Optional file object to log the chaining process.

    Returns:
        The chained words.

    Raises:
        UnknownModeError: If `mode` is not a valid mode code.
        ValueError: If the file contains no words.
        WordChainError: If the words cannot be chained.
    """
    policy = get_policy(mode)

    words = load_words(words_path)
    if not words:
        raise ValueError(f"No words found in {words_path}")
    _log(logf, f"Policy: {policy.name}", f"Words read: {int_comma(len(words))}")

    chain = policy.chain(words)
    _log(
        logf,
        f"Chain length: {int_comma(len(chain))}",
        f"Closed: {is_circular_chain(chain)}",
    )
    return chain


def run(words_path: str | PathLike, mode: str) -> int:
    """Chain the words in a file and write the chain beside it.

    The output is written to `<stem>-<mode><suffix>` in the same directory as the input.
    When `write_log_file` is set, a run log is written under `<log_dir>/<mode>/`.

    Args:
        words_path: Path to a file of whitespace-separated words.
        mode (str): The mode code, e.g. "path" or "circuit".

    Returns:
        Process exit code: 0 on success, or when no chain exists and an empty output is
        written instead, otherwise 1.
    """
    try:
        chain_mode = parse_mode(mode)
    except UnknownModeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not chainer_config.write_log_file:
        return run_one(words_path, chain_mode, logf=None)

    logfile = Path(chainer_config.log_dir) / chain_mode / f"{Path(words_path).stem}.log"
    print(f"Log file: {logfile}")
    try:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        logf = open(logfile, "w", encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot create log file: {e}", file=sys.stderr)
        return 1

    with logf:
        return run_one(words_path, chain_mode, logf=logf)


def run_one(words_path: str | PathLike, mode: ChainMode, *, logf: TextIO | None) -> int:
    """Chain one word list and write the output file.  See `run`."""
    out_path = output_path(words_path, mode)
    start_time = time()
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    _log(logf, f"Input: {words_path}", f"Mode: {mode}", f"Start time: {start_time_str}")

    print(f"Processing: {words_path}")
    print(f"Mode: {mode}")
    print(SEPARATOR)

    try:
        chain = build_word_chain(words_path, mode, logf=logf)
        write_words(out_path, chain)
    except NoChainExistsError as e:
        print(SEPARATOR)
        print(f"Error: {e}", file=sys.stderr)
        _log(logf, f"No chain found: {e.reason}")
        if not chainer_config.empty_output_on_failure:
            return 1
        print("Cannot form a valid chain with the given words.")
        try:
            write_words(out_path, [])
        except OSError as write_error:
            print(f"Error: {write_error}", file=sys.stderr)
            _log(logf, f"Error: {write_error}")
            return 1
        print(f"Empty file created: {out_path}")
        _log(logf, f"Output: {out_path} (empty)")
        return 0
    except (WordChainError, ValueError, OSError) as e:
        print(SEPARATOR)
        print(f"Error: {e}", file=sys.stderr)
        _log(logf, f"Error: {e}")
        return 1

    elapsed = time_str(time() - start_time)
    print(f"Words processed: {int_comma(len(chain))}")
    print(SEPARATOR)
    print("Success!")
    print(f"Output written to: {out_path}")
    _log(logf, f"Output: {out_path}", f"Time taken: {elapsed}")
    return 0
