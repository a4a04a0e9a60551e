"""Word chain builder configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class ChainerConfig(BaseSettings):
    """Configuration settings for the word chain builder."""

    deterministic: bool = True
    """Whether to enumerate graph nodes in sorted order. Default: True.

    If False, nodes are enumerated in the order they were first seen, so the chain found
    depends on the order of the input words as well as their letters.
    """

    log_dir: str = "logs"
    """Root directory for run logs. Default: "logs"."""

    write_log_file: bool = True
    """Whether to write a log file for each run. Default: True."""

    empty_output_on_failure: bool = True
    """Write an empty output file when the words cannot be chained. Default: True.

    If False, such runs write nothing and exit with a non-zero status instead.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORDCHAIN_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = ChainerConfig()
