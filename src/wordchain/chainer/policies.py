"""Chaining policies: open chains (Eulerian paths) and closed chains (Eulerian circuits)."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum

from wordchain.chainer.utils import first_letter, last_letter
from wordchain.graph import Eligibility, LetterGraph


class WordChainError(Exception):
    """Base class for errors raised while chaining words."""

    pass


class NoChainExistsError(WordChainError):
    """Exception raised when the words cannot be arranged into the requested chain."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(f"{message} ({reason}).")
        self.reason = reason


class NoPathExistsError(NoChainExistsError):
    """Exception raised when no open chain uses every word exactly once."""

    pass


class NoCircuitExistsError(NoChainExistsError):
    """Exception raised when no closed chain uses every word exactly once."""

    pass


class SingleWordNotCircularError(WordChainError):
    """Exception raised when a lone word cannot form a circle by itself."""

    def __init__(self, word: str) -> None:
        self.word = word
        self.first = first_letter(word)
        self.last = last_letter(word)
        super().__init__(
            f"Cannot create a circular chain with the single word '{word}': "
            f"first letter '{self.first}' does not equal last letter '{self.last}'."
        )


class InternalInconsistencyError(WordChainError, RuntimeError):
    """Exception raised when a chain found for a circuit does not close."""

    pass


class UnknownModeError(ValueError):
    """Exception raised for an unrecognised chaining mode."""

    pass


class ChainMode(StrEnum):
    """Enumeration for chaining modes."""

    PATH = "path"
    CIRCUIT = "circuit"


MODE_ALIASES = {"chain": ChainMode.PATH, "circular": ChainMode.CIRCUIT}
"""Legacy mode codes, still accepted on the command line."""


def parse_mode(code: str) -> ChainMode:
    """Convert a mode code such as "circuit", "--circular" or "PATH" to a `ChainMode`."""
    key = code.removeprefix("--").lower()
    if key in MODE_ALIASES:
        return MODE_ALIASES[key]
    try:
        return ChainMode(key)
    except ValueError:
        valid = ", ".join([*ChainMode, *MODE_ALIASES])
        raise UnknownModeError(f"Invalid mode: {code!r}. Available modes: {valid}") from None


class ChainPolicy(ABC):
    """Arranges words so each starts with the last letter of the previous word.

    Subclasses decide which Eulerian trails are acceptable and how a lone word is handled.
    """

    mode: ChainMode
    name: str

    def chain(self, words: Sequence[str]) -> list[str]:
        """Order all of `words` into a chain.

        Args:
            words (Sequence[str]): Words, in the order supplied by the caller.  Empty strings
                are ignored.

        Returns:
            A permutation of `words` where each word starts with the last letter of the
            previous one.

        Raises:
            WordChainError: If no such arrangement exists.
        """
        words = [word for word in words if word]
        if not words:
            return []
        if len(words) == 1:
            return self.chain_single(words[0])

        graph = LetterGraph(words)
        eligibility = graph.analyze_eulerian_eligibility()
        if not self.accepts(eligibility) or eligibility.start_node is None:
            self.reject(graph)

        chain = graph.extract_eulerian_trail(eligibility.start_node)
        self.verify(chain)
        return chain

    def chain_single(self, word: str) -> list[str]:
        """Handle the one-word case."""
        return [word]

    @abstractmethod
    def accepts(self, eligibility: Eligibility) -> bool:
        """Return whether a graph with the given eligibility can be chained by this policy."""

    @abstractmethod
    def reject(self, graph: LetterGraph) -> None:
        """Raise the error for a graph this policy cannot chain."""

    def verify(self, chain: list[str]) -> None:
        """Check the extracted chain before it is returned."""
        pass


class PathChainPolicy(ChainPolicy):
    """Builds an open chain: the last word need not lead back to the first."""

    mode = ChainMode.PATH
    name = "Word Chain (Path)"

    def accepts(self, eligibility: Eligibility) -> bool:
        return eligibility.exists

    def reject(self, graph: LetterGraph) -> None:
        raise NoPathExistsError(
            "Cannot create a word chain: no Eulerian path exists. Words cannot be arranged so "
            "each word starts with the last letter of the previous one",
            graph.diagnose(),
        )


class CircuitChainPolicy(ChainPolicy):
    """Builds a closed chain: the last word also leads back to the first."""

    mode = ChainMode.CIRCUIT
    name = "Circular Chaining (Circuit)"

    def chain_single(self, word: str) -> list[str]:
        if first_letter(word) != last_letter(word):
            raise SingleWordNotCircularError(word)
        return [word]

    def accepts(self, eligibility: Eligibility) -> bool:
        return eligibility.exists and eligibility.is_circuit

    def reject(self, graph: LetterGraph) -> None:
        raise NoCircuitExistsError(
            "Cannot create a circular chain: no Eulerian circuit exists. Words cannot be "
            "arranged in a circle where each word starts with the last letter of the previous "
            "one and the last word leads back to the first",
            graph.diagnose(),
        )

    def verify(self, chain: list[str]) -> None:
        if not chain:
            return
        first = first_letter(chain[0])
        last = last_letter(chain[-1])
        if first != last:
            raise InternalInconsistencyError(
                "Internal error: found chain is not circular. "
                f"First word '{chain[0]}' starts with '{first}' "
                f"but last word '{chain[-1]}' ends with '{last}'."
            )


POLICIES: dict[ChainMode, ChainPolicy] = {
    ChainMode.PATH: PathChainPolicy(),
    ChainMode.CIRCUIT: CircuitChainPolicy(),
}


def get_policy(mode: ChainMode | str) -> ChainPolicy:
    """Get the chaining policy for a mode or mode code."""
    if not isinstance(mode, ChainMode):
        mode = parse_mode(mode)
    return POLICIES[mode]
