from wordchain.chainer.config import config as chainer_config
from wordchain.graph import NOT_ELIGIBLE, Eligibility, LetterGraph


def test_add_word_updates_degrees():
    graph = LetterGraph()
    graph.add_word("Apple")
    assert graph.adjacency == {"a": ["Apple"]}
    assert graph.out_degree == {"a": 1, "e": 0}
    assert graph.in_degree == {"e": 1, "a": 0}
    assert len(graph) == 1


def test_add_word_ignores_empty_string():
    graph = LetterGraph()
    graph.add_word("")
    assert len(graph) == 0
    assert not graph.adjacency
    assert not graph.in_degree
    assert not graph.out_degree


def test_adjacency_keeps_insertion_order():
    graph = LetterGraph(["ant", "axe", "arm"])
    assert graph.adjacency["a"] == ["ant", "axe", "arm"]
    assert graph.out_degree["a"] == 3


def test_get_nodes_sorted():
    graph = LetterGraph(["zebra", "apple"])
    assert list(graph.get_nodes()) == ["a", "e", "z"]


def test_get_nodes_first_seen_order(monkeypatch):
    monkeypatch.setattr(chainer_config, "deterministic", False)
    graph = LetterGraph(["zebra", "apple"])
    assert list(graph.get_nodes()) == ["a", "z", "e"]


def test_circuit_eligibility():
    graph = LetterGraph(["apple", "era"])
    assert graph.analyze_eulerian_eligibility() == Eligibility(True, "a", True)


def test_path_eligibility():
    graph = LetterGraph(["apple", "elephant", "tiger", "red"])
    exists, start_node, is_circuit = graph.analyze_eulerian_eligibility()
    assert exists
    assert start_node == "a"
    assert not is_circuit


def test_large_imbalance_is_not_eligible():
    graph = LetterGraph(["ab", "ac", "ad"])
    assert graph.analyze_eulerian_eligibility() == NOT_ELIGIBLE
    assert "3 words start with 'a'" in graph.diagnose()


def test_multiple_start_candidates_is_not_eligible():
    graph = LetterGraph(["apple", "banana", "cherry"])
    assert graph.analyze_eulerian_eligibility() == NOT_ELIGIBLE
    assert "exactly one start and one end letter" in graph.diagnose()


def test_disconnected_balanced_groups_are_not_eligible():
    # "aba" and "cdc" are both loops, but share no letter
    graph = LetterGraph(["ab", "ba", "cd", "dc"])
    assert graph.analyze_eulerian_eligibility() == NOT_ELIGIBLE
    assert "separate groups" in graph.diagnose()


def test_open_path_diagnosis():
    graph = LetterGraph(["apple", "elephant", "tiger", "red"])
    assert graph.diagnose() == "the words only form an open chain from 'a' to 'd'"


def test_eligibility_is_idempotent():
    graph = LetterGraph(["apple", "elephant", "tiger", "red"])
    assert graph.analyze_eulerian_eligibility() == graph.analyze_eulerian_eligibility()


def test_empty_graph_is_circuit_without_start():
    assert LetterGraph().analyze_eulerian_eligibility() == Eligibility(True, None, True)


def test_extract_trail_takes_most_recent_edge_first():
    # Two loops through 'a': the later word is taken first from 'a'
    graph = LetterGraph(["ab", "ba", "ac", "ca"])
    assert graph.extract_eulerian_trail("a") == ["ac", "ca", "ab", "ba"]


def test_extract_trail_splices_subtours():
    graph = LetterGraph(["ab", "bc", "ca", "bb"])
    trail = graph.extract_eulerian_trail("a")
    assert trail == ["ab", "bb", "bc", "ca"]


def test_extract_trail_does_not_modify_graph():
    graph = LetterGraph(["apple", "era"])
    graph.extract_eulerian_trail("a")
    assert graph.adjacency == {"a": ["apple"], "e": ["era"]}
    assert graph.extract_eulerian_trail("a") == ["apple", "era"]


def test_letters_are_case_folded():
    graph = LetterGraph(["Echo", "oboE"])
    assert list(graph.get_nodes()) == ["e", "o"]
    exists, _, is_circuit = graph.analyze_eulerian_eligibility()
    assert exists and is_circuit
