from nfa2dfa.automaton import NFA, fmt_set, mark_state, set_literal
from nfa2dfa.construction import construct


def test_build_merges_destinations_and_dedups_alphabet():
    nfa = NFA.build(3, ["a", "b", "a"], 0, [2, 2], [(0, "a", 1), (0, "a", 2), (0, "a", 1)])

    assert nfa.alphabet == ("a", "b")
    assert nfa.accept_states == frozenset({2})
    assert nfa.targets(0, "a") == frozenset({1, 2})
    assert nfa.targets(0, "b") == frozenset()
    assert nfa.targets(1, "a") == frozenset()


def test_move_unions_targets(ab_nfa):
    assert ab_nfa.move({0, 1}, "a") == frozenset({0, 1})
    assert ab_nfa.move({0, 1}, "b") == frozenset({2})
    assert ab_nfa.move(set(), "a") == frozenset()


def test_dangling_states_in_range(ab_nfa):
    assert ab_nfa.dangling_states() == frozenset()


def test_formatting_helpers():
    assert fmt_set(set()) == "∅"
    assert fmt_set({2, 0, 1}) == "{0,1,2}"
    assert set_literal(frozenset({5, 0, 2})) == "[0, 2, 5]"
    assert mark_state("q", True, True) == "→*q"
    assert mark_state("q", False, False) == "q"


def test_nfa_run(ab_nfa):
    ok, trace, _ = ab_nfa.run("aab")
    assert ok
    assert trace[0] == ("{0}", "ε", "{0}")
    assert trace[-1] == ("{2}", "ε", "{2}")

    ok, _, reason = ab_nfa.run("abc")
    assert not ok
    assert "вне алфавита" in reason


def test_dfa_run(ab_nfa):
    dfa = construct(ab_nfa)

    assert dfa.run("ab")[0]
    assert not dfa.run("")[0]

    ok, trace, reason = dfa.run("b")
    assert not ok
    assert trace == [("{0}", "b", "-")]
    assert "не задан" in reason


def test_dfa_step_unknown_state(ab_nfa):
    dfa = construct(ab_nfa)
    assert dfa.step(frozenset({1}), "a") == frozenset()
