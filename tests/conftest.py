"""
общие фикстуры pytest: небольшие nfa, собранные вручную.
"""

import pytest

from nfa2dfa.automaton import NFA


@pytest.fixture
def ab_nfa():
    """
    3 состояния, алфавит a b, старт 0, принимающее {2}; 0 -a-> {0, 1}, 1 -b-> 2.

    принимает слова, оканчивающиеся на "ab".
    """
    return NFA.build(3, "ab", 0, [2], [(0, "a", 0), (0, "a", 1), (1, "b", 2)])


@pytest.fixture
def third_from_last_nfa():
    """
    слова над {a, b}, у которых третий символ с конца — "a".

    построение подмножеств даёт все 8 подмножеств, содержащих состояние 0.
    """
    edges = [
        (0, "a", 0), (0, "a", 1), (0, "b", 0),
        (1, "a", 2), (1, "b", 2),
        (2, "a", 3), (2, "b", 3),
    ]
    return NFA.build(4, "ab", 0, [3], edges)


@pytest.fixture
def nfa_text():
    return "3\na b\n0\n2\n0 a 0 1\n\n1 b 2\n"
