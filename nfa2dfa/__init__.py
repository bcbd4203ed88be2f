from nfa2dfa.automaton import DFA, NFA
from nfa2dfa.construction import construct
from nfa2dfa.errors import NFAFormatError, Nfa2DfaError
from nfa2dfa.textio import format_dfa, parse_nfa, read_nfa, write_dfa

__all__ = [
    "DFA", "NFA", "construct",
    "Nfa2DfaError", "NFAFormatError",
    "parse_nfa", "read_nfa", "format_dfa", "write_dfa",
]
