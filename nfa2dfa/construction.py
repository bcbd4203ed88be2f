import logging
from collections import deque
from typing import Deque, Dict, List, Set

from nfa2dfa.automaton import DFA, NFA, StateSet, fmt_set

logger = logging.getLogger(__name__)


def construct(nfa: NFA) -> DFA:
    """
    построение подмножеств (обход в ширину).

    очередь начинается с {start}; для каждого символа алфавита (в его порядке) считается move(S, a).
    непустое и ещё не встреченное множество становится новым состоянием dfa и попадает в очередь.
    переход (S, a) записывается всегда, даже если множество пустое.
    S принимающее, если пересекается с принимающими состояниями nfa.
    """
    start: StateSet = frozenset({nfa.start_state})
    queue: Deque[StateSet] = deque([start])
    seen: Set[StateSet] = {start}
    dfa_states: List[StateSet] = [start]
    dfa_accepts: List[StateSet] = []
    dfa_delta: Dict[StateSet, Dict[str, StateSet]] = {}

    while queue:
        S = queue.popleft()
        row = dfa_delta.setdefault(S, {})
        for a in nfa.alphabet:
            T = nfa.move(S, a)
            if T and T not in seen:   # пустое множество состоянием не становится
                seen.add(T)
                dfa_states.append(T)
                queue.append(T)
            row[a] = T
        if S & nfa.accept_states:
            dfa_accepts.append(S)
        logger.debug("обработано %s, в очереди %d", fmt_set(S), len(queue))

    return DFA(
        states=tuple(dfa_states),
        alphabet=nfa.alphabet,
        transitions=dfa_delta,
        start_state=start,
        accept_states=tuple(dfa_accepts),
    )
