from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Tuple

StateSet = FrozenSet[int]
Trace = List[Tuple[str, str, str]]
RunResult = Tuple[bool, Trace, str]


def fmt_set(s: Iterable[int]) -> str:
    s = sorted(s)
    return "∅" if not s else "{" + ",".join(str(q) for q in s) + "}"

def set_literal(s: Iterable[int]) -> str:
    """текстовое представление множества для выходного файла: [0, 2, 5]"""
    return str(sorted(s))

def mark_state(name: str, is_start: bool, is_accept: bool) -> str:
    prefix = ""
    if is_start:
        prefix += "→"
    if is_accept:
        prefix += "*"
    return f"{prefix}{name}"

# NFA

@dataclass(frozen=True)
class NFA:
    num_states: int
    alphabet: Tuple[str, ...]
    transitions: Mapping[int, Mapping[str, StateSet]]
    start_state: int
    accept_states: StateSet

    @classmethod
    def build(cls, num_states: int, alphabet: Iterable[str], start_state: int,
              accept_states: Iterable[int], edges: Iterable[Tuple[int, str, int]]) -> "NFA":
        """
        собирает nfa из троек (from, symbol, to); назначения по одной паре (from, symbol) объединяются.
        повторы в алфавите схлопываются, порядок первого появления сохраняется.
        """
        delta: Dict[int, Dict[str, set]] = {}
        for q, a, p in edges:
            delta.setdefault(q, {}).setdefault(a, set()).add(p)
        return cls(
            num_states=num_states,
            alphabet=tuple(dict.fromkeys(alphabet)),
            transitions={q: {a: frozenset(d) for a, d in m.items()} for q, m in delta.items()},
            start_state=start_state,
            accept_states=frozenset(accept_states),
        )

    def targets(self, state: int, symbol: str) -> StateSet:
        return self.transitions.get(state, {}).get(symbol, frozenset())

    def move(self, S: Iterable[int], a: str) -> StateSet:
        out = set()
        for q in S:
            out |= self.targets(q, a)
        return frozenset(out)

    def dangling_states(self) -> StateSet:
        """идентификаторы вне диапазона 0..num_states-1, встречающиеся в описании"""
        referenced = {self.start_state} | set(self.accept_states)
        for q, m in self.transitions.items():
            referenced.add(q)
            for dest in m.values():
                referenced |= dest
        return frozenset(q for q in referenced if not 0 <= q < self.num_states)

    def run(self, w: str) -> RunResult:
        cur: StateSet = frozenset({self.start_state})
        trace: Trace = [(fmt_set(cur), "ε", fmt_set(cur))]
        for i, ch in enumerate(w):
            if ch not in self.alphabet:
                trace.append((fmt_set(cur), ch, "-"))
                return False, trace, f"на шаге {i}: символ '{ch}' вне алфавита"
            nxt = self.move(cur, ch)
            trace.append((fmt_set(cur), ch, fmt_set(nxt) if nxt else "-"))
            cur = nxt
        trace.append((fmt_set(cur), "ε", fmt_set(cur)))
        ok = bool(cur & self.accept_states)
        return ok, trace, ("множество содержит принимающее" if ok
                           else "множество не пересекается с принимающими")

# DFA

@dataclass(frozen=True)
class DFA:
    """
    состояния dfa — непустые подмножества состояний nfa (frozenset), в порядке обнаружения.
    переходы заданы для каждой пары (состояние, символ); пустое множество — не ребро, а отсутствие перехода.
    """
    states: Tuple[StateSet, ...]
    alphabet: Tuple[str, ...]
    transitions: Mapping[StateSet, Mapping[str, StateSet]]
    start_state: StateSet
    accept_states: Tuple[StateSet, ...]

    def is_accepting(self, S: StateSet) -> bool:
        return S in self.accept_states

    def step(self, S: StateSet, a: str) -> StateSet:
        return self.transitions.get(S, {}).get(a, frozenset())

    def edges(self) -> Iterator[Tuple[StateSet, str, StateSet]]:
        for S in self.states:
            for a, T in self.transitions.get(S, {}).items():
                if T:
                    yield S, a, T

    def run(self, w: str) -> RunResult:
        cur = self.start_state
        trace: Trace = []
        for i, ch in enumerate(w):
            if ch not in self.alphabet:
                trace.append((fmt_set(cur), ch, "-"))
                return False, trace, f"на шаге {i}: символ '{ch}' вне алфавита"
            nxt = self.step(cur, ch)
            trace.append((fmt_set(cur), ch, fmt_set(nxt) if nxt else "-"))
            if not nxt:
                return False, trace, f"на шаге {i}: переход из {fmt_set(cur)} по '{ch}' не задан"
            cur = nxt
        trace.append((fmt_set(cur), "ε", fmt_set(cur)))
        ok = self.is_accepting(cur)
        return ok, trace, f"закончили в {'принимающем' if ok else 'непринимающем'} состоянии {fmt_set(cur)}"
