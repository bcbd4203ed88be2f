"""
текстовые форматы.

вход (nfa):
  <число состояний>
  <символы алфавита через пробел>
  <начальное состояние>
  <принимающие состояния через пробел>   (строка может быть пустой или отсутствовать)
  <from> <symbol> <to1> [<to2> ...]      (по строке на группу переходов)

выход (dfa):
  <число состояний dfa>
  <алфавит>
  <начальное множество>
  <принимающие множества через пробел>
  <множество> <symbol> <множество-назначение>   (только непустые переходы)
"""

from pathlib import Path
from typing import Iterable, List, Tuple, Union

from nfa2dfa.automaton import DFA, NFA, set_literal
from nfa2dfa.errors import NFAFormatError

PathLike = Union[str, Path]


def _to_int(token: str, lineno: int, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise NFAFormatError(f"{what}: ожидалось целое, получено '{token}'", lineno) from None

def parse_nfa(lines: Iterable[str]) -> NFA:
    lines = list(lines)

    def header(i: int, what: str) -> str:
        if i >= len(lines):
            raise NFAFormatError(f"нет строки '{what}'", i + 1)
        return lines[i].strip()

    num_states = _to_int(header(0, "число состояний"), 1, "число состояний")
    alphabet = [tok[0] for tok in header(1, "алфавит").split()]
    start = _to_int(header(2, "начальное состояние"), 3, "начальное состояние")
    # нет строки принимающих: пустое множество
    accept_line = lines[3] if len(lines) > 3 else ""
    accepts = [_to_int(tok, 4, "принимающее состояние") for tok in accept_line.split()]

    edges: List[Tuple[int, str, int]] = []
    for lineno, line in enumerate(lines[4:], 5):
        parts = line.split()
        if len(parts) < 2:   # пустые и неполные строки пропускаем
            continue
        q = _to_int(parts[0], lineno, "исходное состояние")
        a = parts[1][0]
        for tok in parts[2:]:
            edges.append((q, a, _to_int(tok, lineno, "состояние-назначение")))

    return NFA.build(num_states, alphabet, start, accepts, edges)

def read_nfa(path: PathLike) -> NFA:
    with open(path, "rb") as f:
        data = f.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NFAFormatError(f"байт {data[e.start]:#04x} не в кодировке utf-8",
                             data[:e.start].count(b"\n") + 1) from None
    return parse_nfa(text.splitlines())


def format_dfa(dfa: DFA) -> str:
    lines = [
        str(len(dfa.states)),
        " ".join(dfa.alphabet),
        set_literal(dfa.start_state),
        " ".join(set_literal(S) for S in dfa.accept_states),
    ]
    for S, a, T in dfa.edges():
        lines.append(f"{set_literal(S)} {a} {set_literal(T)}")
    return "\n".join(lines) + "\n"

def write_dfa(dfa: DFA, path: PathLike) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_dfa(dfa))
