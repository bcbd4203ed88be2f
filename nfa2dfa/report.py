from typing import List, Sequence, Tuple, Union

from tabulate import tabulate

from nfa2dfa.automaton import DFA, NFA, Trace, fmt_set, mark_state


def print_table(title: str, headers: List[str], rows: List[List[str]]):
    print(f"\n{title}")
    print(tabulate(rows, headers=headers, tablefmt="github", colalign=("center",) * len(headers)))


def transition_table(A: Union[NFA, DFA]) -> Tuple[List[str], List[List[str]]]:
    """
    δ-таблица автомата: строка на состояние, столбец на символ.
    → помечает начальное состояние, * — принимающие; '-' — перехода нет.
    """
    headers = ["состояние"] + list(A.alphabet)
    rows = []
    if isinstance(A, NFA):
        # исходные состояния вне 0..num_states-1 тоже показываем, в конце таблицы
        extra = sorted(q for q in A.transitions if not 0 <= q < A.num_states)
        for q in [*range(A.num_states), *extra]:
            row = [mark_state(str(q), q == A.start_state, q in A.accept_states)]
            for a in A.alphabet:
                dest = A.targets(q, a)
                row.append(fmt_set(dest) if dest else "-")
            rows.append(row)
    else:
        for S in A.states:
            row = [mark_state(fmt_set(S), S == A.start_state, A.is_accepting(S))]
            for a in A.alphabet:
                dest = A.step(S, a)
                row.append(fmt_set(dest) if dest else "-")
            rows.append(row)
    return headers, rows


def dump_dfa(dfa: DFA):
    print("DFA States: " + " ".join(fmt_set(S) for S in dfa.states))
    print("DFA Start State: " + fmt_set(dfa.start_state))
    print("DFA Accept States: " + " ".join(fmt_set(S) for S in dfa.accept_states))
    print("DFA Transitions:")
    for S, a, T in dfa.edges():
        print(f"{fmt_set(S)} --{a}--> {fmt_set(T)}")


def print_trace(title: str, trace: Trace):
    headers = ["шаг", "текущее", "символ", "следующее"]
    rows = [[str(j), c, s, n] for j, (c, s, n) in enumerate(trace)]
    print_table(title, headers, rows)


def compare_runs(nfa: NFA, dfa: DFA, words: Sequence[str]) -> bool:
    """прогоняет слова через nfa и dfa, печатает трассировки; True, если все вердикты совпали"""
    all_agree = True
    for w in words:
        results = [("nfa", nfa.run(w)), ("dfa", dfa.run(w))]
        for title, (ok, trace, reason) in results:
            print(f"\nрезультат ({title}, '{w}'): {'принято' if ok else 'отклонено'} — {reason}")
            print_trace(f"трассировка ({title})", trace)
        agree = results[0][1][0] == results[1][1][0]
        print("сверка: " + ("вердикты совпадают ✅" if agree else "вердикты НЕ совпадают ❌"))
        all_agree = all_agree and agree
    return all_agree
