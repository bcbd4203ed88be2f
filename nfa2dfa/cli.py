import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from nfa2dfa.automaton import fmt_set
from nfa2dfa.construction import construct
from nfa2dfa.errors import NFAFormatError
from nfa2dfa.report import compare_runs, dump_dfa, print_table, transition_table
from nfa2dfa.textio import read_nfa, write_dfa

logger = logging.getLogger(__name__)

INPUT_FILE = "nfa_input.txt"
OUTPUT_FILE = "dfa_output.txt"


@dataclass
class Config:
    input: str = INPUT_FILE
    output: str = OUTPUT_FILE
    words: List[str] = field(default_factory=list)
    table: bool = False
    log_level: str = "WARNING"


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    p = argparse.ArgumentParser(
        prog="nfa2dfa",
        description="построение dfa по nfa методом подмножеств",
    )
    p.add_argument("input", nargs="?", default=INPUT_FILE, help="файл с описанием nfa")
    p.add_argument("-o", "--output", default=OUTPUT_FILE, help="куда записать dfa")
    p.add_argument("-w", "--word", dest="words", action="append", default=[],
                   help="слово для сверки nfa и dfa (можно несколько раз)")
    p.add_argument("--table", action="store_true", help="напечатать δ-таблицы nfa и dfa")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    return Config(input=args.input, output=args.output, words=args.words,
                  table=args.table, log_level=args.log_level)


def run(cfg: Config) -> int:
    nfa = read_nfa(cfg.input)
    dangling = nfa.dangling_states()
    if dangling:
        logger.warning("состояния вне диапазона 0..%d: %s", nfa.num_states - 1, fmt_set(dangling))

    dfa = construct(nfa)
    write_dfa(dfa, cfg.output)
    logger.info("dfa из %d состояний записан в %s", len(dfa.states), cfg.output)

    dump_dfa(dfa)
    if cfg.table:
        hdr, rows = transition_table(nfa)
        print_table("таблица переходов (исходный nfa)", hdr, rows)
        hdr, rows = transition_table(dfa)
        print_table("таблица переходов (эквивалентный dfa)", hdr, rows)

    if cfg.words and not compare_runs(nfa, dfa, cfg.words):
        return 2
    print(f"\n[ok] dfa записан в {cfg.output}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    cfg = parse_args(argv)
    logging.basicConfig(level=getattr(logging, cfg.log_level),
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    try:
        return run(cfg)
    except NFAFormatError as e:
        print(f"ошибка в описании nfa ({cfg.input}): {e}", file=sys.stderr)
    except OSError as e:
        print(f"ошибка чтения или записи файлов: {e}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
