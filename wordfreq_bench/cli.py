"""Benchmark word-frequency counting over a growing number of workers."""

from __future__ import annotations

import argparse
import csv
import os
import sys
import time
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from operator import itemgetter

from wordfreq_bench.counter import WordCounter
from wordfreq_bench.file import read_file

DEFAULT_INPUT = "example.txt"
DEFAULT_CSV = "resultados_rendimiento.csv"
CSV_HEADER = ("NumCPUs", "TiempoNanosegundos")
_RULE = "=================================="


@dataclass(frozen=True)
class RunResult:
    """Outcome of one timed run with a given number of workers."""

    workers: int
    elapsed_ns: int
    frequencies: dict[str, int] = field(repr=False)
    total: int


def most_frequent(frequencies: Mapping[str, int]) -> tuple[str, int]:
    """Return the word with the highest count, or ``("", 0)`` when empty."""
    return max(frequencies.items(), key=itemgetter(1), default=("", 0))


def benchmark(text: str, max_workers: int) -> Iterator[RunResult]:
    """Time frequency counting of ``text`` for 1 to ``max_workers`` workers."""
    for workers in range(1, max_workers + 1):
        start = time.perf_counter_ns()
        counter = WordCounter(workers)
        frequencies = counter.count_word_frequency(text)
        elapsed = time.perf_counter_ns() - start
        yield RunResult(workers, elapsed, frequencies, counter.count_words(text))


def write_csv(results: Iterable[RunResult], path: str | os.PathLike[str]) -> None:
    """Write worker counts and elapsed nanoseconds to a CSV file."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows((r.workers, r.elapsed_ns) for r in results)


def _fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    digits = len(str(unit)) - 1
    fraction = str(rest).zfill(digits).rstrip("0")
    return f"{whole}.{fraction}" if fraction else str(whole)


def _format_duration(ns: int) -> str:
    """Render nanoseconds in the compact ``1h2m3.5s`` / ``1.5ms`` style."""
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_fraction(ns, 1_000)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_fraction(ns, 1_000_000)}ms"
    hours, rest = divmod(ns, 3_600 * 1_000_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000_000)
    seconds = _fraction(rest, 1_000_000_000) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wordfreq-bench",
        description="Time word-frequency counting with 1..N workers.",
    )
    parser.add_argument("--input", default=DEFAULT_INPUT, help="text file to analyse")
    parser.add_argument("--csv", default=DEFAULT_CSV, help="where to write timings")
    parser.add_argument(
        "--max-workers",
        type=_positive_int,
        default=os.cpu_count() or 1,
        help="largest number of workers to try",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark and report the fastest run; return the exit status."""
    args = _parse_args(argv)
    try:
        text = read_file(args.input)
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    results = []
    for result in benchmark(text, args.max_workers):
        print(f"Utilizando {result.workers} CPUs - Tiempo: {_format_duration(result.elapsed_ns)}")
        results.append(result)

    try:
        write_csv(results, args.csv)
    except OSError as exc:
        print(f"Error al crear archivo CSV: {exc}", file=sys.stderr)
        return 1

    best = min(results, key=lambda r: r.elapsed_ns)
    word, count = most_frequent(best.frequencies)

    print()
    print(_RULE)
    print("RESULTADOS DEL MEJOR TIEMPO")
    print(_RULE)
    print(
        f"Mejor tiempo conseguido utilizando {best.workers} CPUs: "
        f"{_format_duration(best.elapsed_ns)}"
    )
    print(_RULE)
    if not best.frequencies:
        print("No se encontraron palabras válidas en el texto.")
    else:
        print(f"Palabra que más aparece: {word:<20} Frecuencia: {count}")
        print(_RULE)
        print(f"Total de palabras: {best.total}")
    print(_RULE)
    print(f"Los resultados de rendimiento han sido guardados en '{args.csv}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())