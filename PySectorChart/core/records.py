from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class BenchmarkRecord:
    language: str
    benchmark: str
    time: float


def unique_in_order(items: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for it in items:
        if it not in seen:
            seen.add(it)
            out.append(it)
    return out


def languages_of(records: Iterable[BenchmarkRecord]) -> List[str]:
    return unique_in_order(r.language for r in records)


def group_by_benchmark(records: Iterable[BenchmarkRecord]) -> Dict[str, Tuple[List[float], List[str]]]:
    """Benchmark name -> (times, languages), both in row order. Keys keep first-seen order."""
    groups: Dict[str, Tuple[List[float], List[str]]] = {}
    for r in records:
        values, labels = groups.setdefault(r.benchmark, ([], []))
        values.append(r.time)
        labels.append(r.language)
    return groups


def exclude_languages(records: Iterable[BenchmarkRecord], excluded: Iterable[str]) -> List[BenchmarkRecord]:
    drop = set(excluded)
    return [r for r in records if r.language not in drop]
