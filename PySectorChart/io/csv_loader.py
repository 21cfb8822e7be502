import os
import csv
import logging
from typing import Iterable, List

from ..core.records import BenchmarkRecord, exclude_languages

logger = logging.getLogger(__name__)


def _is_number(tok: str) -> bool:
    try:
        float(tok)
    except ValueError:
        return False
    return True


def load_benchmarks(path: str, exclude: Iterable[str] = ()) -> List[BenchmarkRecord]:
    """
    Read `language,benchmark,time` rows. A leading row whose time field is not
    numeric is taken as a header. Blank rows are ignored.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    records = []
    header_skipped = False
    with open(path, "r", newline="", encoding="utf-8") as f:
        r = csv.reader(f)
        for lineno, row in enumerate(r, start=1):
            row = [tok.strip() for tok in row]
            if not row or not any(row):
                continue
            if len(row) != 3:
                raise ValueError(f"{path}:{lineno}: expected 3 fields, got {len(row)}")
            language, benchmark, time_tok = row
            if not _is_number(time_tok):
                if not records and not header_skipped:
                    logger.debug("skipping header row %s", row)
                    header_skipped = True
                    continue
                raise ValueError(f"{path}:{lineno}: time '{time_tok}' is not a number")
            records.append(BenchmarkRecord(language, benchmark, float(time_tok)))
    if not records:
        raise ValueError(f"CSV '{path}' has no benchmark rows")
    kept = exclude_languages(records, exclude)
    logger.info("loaded %d rows from %s (%d after exclusions)", len(records), path, len(kept))
    return kept
