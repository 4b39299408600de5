from __future__ import annotations

import csv
import io
import json
from typing import Any, Dict, Iterable, Iterator, List, Mapping


def _cell(value: Any) -> Any:
    # nested objects/arrays are embedded as JSON text
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    if value is None:
        return ""
    return value


def csv_stream(rows: Iterable[Dict[str, Any]], fieldnames: List[str]) -> Iterator[bytes]:
    """
    Stream CSV as bytes without holding full file in memory.
    """
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=fieldnames, extrasaction="ignore")
    writer.writeheader()
    yield buf.getvalue().encode("utf-8")
    buf.seek(0)
    buf.truncate(0)

    for r in rows:
        writer.writerow({k: _cell(r.get(k)) for k in fieldnames})
        yield buf.getvalue().encode("utf-8")
        buf.seek(0)
        buf.truncate(0)


def sectioned_csv_stream(sections: Mapping[str, List[Dict[str, Any]]]) -> Iterator[bytes]:
    """
    One block per non-empty section: a ``=== NAME ===`` banner line, then a
    header taken from the first row's own keys, then the rows.
    Later rows with extra keys lose those columns; missing keys render empty.
    """
    first = True
    for name, rows in sections.items():
        if not rows:
            continue
        banner = f"=== {name.upper()} ===\n"
        yield (banner if first else "\n" + banner).encode("utf-8")
        first = False
        yield from csv_stream(rows, list(rows[0].keys()))
