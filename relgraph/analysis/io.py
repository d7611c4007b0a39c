#!/usr/bin/env python3

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from relgraph.constants import EDGE_DELIMITER
from relgraph.errors import MalformedInputError

logger = logging.getLogger(__name__)

Edge = tuple[str, str]


def parse_edge_lines(lines: Iterable[str], source: str | None = None) -> list[Edge]:
    """Turn ``entityA,entityB`` lines into name pairs.

    Blank lines are skipped and surrounding whitespace is stripped from each
    name. A double-quoted field keeps embedded commas (``"STACY, JILL"``).
    """
    edges: list[Edge] = []
    reader = csv.reader(lines, delimiter=EDGE_DELIMITER)
    next_line = 1
    while True:
        # Rows can span lines when a quote is left open; report where the row began
        line_number = next_line
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            raise MalformedInputError(str(e), path=source, line_number=line_number) from e
        next_line = reader.line_num + 1
        if not row or (len(row) == 1 and not row[0].strip()):
            continue
        if len(row) != 2:
            message = f"expected 2 fields, got {len(row)}"
            if reader.line_num > line_number:
                message += f" (quoted field left open until line {reader.line_num})"
            raise MalformedInputError(
                message,
                path=source,
                line_number=line_number,
                line=EDGE_DELIMITER.join(row),
            )
        first, second = (field.strip() for field in row)
        if not first or not second:
            raise MalformedInputError(
                "empty entity name",
                path=source,
                line_number=line_number,
                line=EDGE_DELIMITER.join(row),
            )
        edges.append((first, second))
    return edges


def _decode_lines(raw: bytes, source: str) -> Iterator[str]:
    for line_number, chunk in enumerate(raw.splitlines(keepends=True), start=1):
        try:
            yield chunk.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(
                f"invalid UTF-8 byte 0x{chunk[e.start]:02x} at column {e.start + 1}",
                path=source,
                line_number=line_number,
            ) from e


def read_edges(path: Path | str) -> list[Edge]:
    path = Path(path)
    # OSError (missing file, directory, permissions) propagates to the caller
    raw = path.read_bytes()
    edges = parse_edge_lines(_decode_lines(raw, str(path)), source=str(path))
    logger.info("Loaded %d edges from %s", len(edges), path)
    return edges
