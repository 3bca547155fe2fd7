"""Reading and writing the high-score records file."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

MAX_RECORDS = 100


@dataclass(frozen=True)
class ScoreEntry:
    """One player's recorded score."""

    name: str
    score: int


def read_scores(path: str | PathLike[str], limit: int = MAX_RECORDS) -> list[ScoreEntry]:
    """Read up to ``limit`` records and return them highest score first.

    Records are whitespace separated ``name score`` pairs; reading stops at
    the first pair whose score is not an integer. Equal scores keep their
    order in the file. A missing file raises FileNotFoundError.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    tokens = Path(path).read_text(encoding="utf-8").split()
    entries: list[ScoreEntry] = []
    for name, raw in zip(tokens[::2], tokens[1::2]):
        if len(entries) >= limit:
            break
        try:
            value = int(raw)
        except ValueError:
            break
        entries.append(ScoreEntry(name, value))
    entries.sort(key=lambda entry: entry.score, reverse=True)
    return entries


def append_score(path: str | PathLike[str], name: str, score: int) -> None:
    """Append one ``name score`` record to the file, creating it if needed."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name} {score}\n")