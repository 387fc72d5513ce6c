"""Size comparison against a naive comma-separated encoding.

This module measures how much shorter the base64 text produced by serialize()
is than the decimal values joined by commas, and checks that the text
decodes back to the same values.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from .codec.layout import RangeMode
from .transport import deserialize, serialize

PREVIEW_VALUES = 10
PREVIEW_CHARS = 60


class ComparisonReport(BaseModel):
    """Result of comparing the packed text with the naive text for one sequence.

    Attributes:
        description: Free-form label for the scenario
        count: Number of values
        preview: First values of the sequence
        naive_text: Decimal values joined by ``","``
        packed_text: Base64 text from serialize()
        compression_ratio: ``naive_length / packed_length``, None if either is 0
        round_trip_ok: Whether the decoded values match the input, ignoring order
    """

    model_config = ConfigDict(frozen=True)

    description: str = ""
    count: int = Field(ge=0)
    preview: list[int]
    naive_text: str
    packed_text: str
    compression_ratio: Optional[float] = None
    round_trip_ok: bool

    @property
    def naive_length(self) -> int:
        return len(self.naive_text)

    @property
    def packed_length(self) -> int:
        return len(self.packed_text)


def naive_serialization(numbers: Iterable[int]) -> str:
    """Return the decimal values joined by commas.

    Example:
        >>> naive_serialization([1, 22, 300])
        '1,22,300'
    """
    return ",".join(str(n) for n in numbers)


def compare(
    numbers: Iterable[int],
    description: str = "",
    *,
    mode: RangeMode | str = RangeMode.TRUNCATE,
    urlsafe: bool = False,
) -> ComparisonReport:
    """Serialize a sequence both ways and report the size difference.

    The round-trip check compares sorted copies of the input and the decoded
    values, so it does not detect reordering.

    Args:
        numbers: Sequence to compare
        description: Label carried into the report
        mode: Range handling passed to serialize()
        urlsafe: If True, use the URL-safe base64 alphabet

    Returns:
        ComparisonReport for the sequence
    """
    values = list(numbers)
    naive_text = naive_serialization(values)
    packed_text = serialize(values, mode=mode, urlsafe=urlsafe)
    decoded = deserialize(packed_text, urlsafe=urlsafe)

    ratio: Optional[float] = None
    if naive_text and packed_text:
        ratio = len(naive_text) / len(packed_text)

    return ComparisonReport(
        description=description,
        count=len(values),
        preview=values[:PREVIEW_VALUES],
        naive_text=naive_text,
        packed_text=packed_text,
        compression_ratio=ratio,
        round_trip_ok=sorted(values) == sorted(decoded),
    )


def format_report(report: ComparisonReport) -> str:
    """Render a report as a human-readable block."""
    title = f"--- Test: {report.description} ---"
    ratio = f"{report.compression_ratio:.2f}x" if report.compression_ratio is not None else "N/A"
    preview = ",".join(str(n) for n in report.preview)

    lines = [
        title,
        f"Values (first {PREVIEW_VALUES}): {preview}... (Total: {report.count})",
        f"Naive text (start): '{report.naive_text[:PREVIEW_CHARS]}...' "
        f"(Length: {report.naive_length})",
        f"Packed text: '{report.packed_text}' (Length: {report.packed_length})",
        f"Compression ratio: {ratio}",
        f"Round trip: {'OK' if report.round_trip_ok else 'FAILED'}",
        "-" * len(title),
    ]
    return "\n".join(lines)


def standard_scenarios(seed: Optional[int] = None) -> list[tuple[str, list[int]]]:
    """Return the benchmark scenarios as ``(description, numbers)`` pairs.

    Random scenarios draw from [1, 300] with ``random.Random(seed)`` so a fixed
    seed reproduces the same inputs.
    """
    rng = random.Random(seed)
    scenarios: list[tuple[str, list[int]]] = [
        ("Single small value", [1]),
        ("Single large value", [300]),
        ("Short range", [1, 2, 3, 4, 5]),
        ("All one-digit values", list(range(1, 10))),
        ("All two-digit values", list(range(10, 100))),
        ("All three-digit values", list(range(100, 301))),
    ]
    for size in (50, 100, 500, 1000):
        scenarios.append((f"Random {size} values", [rng.randint(1, 300) for _ in range(size)]))
    scenarios.append(("Every value 1-300", list(range(1, 301))))
    scenarios.append(("Every value 1-300 three times", [n for n in range(1, 301) for _ in range(3)]))
    return scenarios
