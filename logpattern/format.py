"""Log format (template) built by aligning the chunks of a cluster's logs."""

import hashlib
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

import click

from logpattern import config as app_config
from logpattern.errors import InvalidInputError, StructuralMismatchError
from logpattern.segment import FixedSegment, Segment, VariableSegment

logger = logging.getLogger(__name__)


class Format:
    """
    Ordered segments summarizing a cluster of logs.

    ``hash`` is a sha256 over the segments' texts (literal for fixed segments,
    the wildcard for variable ones). It only changes when a segment is
    promoted from fixed to variable, never when value counts change.
    """

    def __init__(self, segments: Optional[List[Segment]] = None):
        self.segments: List[Segment] = list(segments or [])
        self.count = 0
        self.hash = ""
        self.sample = ""
        self.cluster = None
        self.calc_hash()

    @classmethod
    def from_chunks(cls, chunks: Sequence) -> "Format":
        """Seed a format's shape from one log's chunks. Nothing is counted yet."""
        return cls([FixedSegment(c.data) for c in chunks])

    @property
    def id(self) -> str:
        return self.hash

    @property
    def short_id(self) -> str:
        """Abbreviated hash for display. Not unique enough to use as a key."""
        return self.hash[:app_config.SHORT_ID_LENGTH]

    def calc_hash(self):
        h = hashlib.sha256()
        for seg in self.segments:
            h.update(seg.text().encode("utf-8"))
        self.hash = h.hexdigest()

    def merge(self, chunks: Sequence):
        """Fold one log's chunks into the format, promoting mismatched fixed segments."""
        if len(chunks) != len(self.segments):
            raise StructuralMismatchError(len(self.segments), len(chunks), format=self)

        self.count += 1
        changed = False

        for idx, chunk in enumerate(chunks):
            if not self.segments[idx].merge(chunk.data):
                previous = self.segments[idx]
                self.segments[idx] = VariableSegment.promote(previous)
                self.segments[idx].merge(chunk.data)
                changed = True
                logger.debug(f"Segment {idx} became variable ({previous.text()!r} != {chunk.data!r})")

        if changed:
            self.calc_hash()

    def template(self, color: bool = False) -> str:
        """Segments joined together, wildcards highlighted when ``color`` is set."""
        parts = []
        for seg in self.segments:
            if seg.fixed() or not color:
                parts.append(seg.text())
            else:
                parts.append(click.style(seg.text(), fg=app_config.HIGHLIGHT_COLOR))
        return "".join(parts)

    def render(self, color: Optional[bool] = None) -> str:
        if color is None:
            color = app_config.ENABLE_COLOR
        if color is None:
            color = sys.stdout.isatty()
        prefix = f"{self.count:{app_config.COUNT_WIDTH}d} [{self.short_id}] "
        return prefix + self.template(color=color)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Format(id={self.short_id!r}, count={self.count}, segments={len(self.segments)})"

    def to_dict(self) -> Dict:
        return {
            "id": self.hash,
            "segments": [seg.to_dict() for seg in self.segments],
            "count": self.count,
            "sample": self.sample,
        }

    def to_json(self, **kwargs) -> str:
        kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, record: Dict) -> "Format":
        """
        Rebuild a format from its serialized record.

        Fixed segment counters are not part of the record; each fixed segment
        gets the format's total count back, which is what it held when saved.
        """
        try:
            count = int(record["count"])
            raw_segments = record["segments"]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid format record: {e}") from e

        segments: List[Segment] = []
        for idx, raw in enumerate(raw_segments):
            if isinstance(raw, dict) and "text" in raw:
                segments.append(FixedSegment(raw["text"], total=count))
            elif isinstance(raw, dict) and "values" in raw:
                try:
                    values = {str(k): int(v) for k, v in raw["values"].items()}
                except (AttributeError, TypeError, ValueError) as e:
                    raise InvalidInputError(f"Invalid values at position {idx}: {e}") from e
                segments.append(VariableSegment(values))
            else:
                raise InvalidInputError(f"Invalid segment at position {idx}: {raw!r}")

        fmt = cls(segments)
        fmt.count = count
        fmt.hash = record.get("id") or fmt.hash
        fmt.sample = record.get("sample", "")
        return fmt

    @classmethod
    def from_json(cls, text: str) -> "Format":
        return cls.from_dict(json.loads(text))


def gen_format(cluster) -> Format:
    """
    Generate a format from a cluster of logs.

    The first log seeds the shape; every log, the first included, is then
    merged in cluster order and pointed back at the resulting format.

    Raises:
        InvalidInputError: The cluster has no logs.
        StructuralMismatchError: A log's chunk count differs from the first
            log's. ``error.format`` holds the partially merged format.
    """
    logs = list(cluster.logs)
    if not logs:
        raise InvalidInputError("Cannot generate a format from an empty cluster")

    fmt = Format.from_chunks(logs[0].chunks)
    fmt.cluster = cluster

    for log in logs:
        fmt.merge(log.chunks)
        log.format = fmt

    fmt.sample = fmt.render(color=False)
    logger.debug(f"Generated format {fmt.short_id} from {fmt.count} logs")

    return fmt
