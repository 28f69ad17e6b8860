"""Per-line processing: classify, reconstruct the timestamp, extract attributes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import tzinfo

from .errors import TimestampError
from .formats import AttributeExtractor, LineClassifier
from .models import LogRecord, RawLine
from .timestamps import TimestampReconstructor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LineProcessor:
    """Turn a RawLine into a LogRecord, or None when the line is invalid.

    Classifier misses and timestamp failures are data-quality issues: they
    produce None and never raise. Any other exception propagates.
    """

    year: int
    classifier: LineClassifier = field(default_factory=LineClassifier)
    reconstructor: TimestampReconstructor = field(default_factory=TimestampReconstructor)
    extractor: AttributeExtractor = field(default_factory=AttributeExtractor)

    @classmethod
    def for_year(cls, year: int, zone: tzinfo | None = None) -> LineProcessor:
        """Build a processor for `year`, attributing offsets from `zone` (default: local)."""
        if zone is None:
            return cls(year=year)
        return cls(year=year, reconstructor=TimestampReconstructor(zone=zone))

    def parse(self, raw: RawLine) -> LogRecord | None:
        """Parse one raw line into a LogRecord if it is valid."""
        classified = self.classifier.classify(raw.text)
        if classified is None:
            logger.debug("line %d: unrecognized shape", raw.line_no)
            return None

        try:
            ts = self.reconstructor.reconstruct(classified.raw_timestamp, self.year)
        except TimestampError as e:
            logger.debug("line %d: %s", raw.line_no, e)
            return None

        return LogRecord(
            level=classified.level,
            timestamp=ts,
            message=classified.message,
            attributes=self.extractor.extract(classified.message),
        )
