"""Line-shape recognition and attribute extraction."""

from __future__ import annotations

from .base import LineParser
from .bracket import LineClassifier
from .kv import AttributeExtractor, unquote

__all__ = [
    "AttributeExtractor",
    "LineClassifier",
    "LineParser",
    "unquote",
]
