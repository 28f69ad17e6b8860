"""Convert bracketed application logs into newline-delimited JSON records."""

from __future__ import annotations

__version__ = "0.1.0"
