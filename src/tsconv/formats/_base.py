"""Abstract base class for output formats."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tsconv._instant import Instant


class OutputMode(enum.StrEnum):
    """How the resolved instant is printed."""

    SECS = "secs"
    MILLIS = "millis"
    NANOS = "nanos"
    RFC2822 = "rfc2822"
    RFC3339 = "rfc3339"


class OutputFormat(ABC):
    """Renders an Instant as text.

    Implementations are pure: the same Instant always renders to the same
    string.
    """

    mode: OutputMode

    @abstractmethod
    def render(self, instant: Instant) -> str: ...
