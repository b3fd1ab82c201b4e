"""
World Event Generator — Live News Simulator

This module fabricates a batch of world events from the fixed template
table. Every template yields exactly one event per batch; region, source,
severity and timestamp are drawn independently at random.

CRITICAL: This is a SIMULATOR. It does NOT ingest real news.
Output is non-deterministic unless a seed is given.
"""

import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from .config import (
    DEFAULT_WINDOW_HOURS,
    TEMPLATES,
    EventTemplate,
    NewsSource,
    Region,
    Severity,
)
from .schemas import WorldEvent


_REGIONS = list(Region)
_SOURCES = list(NewsSource)
_SEVERITIES = list(Severity)


class WorldEventGenerator:
    """
    World event generator for the dashboard feed.

    Features:
    - One event per template, always in template order before sorting
    - Uniform region/source/severity picks, independent per event
    - Timestamps uniform over the window preceding "now"
    - Deterministic output with fixed random seed

    Usage:
        generator = WorldEventGenerator()
        for event in generator.generate():
            print(event.model_dump_json())
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        window_hours: float = DEFAULT_WINDOW_HOURS,
        templates: Sequence[EventTemplate] = TEMPLATES,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for deterministic output (None for random)
            window_hours: Width of the timestamp window before "now"
            templates: Template table to draw from
        """
        if window_hours < 0:
            raise ValueError(f"window_hours must be >= 0, got {window_hours}")

        self.seed = seed
        self.window_hours = window_hours
        self.templates = tuple(templates)
        self._rng = random.Random(seed)

    def generate_event(
        self,
        template: EventTemplate,
        index: int,
        now: datetime,
    ) -> WorldEvent:
        """
        Generate a single event from a template.

        Args:
            template: Fixed category/title/description
            index: Template position, used in the event id
            now: Generation instant (UTC)
        """
        offset = timedelta(hours=self._rng.random() * self.window_hours)

        return WorldEvent(
            id=f"event-{int(now.timestamp() * 1000)}-{index}",
            title=template.title,
            description=template.description,
            category=template.category,
            region=self._rng.choice(_REGIONS),
            timestamp=now - offset,
            source=self._rng.choice(_SOURCES),
            severity=self._rng.choice(_SEVERITIES),
        )

    def generate(self, now: Optional[datetime] = None) -> List[WorldEvent]:
        """
        Generate one batch of events, most recent first.

        Args:
            now: Generation instant (defaults to current UTC time)

        Returns:
            One WorldEvent per template, sorted descending by timestamp
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        events = [
            self.generate_event(template, index, now)
            for index, template in enumerate(self.templates)
        ]

        # sorted() is stable, so ties keep template order
        return sorted(events, key=lambda e: e.timestamp, reverse=True)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the random state.

        Args:
            seed: New random seed (uses original if None)
        """
        if seed is not None:
            self.seed = seed
        self._rng = random.Random(self.seed)


def list_events(
    now: Optional[datetime] = None,
    window_hours: float = DEFAULT_WINDOW_HOURS,
) -> List[WorldEvent]:
    """Produce a fresh, unseeded batch of events."""
    return WorldEventGenerator(window_hours=window_hours).generate(now=now)
