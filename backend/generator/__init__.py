"""
Generator Module — World Event Simulator

Public API:
- WorldEventGenerator: Main generator class
- list_events: One fresh, unseeded batch
- WorldEvent: Output schema
- Category / Region / NewsSource / Severity: Field enumerations
"""

from .config import TEMPLATES, Category, EventTemplate, NewsSource, Region, Severity
from .generator import WorldEventGenerator, list_events
from .schemas import WorldEvent

__all__ = [
    "WorldEventGenerator",
    "list_events",
    "WorldEvent",
    "EventTemplate",
    "TEMPLATES",
    "Category",
    "Region",
    "NewsSource",
    "Severity",
]
