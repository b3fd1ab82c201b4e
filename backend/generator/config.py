"""
Generator Configuration — Templates and Enumerations

This module defines the fixed tables the world event generator draws from:
the 15 event templates plus the region and news-source pools.

Only `category`, `title` and `description` are fixed per template.
Everything else is drawn at random on every call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# =============================================================================
# ENUMERATIONS
# =============================================================================

class Category(str, Enum):
    """Event categories (fixed per template)."""
    POLITICS = "Politics"
    ECONOMY = "Economy"
    TECHNOLOGY = "Technology"
    ENVIRONMENT = "Environment"
    HEALTH = "Health"
    CONFLICT = "Conflict"
    SPORTS = "Sports"
    CULTURE = "Culture"


class Region(str, Enum):
    """Geographic regions, one picked uniformly per event."""
    NORTH_AMERICA = "North America"
    EUROPE = "Europe"
    ASIA = "Asia"
    MIDDLE_EAST = "Middle East"
    AFRICA = "Africa"
    LATIN_AMERICA = "Latin America"
    OCEANIA = "Oceania"


class NewsSource(str, Enum):
    """News agencies, one picked uniformly per event."""
    REUTERS = "Reuters"
    AP_NEWS = "AP News"
    BBC = "BBC"
    AFP = "AFP"
    AL_JAZEERA = "Al Jazeera"
    CNN = "CNN"
    GUARDIAN = "Guardian"


class Severity(str, Enum):
    """Severity levels, uniform over the three values."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# TEMPLATES
# =============================================================================

@dataclass(frozen=True)
class EventTemplate:
    """Fixed part of a generated event."""
    category: Category
    title: str
    description: str


# Order matters: the template index is part of the event id.
TEMPLATES: Tuple[EventTemplate, ...] = (
    EventTemplate(
        category=Category.POLITICS,
        title="Summit meeting scheduled between world leaders",
        description="International diplomats gather to discuss global cooperation and trade agreements.",
    ),
    EventTemplate(
        category=Category.ECONOMY,
        title="Stock markets show volatility amid economic concerns",
        description="Major indices fluctuate as investors react to changing economic indicators.",
    ),
    EventTemplate(
        category=Category.TECHNOLOGY,
        title="Major tech company announces breakthrough in AI research",
        description="New developments in artificial intelligence promise to revolutionize multiple industries.",
    ),
    EventTemplate(
        category=Category.ENVIRONMENT,
        title="Climate conference yields new commitments",
        description="Countries pledge to reduce carbon emissions and invest in renewable energy.",
    ),
    EventTemplate(
        category=Category.HEALTH,
        title="WHO reports progress in global health initiatives",
        description="International health organization announces improvements in disease prevention programs.",
    ),
    EventTemplate(
        category=Category.CONFLICT,
        title="Peace talks continue in conflict zone",
        description="Diplomatic efforts intensify as parties work toward resolution.",
    ),
    EventTemplate(
        category=Category.SPORTS,
        title="International championship draws global attention",
        description="Athletes from around the world compete in prestigious tournament.",
    ),
    EventTemplate(
        category=Category.CULTURE,
        title="UNESCO recognizes new world heritage sites",
        description="Historic and cultural landmarks gain international protection status.",
    ),
    EventTemplate(
        category=Category.ECONOMY,
        title="Central bank announces policy changes",
        description="Monetary authorities adjust interest rates to manage economic growth.",
    ),
    EventTemplate(
        category=Category.TECHNOLOGY,
        title="Cybersecurity experts warn of new threats",
        description="Security researchers identify emerging risks to digital infrastructure.",
    ),
    EventTemplate(
        category=Category.ENVIRONMENT,
        title="Major conservation effort launched",
        description="International coalition works to protect endangered species and habitats.",
    ),
    EventTemplate(
        category=Category.POLITICS,
        title="Election results reshape political landscape",
        description="Democratic process brings changes to government composition.",
    ),
    EventTemplate(
        category=Category.HEALTH,
        title="Medical breakthrough offers new treatment options",
        description="Researchers announce promising results in clinical trials.",
    ),
    EventTemplate(
        category=Category.ECONOMY,
        title="Trade agreement signed between nations",
        description="Economic partnership aims to boost bilateral commerce and investment.",
    ),
    EventTemplate(
        category=Category.TECHNOLOGY,
        title="Space agency announces new exploration mission",
        description="Ambitious project to explore outer space gains momentum.",
    ),
)


# =============================================================================
# GENERATOR DEFAULTS
# =============================================================================

DEFAULT_WINDOW_HOURS: float = 6.0
