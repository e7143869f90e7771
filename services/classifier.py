"""
Destination classification.

Maps a free-text destination to a DestinationType. Known place names are
checked first since they are a stronger signal than generic vocabulary, then
keyword rules in a fixed order, then the fallback type. Matching is a
case-insensitive substring test; no accent stripping is done, so "Tóquio"
and "Toquio" are different inputs.
"""

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from schemas.checklist_schema import DestinationType

# Insertion order is the lookup order
PLACE_TYPES: Mapping[str, DestinationType] = MappingProxyType({
    "florianópolis": DestinationType.BEACH,
    "rio de janeiro": DestinationType.BEACH,
    "cancún": DestinationType.BEACH,
    "maldivas": DestinationType.BEACH,
    "búzios": DestinationType.BEACH,
    "fernando de noronha": DestinationType.BEACH,
    "porto de galinhas": DestinationType.BEACH,
    "gramado": DestinationType.WINTER,
    "campos do jordão": DestinationType.WINTER,
    "bariloche": DestinationType.WINTER,
    "paris": DestinationType.INTERNATIONAL,
    "nova york": DestinationType.INTERNATIONAL,
    "roma": DestinationType.INTERNATIONAL,
    "tóquio": DestinationType.INTERNATIONAL,
    "londres": DestinationType.INTERNATIONAL,
    "barcelona": DestinationType.INTERNATIONAL,
    "chapada dos veadeiros": DestinationType.CAMPING,
    "monte roraima": DestinationType.MOUNTAIN,
    "machu picchu": DestinationType.MOUNTAIN,
    "serra da mantiqueira": DestinationType.MOUNTAIN,
    "são paulo": DestinationType.CITY,
    "brasília": DestinationType.CITY,
    "curitiba": DestinationType.CITY,
    "belo horizonte": DestinationType.CITY,
})

# Tested top to bottom; the first rule with a matching keyword wins
KEYWORD_RULES: Tuple[Tuple[DestinationType, Tuple[str, ...]], ...] = (
    (DestinationType.BEACH, ("praia", "beach", "mar", "ilha")),
    (DestinationType.MOUNTAIN, ("mont", "serra", "mountain", "trekking", "hiking")),
    (DestinationType.CAMPING, ("camping", "acampamento", "camp")),
    (DestinationType.WINTER, ("inverno", "neve", "winter", "snow", "frio")),
    (DestinationType.INTERNATIONAL, (
        "internacional", "international", "exterior", "abroad", "passport", "passaporte",
    )),
)


class DestinationClassifier:
    """Rule-based classifier over a place table and keyword rules."""

    def __init__(
        self,
        place_types: Mapping[str, DestinationType] = PLACE_TYPES,
        keyword_rules: Sequence[Tuple[DestinationType, Sequence[str]]] = KEYWORD_RULES,
        fallback: DestinationType = DestinationType.CITY,
    ):
        self.place_types = place_types
        self.keyword_rules = keyword_rules
        self.fallback = fallback

    def classify(self, destination: str) -> DestinationType:
        lowered = destination.lower()

        for place, destination_type in self.place_types.items():
            if place in lowered:
                return destination_type

        for destination_type, keywords in self.keyword_rules:
            if any(keyword in lowered for keyword in keywords):
                return destination_type

        return self.fallback


default_classifier = DestinationClassifier()


def determine_destination_type(destination: str) -> DestinationType:
    """Classifies a destination with the built-in tables."""
    return default_classifier.classify(destination)
