from typing import List, Optional

from schemas.checklist_schema import (
    DESTINATION_TYPE_ICONS,
    DESTINATION_TYPE_LABELS,
    ClassificationResult,
    DestinationType,
    DestinationTypeInfo,
)
from services.classifier import determine_destination_type

# Suggested destinations for the autocomplete dropdown
SUGGESTED_DESTINATIONS = [
    "Florianópolis",
    "Rio de Janeiro",
    "Gramado",
    "Campos do Jordão",
    "Paris",
    "Nova York",
    "Londres",
    "Tóquio",
    "Barcelona",
    "Cancún",
    "Bariloche",
    "Fernando de Noronha",
    "Chapada dos Veadeiros",
    "Bonito",
    "São Paulo",
    "Salvador",
    "Porto de Galinhas",
    "Brasília",
    "Maldivas",
    "Roma",
    "Búzios",
    "Machu Picchu",
]

# Quick-pick options shown under the input
POPULAR_DESTINATIONS = [
    "Florianópolis",
    "Rio de Janeiro",
    "Gramado",
    "Paris",
    "Nova York",
    "Chapada dos Veadeiros",
]


def get_suggestions(query: Optional[str] = None) -> List[str]:
    """Suggested destinations, filtered by a case-insensitive substring when a query is given."""
    if not query or not query.strip():
        return list(SUGGESTED_DESTINATIONS)
    lowered = query.strip().lower()
    return [name for name in SUGGESTED_DESTINATIONS if lowered in name.lower()]


def get_popular_destinations() -> List[str]:
    return list(POPULAR_DESTINATIONS)


def get_type_info(destination_type: DestinationType) -> DestinationTypeInfo:
    return DestinationTypeInfo(
        type=destination_type,
        label=DESTINATION_TYPE_LABELS[destination_type],
        icon=DESTINATION_TYPE_ICONS[destination_type],
    )


def list_destination_types() -> List[DestinationTypeInfo]:
    return [get_type_info(destination_type) for destination_type in DestinationType]


def preview_classification(query: str) -> ClassificationResult:
    destination_type = determine_destination_type(query)
    info = get_type_info(destination_type)
    return ClassificationResult(query=query, **info.model_dump())
