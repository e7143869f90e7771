from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

class DestinationType(str, Enum):
    """Closed set of travel categories a destination can be classified into."""
    BEACH = "beach"
    MOUNTAIN = "mountain"
    CITY = "city"
    INTERNATIONAL = "international"
    CAMPING = "camping"
    WINTER = "winter"
    DEFAULT = "default"

# Display metadata consumed by the frontend, one entry per DestinationType
DESTINATION_TYPE_LABELS = {
    DestinationType.BEACH: "Praia",
    DestinationType.MOUNTAIN: "Montanha",
    DestinationType.CAMPING: "Camping",
    DestinationType.WINTER: "Inverno",
    DestinationType.INTERNATIONAL: "Internacional",
    DestinationType.CITY: "Cidade",
    DestinationType.DEFAULT: "Geral",
}

DESTINATION_TYPE_ICONS = {
    DestinationType.BEACH: "umbrella",
    DestinationType.MOUNTAIN: "mountain",
    DestinationType.CAMPING: "tent",
    DestinationType.WINTER: "snowflake",
    DestinationType.INTERNATIONAL: "globe",
    DestinationType.CITY: "building",
    DestinationType.DEFAULT: "plane",
}

def get_destination_type_label(destination_type: DestinationType) -> str:
    return DESTINATION_TYPE_LABELS[DestinationType(destination_type)]

class ChecklistItem(BaseModel):
    """Schema for a single item in a travel checklist."""
    id: str
    name: str = Field(..., examples=["Passaporte"])
    category: str = Field(..., examples=["Documentos"])
    done: bool = False

class Destination(BaseModel):
    """Schema for a full checklist generated for one destination."""
    id: str
    name: str = Field(..., examples=["Paris"])
    type: DestinationType
    items: List[ChecklistItem]

    @model_validator(mode="after")
    def check_unique_item_ids(self):
        seen = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(f"Duplicate item id '{item.id}' in checklist.")
            seen.add(item.id)
        return self

class DestinationCreate(BaseModel):
    """Schema for requesting a new checklist generation."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, examples=["Florianópolis"])

class ItemToggleRequest(BaseModel):
    """Schema for toggling an item. Without `done` the current status is flipped."""
    done: Optional[bool] = None

class ChecklistSummary(BaseModel):
    """Schema for a saved checklist in the listing."""
    id: str
    name: str
    type: DestinationType
    type_label: str
    completed: int
    total: int
    progress: int = Field(..., ge=0, le=100)

class DestinationTypeInfo(BaseModel):
    """Display metadata for a destination type."""
    type: DestinationType
    label: str
    icon: str

class ClassificationResult(DestinationTypeInfo):
    """Schema for a classification preview of a free-text destination."""
    query: str
