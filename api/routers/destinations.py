from fastapi import APIRouter, HTTPException, Query
from typing import List, Optional

from schemas.checklist_schema import ClassificationResult, DestinationTypeInfo
from services import destination_service

router = APIRouter(
    prefix="/destinations",
    tags=["Destinations"],
    responses={404: {"description": "Not found"}},
)

@router.get("/suggestions", response_model=List[str])
def get_suggestions(q: Optional[str] = Query(None, description="Filter suggestions by name")):
    """Suggested destinations for the autocomplete dropdown."""
    return destination_service.get_suggestions(q)

@router.get("/popular", response_model=List[str])
def get_popular():
    """Popular destinations shown as quick options."""
    return destination_service.get_popular_destinations()

@router.get("/types", response_model=List[DestinationTypeInfo])
def get_destination_types():
    """Display label and icon for every destination type."""
    return destination_service.list_destination_types()

@router.get("/classify", response_model=ClassificationResult)
def classify_destination(q: str = Query(..., min_length=1, description="Destination to classify")):
    """Previews which type a destination would be classified as."""
    if not q.strip():
        raise HTTPException(status_code=422, detail="Destination must not be blank.")
    return destination_service.preview_classification(q.strip())
