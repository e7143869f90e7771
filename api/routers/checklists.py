from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from urllib.parse import quote

from schemas.checklist_schema import (
    ChecklistItem,
    ChecklistSummary,
    Destination,
    DestinationCreate,
    ItemToggleRequest,
)
from services import checklist_service, export_service
from services.checklist_builder import calculate_progress
from services.plan_service import ChecklistLimitReached
from core.security import get_current_user

router = APIRouter(
    prefix="/checklists",
    tags=["Checklists"],
    responses={404: {"description": "Not found"}},
)

@router.post("/generate", response_model=Destination)
def generate_checklist(
    request: DestinationCreate,
    current_user: dict = Depends(get_current_user)
):
    """
    Generates a checklist for a destination. The result is not saved until
    it is posted back to this collection.
    """
    try:
        return checklist_service.generate_checklist(request.name, current_user['uid'])
    except ChecklistLimitReached as e:
        raise HTTPException(status_code=403, detail=str(e))

@router.post("", response_model=Destination)
def save_checklist(
    checklist: Destination,
    current_user: dict = Depends(get_current_user)
):
    """Saves a checklist, replacing an earlier version with the same id."""
    try:
        return checklist_service.save_checklist(checklist, current_user['uid'])
    except ChecklistLimitReached as e:
        raise HTTPException(status_code=403, detail=str(e))

@router.get("", response_model=List[ChecklistSummary])
def list_checklists(current_user: dict = Depends(get_current_user)):
    """Lists the user's saved checklists with their progress."""
    checklists = checklist_service.get_saved_checklists(current_user['uid'])
    return [checklist_service.summarize_checklist(checklist) for checklist in checklists]

@router.get("/{checklist_id}", response_model=Destination)
def get_checklist(
    checklist_id: str,
    current_user: dict = Depends(get_current_user)
):
    checklist = checklist_service.get_checklist(current_user['uid'], checklist_id)
    if not checklist:
        raise HTTPException(status_code=404, detail="Checklist not found.")
    return checklist

@router.put("/{checklist_id}/items/{item_id}/toggle", response_model=ChecklistItem)
def toggle_item(
    checklist_id: str,
    item_id: str,
    request: Optional[ItemToggleRequest] = None,
    current_user: dict = Depends(get_current_user)
):
    """
    Toggles the 'done' status of a single checklist item, or sets it when
    the body carries an explicit value.
    """
    done = request.done if request else None
    updated_item = checklist_service.toggle_item_status(current_user['uid'], checklist_id, item_id, done)
    if not updated_item:
        raise HTTPException(status_code=404, detail="Checklist item not found.")
    return updated_item

@router.delete("/{checklist_id}", status_code=204)
def delete_checklist(
    checklist_id: str,
    current_user: dict = Depends(get_current_user)
):
    if not checklist_service.delete_checklist(current_user['uid'], checklist_id):
        raise HTTPException(status_code=404, detail="Checklist not found.")
    return Response(status_code=204)

@router.get("/{checklist_id}/export", response_class=PlainTextResponse)
def export_checklist(
    checklist_id: str,
    current_user: dict = Depends(get_current_user)
):
    """Downloads the checklist as a paginated text document grouped by category."""
    checklist = checklist_service.get_checklist(current_user['uid'], checklist_id)
    if not checklist:
        raise HTTPException(status_code=404, detail="Checklist not found.")

    document = export_service.render_checklist_document(checklist, calculate_progress(checklist))
    filename = export_service.export_filename(checklist.name)
    return PlainTextResponse(
        document.to_text(),
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
