import logging
from typing import List, Optional

from pydantic import ValidationError

from core.config import settings
from schemas.checklist_schema import ChecklistItem, ChecklistSummary, Destination, get_destination_type_label
from services import plan_service
from services.checklist_builder import (
    ChecklistBuilder,
    calculate_progress,
    count_completed,
    toggle_item,
)
from services.firebase_service import db

logger = logging.getLogger(__name__)

checklist_builder = ChecklistBuilder(include_destination_items=settings.ENABLE_DESTINATION_OVERRIDES)

KEY_PREFIX = "checklist-"


def _checklist_path(user_id: str, checklist_id: str) -> str:
    return f'checklists/{user_id}/{KEY_PREFIX}{checklist_id}'


def _parse_checklist(record: dict) -> Destination:
    # Firebase drops empty lists, so a checklist without items comes back without the key
    record = dict(record)
    record.setdefault("items", [])
    return Destination.model_validate(record)


def count_saved_checklists(user_id: str) -> int:
    saved = db.reference(f'checklists/{user_id}').get(shallow=True)
    if not saved:
        return 0
    return sum(1 for key in saved if key.startswith(KEY_PREFIX))


def generate_checklist(destination_name: str, user_id: str) -> Destination:
    """
    Generates a new checklist for a destination after checking the user's plan limit.
    The checklist is not saved; call save_checklist for that.
    """
    plan = plan_service.get_user_plan(user_id)
    plan_service.check_checklist_limit(count_saved_checklists(user_id), plan)

    checklist = checklist_builder.build(destination_name)
    logger.info(f"Generated '{checklist.type.value}' checklist with {len(checklist.items)} items for '{destination_name}'")
    return checklist


def save_checklist(checklist: Destination, user_id: str) -> Destination:
    """
    Stores a checklist as-is, replacing any previous version with the same id.
    Storing a new checklist counts against the user's plan limit.
    """
    checklist_ref = db.reference(_checklist_path(user_id, checklist.id))
    if not checklist_ref.get(shallow=True):
        plan = plan_service.get_user_plan(user_id)
        plan_service.check_checklist_limit(count_saved_checklists(user_id), plan)

    checklist_ref.set(checklist.model_dump(mode="json"))
    return checklist


def get_saved_checklists(user_id: str) -> List[Destination]:
    """Retrieves all saved checklists for a user, skipping records that fail to parse."""
    saved = db.reference(f'checklists/{user_id}').get()
    if not saved:
        return []

    checklists = []
    for key, record in saved.items():
        if not key.startswith(KEY_PREFIX):
            continue
        try:
            checklists.append(_parse_checklist(record))
        except (ValidationError, TypeError) as e:
            logger.error(f"Error parsing saved checklist {key} for user {user_id}: {e}")
    return checklists


def get_checklist(user_id: str, checklist_id: str) -> Optional[Destination]:
    record = db.reference(_checklist_path(user_id, checklist_id)).get()
    if not record:
        return None
    return _parse_checklist(record)


def toggle_item_status(user_id: str, checklist_id: str, item_id: str, done: Optional[bool] = None) -> Optional[ChecklistItem]:
    """
    Toggles the 'done' status of a checklist item and saves the checklist.
    Returns the updated item, or None if the checklist or the item is not found.
    """
    checklist = get_checklist(user_id, checklist_id)
    if not checklist:
        return None

    updated = toggle_item(checklist, item_id, done)
    if not updated:
        return None

    save_checklist(updated, user_id)
    return next(item for item in updated.items if item.id == item_id)


def delete_checklist(user_id: str, checklist_id: str) -> bool:
    checklist_ref = db.reference(_checklist_path(user_id, checklist_id))
    if not checklist_ref.get(shallow=True):
        return False
    checklist_ref.delete()
    logger.info(f"Deleted checklist {checklist_id} for user {user_id}")
    return True


def summarize_checklist(checklist: Destination) -> ChecklistSummary:
    return ChecklistSummary(
        id=checklist.id,
        name=checklist.name,
        type=checklist.type,
        type_label=get_destination_type_label(checklist.type),
        completed=count_completed(checklist.items),
        total=len(checklist.items),
        progress=calculate_progress(checklist),
    )
