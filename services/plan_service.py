import logging
from enum import Enum
from typing import Optional

from firebase_admin import db

from core.config import settings

logger = logging.getLogger(__name__)


class PlanTier(str, Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    FAMILY = "family"


class ChecklistLimitReached(ValueError):
    """Raised when a user has as many saved checklists as the plan allows."""

    def __init__(self, plan: PlanTier, limit: int):
        self.plan = plan
        self.limit = limit
        super().__init__(f"The {plan.value} plan allows up to {limit} checklists. Upgrade to create more.")


def get_checklist_limit(plan: PlanTier) -> Optional[int]:
    """Maximum number of saved checklists for a plan, None when unlimited."""
    if plan == PlanTier.BASIC:
        return settings.FREE_PLAN_CHECKLIST_LIMIT
    return None


def get_user_plan(user_id: str) -> PlanTier:
    """Reads the user's plan from the database, defaulting to the free plan."""
    plan = db.reference(f'users/{user_id}/plan').get()
    if not plan:
        return PlanTier.BASIC
    try:
        return PlanTier(plan)
    except ValueError:
        logger.warning(f"Unknown plan '{plan}' for user {user_id}, treating as basic")
        return PlanTier.BASIC


def check_checklist_limit(current_count: int, plan: PlanTier):
    """Raises ChecklistLimitReached if another checklist would exceed the plan's limit."""
    limit = get_checklist_limit(plan)
    if limit is not None and current_count >= limit:
        raise ChecklistLimitReached(plan, limit)
