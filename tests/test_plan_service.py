"""Tests for plan tiers and the checklist count limit."""

import pytest

from services.plan_service import (
    ChecklistLimitReached,
    PlanTier,
    check_checklist_limit,
    get_checklist_limit,
    get_user_plan,
)


def test_basic_plan_limit(free_limit):
    assert get_checklist_limit(PlanTier.BASIC) == free_limit


def test_paid_plans_are_unlimited():
    assert get_checklist_limit(PlanTier.PREMIUM) is None
    assert get_checklist_limit(PlanTier.FAMILY) is None


def test_below_limit_passes(free_limit):
    check_checklist_limit(free_limit - 1, PlanTier.BASIC)


def test_at_limit_raises(free_limit):
    with pytest.raises(ChecklistLimitReached) as exc_info:
        check_checklist_limit(free_limit, PlanTier.BASIC)
    assert exc_info.value.limit == free_limit
    assert "5 checklists" in str(exc_info.value)


def test_premium_never_raises():
    check_checklist_limit(1000, PlanTier.PREMIUM)


def test_user_plan_defaults_to_basic(fake_db):
    assert get_user_plan("nobody") == PlanTier.BASIC


def test_user_plan_from_database(fake_db):
    fake_db.reference("users/user-1").set({"plan": "family"})
    assert get_user_plan("user-1") == PlanTier.FAMILY


def test_unknown_plan_treated_as_basic(fake_db):
    fake_db.reference("users/user-1").set({"plan": "gold"})
    assert get_user_plan("user-1") == PlanTier.BASIC
