"""Event helper utilities.

Helpers for publishing storefront events on the global event bus.

Quick import:
    from mart.events.event_helpers import (
        publish_profile_updated, publish_plan_generated, publish_order_placed,
    )
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import create_event, PROFILE_UPDATED, PLAN_GENERATED, ORDER_PLACED

__all__ = [
    'publish_profile_updated', 'publish_plan_generated', 'publish_order_placed',
    'PROFILE_UPDATED', 'PLAN_GENERATED', 'ORDER_PLACED',
]


def publish_profile_updated(profile: Any):
    """Publish a profile.updated event so open views recompute their targets."""
    create_event(PROFILE_UPDATED, {'profile': profile})


def publish_plan_generated(plan: Any):
    """Publish a plan.generated event with a small summary of the new week."""
    entries = plan.all_entries()
    create_event(PLAN_GENERATED, {
        'days': sum(1 for d in plan.days.values() if d),
        'entries': len(entries),
    })


def publish_order_placed(order: Any):
    create_event(ORDER_PLACED, {'order': order})
