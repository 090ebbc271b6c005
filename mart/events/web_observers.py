"""Web-facing observers for storefront events.

Subscribes to the GLOBAL_EVENT_BUS for profile.updated, plan.generated and
order.placed and keeps a small in-memory ring buffer of recent events that the
client polls through GET /api/events.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; uvicorn may serve requests from a thread pool.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, PROFILE_UPDATED, PLAN_GENERATED, ORDER_PLACED

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _summarize(payload: Any) -> Dict[str, Any]:
    evt: Dict[str, Any] = {}
    if not isinstance(payload, dict):
        return evt
    profile = payload.get('profile')
    if profile is not None:
        evt['user'] = getattr(profile, 'to_dict', lambda: {})()
    order = payload.get('order')
    if order is not None:
        evt['orderId'] = getattr(order, 'id', '')
        evt['total'] = getattr(order, 'total', 0)
    for k in ('days', 'entries'):
        if k in payload:
            evt[k] = payload[k]
    return evt


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        evt.update(_summarize(payload))
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (PROFILE_UPDATED, PLAN_GENERATED, ORDER_PLACED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.debug("Web observers subscribed")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
