"""User profile persistence (first user of the mock database is the signed-in user)."""
import logging
from typing import Any, Dict, Optional

from mart.domain.UserProfile import UserProfile
from mart.events.event_helpers import publish_profile_updated
from mart.infra.Mock_Database import load_db, save_db

logger = logging.getLogger(__name__)


def get_user_profile(user_id: Optional[str] = None) -> Optional[UserProfile]:
    users = load_db()["users"]
    if not users:
        return None
    if user_id is None:
        return UserProfile.from_dict(users[0])
    for record in users:
        if str(record.get("id")) == str(user_id):
            return UserProfile.from_dict(record)
    return None


def update_user_profile(changes: Dict[str, Any], user_id: Optional[str] = None) -> Optional[UserProfile]:
    """Apply a partial update and persist it. Returns None when the user does not exist.

    Raises ValueError for fields that cannot be edited or an unknown activity level.
    """
    current = get_user_profile(user_id)
    if current is None:
        return None
    updated = current.updated(changes)
    db = load_db()
    db["users"] = [updated.to_dict() if str(u.get("id")) == updated.id else u for u in db["users"]]
    save_db(db)
    logger.info("Profile %s updated: %s", updated.id, ", ".join(sorted(changes)))
    publish_profile_updated(updated)
    return updated


__all__ = ["get_user_profile", "update_user_profile"]
