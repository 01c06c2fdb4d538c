# salon_backend/queries/_helpers.py
from typing import Any, Dict

from salon_backend.models._timestamps import utcnow


def apply_updates(obj: Any, updates: Dict[str, Any], stamp: bool = True) -> Any:
    """Merge a partial update into an ORM row; unknown keys are ignored."""
    for key, value in updates.items():
        if key == "id" or not hasattr(obj, key):
            continue
        setattr(obj, key, value)
    if stamp and hasattr(obj, "updated_at"):
        obj.updated_at = utcnow()
    return obj
