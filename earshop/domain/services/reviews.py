from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId


def new_review_doc(fields: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Build the embedded review document pushed onto a product's 'review' list."""
    doc: Dict[str, Any] = {"_id": ObjectId()}
    doc.update(fields)
    doc["date"] = now or datetime.now(timezone.utc)
    return doc


def merge_review(current: Dict[str, Any], changes: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Apply an edit to a stored review. Only keys present in `changes` replace
    stored values; the identity is kept. The date is the caller's, or the time
    of the edit when none is sent.
    """
    merged = dict(current)
    edit = dict(changes)
    date = edit.pop("date", None)
    edit.pop("_id", None)
    merged.update(edit)
    merged["date"] = date or now or datetime.now(timezone.utc)
    return merged
