import re
from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId


# --- OBJECT IDS ---
def parse_object_id(raw_id: str) -> Optional[ObjectId]:
    """Turn a path id into an ObjectId, or None if it isn't a legal one."""
    try:
        return ObjectId(raw_id)
    except (InvalidId, TypeError):
        return None


# --- SERIALIZATION ---
def serialize_doc(doc: dict) -> dict:
    doc = dict(doc)
    doc["_id"] = str(doc["_id"])
    return doc


# --- QUERY HELPERS ---
def contains_ignore_case(text: str) -> dict:
    """Case-insensitive substring match; regex metacharacters in text match literally."""
    return {"$regex": re.escape(text), "$options": "i"}
