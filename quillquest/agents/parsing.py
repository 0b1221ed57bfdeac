"""
Best-effort extraction of structured data from free-form model text.

Models asked for JSON often wrap it in prose or code fences. We take the
first greedy {...} span and try to decode it. This is a heuristic: two
separate objects in one reply are captured as a single span that fails
to decode, and the caller falls back to the raw text.
"""

import json
import re
from typing import Any, Dict, List, Optional

from quillquest.schemas.schema import Character, Continuation, World

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)

UNKNOWN_CHARACTER_NAME = "Unknown"
UNKNOWN_WORLD_NAME = "Unknown Realm"


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Return the first {...} span of `text` decoded as a dict, or None. Never raises."""
    if not text:
        return None
    match = _JSON_OBJECT.search(text)
    if not match:
        return None
    try:
        data = json.loads(match.group())
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def fallback_character(raw_text: str, description: str) -> Character:
    return {
        "name": UNKNOWN_CHARACTER_NAME,
        "backstory": raw_text,
        "traits": [],
        "appearance": description,
    }


def fallback_world(raw_text: str) -> World:
    return {
        "name": UNKNOWN_WORLD_NAME,
        "description": raw_text,
        "history": "",
        "features": [],
    }


def fallback_continuation(raw_text: str) -> Continuation:
    return {"continuation": raw_text}


def clean_suggestions(value: Any) -> Optional[List[str]]:
    """Keep the non-empty string entries of a suggestions list."""
    if not isinstance(value, list):
        return None
    suggestions = [s for s in value if isinstance(s, str) and s.strip()]
    return suggestions or None
