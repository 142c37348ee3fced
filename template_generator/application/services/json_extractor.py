"""Pull a JSON object out of model-generated text.

Model output may wrap the JSON in a fenced code block, surround it with
prose, or be bare JSON. Extraction never raises; parse failures surface as
None from parse_json_safely so callers can fall back.
"""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Non-greedy: stop at the first closing fence.
_CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*(\{[\s\S]*?\})\s*```")
# Greedy: widest brace span, so nested objects stay intact.
_BARE_OBJECT_RE = re.compile(r"(\{[\s\S]*\})")


def extract_json_from_text(text: str) -> str:
    """Return the most plausible JSON object text inside text.

    Order: first fenced block (optionally tagged json), then the first-to-last
    brace span, then text unchanged.
    """
    match = _CODE_BLOCK_RE.search(text)
    if match:
        return match.group(1)
    match = _BARE_OBJECT_RE.search(text)
    if match:
        return match.group(1)
    return text


def parse_json_safely(text: str) -> Any | None:
    """Extract and parse JSON from text; return None on any failure."""
    if not isinstance(text, str):
        logger.warning("Cannot parse JSON from %s", type(text).__name__)
        return None
    try:
        return json.loads(extract_json_from_text(text))
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning("Error parsing JSON from model output: %s", e)
        return None
