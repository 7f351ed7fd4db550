import json
import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


def extract_json_block(text: str) -> Optional[str]:
    """
    Pull the first complete JSON object or array out of free text.

    Code fences are removed, leading prose is skipped and the closing
    bracket is found by depth counting outside of string literals.
    Returns None when no balanced block exists (e.g. truncated output).
    """
    if not text or not isinstance(text, str):
        return None

    cleaned = _FENCE_RE.sub("", text).strip()

    starts = [i for i in (cleaned.find("{"), cleaned.find("[")) if i != -1]
    if not starts:
        return None
    cleaned = cleaned[min(starts):]

    opener = cleaned[0]
    closer = "}" if opener == "{" else "]"
    depth = 0
    in_string = False
    escape = False

    for i, ch in enumerate(cleaned):
        if escape:
            escape = False
            continue
        if ch == "\\":
            escape = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return cleaned[: i + 1]

    return None


def safe_parse_json(raw: str) -> Any:
    """
    json.loads with a second attempt on the extracted block.

    Raises ValueError when neither attempt yields JSON.
    """
    try:
        return json.loads(raw)
    except (TypeError, json.JSONDecodeError):
        pass

    extracted = extract_json_block(raw)
    if extracted is not None:
        try:
            return json.loads(extracted)
        except json.JSONDecodeError as e:
            logger.warning(f"Extracted JSON block still invalid: {e}")

    preview = raw[:200] if isinstance(raw, str) else repr(raw)
    raise ValueError(f"LLM did not return valid JSON (first 200 chars: {preview!r})")
