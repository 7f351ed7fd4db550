import html
import re

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def clean_html_text(text: str) -> str:
    """Strip tags, decode entities and collapse whitespace."""
    if not text:
        return ""
    cleaned = _TAG_RE.sub("", text)
    cleaned = html.unescape(cleaned).replace("\xa0", " ")
    return _WS_RE.sub(" ", cleaned).strip()


def truncate_sentences(text: str, limit: int) -> str:
    """Keep whole sentences while the result stays within `limit` characters."""
    if len(text) <= limit:
        return text
    result = ""
    for sentence in text.split(". "):
        if len(result + sentence) > limit:
            break
        result += sentence + ". "
    # a first sentence longer than the limit is cut hard
    return result.strip() or text[:limit].rstrip()
