import re
from typing import Optional

# characters that separate words; they become hyphens rather than vanishing
_SEPARATORS = re.compile(r"[\s\-_/\\|]+")
_DISALLOWED = re.compile(r"[^a-z0-9 ]")
_WHITESPACE = re.compile(r"\s+")


def normalize(raw: Optional[str]) -> str:
    """
    Canonical form of a tag or category.

    Lowercase, trim, turn word separators into spaces, drop anything other
    than ASCII letters, digits and spaces, then join the remaining words with
    single hyphens. "UI/UX", "ui ux" and "ui-ux" all become "ui-ux".
    Total and idempotent; the result only holds [a-z0-9-].
    """
    if raw is None:
        return ""
    value = _SEPARATORS.sub(" ", raw.lower().strip())
    value = _DISALLOWED.sub("", value).strip()
    return _WHITESPACE.sub("-", value)

