"""Deterministic provider for tests and offline runs; never touches the network."""
from typing import Dict, List, Tuple
from LYNK.llms.base import AsyncLLMBase

DEFAULT_RESPONSE = "AI-generated content"

# (site hints, response) pairs checked in order; the last entry is the catch-all
_TITLES: List[Tuple[Tuple[str, ...], str]] = [
    (("dribbble", "design"), "Dribbble - Discover Design Inspiration"),
    (("github",), "GitHub - Code Hosting and Collaboration"),
    (("youtube",), "YouTube - Video Tutorials and Entertainment"),
    (("medium",), "Medium - Articles and Thought Leadership"),
    ((), "Useful Online Resource"),
]

_DESCRIPTIONS: List[Tuple[Tuple[str, ...], str]] = [
    (("dribbble", "design"), "A platform for designers to showcase creative work and find design inspiration."),
    (("github",), "Code hosting platform for version control and collaboration on software projects."),
    (("youtube",), "Video sharing platform for educational content, tutorials, and entertainment."),
    (("medium",), "Online publishing platform for articles, blog posts, and thought leadership."),
    ((), "A valuable online resource with relevant content and information."),
]

_TAGS: List[Tuple[Tuple[str, ...], str]] = [
    (("dribbble", "design"), "design, inspiration, portfolio, ui/ux, creative"),
    (("github",), "coding, development, programming, open-source, collaboration"),
    (("youtube",), "video, tutorial, learning, education, entertainment"),
    (("medium",), "article, blog, reading, writing, publishing"),
    ((), "resource, web, reference, online, content"),
]

_CATEGORIES: List[Tuple[Tuple[str, ...], str]] = [
    (("dribbble", "design"), "Design"),
    (("github",), "Development"),
    (("youtube",), "Learning"),
    (("medium",), "Reading"),
    ((), "General"),
]


def _pick(prompt: str, table: List[Tuple[Tuple[str, ...], str]]) -> str:
    for hints, response in table:
        if not hints or any(hint in prompt for hint in hints):
            return response
    return DEFAULT_RESPONSE


class OfflineLLM(AsyncLLMBase):
    """Pattern-matches the prompt's instruction and site hints to fixed text."""

    provider_name = "offline"

    def __init__(self):
        super().__init__()
        self.calls: List[str] = []

    async def _generate(self, prompt: str) -> str:
        self.calls.append(prompt)
        lower = prompt.lower()

        if "concise title" in lower:
            return _pick(lower, _TITLES)
        if "brief, informative description" in lower:
            return _pick(lower, _DESCRIPTIONS)
        if "relevant tags" in lower:
            return _pick(lower, _TAGS)
        if "categorize" in lower or "category" in lower:
            return _pick(lower, _CATEGORIES)
        return DEFAULT_RESPONSE
