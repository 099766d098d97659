from typing import List
from LYNK.llms.fallback import is_generation_failure
from LYNK.memory.normalizer import normalize
from LYNK.skills.skill import Skill
from LYNK.types import AgentContext


def split_tags(response: str) -> List[str]:
    """Comma separated provider output to trimmed, non-empty tokens."""
    return [tag.strip() for tag in response.split(",") if tag.strip()]


def dedupe(values: List[str]) -> List[str]:
    """Drop repeats, keeping the first occurrence of each value."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class TagSkill(Skill):
    order = 3
    capability = "tags"
    memory_key = "tags"

    def build_prompt(self, context: AgentContext) -> str:
        hints = []
        if context.existing_title:
            hints.append(f"Saved title: {context.existing_title}")
        return self.format_prompt(
            "Generate relevant tags for the following URL.",
            context,
            [
                "Generate 3-5 relevant tags",
                "Tags should be single words or short phrases (max 2 words)",
                "Use lowercase",
                "Separate tags with commas",
                "Output tags only in format: tag1, tag2, tag3",
            ],
            hints,
        )

    async def apply(self, context: AgentContext) -> None:
        context.add_reasoning("TagSkill started")

        response = await self.llm.generate(self.build_prompt(context))
        candidates = split_tags(response)

        if is_generation_failure(response) or not self.uses_memory:
            if self.uses_memory:
                context.add_reasoning("TagSkill kept raw output, generation unavailable")
            context.memory[self.memory_key] = dedupe(candidates)
            context.add_reasoning("TagSkill inferred tags")
            return

        resolved = []
        for tag in candidates:
            if not normalize(tag):
                continue
            resolved.append(await self.memory_store.reuse_or_create(tag))

        context.memory[self.memory_key] = dedupe(resolved)
        context.add_reasoning("TagSkill inferred and reused tags")
