from LYNK.skills.skill import Skill
from LYNK.types import AgentContext

_QUOTES = "\"'`"


def strip_wrapping_quotes(text: str) -> str:
    """Remove one pair of matching quotes around the whole title, if present."""
    text = text.strip()
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1].strip()
    return text


class TitleSkill(Skill):
    order = 1
    capability = "title"
    memory_key = "title"

    def build_prompt(self, context: AgentContext) -> str:
        hints = []
        if context.existing_description:
            hints.append(f"Saved description: {context.existing_description}")
        return self.format_prompt(
            "Generate a concise title for the following URL.",
            context,
            [
                "Max 10 words",
                "Name the site or resource and what it offers",
                "No emojis or surrounding quotes",
                "Output title only, no additional text",
            ],
            hints,
        )

    async def apply(self, context: AgentContext) -> None:
        context.add_reasoning("TitleSkill started")

        title = await self.llm.generate(self.build_prompt(context))
        title = strip_wrapping_quotes(title)

        context.memory[self.memory_key] = title
        context.add_reasoning("TitleSkill generated title")
