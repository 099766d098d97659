from LYNK.skills.skill import Skill
from LYNK.types import AgentContext


class DescriptionSkill(Skill):
    order = 2
    capability = "description"
    memory_key = "description"

    def build_prompt(self, context: AgentContext) -> str:
        hints = []
        if context.existing_title:
            hints.append(f"Saved title: {context.existing_title}")
        return self.format_prompt(
            "Generate a brief, informative description for the following URL.",
            context,
            [
                "Max 30 words",
                "Describe what the resource is about or its purpose",
                "Be specific and informative",
                "No emojis or special characters",
                "Output description only, no additional text",
            ],
            hints,
        )

    async def apply(self, context: AgentContext) -> None:
        context.add_reasoning("DescriptionSkill started")

        description = await self.llm.generate(self.build_prompt(context))

        context.memory[self.memory_key] = description.strip()
        context.add_reasoning("DescriptionSkill generated description")
