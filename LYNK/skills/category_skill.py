from LYNK.llms.fallback import is_generation_failure
from LYNK.memory.normalizer import normalize
from LYNK.skills.skill import Skill
from LYNK.types import AgentContext


class CategorySkill(Skill):
    """Folder-style category for the resource"""

    order = 4
    capability = "category"
    memory_key = "category"

    def build_prompt(self, context: AgentContext) -> str:
        return self.format_prompt(
            "Categorize the following URL into ONE category/folder name.",
            context,
            [
                "Choose ONE category",
                "Use simple, clear category names",
                "Output category name only",
            ],
        )

    async def apply(self, context: AgentContext) -> None:
        context.add_reasoning("CategorySkill started")

        raw_category = (await self.llm.generate(self.build_prompt(context))).strip()

        if (
            self.uses_memory
            and normalize(raw_category)
            and not is_generation_failure(raw_category)
        ):
            category = await self.memory_store.reuse_or_create_category(raw_category)
            context.add_reasoning(f"CategorySkill reused category: {category}")
        else:
            category = raw_category
            context.add_reasoning(f"CategorySkill kept raw category: {category}")

        context.memory[self.memory_key] = category
