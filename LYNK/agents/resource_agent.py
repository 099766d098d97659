from typing import List, Sequence
from LYNK.agents.agent import Agent
from LYNK.skills.skill import Skill
from LYNK.types import AgentContext
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)


class ResourceAgent(Agent):
    """
    Runs enrichment skills against a resource context.

    Skills execute one after another in their fixed order (title,
    description, tags, category). When the context declares needs, only
    skills whose capability is requested run and every skill leaves a
    reasoning line saying whether it ran. Without needs every skill runs.
    """

    def __init__(
        self,
        skills: Sequence[Skill],
        name: str = "Resource Agent",
    ):
        super().__init__(name)
        # sorted() is stable, so equal orders keep registration order
        self.skills: List[Skill] = sorted(skills, key=lambda skill: skill.order)

    async def execute(self, context: AgentContext) -> None:
        needs = context.needs

        # No needs declared: run every skill
        if not needs:
            for skill in self.skills:
                await self._run_skill(skill, context)
            return

        for skill in self.skills:
            if needs.get(skill.capability_name(), False):
                context.add_reasoning(f"Executing {skill.name} (requested by needs)")
                await self._run_skill(skill, context)
            else:
                context.add_reasoning(f"Skipping {skill.name} (not needed)")

    async def _run_skill(self, skill: Skill, context: AgentContext) -> None:
        try:
            await skill.apply(context)
        except Exception as e:
            logger.error(
                f"{skill.name} failed for {context.url}: {type(e).__name__}: {e}"
            )
            context.add_reasoning(f"{skill.name} failed: {type(e).__name__}: {e}")
