from typing import Optional
from LYNK.agents.agent import Agent
from LYNK.decision.decision_engine import DecisionEngine
from LYNK.types import AgentAction, AgentContext, AgentInput
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)


class EnrichmentOrchestrator:
    """
    Entry point for the "enrich resource" operation: decide, then run the
    agent on a fresh context. Unexpected faults propagate to the caller.
    """

    def __init__(
        self,
        agent: Agent,
        decision_engine: Optional[DecisionEngine] = None,
    ):
        self.agent = agent
        self.decision_engine = decision_engine or DecisionEngine()

    async def enrich(self, agent_input: AgentInput) -> AgentContext:
        logger.info(f"Received enrichment request for URL: {agent_input.url}")

        decision = self.decision_engine.decide(agent_input)

        if decision.action == AgentAction.NONE:
            logger.info(f"No enrichment for URL {agent_input.url}: {decision.reason}")
            return AgentContext.empty(agent_input)

        context = AgentContext.from_input(agent_input)
        context.add_reasoning(f"DecisionEngine selected action: {decision.action.value}")
        context.add_reasoning(f"Reason: {decision.reason}")

        logger.debug(f"Dispatching {agent_input.url} to {self.agent.name}")
        await self.agent.execute(context)

        context.memory["confidence"] = decision.confidence

        logger.info(f"Successfully enriched resource for URL: {agent_input.url}")
        return context
