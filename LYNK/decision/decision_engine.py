from LYNK.types import AgentAction, AgentDecision, AgentEvent, AgentInput

ENRICH_REASON = "resource needs enrichment with AI-generated metadata"
MISSING_EVENT_REASON = "missing event type and resource information"
LINK_SAVED_REASON = "new link detected, enriching with metadata"
UNHANDLED_REASON = "unhandled event"


class DecisionEngine:
    """
    Rule-based gate in front of the agent. Rules are checked in order and
    the first match wins; identifying fields outrank the event name.
    Never raises.
    """

    def decide(self, agent_input: AgentInput) -> AgentDecision:
        # Rule 1: resource id and URL present, enrich whatever the event
        if agent_input.resource_id is not None and agent_input.url is not None:
            return AgentDecision(AgentAction.ENRICH, 0.75, ENRICH_REASON)

        # Rule 2: nothing to go on
        if agent_input.event is None:
            return AgentDecision(AgentAction.NONE, 0.1, MISSING_EVENT_REASON)

        # Rule 3: explicit enrichment event
        if agent_input.event == AgentEvent.RESOURCE_ENRICH:
            return AgentDecision(AgentAction.ENRICH, 0.75, ENRICH_REASON)

        # Rule 4: link saved event
        if agent_input.event == AgentEvent.LINK_SAVED:
            return AgentDecision(AgentAction.ENRICH, 0.65, LINK_SAVED_REASON)

        return AgentDecision(AgentAction.NONE, 0.05, UNHANDLED_REASON)
