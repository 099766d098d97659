import pytest
from LYNK.decision import DecisionEngine
from LYNK.types import AgentAction, AgentInput


@pytest.fixture
def engine():
    return DecisionEngine()


@pytest.mark.parametrize(
    "fields,action,confidence",
    [
        ({"resource_id": "r1", "url": "https://x.com"}, AgentAction.ENRICH, 0.75),
        ({}, AgentAction.NONE, 0.10),
        ({"event": "RESOURCE_ENRICH"}, AgentAction.ENRICH, 0.75),
        ({"event": "LINK_SAVED"}, AgentAction.ENRICH, 0.65),
        ({"event": "UNKNOWN_EVENT"}, AgentAction.NONE, 0.05),
    ],
)
def test_rule_outcomes(engine, fields, action, confidence):
    decision = engine.decide(AgentInput(**fields))
    assert decision.action == action
    assert decision.confidence == pytest.approx(confidence)


def test_identifying_fields_outrank_event(engine):
    """Rule 1 fires before the event is even looked at"""
    decision = engine.decide(
        AgentInput(resource_id="r1", url="https://x.com", event="UNKNOWN_EVENT")
    )
    assert decision.action == AgentAction.ENRICH
    assert decision.confidence == pytest.approx(0.75)
    assert decision.reason == "resource needs enrichment with AI-generated metadata"


def test_partial_identity_falls_through_to_event(engine):
    decision = engine.decide(AgentInput(url="https://x.com", event="LINK_SAVED"))
    assert decision.action == AgentAction.ENRICH
    assert decision.confidence == pytest.approx(0.65)
    assert decision.reason == "new link detected, enriching with metadata"


def test_missing_event_reason(engine):
    decision = engine.decide(AgentInput(resource_id="r1"))
    assert decision.action == AgentAction.NONE
    assert decision.reason == "missing event type and resource information"


def test_event_match_is_exact(engine):
    decision = engine.decide(AgentInput(event="link_saved"))
    assert decision.action == AgentAction.NONE
    assert decision.reason == "unhandled event"


def test_decision_is_immutable(engine):
    decision = engine.decide(AgentInput())
    with pytest.raises(Exception):
        decision.confidence = 1.0


def test_input_accepts_wire_names():
    agent_input = AgentInput.model_validate(
        {
            "resourceId": "r1",
            "url": "https://x.com",
            "userId": "u1",
            "contentType": "link",
            "existingTitle": "Old",
            "needs": {"tags": True},
        }
    )
    assert agent_input.resource_id == "r1"
    assert agent_input.user_id == "u1"
    assert agent_input.content_type == "link"
    assert agent_input.existing_title == "Old"
    assert agent_input.needs == {"tags": True}
