from enum import Enum
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from pydantic import BaseModel, ConfigDict, Field


class AgentAction(str, Enum):
    """What the decision engine wants done with a request"""
    ENRICH = "ENRICH"
    NONE = "NONE"


class AgentEvent:
    """Event names understood by the decision engine"""
    RESOURCE_ENRICH = "RESOURCE_ENRICH"
    LINK_SAVED = "LINK_SAVED"


class AgentInput(BaseModel):
    """
    Raw enrichment request. Accepts the camelCase names used on the wire
    as well as the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    resource_id: Optional[str] = Field(default=None, alias="resourceId")
    url: Optional[str] = None
    persona: Optional[str] = None
    event: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    content_type: Optional[str] = Field(default=None, alias="contentType")
    existing_title: Optional[str] = Field(default=None, alias="existingTitle")
    existing_description: Optional[str] = Field(
        default=None, alias="existingDescription"
    )
    # which fields the caller wants, e.g. {"title": True, "tags": False}
    needs: Optional[Dict[str, bool]] = None


@dataclass(frozen=True)
class AgentDecision:
    """Outcome of the decision engine; confidence is advisory only"""
    action: AgentAction
    confidence: float
    reason: str


@dataclass
class AgentContext:
    """Working state for one enrichment run, owned by the agent while it runs"""
    resource_id: Optional[str] = None
    url: Optional[str] = None
    persona: Optional[str] = None
    needs: Optional[Dict[str, bool]] = None
    existing_title: Optional[str] = None
    existing_description: Optional[str] = None
    memory: Dict[str, Any] = field(default_factory=dict)
    reasoning: List[str] = field(default_factory=list)

    def add_reasoning(self, step: str) -> None:
        self.reasoning.append(step)

    @classmethod
    def from_input(cls, agent_input: AgentInput) -> "AgentContext":
        return cls(
            resource_id=agent_input.resource_id,
            url=agent_input.url,
            persona=agent_input.persona,
            needs=dict(agent_input.needs) if agent_input.needs is not None else None,
            existing_title=agent_input.existing_title,
            existing_description=agent_input.existing_description,
        )

    @classmethod
    def empty(cls, agent_input: AgentInput) -> "AgentContext":
        """Context returned untouched when no enrichment is performed"""
        return cls.from_input(agent_input)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resourceId": self.resource_id,
            "url": self.url,
            "persona": self.persona,
            "needs": self.needs,
            "memory": dict(self.memory),
            "reasoning": list(self.reasoning),
        }
