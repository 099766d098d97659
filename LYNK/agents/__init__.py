"""Agents module."""

from LYNK.agents.agent import Agent
from LYNK.agents.resource_agent import ResourceAgent

__all__ = [
    "Agent",
    "ResourceAgent",
]
