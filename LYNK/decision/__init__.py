from .decision_engine import DecisionEngine

__all__ = ["DecisionEngine"]
