"""LYNK: agent orchestration for AI enrichment of saved resources."""

__version__ = "0.1.0"
