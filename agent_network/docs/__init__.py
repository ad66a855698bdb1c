"""Documentation navigation tables."""

from agent_network.docs.rag_reference import RAG_REFERENCE_NAV

__all__ = ["RAG_REFERENCE_NAV"]
