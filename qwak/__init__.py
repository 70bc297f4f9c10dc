"""Quick agentic aliases: named prompts run through an AI agent command."""

__version__ = "0.1.0"