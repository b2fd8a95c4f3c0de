"""Boundary to the external structuring model (prompt + OpenAI-compatible client)."""
