"""Prompt Forge: AI-assisted rewriting of prompts and stories."""
