"""Error hierarchy for Prompt Forge.

Every enhancement failure surfaces to the user with the same message; the
``kind`` attribute keeps the underlying cause available for logs and tests.
"""

from __future__ import annotations

from prompt_forge.constants import ENHANCEMENT_FAILED_MESSAGE


class PromptForgeError(Exception):
    """Base for all Prompt Forge errors."""


class EnhancementError(PromptForgeError):
    """The enhancement call failed.

    Attributes:
        kind: One of ``config``, ``invalid_request``, ``network``, ``service``,
            ``malformed`` or ``schema``.
    """

    KINDS = ("config", "invalid_request", "network", "service", "malformed", "schema")

    def __init__(self, kind: str = "service") -> None:
        if kind not in self.KINDS:
            raise ValueError(f"Unknown enhancement error kind: {kind}")
        self.kind = kind
        super().__init__(ENHANCEMENT_FAILED_MESSAGE)


class TemplateError(PromptForgeError):
    """A template cannot be saved as given."""


class StyleError(PromptForgeError):
    """A custom style cannot be saved as given."""
