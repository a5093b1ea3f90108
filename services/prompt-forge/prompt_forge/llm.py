"""Enhancement client: builds the rewrite request and validates the structured reply."""

from __future__ import annotations

import json
import logging
import os

import openai
from dotenv import load_dotenv
from openai import OpenAI
from pydantic import ValidationError

from prompt_forge.constants import MAX_INTENSITY, MIN_INTENSITY
from prompt_forge.errors import EnhancementError
from prompt_forge.models import EnhancementResult, StyleDefinition

logger = logging.getLogger(__name__)

load_dotenv()
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))
if not os.getenv("OPENAI_API_KEY"):
    logger.warning("OPENAI_API_KEY not set in environment or .env file.")

INTENSITY_DESCRIPTIONS = {
    1: "Subtle & Conservative: Minimal changes, focused on basic grammar and slight clarity improvements.",
    2: "Modest: Light enhancements to vocabulary and flow without changing the core structure.",
    3: "Balanced: Standard professional enhancement with good descriptive depth and structural optimization.",
    4: "High: Significant creative flourishes, advanced vocabulary, and strong atmospheric/technical expansion.",
    5: "Maximum / Extreme: Full transformation. Highly evocative, incredibly detailed, and deeply immersive or technically dense.",
}

ENHANCEMENT_SCHEMA = {
    "type": "object",
    "properties": {
        "original": {"type": "string"},
        "enhanced": {"type": "string"},
        "explanation": {
            "type": "string",
            "description": "Detailed explanation of what was improved.",
        },
        "keyChanges": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Short bullet points of specific linguistic or structural changes.",
        },
        "tips": {
            "type": "array",
            "items": {"type": "string"},
            "description": "General tips for the user to improve their writing in the future.",
        },
    },
    "required": ["original", "enhanced", "explanation", "keyChanges", "tips"],
    "additionalProperties": False,
}

PROMPT_ENHANCE = """Enhance the following text using the style/instruction provided.

Target Style Name: {style_name}
Style Specific Instructions: {style_instruction}

Enhancement Intensity Level: {intensity}/{max_intensity}
Intensity Instruction: {intensity_description}

Original text to enhance: "{text}"

General rules for the response:
- Adhere strictly to the requested intensity level.
- Improve clarity, vocabulary, and structural impact based on the target style.
- For AI prompts and coding-agent instructions, optimize for maximum model adherence and clear constraints.
- For stories, make them immersive, evocative, and well-paced.
- Maintain the original intent but maximize quality."""

_client = None


def get_client() -> OpenAI:
    """Return the shared OpenAI client, reading the API key on first use."""
    global _client
    if _client is None:
        api_key = os.getenv("OPENAI_API_KEY", "")
        if not api_key:
            raise EnhancementError("config")
        _client = OpenAI(api_key=api_key)
    return _client


def build_enhancement_prompt(text: str, style: StyleDefinition, intensity: int) -> str:
    if isinstance(intensity, bool) or not isinstance(intensity, int) or not MIN_INTENSITY <= intensity <= MAX_INTENSITY:
        raise EnhancementError("invalid_request")
    return PROMPT_ENHANCE.format(
        style_name=style.name,
        style_instruction=style.instruction,
        intensity=intensity,
        max_intensity=MAX_INTENSITY,
        intensity_description=INTENSITY_DESCRIPTIONS[intensity],
        text=text,
    )


def parse_enhancement_response(raw: str, original: str) -> EnhancementResult:
    """Validate the service's JSON reply; ``original`` always echoes the submitted text."""
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise EnhancementError("malformed") from e

    try:
        result = EnhancementResult.model_validate(payload)
    except ValidationError as e:
        raise EnhancementError("schema") from e

    return result.model_copy(update={"original": original})


def enhance_prompt(text: str, style: StyleDefinition, intensity: int = 3, client=None) -> EnhancementResult:
    """Rewrite ``text`` in ``style`` at ``intensity`` (1-5).

    One request per call, no retry. Every failure raises ``EnhancementError``
    carrying the generic user-facing message.
    """
    try:
        prompt = build_enhancement_prompt(text, style, intensity)
        client = client or get_client()
        response = client.responses.create(
            model=OPENAI_MODEL,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": "enhancement_result",
                    "schema": ENHANCEMENT_SCHEMA,
                    "strict": True,
                }
            },
            timeout=OPENAI_TIMEOUT,
        )
        return parse_enhancement_response(response.output_text, text)
    except EnhancementError as e:
        logger.warning("Enhancement failed (%s) for style %s", e.kind, style.id, exc_info=e.__cause__)
        raise
    except openai.APIConnectionError as e:
        logger.exception("Could not reach the generation service")
        raise EnhancementError("network") from e
    except openai.OpenAIError as e:
        logger.exception("Generation service rejected the request")
        raise EnhancementError("service") from e
    except Exception as e:
        logger.exception("Unexpected failure while enhancing")
        raise EnhancementError("service") from e
