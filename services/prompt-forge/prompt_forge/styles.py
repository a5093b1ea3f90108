"""Predefined rewriting styles, quick-start examples and custom style creation."""

from __future__ import annotations

from prompt_forge.errors import StyleError
from prompt_forge.models import StyleDefinition, now_millis

PREDEFINED_STYLES: tuple[StyleDefinition, ...] = (
    StyleDefinition(
        id="creative",
        name="Creative Writing",
        instruction="Make it more descriptive and engaging. Focus on sensory details and character voice.",
    ),
    StyleDefinition(
        id="agentic_ide",
        name="Vibe Coding & Agentic IDEs",
        instruction=(
            "Act as a professional prompt engineer for coding agents (e.g., Cursor, Windsurf, Copilot). "
            "Refine user input into actionable, step-by-step instructions. Focus on optimizing for clarity, "
            "providing relevant technical details, specifying architectural constraints, and ensuring "
            "instructions are optimized for model adherence in an iterative development workflow."
        ),
    ),
    StyleDefinition(
        id="vibe_coding",
        name="Workflow Architect",
        instruction=(
            "Act as an Expert Workflow Architect for Agentic IDEs. Restructure the user input into a logical, "
            "iterative implementation plan. Use clear system-level instructions, step-by-step logic, and "
            "specify expected tech stacks where applicable. Focus on readability for a coding agent."
        ),
    ),
    StyleDefinition(
        id="image_gen",
        name="Image Generation",
        instruction=(
            "Act as a Professional Prompt Engineer for Midjourney/DALL-E. Expand the user's idea into a highly "
            "descriptive synthesis prompt. Include technical details: lighting (e.g., cinematic, volumetric), "
            "lens (e.g., 85mm, wide-angle), composition (e.g., low-angle, rule of thirds), and specific "
            "artistic styles or mediums."
        ),
    ),
    StyleDefinition(
        id="professional",
        name="Professional",
        instruction=(
            "Refine for a corporate environment. Ensure polite, clear, and concise language. "
            "Focus on actionable items and respect."
        ),
    ),
    StyleDefinition(
        id="academic",
        name="Academic",
        instruction=(
            "Use formal language, specialized terminology, and clear logical structure. "
            "Avoid contractions and colloquialisms."
        ),
    ),
    StyleDefinition(
        id="chatbot",
        name="System Prompt",
        instruction=(
            "Optimize as an instruction set for a Large Language Model. Use delimiters, specify persona, "
            "and define constraints clearly."
        ),
    ),
    StyleDefinition(
        id="casual",
        name="Casual",
        instruction=(
            "Keep it friendly, relatable, and suitable for social media. Use emojis sparingly and maintain "
            "a conversational flow."
        ),
    ),
    StyleDefinition(
        id="technical",
        name="Technical Docs",
        instruction="Focus on precision, step-by-step clarity, and lack of ambiguity. Use consistent terminology.",
    ),
)

DEFAULT_STYLE = PREDEFINED_STYLES[0]

EXAMPLES: dict[str, list[str]] = {
    "creative": [
        "A lonely clockmaker discovers a watch that can pause time.",
        "Write a short poem about the first snowfall.",
        "The secret life of a houseplant.",
    ],
    "agentic_ide": [
        "I need a Python script to scrape a website and save it to a database.",
        "Help me add user authentication to my Next.js app with Supabase.",
        "Refactor this mess of a CSS file into clean Tailwind classes.",
        "Create a Dockerfile for a Node.js backend with a Redis cache layer.",
        "Fix the memory leak in this React useEffect hook.",
    ],
    "vibe_coding": [
        "Refactor this legacy React class component into a functional one using modern Hooks and Tailwind CSS.",
        "Build a responsive, glassmorphic landing page hero section with a floating 3D illustration.",
        "Implement a robust JWT-based authentication flow with refresh tokens and secure cookie storage.",
        "Create a reusable 'Command Palette' component with fuzzy search and keyboard shortcut support.",
        "Optimize this recursive data transformation utility to handle 100k+ nested objects efficiently.",
    ],
    "image_gen": [
        "A futuristic cyberpunk city in the style of Blade Runner.",
        "A portrait of a wise old wizard.",
        "An isometric 3D render of a tiny cozy forest cabin.",
    ],
    "professional": [
        "Ask for a salary increase.",
        "Draft a professional rejection email.",
        "Explain a 2-day project delay.",
    ],
    "academic": [
        "The implications of universal basic income.",
        "Summarize photosynthesis.",
        "Analyze isolated themes in literature.",
    ],
    "chatbot": [
        "Explain black holes to 8-year-olds.",
        "Act as a travel guide for Mars.",
        "Troubleshoot a leaking faucet.",
    ],
    "casual": [
        "Caption for a photo of me eating pizza.",
        "Invite friends to a BBQ.",
        "Funny way to tell roommates I'm moving.",
    ],
    "technical": [
        "Configure secure SSH connection.",
        "Difference between REST and GraphQL.",
        "Setting up a React project with TS.",
    ],
}

# Styles that expose the intensity slider
INTENSITY_STYLE_IDS = ("creative",)

INTENSITY_LABELS = {
    1: "Subtle",
    2: "Light",
    3: "Balanced",
    4: "High",
    5: "Extreme",
}


def examples_for(style_id: str) -> list[str]:
    return EXAMPLES.get(style_id) or EXAMPLES[DEFAULT_STYLE.id]


def find_style(styles, style_id: str) -> StyleDefinition | None:
    for style in styles:
        if style.id == style_id:
            return style
    return None


def new_custom_style(name: str, instruction: str, existing_ids=(), now_ms: int | None = None) -> StyleDefinition:
    """Build a custom style from form input.

    The id is derived from the creation time and bumped until it does not
    collide with ``existing_ids`` or a predefined style.
    """
    name = name.strip()
    instruction = instruction.strip()
    if not name or not instruction:
        raise StyleError("A custom style needs both a name and an instruction.")

    taken = set(existing_ids) | {style.id for style in PREDEFINED_STYLES}
    stamp = now_ms if now_ms is not None else now_millis()
    style_id = f"custom-{stamp}"
    while style_id in taken:
        stamp += 1
        style_id = f"custom-{stamp}"

    return StyleDefinition(id=style_id, name=name, instruction=instruction, is_custom=True)
