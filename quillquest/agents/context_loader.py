"""
Prompt Loader Utility for QuillQuest

Prompt templates live as text files next to this module so they can be
edited without touching code. Placeholders use str.format syntax; literal
braces in the JSON examples are doubled.
"""

from pathlib import Path
from functools import lru_cache


PROMPTS_DIR = Path(__file__).resolve().parent / "prompts"

PROMPT_FILES = {
    "writing_prompt": "writing_prompt.txt",
    "character": "character.txt",
    "scene": "scene.txt",
    "world": "world.txt",
    "continue_story": "continue_story.txt",
}


@lru_cache(maxsize=10)
def load_prompt(name: str) -> str:
    """
    Load the template for a prompt.

    Raises:
        ValueError: If the prompt name is unknown
        FileNotFoundError: If the template file is missing
    """
    if name not in PROMPT_FILES:
        raise ValueError(f"Unknown prompt: {name}. Available: {list(PROMPT_FILES.keys())}")

    prompt_path = PROMPTS_DIR / PROMPT_FILES[name]

    if not prompt_path.exists():
        raise FileNotFoundError(f"Prompt file not found: {prompt_path}")

    return prompt_path.read_text(encoding="utf-8").strip()


def render_prompt(name: str, **values: str) -> str:
    """Fill a template. User text is substituted verbatim."""
    return load_prompt(name).format(**values)
