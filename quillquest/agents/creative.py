from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from quillquest.agents.context_loader import render_prompt
from quillquest.agents.parsing import (
    clean_suggestions,
    extract_json_object,
    fallback_character,
    fallback_continuation,
    fallback_world,
)
from quillquest.agents.venice import VeniceClient
from quillquest.core.logger import get_logger, log_agent_action

logger = get_logger("creative")

PROMPT_IMAGE = "Atmospheric concept art for a story: {text}. Cinematic, dramatic lighting, high quality illustration"
PORTRAIT_IMAGE = "Professional character portrait, {appearance}. High quality, detailed, fantasy art style, dramatic lighting"
SCENE_IMAGE = "Cinematic scene illustration: {description}. Dramatic composition, atmospheric lighting, high quality concept art, detailed environment"
WORLD_IMAGE = "Epic landscape concept art: {description}. Sweeping vista, dramatic skies, detailed environment art, cinematic lighting"

# Only the start of a writing prompt goes into its illustration
PROMPT_IMAGE_CHARS = 200
PORTRAIT_SIZE = 512


@dataclass
class Outcome:
    """
    Result of a composite operation.

    `issues` lists what went wrong without failing the request (image step
    failed, structured output fell back). No issues means complete.
    """
    value: Dict[str, Any]
    issues: List[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.issues)

    def degrade(self, reason: str) -> "Outcome":
        self.issues.append(reason)
        return self


class CreativeService:
    """Composite writing helpers: one text call, then at most one image call."""

    def __init__(self, client: VeniceClient):
        self.client = client

    def _illustrate(self, outcome: Outcome, key: str, prompt: str, **options) -> Outcome:
        """Attach an image under `key`. Image failures only degrade the outcome."""
        try:
            image = self.client.generate_image(prompt, **options)
        except Exception as e:
            logger.warning(f"Image generation failed, continuing without {key}: {e}")
            return outcome.degrade(f"image: {e}")
        if image:
            outcome.value[key] = image
        else:
            outcome.degrade("image: empty response")
        return outcome

    def _finish(self, action: str, outcome: Outcome) -> Outcome:
        details = "complete" if not outcome.degraded else "degraded: " + "; ".join(outcome.issues)
        log_agent_action("creative", action, details, success=not outcome.degraded)
        return outcome

    def generate_writing_prompt(self, genre: Optional[str] = None) -> Outcome:
        genre_text = f"in the {genre} genre" if genre else ""
        prompt_text = self.client.generate_text(render_prompt("writing_prompt", genre_text=genre_text))

        outcome = Outcome({"prompt": prompt_text})
        self._illustrate(
            outcome, "imageUrl",
            PROMPT_IMAGE.format(text=prompt_text[:PROMPT_IMAGE_CHARS]),
        )
        return self._finish("generate_writing_prompt", outcome)

    def generate_character(self, description: str) -> Outcome:
        raw = self.client.generate_text(render_prompt("character", description=description), max_tokens=800)

        character = extract_json_object(raw)
        if character is not None:
            outcome = Outcome(character)
        else:
            logger.warning("Character response had no JSON object, using raw text")
            outcome = Outcome(fallback_character(raw, description)).degrade("text: unstructured response")

        appearance = outcome.value.get("appearance") or description
        self._illustrate(
            outcome, "portraitUrl",
            PORTRAIT_IMAGE.format(appearance=appearance),
            width=PORTRAIT_SIZE, height=PORTRAIT_SIZE,
        )
        return self._finish("generate_character", outcome)

    def visualize_scene(self, description: str) -> Outcome:
        enhanced = self.client.generate_text(render_prompt("scene", description=description))

        outcome = Outcome({"description": enhanced})
        # The illustration follows the user's scene, not the rewrite
        self._illustrate(outcome, "imageUrl", SCENE_IMAGE.format(description=description))
        return self._finish("visualize_scene", outcome)

    def generate_world(self, concept: str) -> Outcome:
        raw = self.client.generate_text(render_prompt("world", concept=concept), max_tokens=800)

        world = extract_json_object(raw)
        if world is not None:
            outcome = Outcome(world)
        else:
            logger.warning("World response had no JSON object, using raw text")
            outcome = Outcome(fallback_world(raw)).degrade("text: unstructured response")

        description = outcome.value.get("description") or concept
        self._illustrate(outcome, "imageUrl", WORLD_IMAGE.format(description=description))
        return self._finish("generate_world", outcome)

    def continue_story(self, story_text: str, direction: Optional[str] = None) -> Outcome:
        direction_text = f"Steer the story in this direction: {direction}" if direction else ""
        raw = self.client.generate_text(
            render_prompt("continue_story", story_text=story_text, direction_text=direction_text),
            max_tokens=1000,
        )

        data = extract_json_object(raw)
        continuation = data.get("continuation") if data else None
        if not isinstance(continuation, str) or not continuation.strip():
            logger.warning("Continuation response had no usable JSON, using raw text")
            outcome = Outcome(fallback_continuation(raw)).degrade("text: unstructured response")
            return self._finish("continue_story", outcome)

        value: Dict[str, Any] = {"continuation": continuation}
        suggestions = clean_suggestions(data.get("suggestions"))
        if suggestions:
            value["suggestions"] = suggestions
        return self._finish("continue_story", Outcome(value))
