# -*- coding: utf-8 -*-
"""
Generation Gateway: one function per request sent to Gemini.

Each call asks once and either returns a validated value or raises a
GenerationFailure subclass. Empty text from the suggestion requests is a
valid result, not a failure.
"""
import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from core.data_models import CharacterBible, CinematicStyle, ProjectSettings, SceneData, SceneDraft
from core.errors import GenerationFailure, RegenerationFailure, SuggestionFailure
from core.gemini_helpers import gemini_json, gemini_text
from core.prompt_builders import (
    SCRIPT_SYSTEM_INSTRUCTION, STORYBOARD_SYSTEM_INSTRUCTION,
    build_context_prompt, build_idea_prompt, build_regenerate_prompt,
    build_script_prompt, build_storyboard_prompt, build_title_prompt,
)

logger = logging.getLogger(__name__)

UNTITLED = "Untitled Project"

SCENE_OBJECT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "number": {"type": "NUMBER"},
        "descriptionEn": {
            "type": "STRING",
            "description": "Visual description. If style is Stop Motion, MUST include headers: "
                           "'Objects:', 'Atmosphere:', 'SFX:'.",
        },
        "descriptionVi": {"type": "STRING", "description": "Vietnamese visual description."},
        "camera": {"type": "STRING", "description": "Camera angle, movement instructions, and shot type."},
        "lighting": {"type": "STRING", "description": "Lighting setup instructions or Style description."},
        "action": {"type": "STRING", "description": "Specific character actions."},
        "transition": {"type": "STRING", "description": "Transition type."},
        "dialogue": {"type": "STRING", "description": "Short dialogue if applicable."},
    },
    "required": ["number", "descriptionEn", "descriptionVi", "camera", "lighting", "action", "transition"],
}

SCENE_LIST_SCHEMA = {"type": "ARRAY", "items": SCENE_OBJECT_SCHEMA}

_scene_list = TypeAdapter(List[SceneDraft])


# ---------- Suggestions ----------

def _suggest(model, request: str, prompt: str) -> str:
    try:
        return gemini_text(model, prompt, request=request).strip()
    except GenerationFailure as e:
        raise SuggestionFailure(request, e.message) from e


def suggest_title(model, settings: ProjectSettings) -> str:
    return _suggest(model, "suggest_title", build_title_prompt(settings)) or UNTITLED


def suggest_context(model, style: CinematicStyle) -> str:
    return _suggest(model, "suggest_context", build_context_prompt(style))


def suggest_idea(model, settings: ProjectSettings) -> str:
    return _suggest(model, "suggest_idea", build_idea_prompt(settings))


# ---------- Script & storyboard ----------

def generate_script(model, settings: ProjectSettings, bible: CharacterBible) -> str:
    return gemini_text(
        model,
        build_script_prompt(settings, bible),
        request="generate_script",
        system_instruction=SCRIPT_SYSTEM_INSTRUCTION,
        temperature=0.8,
    )


def generate_storyboard(model, settings: ProjectSettings, bible: CharacterBible) -> List[SceneDraft]:
    """
    Trả về đúng settings.scene_count cảnh (chưa có id) theo thứ tự model trả.
    Payload sai shape hoặc sai số lượng → GenerationFailure, không trả một phần.
    """
    data = gemini_json(
        model,
        build_storyboard_prompt(settings, bible),
        SCENE_LIST_SCHEMA,
        request="generate_storyboard",
        system_instruction=STORYBOARD_SYSTEM_INSTRUCTION,
        temperature=0.7,
    )
    try:
        drafts = _scene_list.validate_python(data)
    except ValidationError as e:
        logger.error("Storyboard payload does not match the scene schema: %s", e)
        raise GenerationFailure("generate_storyboard", "payload does not match the scene schema") from e
    if len(drafts) != settings.scene_count:
        raise GenerationFailure(
            "generate_storyboard",
            f"expected {settings.scene_count} scenes, got {len(drafts)}",
        )
    logger.info("Storyboard generated: %d scenes", len(drafts))
    return drafts


def regenerate_scene(model, scene_id: str, scene_number: int, settings: ProjectSettings,
                     bible: CharacterBible, current: SceneData) -> SceneData:
    prompt = build_regenerate_prompt(scene_number, settings, bible, current)
    try:
        data = gemini_json(model, prompt, SCENE_OBJECT_SCHEMA, request="regenerate_scene", temperature=0.8)
    except GenerationFailure as e:
        raise RegenerationFailure(scene_id, e.message) from e
    if not isinstance(data, dict):
        raise RegenerationFailure(scene_id, "expected a single scene object")
    # id/number của cảnh gốc luôn thắng, model trả gì cũng bỏ qua
    payload = {k: v for k, v in data.items() if k not in ("id", "number")}
    try:
        return SceneData.model_validate({**payload, "id": scene_id, "number": scene_number})
    except ValidationError as e:
        raise RegenerationFailure(scene_id, "payload does not match the scene schema") from e
