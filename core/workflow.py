# -*- coding: utf-8 -*-
"""
Handlers for the user actions that call Gemini: run one gateway request,
then apply the result to the store or leave the store untouched.
"""
import logging
from typing import List, Optional

from core import generation
from core.data_models import SceneData
from core.errors import GenerationFailure, RegenerationFailure, SuggestionFailure
from core.project_store import ProjectStore

logger = logging.getLogger(__name__)

# nút UI → (op key, field trong ProjectSettings)
SUGGESTIONS = {
    "title": ("title", "title"),
    "context": ("context", "context"),
    "idea": ("idea", "video_idea"),
}


def regenerate_op(scene_id: str) -> str:
    return f"regenerate:{scene_id}"


def _request_suggestion(store: ProjectStore, model, kind: str) -> str:
    settings = store.settings
    if kind == "title":
        return generation.suggest_title(model, settings)
    if kind == "context":
        return generation.suggest_context(model, settings.style)
    return generation.suggest_idea(model, settings)


def suggest_field(store: ProjectStore, model, kind: str) -> bool:
    """Best-effort: lỗi chỉ ghi log, field giữ nguyên. Trả True nếu đã áp dụng."""
    if kind not in SUGGESTIONS:
        raise ValueError(f"unknown suggestion: {kind}")
    op, field = SUGGESTIONS[kind]
    store.mark_busy(op)
    try:
        value = _request_suggestion(store, model, kind)
    except SuggestionFailure as e:
        logger.warning("Suggestion %s failed, keeping current value: %s", kind, e)
        return False
    finally:
        store.clear_busy(op)
    store.apply_suggestion(field, value)
    return True


def write_script(store: ProjectStore, model) -> str:
    store.mark_busy("script")
    try:
        text = generation.generate_script(model, store.settings, store.bible)
    except GenerationFailure:
        logger.exception("Script generation failed")
        raise
    finally:
        store.clear_busy("script")
    store.apply_generated_script(text)
    return text


def build_storyboard(store: ProjectStore, model) -> List[SceneData]:
    store.mark_busy("storyboard")
    try:
        drafts = generation.generate_storyboard(model, store.settings, store.bible)
    except GenerationFailure:
        logger.exception("Storyboard generation failed")
        raise
    finally:
        store.clear_busy("storyboard")
    return store.apply_storyboard(drafts)


def regenerate(store: ProjectStore, model, scene_id: str) -> Optional[SceneData]:
    """
    Sinh lại một cảnh. Trả None nếu cảnh không còn, đang được sinh lại,
    hoặc kết quả về muộn (cảnh đã bị xoá / storyboard đã bị thay).
    """
    op = regenerate_op(scene_id)
    if store.is_busy(op):
        logger.warning("Scene %s is already regenerating", scene_id)
        return None
    ticket = store.issue_regeneration(scene_id)
    if ticket is None:
        return None
    current = store.get_scene(scene_id)
    store.mark_busy(op)
    try:
        new_scene = generation.regenerate_scene(
            model, ticket.scene_id, ticket.scene_number, store.settings, store.bible, current,
        )
    except RegenerationFailure:
        logger.exception("Regeneration of scene %s failed", scene_id)
        raise
    finally:
        store.clear_busy(op)
    if not store.apply_regenerated_scene(scene_id, new_scene, ticket=ticket):
        return None
    return store.get_scene(scene_id)
