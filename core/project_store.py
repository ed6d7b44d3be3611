# -*- coding: utf-8 -*-
import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Set

from core.character_bible import CharacterDraft, add_character
from core.data_models import (
    CharacterBible, FullProjectData, ProjectSettings, SceneData, SceneDraft, new_scene_id,
)
from core.presets import default_project

logger = logging.getLogger(__name__)

SUGGESTION_FIELDS = ("title", "context", "video_idea")

NEW_SCENE_PLACEHOLDER = {
    "description_en": "New empty scene...",
    "description_vi": "Cảnh mới...",
    "action": "Enter action...",
    "camera": "Wide shot",
    "lighting": "Natural light",
    "transition": "Cut to",
}


class RegenerationTicket(NamedTuple):
    scene_id: str
    scene_number: int
    generation: int
    revision: int = 0


class ProjectStore:
    """
    Chủ sở hữu duy nhất của settings / character bible / danh sách cảnh.

    Mọi thao tác dựng giá trị mới trước rồi gán một lần, người đọc không
    bao giờ thấy trạng thái dở dang. Getter luôn trả bản sao.
    """

    def __init__(self, data: Optional[FullProjectData] = None):
        data = (data or default_project()).model_copy(deep=True)
        self._settings: ProjectSettings = data.settings
        self._bible: CharacterBible = data.character_bible
        self._scenes: List[SceneData] = list(data.scenes)
        # Tăng mỗi khi cả danh sách cảnh bị thay (generate / clear / import)
        self.storyboard_generation = 0
        self._busy: Set[str] = set()
        # Tăng mỗi khi một cảnh bị sửa tay hoặc được sinh lại
        self._revisions: Dict[str, int] = {}

    # ---------- read ----------

    @property
    def settings(self) -> ProjectSettings:
        return self._settings.model_copy(deep=True)

    @property
    def bible(self) -> CharacterBible:
        return self._bible.model_copy(deep=True)

    @property
    def scenes(self) -> List[SceneData]:
        return [s.model_copy(deep=True) for s in self._scenes]

    def snapshot(self) -> FullProjectData:
        return FullProjectData(settings=self.settings, character_bible=self.bible, scenes=self.scenes)

    def get_scene(self, scene_id: str) -> Optional[SceneData]:
        for s in self._scenes:
            if s.id == scene_id:
                return s.model_copy(deep=True)
        return None

    # ---------- settings & bible ----------

    def apply_suggestion(self, field: str, value: str) -> None:
        if field not in SUGGESTION_FIELDS:
            raise ValueError(f"not a suggestion field: {field}")
        self._settings = self._settings.model_copy(update={field: value})

    def update_settings(self, **fields) -> None:
        unknown = set(fields) - set(ProjectSettings.model_fields)
        if unknown:
            raise ValueError(f"unknown settings fields: {sorted(unknown)}")
        merged = {**self._settings.model_dump(), **fields}
        self._settings = ProjectSettings.model_validate(merged)

    def apply_generated_script(self, text: str) -> None:
        self._settings = self._settings.model_copy(update={"script": text})

    def update_bible(self, english: Optional[str] = None, vietnamese: Optional[str] = None) -> None:
        upd = {}
        if english is not None:
            upd["english"] = english
        if vietnamese is not None:
            upd["vietnamese"] = vietnamese
        self._bible = self._bible.model_copy(update=upd)

    def add_character(self, draft: CharacterDraft) -> None:
        self._bible = add_character(self._bible, draft)

    # ---------- scenes ----------

    def apply_storyboard(self, drafts: Iterable[SceneDraft]) -> List[SceneData]:
        new_scenes = []
        for pos, d in enumerate(drafts, 1):
            fields = d.model_dump(exclude={"id", "number"})
            new_scenes.append(SceneData(**fields, number=pos, id=new_scene_id()))
        self._scenes = new_scenes
        self.storyboard_generation += 1
        logger.info("Storyboard replaced with %d scenes", len(new_scenes))
        return self.scenes

    def issue_regeneration(self, scene_id: str) -> Optional[RegenerationTicket]:
        scene = self.get_scene(scene_id)
        if scene is None:
            return None
        return RegenerationTicket(
            scene.id, scene.number, self.storyboard_generation, self._revisions.get(scene.id, 0),
        )

    def is_stale(self, ticket: RegenerationTicket) -> bool:
        return (
            ticket.generation != self.storyboard_generation
            or self.get_scene(ticket.scene_id) is None
            or ticket.revision != self._revisions.get(ticket.scene_id, 0)
        )

    def apply_regenerated_scene(self, scene_id: str, record: SceneDraft,
                                ticket: Optional[RegenerationTicket] = None) -> bool:
        if ticket is not None and self.is_stale(ticket):
            logger.warning("Discarding stale regeneration for scene %s", scene_id)
            return False
        for i, s in enumerate(self._scenes):
            if s.id != scene_id:
                continue
            fields = record.model_dump(exclude={"id", "number"})
            replaced = SceneData(**fields, id=s.id, number=s.number)
            self._scenes = self._scenes[:i] + [replaced] + self._scenes[i + 1:]
            self._bump_revision(scene_id)
            return True
        logger.warning("Regenerated scene %s no longer exists", scene_id)
        return False

    def update_scene(self, scene_id: str, **fields) -> bool:
        fields.pop("id", None)
        unknown = set(fields) - set(SceneData.model_fields)
        if unknown:
            raise ValueError(f"unknown scene fields: {sorted(unknown)}")
        for i, s in enumerate(self._scenes):
            if s.id == scene_id:
                updated = SceneData.model_validate({**s.model_dump(), **fields})
                self._scenes = self._scenes[:i] + [updated] + self._scenes[i + 1:]
                self._bump_revision(scene_id)
                return True
        return False

    def _bump_revision(self, scene_id: str) -> None:
        self._revisions[scene_id] = self._revisions.get(scene_id, 0) + 1

    def delete_scene(self, scene_id: str) -> bool:
        kept = [s for s in self._scenes if s.id != scene_id]
        if len(kept) == len(self._scenes):
            return False
        self._scenes = kept
        return True

    def add_scene(self) -> SceneData:
        last_number = self._scenes[-1].number if self._scenes else 0
        scene = SceneData(id=new_scene_id(), number=last_number + 1, **NEW_SCENE_PLACEHOLDER)
        self._scenes = self._scenes + [scene]
        return scene.model_copy(deep=True)

    def clear_all(self) -> None:
        self._scenes = []
        self.storyboard_generation += 1

    # ---------- whole project ----------

    def load_preset(self, data: FullProjectData) -> None:
        data = data.model_copy(deep=True)
        self._settings, self._bible, self._scenes = data.settings, data.character_bible, list(data.scenes)
        self.storyboard_generation += 1

    import_project = load_preset

    # ---------- in-flight requests ----------

    def mark_busy(self, op: str) -> None:
        self._busy.add(op)

    def clear_busy(self, op: str) -> None:
        self._busy.discard(op)

    def is_busy(self, op: str) -> bool:
        return op in self._busy
