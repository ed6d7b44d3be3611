import uuid
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CinematicStyle(str, Enum):
    CINEMATIC = "Cinematic"
    ANIME = "Anime"
    REALISTIC = "Realistic"
    CYBERPUNK = "Cyberpunk"
    VINTAGE = "Vintage Film"
    DOCUMENTARY = "Documentary"
    SCIFI = "Sci-Fi Adventure"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    NOIR = "Film Noir"
    WESTERN = "Western"
    STOP_MOTION = "Stop Motion"


class AspectRatio(str, Enum):
    RATIO_16_9 = "16:9"
    RATIO_9_16 = "9:16"


class Language(str, Enum):
    EN = "en"
    VI = "vi"


class _Model(BaseModel):
    # JSON dùng camelCase (videoIdea, sceneCount...), code dùng snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectSettings(_Model):
    title: Optional[str] = None
    context: str = ""
    video_idea: str = ""
    script: str = ""
    style: CinematicStyle = CinematicStyle.CINEMATIC
    ratio: AspectRatio = AspectRatio.RATIO_16_9
    scene_count: int = Field(default=3, ge=1, le=50)


class CharacterBible(_Model):
    english: str = ""
    vietnamese: str = ""

    def text_for(self, language: Language) -> str:
        return self.english if Language(language) == Language.EN else self.vietnamese


class SceneDraft(_Model):
    """Một cảnh ~8s như model trả về (chưa có id)."""
    number: int = Field(ge=1)
    description_en: str
    description_vi: str
    camera: str
    lighting: str
    action: str
    transition: Optional[str] = None
    dialogue: Optional[str] = None


class SceneData(SceneDraft):
    id: str

    def description_for(self, language: Language) -> str:
        return self.description_en if Language(language) == Language.EN else self.description_vi


class FullProjectData(_Model):
    settings: ProjectSettings
    character_bible: CharacterBible
    scenes: List[SceneData] = Field(default_factory=list)


def new_scene_id() -> str:
    return str(uuid.uuid4())
