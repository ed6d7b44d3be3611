"""Shared test fixtures."""

import json
from types import SimpleNamespace

import pytest

from core.data_models import (
    AspectRatio, CharacterBible, CinematicStyle, FullProjectData, ProjectSettings, SceneData,
)
from core.project_store import ProjectStore


class FakeModel:
    """Stands in for GeminiModel: records every call and replays canned text."""

    def __init__(self, *responses, error=None, on_call=None):
        self.responses = list(responses)
        self.error = error
        self.on_call = on_call
        self.calls = []

    def generate_content(self, prompt, config=None):
        self.calls.append(SimpleNamespace(prompt=prompt, config=config))
        if self.on_call:
            self.on_call()
        if self.error is not None:
            raise self.error
        text = self.responses.pop(0) if len(self.responses) > 1 else (self.responses[0] if self.responses else "")
        return SimpleNamespace(text=text)

    @property
    def last_prompt(self):
        return self.calls[-1].prompt

    @property
    def last_config(self):
        return self.calls[-1].config


def scene_payload(number, **overrides):
    data = {
        "number": number,
        "descriptionEn": f"Scene {number} in the submarine",
        "descriptionVi": f"Cảnh {number} trong tàu ngầm",
        "camera": "Slow push-in",
        "lighting": "Dim brass glow",
        "action": "Nemo turns the wheel",
        "transition": "Cut to",
    }
    data.update(overrides)
    return data


def scenes_json(n, **overrides):
    return json.dumps([scene_payload(i, **overrides) for i in range(1, n + 1)])


@pytest.fixture
def settings() -> ProjectSettings:
    return ProjectSettings(
        title="The Silent Depth",
        context="Deep ocean, steampunk submarine",
        video_idea="A glowing relic is found on the sea floor",
        script="",
        style=CinematicStyle.SCIFI,
        ratio=AspectRatio.RATIO_16_9,
        scene_count=3,
    )


@pytest.fixture
def bible() -> CharacterBible:
    return CharacterBible(
        english="Captain Nemo, late forties, dark blue uniform.",
        vietnamese="Thuyền trưởng Nemo, ngoài bốn mươi, quân phục xanh đậm.",
    )


@pytest.fixture
def scene() -> SceneData:
    return SceneData(
        id="s_1",
        number=1,
        description_en="  The relic pulses with light.\n  Bubbles rise.  ",
        description_vi="  Cổ vật phát sáng.  ",
        camera="Slow push-in",
        lighting="Cold blue glow",
        action="Sophia reaches out",
        transition="Dissolve",
        dialogue="Don't touch it.",
    )


@pytest.fixture
def project(settings, bible) -> FullProjectData:
    scenes = [
        SceneData(id=f"s_{i}", **scene_payload(i))
        for i in range(1, 4)
    ]
    return FullProjectData(settings=settings, character_bible=bible, scenes=scenes)


@pytest.fixture
def store(project) -> ProjectStore:
    return ProjectStore(project)
