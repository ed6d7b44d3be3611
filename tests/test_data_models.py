"""Tests for data models and presets."""

import pytest
from pydantic import ValidationError

from core.data_models import (
    AspectRatio, CharacterBible, CinematicStyle, Language, ProjectSettings, SceneData, new_scene_id,
)
from core.presets import (
    DEFAULT_BIBLE, DEFAULT_SETTINGS, STYLE_PRESETS, TOY_PROJECT_DATA, default_project, preset_project, style_block,
)


class TestModels:
    def test_settings_accept_both_names(self):
        a = ProjectSettings(videoIdea="x", sceneCount=5)
        b = ProjectSettings(video_idea="x", scene_count=5)
        assert a == b

    @pytest.mark.parametrize("count", [0, 51])
    def test_scene_count_bounds(self, count):
        with pytest.raises(ValidationError):
            ProjectSettings(scene_count=count)

    def test_closed_enums(self):
        with pytest.raises(ValidationError):
            ProjectSettings(style="Claymation")
        with pytest.raises(ValidationError):
            ProjectSettings(ratio="4:3")
        assert ProjectSettings(style="Stop Motion").style == CinematicStyle.STOP_MOTION
        assert ProjectSettings(ratio="9:16").ratio == AspectRatio.RATIO_9_16

    def test_language_helpers(self, scene):
        bible = CharacterBible(english="EN", vietnamese="VI")
        assert bible.text_for(Language.EN) == "EN"
        assert bible.text_for("vi") == "VI"
        assert scene.description_for("vi") == scene.description_vi

    def test_optional_scene_fields(self):
        sc = SceneData(
            id="a", number=1, descriptionEn="e", descriptionVi="v", camera="c", lighting="l", action="a",
        )
        assert sc.transition is None
        assert sc.dialogue is None

    def test_scene_ids_are_unique(self):
        assert len({new_scene_id() for _ in range(50)}) == 50


class TestPresets:
    def test_defaults(self):
        data = default_project()
        assert data.scenes == []
        assert data.character_bible == DEFAULT_BIBLE
        assert data.settings == DEFAULT_SETTINGS
        assert DEFAULT_BIBLE.english and DEFAULT_BIBLE.vietnamese

    def test_default_project_is_fresh(self):
        a = default_project()
        a.settings.context = "changed"
        assert default_project().settings.context != "changed"

    def test_toy_preset_is_stop_motion(self):
        data = preset_project("Toy Story (Stop Motion)")
        assert data == TOY_PROJECT_DATA
        assert data.settings.style == CinematicStyle.STOP_MOTION
        assert len(data.scenes) == data.settings.scene_count
        for sc in data.scenes:
            assert "Objects:" in sc.description_en
            assert "SFX:" in sc.description_en

    def test_every_style_has_a_profile(self):
        assert set(STYLE_PRESETS) == set(CinematicStyle)
        for style in CinematicStyle:
            block = style_block(style)
            assert block.startswith("[STYLE PROFILE]")
            assert "- tone:" in block

    def test_style_block_unknown(self):
        assert style_block("Claymation") == ""
