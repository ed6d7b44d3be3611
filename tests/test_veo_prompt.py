"""Tests for per-scene prompt assembly."""

from core.data_models import AspectRatio, Language
from core.veo_prompt import assemble_prompt, scene_prompt, storyboard_prompt_sheet


class TestAssemblePrompt:
    def test_full_layout(self, scene):
        out = assemble_prompt("  Nemo bible.  \n", scene, AspectRatio.RATIO_16_9, Language.EN)
        assert out == (
            "Nemo bible.\n"
            "\n"
            "The relic pulses with light.\n  Bubbles rise.\n"
            'Dialogue: "Don\'t touch it."\n'
            "Camera: Slow push-in\n"
            "Lighting: Cold blue glow\n"
            "Transition: Dissolve\n"
            "Ratio: 16:9"
        )

    def test_vietnamese_uses_vi_description(self, scene):
        out = assemble_prompt("Bible VI", scene, AspectRatio.RATIO_9_16, Language.VI)
        assert out.splitlines()[2] == "Cổ vật phát sáng."
        assert out.endswith("Ratio: 9:16")

    def test_dialogue_line_omitted_when_empty(self, scene):
        for value in (None, ""):
            sc = scene.model_copy(update={"dialogue": value})
            out = assemble_prompt("B", sc, AspectRatio.RATIO_16_9, Language.EN)
            assert "Dialogue" not in out
            assert "Bubbles rise.\nCamera: Slow push-in" in out

    def test_missing_transition_becomes_cut_to(self, scene):
        for value in (None, ""):
            sc = scene.model_copy(update={"transition": value})
            out = assemble_prompt("B", sc, AspectRatio.RATIO_16_9, Language.EN)
            assert "Transition: Cut To" in out.splitlines()

    def test_deterministic(self, scene):
        a = assemble_prompt("B", scene, AspectRatio.RATIO_16_9, Language.EN)
        b = assemble_prompt("B", scene, AspectRatio.RATIO_16_9, Language.EN)
        assert a == b

    def test_accepts_plain_string_tags(self, scene):
        out = assemble_prompt("B", scene, "16:9", "vi")
        assert "Cổ vật phát sáng." in out


class TestProjectPrompts:
    def test_scene_prompt_picks_bible_language(self, project):
        sc = project.scenes[0]
        assert scene_prompt(project, sc, Language.VI).startswith("Thuyền trưởng Nemo")
        assert scene_prompt(project, sc, Language.EN).startswith("Captain Nemo")

    def test_prompt_sheet_has_one_block_per_scene(self, project):
        sheet = storyboard_prompt_sheet(project, Language.EN)
        assert sheet.count("## Scene ") == 3
        assert sheet.index("## Scene 1") < sheet.index("## Scene 2") < sheet.index("## Scene 3")
