"""Tests for the action handlers that combine gateway calls with store updates."""

import json

import pytest

from conftest import FakeModel, scene_payload, scenes_json
from core import workflow
from core.errors import GenerationFailure, RegenerationFailure


class TestSuggestField:
    def test_applies_title(self, store):
        assert workflow.suggest_field(store, FakeModel("Abyss"), "title") is True
        assert store.settings.title == "Abyss"
        assert not store.is_busy("title")

    def test_idea_goes_to_video_idea(self, store):
        workflow.suggest_field(store, FakeModel("Một bí ẩn mới."), "idea")
        assert store.settings.video_idea == "Một bí ẩn mới."

    def test_empty_context_is_applied(self, store):
        assert workflow.suggest_field(store, FakeModel(""), "context") is True
        assert store.settings.context == ""

    def test_failure_leaves_field_unchanged(self, store):
        before = store.settings
        ok = workflow.suggest_field(store, FakeModel(error=RuntimeError("boom")), "context")
        assert ok is False
        assert store.settings == before
        assert not store.is_busy("context")

    def test_unknown_kind(self, store):
        with pytest.raises(ValueError):
            workflow.suggest_field(store, FakeModel("x"), "script")


class TestWriteScript:
    def test_success(self, store):
        assert workflow.write_script(store, FakeModel("The story.")) == "The story."
        assert store.settings.script == "The story."

    def test_failure_does_not_mutate(self, store):
        store.apply_generated_script("keep me")
        with pytest.raises(GenerationFailure):
            workflow.write_script(store, FakeModel(error=RuntimeError("down")))
        assert store.settings.script == "keep me"
        assert not store.is_busy("script")


class TestBuildStoryboard:
    def test_replaces_scenes(self, store):
        scenes = workflow.build_storyboard(store, FakeModel(scenes_json(3)))
        assert [s.number for s in scenes] == [1, 2, 3]
        assert not ({s.id for s in scenes} & {"s_1", "s_2", "s_3"})
        assert store.scenes == scenes

    def test_malformed_payload_keeps_old_scenes(self, store):
        before = store.scenes
        with pytest.raises(GenerationFailure):
            workflow.build_storyboard(store, FakeModel('[{"number": 1}]'))
        assert store.scenes == before
        assert not store.is_busy("storyboard")

    def test_busy_while_in_flight(self, store):
        seen = []
        model = FakeModel(scenes_json(3), on_call=lambda: seen.append(store.is_busy("storyboard")))
        workflow.build_storyboard(store, model)
        assert seen == [True]


class TestRegenerate:
    def test_replaces_only_target(self, store):
        before = store.scenes
        model = FakeModel(json.dumps(scene_payload(7, id="x", descriptionEn="Regenerated")))
        out = workflow.regenerate(store, model, "s_2")
        assert out.id == "s_2"
        assert out.number == 2
        assert out.description_en == "Regenerated"
        after = store.scenes
        assert after[0] == before[0]
        assert after[2] == before[2]
        assert not store.is_busy(workflow.regenerate_op("s_2"))

    def test_failure_leaves_scene_untouched(self, store):
        before = store.get_scene("s_1")
        with pytest.raises(RegenerationFailure):
            workflow.regenerate(store, FakeModel("garbage"), "s_1")
        assert store.get_scene("s_1") == before

    def test_unknown_scene(self, store):
        model = FakeModel("{}")
        assert workflow.regenerate(store, model, "ghost") is None
        assert model.calls == []

    def test_already_regenerating(self, store):
        store.mark_busy(workflow.regenerate_op("s_1"))
        model = FakeModel(json.dumps(scene_payload(1)))
        assert workflow.regenerate(store, model, "s_1") is None
        assert model.calls == []

    def test_scene_deleted_while_in_flight(self, store):
        model = FakeModel(json.dumps(scene_payload(1)), on_call=lambda: store.delete_scene("s_1"))
        assert workflow.regenerate(store, model, "s_1") is None
        assert store.get_scene("s_1") is None

    def test_scene_edited_while_in_flight(self, store):
        model = FakeModel(
            json.dumps(scene_payload(1, descriptionEn="late")),
            on_call=lambda: store.update_scene("s_1", description_en="typed by hand"),
        )
        assert workflow.regenerate(store, model, "s_1") is None
        assert store.get_scene("s_1").description_en == "typed by hand"

    def test_storyboard_replaced_while_in_flight(self, store):
        def swap():
            store.clear_all()
            store.add_scene()
        model = FakeModel(json.dumps(scene_payload(1, descriptionEn="late")), on_call=swap)
        assert workflow.regenerate(store, model, "s_1") is None
        assert all(s.description_en != "late" for s in store.scenes)
