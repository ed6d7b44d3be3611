"""Streamlit section tests: edits typed in the same rerun as a button click are kept."""

from streamlit.testing.v1 import AppTest


def _settings_page():
    from types import SimpleNamespace

    import streamlit as st

    from core.project_store import ProjectStore
    from ui.section_1_settings import render_section_1

    class RecordingModel:
        def __init__(self):
            self.prompts = []

        def generate_content(self, prompt, config=None):
            self.prompts.append(prompt)
            return SimpleNamespace(text="A drafted story.")

    if "store" not in st.session_state:
        st.session_state.store = ProjectStore()
        st.session_state.model = RecordingModel()
    render_section_1(st.session_state.model)


def _bible_page():
    import streamlit as st

    from core.project_store import ProjectStore
    from ui.section_2_bible import render_section_2

    if "store" not in st.session_state:
        st.session_state.store = ProjectStore()
    render_section_2()


def _by_label(widgets, label):
    return next(w for w in widgets if w.label == label)


def _start(page):
    at = AppTest.from_function(page, default_timeout=10)
    at.run()
    assert not at.exception
    return at


class TestSettingsSection:
    def test_script_uses_idea_typed_in_same_run(self):
        at = _start(_settings_page)
        _by_label(at.text_area, "Video Idea / Ý tưởng").set_value("NEW IDEA TYPED")
        _by_label(at.button, "✨ Draft Full Story with AI (Viết cốt truyện)").click()
        at.run()
        assert not at.exception
        store = at.session_state["store"]
        assert "NEW IDEA TYPED" in at.session_state["model"].prompts[-1]
        assert store.settings.video_idea == "NEW IDEA TYPED"
        assert store.settings.script == "A drafted story."

    def test_title_suggestion_uses_context_typed_in_same_run(self):
        at = _start(_settings_page)
        _by_label(at.text_area, "Context / Bối cảnh").set_value("Abandoned moon base")
        _by_label(at.button, "🪄 Suggest Title").click()
        at.run()
        assert not at.exception
        store = at.session_state["store"]
        assert "Context: Abandoned moon base" in at.session_state["model"].prompts[-1]
        assert store.settings.context == "Abandoned moon base"
        assert store.settings.title == "A drafted story."


class TestBibleSection:
    def test_add_character_keeps_edited_bible(self):
        at = _start(_bible_page)
        _by_label(at.text_area, "English Bible (Final Text)").set_value("MY EDITED BIBLE")
        _by_label(at.text_input, "Name / Tên (EN)").set_value("Zed")
        _by_label(at.button, "Add Character to Bible / Thêm vào hồ sơ").click()
        at.run()
        assert not at.exception
        assert at.session_state["store"].bible.english == "MY EDITED BIBLE\n\nZed."

    def test_clear_one_side_keeps_edit_on_other(self):
        at = _start(_bible_page)
        _by_label(at.text_area, "English Bible (Final Text)").set_value("Only Zed remains.")
        _by_label(at.button, "🧹 Clear VI").click()
        at.run()
        assert not at.exception
        bible = at.session_state["store"].bible
        assert bible.english == "Only Zed remains."
        assert bible.vietnamese == ""
