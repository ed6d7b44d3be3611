# -*- coding: utf-8 -*-
import streamlit as st

from core.data_models import Language, SceneData
from core.errors import GenerationFailure, RegenerationFailure
from core.project_store import ProjectStore
from core.text_utils import clip_preview
from core.veo_prompt import scene_prompt, storyboard_prompt_sheet
from core import workflow


def _render_scene_editor(store: ProjectStore, sc: SceneData):
    with st.form(key=f"edit_{sc.id}"):
        number = st.number_input("Scene #", min_value=1, value=sc.number, step=1)
        desc_en = st.text_area("Visual (EN)", value=sc.description_en, height=110)
        desc_vi = st.text_area("Mô tả hình ảnh (VI)", value=sc.description_vi, height=110)
        c1, c2, c3 = st.columns(3)
        with c1:
            camera = st.text_input("Camera", value=sc.camera)
        with c2:
            lighting = st.text_input("Lighting", value=sc.lighting)
        with c3:
            transition = st.text_input("Transition", value=sc.transition or "", placeholder="Cut to")
        action = st.text_input("Action / Hành động", value=sc.action)
        dialogue = st.text_input("Dialogue (Optional) / Thoại", value=sc.dialogue or "")
        if st.form_submit_button("💾 Save"):
            store.update_scene(
                sc.id, number=int(number), description_en=desc_en, description_vi=desc_vi,
                camera=camera, lighting=lighting, action=action,
                transition=transition or None, dialogue=dialogue or None,
            )
            st.session_state[f"editing_{sc.id}"] = False
            st.rerun()


def _render_scene_card(model, store: ProjectStore, sc: SceneData):
    project = store.snapshot()
    with st.expander(f"SCENE {sc.number} — {clip_preview(sc.description_en, 80)}", expanded=True):
        cA, cB, cC = st.columns(3)
        with cA:
            if st.button("✏️ Edit", key=f"btn_edit_{sc.id}"):
                st.session_state[f"editing_{sc.id}"] = True
        with cB:
            busy = store.is_busy(workflow.regenerate_op(sc.id))
            if st.button("🔄 Regenerate", key=f"btn_regen_{sc.id}", disabled=not bool(model) or busy):
                with st.spinner(f"Đang sinh lại cảnh {sc.number}..."):
                    try:
                        workflow.regenerate(store, model, sc.id)
                    except RegenerationFailure:
                        st.error("Failed to regenerate scene")
                    else:
                        st.rerun()
        with cC:
            if st.button("🗑️ Delete", key=f"btn_del_{sc.id}"):
                store.delete_scene(sc.id)
                st.rerun()

        if st.session_state.get(f"editing_{sc.id}"):
            _render_scene_editor(store, sc)
            return

        tab_en, tab_vi = st.tabs(["EN", "VN"])
        for tab, lang in ((tab_en, Language.EN), (tab_vi, Language.VI)):
            with tab:
                st.write(sc.description_for(lang))
                st.caption(f"Camera: {sc.camera} · Lighting: {sc.lighting} · Transition: {sc.transition or 'Cut To'}")
                st.caption(f"Act: {sc.action}")
                if sc.dialogue:
                    st.caption(f'Dial: "{sc.dialogue}"')
                st.caption(f"Final VEO 3 Prompt ({lang.value.upper()})")
                st.code(scene_prompt(project, sc, lang), language="text")


def render_section_3(model):
    st.header("3) Storyboard")
    store: ProjectStore = st.session_state.store
    settings = store.settings

    if st.button(f"🎬 Generate Storyboard ({settings.scene_count} Scenes)", type="primary",
                 disabled=not bool(model) or store.is_busy("storyboard")):
        with st.spinner("Đang tạo Storyboard (Generating)..."):
            try:
                workflow.build_storyboard(store, model)
            except GenerationFailure:
                st.error("Failed to generate scenes. Please try again.")
            else:
                st.rerun()

    scenes = store.scenes
    if not scenes:
        st.info("Chưa có cảnh. Bấm Generate Storyboard hoặc thêm cảnh thủ công.")

    col1, col2, col3 = st.columns([1, 1, 2])
    with col1:
        if st.button("➕ Add Scene"):
            store.add_scene()
            st.rerun()
    with col2:
        confirm = st.checkbox("Xác nhận xoá hết", key="confirm_clear")
        if st.button("🗑️ Clear All", disabled=not (scenes and confirm)):
            store.clear_all()
            st.rerun()

    if not scenes:
        return

    st.subheader(f"Storyboard ({len(scenes)} Scenes)")
    for sc in scenes:
        _render_scene_card(model, store, sc)

    with st.expander("📋 Copy all prompts"):
        lang = st.radio("Language", list(Language), format_func=lambda x: x.value.upper(), horizontal=True)
        st.code(storyboard_prompt_sheet(store.snapshot(), lang), language="text")
