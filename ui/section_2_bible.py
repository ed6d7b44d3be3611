from typing import Optional

import streamlit as st
from core.character_bible import CharacterDraft
from core.project_store import ProjectStore

BUILDER_FIELDS = [
    ("name", "Name / Tên", "English Name", "Tên Tiếng Việt"),
    ("age", "Age / Tuổi", "e.g. late 40s", "Vd: 40 tuổi"),
    ("face", "Face & Hair (Focus on Consistency!) / Khuôn mặt & Tóc",
     "High cheekbones, piercing blue eyes...", "Gò má cao, mắt xanh..."),
    ("body", "Height & Build / Ngoại hình", "Tall, muscular build...", "Cao, dáng vạm vỡ..."),
    ("outfit", "Outfit / Trang phục", "Blue naval uniform with gold buttons...", "Quân phục hải quân xanh..."),
    ("personality", "Personality / Tính cách", "Stern, commanding...", "Nghiêm nghị, quyền uy..."),
]


def _render_builder() -> Optional[CharacterDraft]:
    with st.form("character_builder", clear_on_submit=True):
        st.caption("👤 Add New Character")
        values = {}
        for field, label, ph_en, ph_vi in BUILDER_FIELDS:
            c1, c2 = st.columns(2)
            with c1:
                values[f"{field}_en"] = st.text_input(f"{label} (EN)", placeholder=ph_en)
            with c2:
                values[f"{field}_vi"] = st.text_input(f"{label} (VI)", placeholder=ph_vi)
        if st.form_submit_button("Add Character to Bible / Thêm vào hồ sơ"):
            draft = CharacterDraft(**{k: v.strip() for k, v in values.items()})
            if draft.name_en:
                return draft
            st.warning("Cần tên tiếng Anh.")
    return None


def render_section_2():
    st.header("2) Character Bible / Hồ sơ nhân vật")
    store: ProjectStore = st.session_state.store

    with st.expander("Character Builder", expanded=False):
        draft = _render_builder()

    bible = store.bible
    col_en, col_vi = st.columns(2)
    with col_en:
        english = st.text_area("English Bible (Final Text)", value=bible.english, height=220)
        clear_en = st.button("🧹 Clear EN")
    with col_vi:
        vietnamese = st.text_area("Vietnamese Bible (Final Text)", value=bible.vietnamese, height=220)
        clear_vi = st.button("🧹 Clear VI")

    # Giữ phần người dùng vừa gõ trước khi nối nhân vật mới hoặc xoá
    store.update_bible(english=english, vietnamese=vietnamese)
    if draft is not None:
        store.add_character(draft)
    if clear_en:
        store.update_bible(english="")
    if clear_vi:
        store.update_bible(vietnamese="")
    if draft is not None or clear_en or clear_vi:
        st.rerun()
