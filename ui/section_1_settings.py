import streamlit as st
from core.data_models import AspectRatio, CinematicStyle
from core.errors import GenerationFailure
from core.project_store import ProjectStore
from core import workflow


def _suggest_button(model, store: ProjectStore, kind: str, label: str) -> bool:
    return st.button(label, key=f"suggest_{kind}", disabled=not bool(model) or store.is_busy(kind))


def _run_suggestion(model, store: ProjectStore, kind: str):
    with st.spinner("Đang gợi ý..."):
        ok = workflow.suggest_field(store, model, kind)
    if ok:
        st.rerun()
    st.caption("Không gợi ý được, giữ nguyên nội dung cũ.")


def _run_script(model, store: ProjectStore):
    with st.spinner("AI is Writing Story (Strict Consistency)..."):
        try:
            workflow.write_script(store, model)
        except GenerationFailure:
            st.error("Failed to write script. Please check API key and try again.")
        else:
            st.rerun()


def render_section_1(model):
    st.header("1) Settings / Thiết lập")

    store: ProjectStore = st.session_state.store
    s = store.settings
    clicked = []

    col_left, col_right = st.columns(2)
    with col_left:
        title = st.text_input("Project Title / Tiêu đề", value=s.title or "", placeholder="E.g. The Silent Depth")
        if _suggest_button(model, store, "title", "🪄 Suggest Title"):
            clicked.append("title")

        context = st.text_area("Context / Bối cảnh", value=s.context, height=90,
                               placeholder="E.g., Deep ocean, steampunk submarine...")
        if _suggest_button(model, store, "context", "💡 Suggest Context"):
            clicked.append("context")

        idea = st.text_area("Video Idea / Ý tưởng", value=s.video_idea, height=90,
                            placeholder="Short summary of the plot...")
        if _suggest_button(model, store, "idea", "🪄 Suggest Idea"):
            clicked.append("idea")

    with col_right:
        styles = list(CinematicStyle)
        style = st.selectbox("Genre", styles, index=styles.index(s.style), format_func=lambda x: x.value)
        ratios = list(AspectRatio)
        ratio = st.selectbox("Ratio", ratios, index=ratios.index(s.ratio), format_func=lambda x: x.value)
        scene_count = st.number_input("No. Scenes", min_value=1, max_value=50, value=s.scene_count, step=1)

        script = st.text_area("Full Script / Cốt truyện chi tiết", value=s.script, height=220,
                              placeholder="Generated story will appear here...")
        if st.button("✨ Draft Full Story with AI (Viết cốt truyện)",
                     disabled=not bool(model and idea) or store.is_busy("script")):
            clicked.append("script")

    # Lưu chỉnh sửa của lượt này trước khi gọi Gemini
    store.update_settings(
        title=title or None, context=context, video_idea=idea, script=script,
        style=style, ratio=ratio, scene_count=int(scene_count),
    )

    for action in clicked:
        if action == "script":
            _run_script(model, store)
        else:
            _run_suggestion(model, store, action)
