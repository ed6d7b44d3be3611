import streamlit as st
from core.env_loader import (
    load_env, get_key_info, validate_key_format, set_runtime_key, write_dotenv_key,
    clear_runtime_key, reset_caches_and_rerun, default_model_name,
)
from core.errors import ProjectImportError
from core.presets import BUILTIN_PRESETS, preset_project
from core.project_io import export_project, import_project, save_project, load_project, list_projects, export_zip
from core.project_store import ProjectStore


def _render_key_manager():
    with st.sidebar.expander("🔐 API Key (GEMINI_API_KEY)", expanded=False):
        current_key = load_env()
        st.caption(f"Hiện tại: {get_key_info(current_key)}")

        new_key = st.text_input(
            "Nhập key mới (không lưu nếu chưa bấm nút bên dưới)",
            type="password",
            placeholder="dán GEMINI_API_KEY vào đây…",
            key="api_key_entry_sidebar",
        )

        colK1, colK2 = st.columns(2)
        with colK1:
            if st.button("⚡ Dùng tạm thời (runtime)"):
                if not validate_key_format(new_key):
                    st.warning("Key trống hoặc không hợp lệ.")
                else:
                    set_runtime_key(new_key)
                    reset_caches_and_rerun()
        with colK2:
            if st.button("💾 Ghi vào .env"):
                if not validate_key_format(new_key):
                    st.warning("Key trống hoặc không hợp lệ.")
                elif write_dotenv_key(new_key):
                    reset_caches_and_rerun()
                else:
                    st.error("Không ghi được .env. Kiểm tra quyền ghi file.")

        if st.button("🧽 Xoá override (dùng lại .env)"):
            clear_runtime_key()
            reset_caches_and_rerun()


def _render_import_export(store: ProjectStore):
    st.sidebar.subheader("📁 Import / Export")
    current_json = export_project(store.snapshot())

    with st.sidebar.expander("⬇️ Export JSON"):
        st.code(current_json, language="json")
        st.download_button("Tải project.json", data=current_json, file_name="project.json",
                           mime="application/json")
        st.download_button("📦 Tải ZIP (JSON + prompts)", data=export_zip(store.snapshot()),
                           file_name="storyboard.zip")

    with st.sidebar.expander("⬆️ Import JSON"):
        json_input = st.text_area("Dán JSON vào đây…", key="import_json", height=160)
        if st.button("Load Project Data", disabled=not json_input):
            try:
                data = import_project(json_input)
            except ProjectImportError as e:
                st.error(f"JSON không hợp lệ ({e.kind.value}): {e}")
            else:
                store.import_project(data)
                st.success("Đã nạp project.")
                st.rerun()

    saved = list_projects()
    if saved:
        sel_file = st.sidebar.selectbox("Mở project đã lưu", ["(Chọn)"] + [f.name for f in saved])
        if sel_file != "(Chọn)" and st.sidebar.button("📂 Mở"):
            try:
                store.import_project(load_project(sel_file))
            except ProjectImportError as e:
                st.sidebar.error(f"Không mở được {sel_file}: {e}")
            else:
                st.rerun()

    if st.sidebar.button("💾 Lưu project", type="primary"):
        f = save_project(store.snapshot())
        st.sidebar.success(f"Đã lưu: {f.name}")


def render_sidebar():
    st.sidebar.title("⚙️ Cấu hình")
    _render_key_manager()

    options = ["gemini-2.5-flash", "gemini-2.5-pro"]
    default = default_model_name()
    if default not in options:
        options.insert(0, default)
    model_name = st.sidebar.selectbox("Model", options, index=options.index(default))
    custom_model = st.sidebar.text_input("Model tuỳ chọn", value="", help="Ví dụ: gemini-2.5-flash")
    model_name = custom_model or model_name

    store: ProjectStore = st.session_state.store
    st.sidebar.markdown("---")
    st.sidebar.subheader("🧸 Sample")
    preset_name = st.sidebar.selectbox("Preset", list(BUILTIN_PRESETS))
    confirm = st.sidebar.checkbox("Ghi đè settings hiện tại", key="confirm_preset")
    if st.sidebar.button("Load Sample", disabled=not confirm):
        store.load_preset(preset_project(preset_name))
        st.rerun()

    st.sidebar.markdown("---")
    _render_import_export(store)

    if not load_env():
        st.sidebar.error("Chưa thấy GEMINI_API_KEY trong .env.")

    return model_name
