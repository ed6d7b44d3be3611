import streamlit as st

from core.env_loader import load_env, init_model, quiet_logs, setup_logging
from core.project_store import ProjectStore

from ui.sidebar import render_sidebar
from ui.section_1_settings import render_section_1
from ui.section_2_bible import render_section_2
from ui.section_3_storyboard import render_section_3

setup_logging()
quiet_logs()
st.set_page_config(page_title="Veo Storyboard Studio", page_icon="🎬", layout="wide")

# Session init
if "store" not in st.session_state:
    st.session_state.store = ProjectStore()

# Load .env and init model
api_key = load_env()
model_name = render_sidebar()   # also handles import/export + presets
model = init_model(api_key, model_name) if api_key else None

st.title("🎬 Veo Storyboard Studio")

# Sections
render_section_1(model)
render_section_2()
render_section_3(model)
