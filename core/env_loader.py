import logging
import os
import streamlit as st

from core.gemini_helpers import DEFAULT_MODEL, GeminiModel

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def quiet_logs():
    os.environ.setdefault("GRPC_VERBOSITY", "ERROR")
    os.environ.setdefault("GRPC_CPP_ENABLE_STACKTRACE", "0")
    os.environ.setdefault("GRPC_ALTS_ENABLED", "0")
    try:
        import absl.logging as absl_logging
        absl_logging.set_verbosity(absl_logging.ERROR)
    except ImportError:
        pass
    for name in ("httpx", "httpcore", "google_genai"):
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(level: str = "") -> None:
    level = (level or os.getenv("STORYBOARD_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def load_env() -> str:
    # Luôn reload .env để chắc chắn đọc key mới trên đĩa
    from dotenv import load_dotenv
    load_dotenv(override=True)
    # Ưu tiên GEMINI_API_KEY (hoặc GOOGLE_API_KEY nếu bạn dùng tên đó)
    return os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", "")


def default_model_name() -> str:
    return os.getenv("GEMINI_MODEL", "") or DEFAULT_MODEL


def get_key_info(key: str) -> str:
    if not key:
        return "chưa có key"
    return f"key_len={len(key)} | key_tail=…{key[-4:]}"


def validate_key_format(k: str) -> bool:
    # Chỉ đảm bảo không rỗng và không có khoảng trắng
    return bool(k and k.strip() and " " not in k)


def set_runtime_key(new_key: str):
    """
    Ghi đè key trong ENV của process hiện tại (không đụng file .env).
    """
    os.environ["GEMINI_API_KEY"] = new_key
    os.environ["GOOGLE_API_KEY"] = new_key  # phòng TH SDK đọc GOOGLE_API_KEY


def clear_runtime_key():
    for var in ("GEMINI_API_KEY", "GOOGLE_API_KEY"):
        os.environ.pop(var, None)


def write_dotenv_key(new_key: str, env_path: str = "") -> bool:
    """
    Ghi key mới vào file .env. Trả về True nếu thành công.
    """
    from dotenv import find_dotenv, set_key
    env_path = env_path or find_dotenv(usecwd=True)
    try:
        if not env_path:
            # nếu chưa có .env, tạo file mới trong cwd
            env_path = os.path.join(os.getcwd(), ".env")
            open(env_path, "a", encoding="utf-8").close()
        set_key(env_path, "GEMINI_API_KEY", new_key)
    except OSError as e:
        logging.getLogger(__name__).error("Cannot write %s: %s", env_path, e)
        return False
    # Đồng bộ runtime ngay sau khi ghi file
    set_runtime_key(new_key)
    return True


def reset_caches_and_rerun():
    st.cache_resource.clear()
    st.cache_data.clear()
    st.rerun()


@st.cache_resource(show_spinner=False)
def init_model(api_key: str, model_name: str):
    if not api_key:
        return None
    from google import genai
    return GeminiModel(genai.Client(api_key=api_key), model_name)
