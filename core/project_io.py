# -*- coding: utf-8 -*-
import io
import json
import logging
import os
import zipfile
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from core.data_models import FullProjectData, Language
from core.errors import ImportErrorKind, ProjectImportError
from core.text_utils import _safe_name
from core.veo_prompt import storyboard_prompt_sheet

logger = logging.getLogger(__name__)

APP_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = Path(os.getenv("STORYBOARD_DATA_DIR", APP_DIR / "projects"))

REQUIRED_KEYS = ("settings", "characterBible", "scenes")


def export_project(data: FullProjectData) -> str:
    return json.dumps(data.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2)


def import_project(text: str) -> FullProjectData:
    """
    Parse tài liệu JSON đã export. Không migrate, không điền mặc định cho
    3 khoá bắt buộc; style/ratio lạ bị từ chối.
    """
    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ProjectImportError(ImportErrorKind.MALFORMED_JSON, f"Invalid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ProjectImportError(ImportErrorKind.MALFORMED_JSON, "Top-level JSON value must be an object")

    for key in REQUIRED_KEYS:
        if key not in raw:
            raise ProjectImportError(ImportErrorKind.MISSING_FIELD, f"Missing required key: {key}", field=key)

    try:
        return FullProjectData.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        raise ProjectImportError(
            ImportErrorKind.INVALID_VALUE, f"Invalid value at {loc}: {first.get('msg')}", field=loc,
        ) from e


def project_file_name(data: FullProjectData) -> str:
    return f"{_safe_name(data.settings.title or '') or 'untitled'}.json"


def save_project(data: FullProjectData, name: Optional[str] = None) -> Path:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    f = DATA_DIR / (f"{_safe_name(name)}.json" if name else project_file_name(data))
    f.write_text(export_project(data), encoding="utf-8")
    logger.info("Saved project to %s", f)
    return f


def load_project(path) -> FullProjectData:
    p = Path(path)
    if not p.is_absolute():
        p = DATA_DIR / p
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read project file %s: %s", p, e)
        raise ProjectImportError(ImportErrorKind.MALFORMED_JSON, f"Cannot read {p.name}: {e}") from e
    return import_project(text)


def list_projects() -> List[Path]:
    if not DATA_DIR.exists():
        return []
    return sorted(DATA_DIR.glob("*.json"))


def export_zip(data: FullProjectData) -> bytes:
    mem = io.BytesIO()
    with zipfile.ZipFile(mem, "w", zipfile.ZIP_DEFLATED) as z:
        z.writestr("project.json", export_project(data))
        z.writestr("script.md", data.settings.script or "")
        z.writestr("prompts_en.txt", storyboard_prompt_sheet(data, Language.EN))
        z.writestr("prompts_vi.txt", storyboard_prompt_sheet(data, Language.VI))
    mem.seek(0)
    return mem.read()
