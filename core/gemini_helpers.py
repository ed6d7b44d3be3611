import json
import logging
import re
from typing import Any, Optional

from google.genai import types

from core.errors import GenerationFailure

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiModel:
    """Gắn client google-genai với một tên model cố định."""

    def __init__(self, client, model_name: str = DEFAULT_MODEL):
        self.client = client
        self.model_name = model_name

    def generate_content(self, prompt: str, config: Optional[types.GenerateContentConfig] = None):
        return self.client.models.generate_content(model=self.model_name, contents=prompt, config=config)


def _generate(model, request: str, prompt: str, config: types.GenerateContentConfig) -> str:
    if model is None:
        raise GenerationFailure(request, "Model chưa được khởi tạo")
    logger.info("Gemini request %s (%d chars)", request, len(prompt))
    try:
        resp = model.generate_content(prompt, config=config)
    except Exception as e:
        logger.error("Gemini request %s failed: %s", request, e)
        raise GenerationFailure(request, str(e)) from e
    return getattr(resp, "text", None) or ""


def gemini_text(model, prompt: str, request: str = "text",
                system_instruction: Optional[str] = None,
                temperature: Optional[float] = None) -> str:
    config = types.GenerateContentConfig(system_instruction=system_instruction, temperature=temperature)
    return _generate(model, request, prompt, config)


def _loads_lenient(txt: str) -> Any:
    try:
        return json.loads(txt)
    except ValueError:
        pass
    m = re.search(r"```(?:json)?\s*(.*?)```", txt, flags=re.S | re.I)
    if m:
        try:
            return json.loads(m.group(1).strip())
        except ValueError:
            pass
    m2 = re.search(r"(\{.*\}|\[.*\])", txt, flags=re.S)
    if m2:
        return json.loads(m2.group(1))
    raise ValueError("no JSON payload in response")


def gemini_json(model, prompt: str, schema: dict, request: str = "json",
                system_instruction: Optional[str] = None,
                temperature: Optional[float] = None) -> Any:
    config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=schema,
        system_instruction=system_instruction,
        temperature=temperature,
    )
    txt = _generate(model, request, prompt, config)
    if not txt.strip():
        raise GenerationFailure(request, "empty response")
    try:
        return _loads_lenient(txt)
    except ValueError as e:
        logger.error("Gemini request %s returned unparseable JSON", request)
        raise GenerationFailure(request, f"invalid JSON: {e}") from e
