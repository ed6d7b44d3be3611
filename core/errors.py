# -*- coding: utf-8 -*-
from enum import Enum
from typing import Optional


class StudioError(Exception):
    """Base class cho mọi lỗi có thể phục hồi của studio."""


class GenerationFailure(StudioError):
    """Gọi model thất bại hoặc payload trả về không đúng schema."""

    def __init__(self, request: str, message: str):
        super().__init__(f"{request}: {message}")
        self.request = request
        self.message = message


class SuggestionFailure(GenerationFailure):
    pass


class RegenerationFailure(GenerationFailure):
    def __init__(self, scene_id: str, message: str):
        super().__init__("regenerate_scene", message)
        self.scene_id = scene_id


class ImportErrorKind(str, Enum):
    MALFORMED_JSON = "malformed_json"
    MISSING_FIELD = "missing_field"
    INVALID_VALUE = "invalid_value"


class ProjectImportError(StudioError):
    def __init__(self, kind: ImportErrorKind, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.field = field
