# -*- coding: utf-8 -*-
from typing import List, NamedTuple

from pydantic import BaseModel

from core.data_models import CharacterBible, Language

OUTFIT_PREFIX = {Language.EN: "Wearing ", Language.VI: "Mặc "}


class CharacterPart(NamedTuple):
    value: str
    prefix: str = ""
    suffix: str = ""


class CharacterDraft(BaseModel):
    """Ô nhập của Character Builder, mỗi thuộc tính có bản EN và VI."""
    name_en: str = ""
    name_vi: str = ""
    age_en: str = ""
    age_vi: str = ""
    body_en: str = ""
    body_vi: str = ""
    face_en: str = ""
    face_vi: str = ""
    outfit_en: str = ""
    outfit_vi: str = ""
    personality_en: str = ""
    personality_vi: str = ""


def assemble_character_paragraph(parts: List[CharacterPart]) -> str:
    pieces = [f"{p.prefix}{p.value}{p.suffix}" for p in parts if p.value]
    return ". ".join(pieces) + ("." if pieces else "")


def append_paragraph(existing: str, paragraph: str) -> str:
    if not paragraph:
        return existing or ""
    return (existing + "\n\n" if existing else "") + paragraph


def character_parts(draft: CharacterDraft, language: Language) -> List[CharacterPart]:
    """Thứ tự: Tên[, tuổi] → dáng người → khuôn mặt/tóc → trang phục → tính cách."""
    lang = Language(language)
    sfx = lang.value

    def field(name: str) -> str:
        return getattr(draft, f"{name}_{sfx}")

    name = field("name")
    age = field("age")
    return [
        CharacterPart(name, suffix=f", {age}" if (name and age) else ""),
        CharacterPart(field("body")),
        CharacterPart(field("face")),
        CharacterPart(field("outfit"), prefix=OUTFIT_PREFIX[lang]),
        CharacterPart(field("personality")),
    ]


def add_character(bible: CharacterBible, draft: CharacterDraft) -> CharacterBible:
    """
    Ghép đoạn mô tả nhân vật mới vào cuối cả hai bản Bible.
    Mỗi ngôn ngữ chỉ dùng các ô không rỗng của chính nó.
    Builder bắt buộc có tên tiếng Anh; thiếu thì trả lại Bible cũ.
    """
    if not draft.name_en:
        return bible.model_copy()
    en = assemble_character_paragraph(character_parts(draft, Language.EN))
    vi = assemble_character_paragraph(character_parts(draft, Language.VI))
    return CharacterBible(
        english=append_paragraph(bible.english, en),
        vietnamese=append_paragraph(bible.vietnamese, vi),
    )
