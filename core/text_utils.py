import re


def _safe_name(s: str) -> str:
    s = re.sub(r"[^\w\- ]+", "", s or "", flags=re.U)
    return s.strip().replace(" ", "_")[:60]


def clip_preview(text: str, limit: int = 120) -> str:
    """Một dòng xem trước cho tiêu đề card cảnh."""
    s = re.sub(r"\s+", " ", text or "").strip()
    return s if len(s) <= limit else s[: limit - 1].rstrip() + "…"
