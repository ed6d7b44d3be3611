from core.text_utils import _safe_name, clip_preview


def test_safe_name():
    assert _safe_name("Boots & the KitKat Heist") == "Boots__the_KitKat_Heist"
    assert _safe_name("") == ""
    assert len(_safe_name("x" * 100)) == 60


def test_clip_preview():
    assert clip_preview("  a\n  b  ") == "a b"
    out = clip_preview("word " * 40, limit=20)
    assert len(out) <= 20
    assert out.endswith("…")
