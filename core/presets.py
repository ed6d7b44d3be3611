# -*- coding: utf-8 -*-
"""
Defaults, built-in sample projects and the per-style hint registry.
Style hints are injected into the script/storyboard prompt builders so the
generated shots keep the look of the selected genre.
"""
from core.data_models import (
    AspectRatio, CharacterBible, CinematicStyle, FullProjectData, ProjectSettings, SceneData,
)

DEFAULT_BIBLE = CharacterBible(
    english=(
        "Captain Nemo, a mysterious and commanding figure in his late forties, with broad shoulders, "
        "wearing a dark blue officer's uniform adorned with brass buttons and golden embroidery of mythical "
        "sea creatures. His swept-back dark hair with silver streaks and piercing blue eyes show wisdom and "
        "hidden sorrow. His posture is always proud and resolute.\n\n"
        "Sophia, a young marine scientist in her late twenties, with curly chestnut hair tied in a loose bun, "
        "green eyes full of curiosity. She wears a waterproof light jacket over a white shirt and rugged cargo "
        "pants, holding a digital tablet and underwater sensors, always focused and alert."
    ),
    vietnamese=(
        "Thuyền trưởng Nemo, người đàn ông bí ẩn quyền uy khoảng ngoài bốn mươi tuổi, bờ vai rộng, khoác quân "
        "phục xanh đậm với các nút đồng và thêu hình sinh vật biển màu vàng. Mái tóc đen vuốt gọn, có vệt bạc, "
        "mắt xanh sâu thẳm toát lên vẻ thông thái và u hoài. Dáng đứng nghiêm nghị, kiên cường.\n\n"
        "Sophia, nhà khoa học trẻ về biển khoảng cuối hai mươi tuổi, tóc nâu xoăn buộc thành búi lỏng, mắt xanh "
        "lá đầy tò mò. Cô mặc áo khoác chống nước ngoài áo sơ mi trắng, quần cargo bụi bặm, tay cầm máy tính "
        "bảng và bộ cảm biến dưới nước, nét mặt chăm chú và tập trung."
    ),
)

DEFAULT_SETTINGS = ProjectSettings(
    context=(
        "Sâu dưới Thái Bình Dương, bên trong tàu ngầm Nautilus công nghệ hơi nước cổ điển nhưng tiên tiến, "
        "với ánh sáng tối, mờ ảo và chi tiết kim loại đồng."
    ),
    video_idea=(
        "Khám phá một cổ vật phát sáng bị lãng quên dưới đáy biển sâu, dẫn đến một khoảnh khắc đối đầu "
        "căng thẳng và kịch tính."
    ),
    script="",
    style=CinematicStyle.SCIFI,
    ratio=AspectRatio.RATIO_16_9,
    scene_count=3,
)


def default_project() -> FullProjectData:
    return FullProjectData(
        settings=DEFAULT_SETTINGS.model_copy(deep=True),
        character_bible=DEFAULT_BIBLE.model_copy(deep=True),
        scenes=[],
    )


TOY_PROJECT_DATA = FullProjectData(
    settings=ProjectSettings(
        title="Boots & the KitKat Heist",
        context=(
            "Một bàn gỗ trong phòng trẻ em, đồ chơi bằng đất sét và nỉ, ánh nắng chiều xuyên qua rèm, "
            "bụi lấp lánh trong không khí."
        ),
        video_idea=(
            "Chú mèo đồ chơi Boots lên kế hoạch đánh cắp thanh KitKat cuối cùng trên bàn trước khi "
            "chú gấu bông Bruno thức dậy."
        ),
        script="",
        style=CinematicStyle.STOP_MOTION,
        ratio=AspectRatio.RATIO_9_16,
        scene_count=3,
    ),
    character_bible=CharacterBible(
        english=(
            "Boots, a small orange clay cat with visible thumbprint texture, oversized green button eyes, "
            "a tiny red felt scarf and mismatched stitched boots. Sneaky, playful, always tiptoeing.\n\n"
            "Bruno, a chubby brown teddy bear with a patched left ear and a blue ribbon bow. Sleepy, "
            "slow-moving, grumpy when woken."
        ),
        vietnamese=(
            "Boots, chú mèo đất sét màu cam nhỏ với vân dấu vân tay, mắt là hai chiếc cúc xanh lá to, "
            "khăn nỉ đỏ tí hon và đôi ủng khâu lệch màu. Lém lỉnh, tinh nghịch, luôn rón rén.\n\n"
            "Bruno, chú gấu bông nâu mũm mĩm, tai trái có miếng vá và nơ ruy băng xanh. Buồn ngủ, chậm "
            "chạp, cáu kỉnh khi bị đánh thức."
        ),
    ),
    scenes=[
        SceneData(
            id="s_1", number=1,
            description_en=(
                "Objects: Boots the clay cat, a wooden desk, a single KitKat bar, a sleeping teddy bear\n"
                "Atmosphere: Quiet afternoon, mischievous anticipation\n"
                "SFX: Soft ticking clock, tiny clay footsteps"
            ),
            description_vi=(
                "Vật thể: Mèo đất sét Boots, bàn gỗ, một thanh KitKat, gấu bông đang ngủ\n"
                "Không khí: Buổi chiều yên tĩnh, háo hức tinh nghịch\n"
                "SFX: Tiếng đồng hồ tích tắc, bước chân đất sét nhỏ"
            ),
            camera="Low angle macro shot, slow dolly in",
            lighting="Playful, warm afternoon light",
            action="Boots peeks over a pencil cup, tail twitching in choppy stop-motion frames",
            transition="Cut to",
        ),
        SceneData(
            id="s_2", number=2,
            description_en=(
                "Objects: Boots, the KitKat bar, a row of colored pencils\n"
                "Atmosphere: Tense, whimsical suspense\n"
                "SFX: Crinkling wrapper, held breath"
            ),
            description_vi=(
                "Vật thể: Boots, thanh KitKat, hàng bút chì màu\n"
                "Không khí: Hồi hộp, kỳ quặc dễ thương\n"
                "SFX: Tiếng giấy bọc sột soạt, nín thở"
            ),
            camera="Side tracking shot at desk level",
            lighting="Warm key light with soft shadows",
            action="Boots tiptoes across the pencils and wraps both paws around the KitKat",
            transition="Match cut",
        ),
        SceneData(
            id="s_3", number=3,
            description_en=(
                "Objects: Bruno the teddy bear, Boots holding the KitKat\n"
                "Atmosphere: Comic surprise\n"
                "SFX: Sleepy yawn, startled meow"
            ),
            description_vi=(
                "Vật thể: Gấu bông Bruno, Boots đang ôm KitKat\n"
                "Không khí: Bất ngờ hài hước\n"
                "SFX: Tiếng ngáp ngái ngủ, tiếng meo giật mình"
            ),
            camera="Quick whip pan to a close-up",
            lighting="Playful, warm lighting with a bright rim",
            action="Bruno opens one button eye; Boots freezes mid-step",
            transition="Cut to",
            dialogue="Not a crumb, Boots.",
        ),
    ],
)

BUILTIN_PRESETS = {
    "Toy Story (Stop Motion)": TOY_PROJECT_DATA,
}


def preset_project(name: str) -> FullProjectData:
    return BUILTIN_PRESETS[name].model_copy(deep=True)


STYLE_PRESETS = {
    CinematicStyle.CINEMATIC: {
        "tone": "dramatic, emotionally grounded, classic three-act beats",
        "look": "anamorphic framing, shallow depth of field, filmic grain",
        "camera": "dolly moves, slow push-ins, motivated crane shots",
        "lighting": "motivated key light, soft contrast, golden/blue hour",
        "sfx": "orchestral swells, subtle room tone",
    },
    CinematicStyle.ANIME: {
        "tone": "expressive, high emotion, stylised pacing",
        "look": "cel-shaded, clean lineart, vivid palette, speed lines on action",
        "camera": "dynamic angles, impact frames, sweeping pans",
        "lighting": "hard rim light, glowing highlights, painted skies",
        "sfx": "whooshes, sparkle chimes, punchy hits",
    },
    CinematicStyle.REALISTIC: {
        "tone": "grounded, natural, understated",
        "look": "photoreal textures, natural skin, true-to-life colour",
        "camera": "eye-level, handheld or tripod, minimal stylisation",
        "lighting": "available light, practicals",
        "sfx": "natural ambience, foley",
    },
    CinematicStyle.CYBERPUNK: {
        "tone": "cold, noir, high tension",
        "look": "neon rain, wet asphalt reflections, holographic signage",
        "camera": "low angles, slow tracking through alleys, drone over megacity",
        "lighting": "magenta/cyan neon, heavy contrast, volumetric haze",
        "sfx": "electrical hum, rain, distant sirens, synth drones",
    },
    CinematicStyle.VINTAGE: {
        "tone": "nostalgic, gentle, melancholic",
        "look": "16mm grain, gate weave, faded warm colour, soft halation",
        "camera": "static tripod frames, slow zooms",
        "lighting": "tungsten warmth, window light",
        "sfx": "projector flicker, vinyl crackle",
    },
    CinematicStyle.DOCUMENTARY: {
        "tone": "observational, informative, honest",
        "look": "natural colour, real locations",
        "camera": "handheld follow, interview framing, B-roll inserts",
        "lighting": "natural light, practical sources",
        "sfx": "location sound, room tone",
    },
    CinematicStyle.SCIFI: {
        "tone": "wondrous, adventurous, rising tension",
        "look": "detailed tech surfaces, brass and glass, scale contrast",
        "camera": "slow reveals, sweeping crane, tracking through corridors",
        "lighting": "cool key, glowing instrument panels, volumetric beams",
        "sfx": "engine hum, sonar pings, metallic creaks",
    },
    CinematicStyle.FANTASY: {
        "tone": "epic, mythic, enchanted",
        "look": "painterly landscapes, flowing fabrics, magical particles",
        "camera": "aerial establishing shots, heroic low angles",
        "lighting": "god rays, warm magic glow, misty backlight",
        "sfx": "choir pads, wind, shimmering spells",
    },
    CinematicStyle.HORROR: {
        "tone": "creeping dread, short violent bursts",
        "look": "low-key, desaturated cold tones, heavy shadows",
        "camera": "slow creeping push-ins, off-balance framing, sudden whip pans",
        "lighting": "single hard source, flicker, deep blacks",
        "sfx": "floor creaks, sub-bass hits, breathing",
    },
    CinematicStyle.NOIR: {
        "tone": "cynical, moody, fatalistic",
        "look": "high-contrast black and white, venetian blind shadows",
        "camera": "dutch angles, slow push through smoke",
        "lighting": "hard key, strong shadows, streetlamp pools",
        "sfx": "rain on windows, saxophone, distant traffic",
    },
    CinematicStyle.WESTERN: {
        "tone": "stoic, sparse, tense standoffs",
        "look": "dusty ochre palette, wide desert vistas",
        "camera": "extreme wide shots, tight eye close-ups",
        "lighting": "harsh midday sun, long sunset shadows",
        "sfx": "wind, spurs, distant hawk",
    },
    CinematicStyle.STOP_MOTION: {
        "tone": "playful, whimsical, handmade charm",
        "look": "clay and felt textures, visible fingerprints, miniature sets",
        "camera": "macro lenses, locked-off frames, small dolly moves",
        "lighting": "warm practical light, soft shadows on tabletop sets",
        "sfx": "tiny footsteps, squeaks, crinkles",
    },
}


def style_block(style) -> str:
    """Render the hint block for a style; empty string for unknown styles."""
    try:
        p = STYLE_PRESETS.get(CinematicStyle(style), {})
    except ValueError:
        return ""
    if not p:
        return ""
    lines = ["[STYLE PROFILE]"]
    for k in ["tone", "look", "camera", "lighting", "sfx"]:
        v = p.get(k)
        if v is None:
            continue
        lines.append(f"- {k}: {v}")
    return "\n".join(lines)
