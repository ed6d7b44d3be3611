# -*- coding: utf-8 -*-
from core.data_models import CharacterBible, CinematicStyle, ProjectSettings, SceneData
from core.presets import style_block

SCRIPT_MIN_CHARS = 50

SCRIPT_SYSTEM_INSTRUCTION = (
    "You are a creative AI screenwriter assistant specializing in visual storytelling. "
    "You prioritize character consistency above all else."
)
STORYBOARD_SYSTEM_INSTRUCTION = (
    "You are an expert AI Video Prompt Engineer. "
    "You create precise, high-fidelity prompts for Google VEO 3."
)


def build_title_prompt(settings: ProjectSettings) -> str:
    return f"""
Create a short, catchy, cinematic title (English) for a {settings.style.value} video.
Context: {settings.context}
Idea: {settings.video_idea}
Return ONLY the title, no quotes.
""".strip()


def build_context_prompt(style: CinematicStyle) -> str:
    return f"""
Write a detailed, atmospheric visual context setting description (Vietnamese) for a {CinematicStyle(style).value} video.
Focus on environment, lighting, and textures. Max 2 sentences.
""".strip()


def build_idea_prompt(settings: ProjectSettings) -> str:
    return f"""
Write a compelling, short video concept/plot summary (Vietnamese) for a {settings.style.value} video set in: {settings.context}.
Focus on conflict or mystery. Max 2 sentences.
""".strip()


def build_script_prompt(settings: ProjectSettings, bible: CharacterBible) -> str:
    """
    Film treatment dài, bám sát Character Bible, chia được đúng scene_count đoạn ~8s.
    """
    return f"""
Role: Master Cinematic Storyteller.
Task: Write a vivid, high-quality film treatment (long-form story) based on the user's concept.

PROJECT SETTINGS:
- Title: {settings.title or ""}
- Context/World: {settings.context}
- Core Concept: {settings.video_idea}
- Genre/Style: {settings.style.value}

{style_block(settings.style)}

CHARACTER BIBLE (STRICT ADHERENCE REQUIRED):
{bible.english}

CRITICAL INSTRUCTION ON CHARACTERS:
You must maintain strict consistency with the provided Character Bible from the beginning to the very end of the story.
- Do not change their physical appearance, age, or defined personality traits.
- Do not add random characters unless necessary for background.
- Every action they take must align with the "Character Bible" provided.

INSTRUCTIONS:
1. Narrative Flow: Write a linear, engaging story that connects the concept into a sequence of events.
2. Visual Focus: Focus intensely on atmosphere, lighting, physical actions, and expressions. Show, don't tell.
3. Pacing: The story must be paced to be split into exactly {settings.scene_count} distinct scenes (approx 8 seconds each).
4. Character Integration: Weave the specific visual details from the Character Bible (outfits, features) into the action naturally.
5. Output Language: English.

FORMAT:
Return a cohesive story text (paragraphs) suitable for a director to read. Do not use "Scene 1" headers yet; just the narrative.
""".strip()


def storyboard_source(settings: ProjectSettings) -> str:
    if settings.script and len(settings.script) > SCRIPT_MIN_CHARS:
        return f"FULL NARRATIVE SCRIPT: {settings.script}"
    return f"CORE IDEA: {settings.video_idea}"


def _field_instructions(style: CinematicStyle) -> str:
    if style == CinematicStyle.STOP_MOTION:
        return """
SPECIAL FORMATTING FOR STOP MOTION / TOY STYLE:
For 'descriptionEn' and 'descriptionVi', you MUST structure the text EXACTLY like this (with line breaks):
Objects: [List main objects in scene]
Atmosphere: [Mood/Atmosphere]
SFX: [Sound Effects]

For 'lighting', describe the visual Style (e.g. Playful, whimsical, warm lighting).
For 'action', describe the animation movement.
""".strip()
    return """
FIELD INSTRUCTIONS:
- descriptionEn: Cinematic visual description (English). Focus on what is seen.
- descriptionVi: Cinematic visual description (Vietnamese). High quality translation.
- camera: Technical camera movement (e.g., "Slow push-in," "Handheld tracking").
- lighting: Mood and lighting setup.
- action: Specific movement occurring within the 8s timeframe.
""".strip()


def build_storyboard_prompt(settings: ProjectSettings, bible: CharacterBible) -> str:
    n = settings.scene_count
    return f"""
Role: VEO 3 Prompt Architect & Director.
Task: Deconstruct the provided SOURCE MATERIAL into a precise {n}-scene storyboard.

SOURCE MATERIAL:
{storyboard_source(settings)}

CONTEXT & STYLE:
Title: {settings.title or ""}
Context: {settings.context}
Style: {settings.style.value}

{style_block(settings.style)}

CHARACTER BIBLE (REFERENCE):
{bible.english}

CONSTRAINTS:
1. Output exactly {n} scenes, numbered 1 to {n} in order.
2. DURATION: Each scene represents an 8-second video clip. Actions must be concise but vivid.
3. CONTINUITY: Ensure logical flow between Scene N and Scene N+1 based on the script.
4. CHARACTER CONSISTENCY: Ensure characters look and act exactly as described in the Bible.
5. NO TEXT: No overlays, subtitles, or speech bubbles.
6. FORMAT: Return JSON matching the schema.

{_field_instructions(settings.style)}

- transition: Edit transition from previous shot (e.g., "Cut to", "Dissolve").
- dialogue: OPTIONAL. Must be spoken within 3-4 seconds max.
""".strip()


def build_regenerate_prompt(scene_number: int, settings: ProjectSettings,
                            bible: CharacterBible, current: SceneData) -> str:
    stop_motion = ""
    if settings.style == CinematicStyle.STOP_MOTION:
        stop_motion = "\nKeep the 'Objects:', 'Atmosphere:', 'SFX:' sections in both descriptions.\n"
    return f"""
Regenerate a specific scene (Scene #{scene_number}) for a VEO 3 AI Video storyboard.

Title: {settings.title or ""}
Context: {settings.context}
Style: {settings.style.value}

{style_block(settings.style)}

Character Bible: {bible.english}

Previous/Current Draft of Scene:
{current.description_en}
Camera: {current.camera}
Lighting: {current.lighting}
Action: {current.action}
{stop_motion}
Task: Improve the prompt for better visual fidelity, action clarity, and lighting. Keep it consistent with the Bible.
Return a SINGLE scene object.
""".strip()
