# -*- coding: utf-8 -*-
from typing import List

from core.data_models import AspectRatio, FullProjectData, Language, SceneData

DEFAULT_TRANSITION = "Cut To"


def assemble_prompt(bible_text: str, scene: SceneData, ratio: AspectRatio, language: Language) -> str:
    """
    Final Veo prompt of one scene, in this order:

        <bible>
        (blank line)
        <description>
        Dialogue: "<dialogue>"      (only when dialogue is set)
        Camera: ...
        Lighting: ...
        Transition: ...            ("Cut To" when missing)
        Ratio: ...
    """
    lines: List[str] = [
        (bible_text or "").strip(),
        "",
        (scene.description_for(language) or "").strip(),
    ]
    if scene.dialogue:
        lines.append(f'Dialogue: "{scene.dialogue}"')
    lines.append(f"Camera: {scene.camera}")
    lines.append(f"Lighting: {scene.lighting}")
    lines.append(f"Transition: {scene.transition or DEFAULT_TRANSITION}")
    lines.append(f"Ratio: {AspectRatio(ratio).value}")
    return "\n".join(lines)


def scene_prompt(project: FullProjectData, scene: SceneData, language: Language) -> str:
    return assemble_prompt(
        project.character_bible.text_for(language),
        scene,
        project.settings.ratio,
        language,
    )


def storyboard_prompt_sheet(project: FullProjectData, language: Language) -> str:
    # Dùng cho "copy all" và file prompts_*.txt trong ZIP
    blocks = []
    for sc in project.scenes:
        blocks.append(f"## Scene {sc.number}\n{scene_prompt(project, sc, language)}")
    return "\n\n".join(blocks)
