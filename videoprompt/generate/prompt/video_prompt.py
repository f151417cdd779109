import json
from typing import List, Optional

from videoprompt.generate.prompt.catalog import (
    CATEGORY_LABELS,
    CUSTOM_CATEGORY,
    DEFAULT_GUIDANCE,
    PLATFORM_GUIDANCE,
    PLATFORM_LABELS,
)

PROMPTS_PER_BATCH = 3

TRANSLATION_SYSTEM_PROMPT = (
    "Du bist ein professioneller Übersetzer. Übersetze den folgenden deutschen Text ins Englische. "
    "Behalte den Stil, Ton und die Bedeutung bei. Antworte nur mit der Übersetzung, ohne zusätzliche Erklärungen."
)


def effective_category(category: str, custom_category: Optional[str]) -> str:
    """Bei "diverses" zählt die freie Eingabe des Nutzers."""
    if category == CUSTOM_CATEGORY and custom_category:
        return custom_category
    return category


def platform_label(platform: str) -> str:
    return PLATFORM_LABELS.get(platform, platform)


def category_label(category: str, custom_category: Optional[str] = None) -> str:
    return CATEGORY_LABELS.get(category, effective_category(category, custom_category))


def platform_guidance(platform: str) -> str:
    return PLATFORM_GUIDANCE.get(platform, DEFAULT_GUIDANCE)


def _output_contract(category_name: str) -> str:
    ordinals = ["ersten", "zweiten", "dritten"]
    example = {
        "prompts": [
            {
                "id": index + 1,
                "content": f"Detaillierte Beschreibung des {ordinals[index]} Video-Prompts...",
                "category": category_name,
            }
            for index in range(PROMPTS_PER_BATCH)
        ]
    }
    return json.dumps(example, ensure_ascii=False, indent=2)


def build_generation_prompt(
    platform: str,
    category: str,
    video_content: str,
    custom_category: Optional[str] = None,
    tones: Optional[List[str]] = None,
    styles: Optional[List[str]] = None,
) -> str:
    """
    Baut die System-Anweisung für die Generierung eines Prompt-Batches.

    Enthält Plattform, Kategorie, Inhalt, optionale Ton-/Stilwünsche,
    die plattformspezifischen Anforderungen und das erwartete
    JSON-Ausgabeformat (genau 3 Einträge mit id 1-3).
    """
    platform_name = platform_label(platform)
    category_name = category_label(category, custom_category)
    tones_text = f"Gewünschte Tonarten: {', '.join(tones)}" if tones else ""
    styles_text = f"Gewünschte Stilarten: {', '.join(styles)}" if styles else ""

    prompt_lines = [
        "Du bist ein Experte für Social Media Video-Content und hilfst dabei, kreative und ansprechende "
        "Video-Prompts zu erstellen. Deine Aufgabe ist es, genau 3 verschiedene, detaillierte Video-Prompts "
        "auf Deutsch zu generieren.",
        "",
        f"Plattform: {platform_name}",
        f"Kategorie: {category_name}",
        f"Inhalt und Ziel: {video_content}",
        tones_text,
        styles_text,
        "",
        f"Plattform-spezifische Anforderungen für {platform_name}: {platform_guidance(platform)}",
        "",
        "Erstelle 3 verschiedene Video-Prompts, die:",
        f"- Optimal für {platform_name} zugeschnitten sind",
        f"- Spezifisch für die gewählte Kategorie {category_name} sind",
        "- Den beschriebenen Inhalt und das Ziel des Videos umsetzen",
        "- Die gewünschten Ton- und Stilarten berücksichtigen (falls angegeben)",
        "- Den plattformspezifischen Anforderungen entsprechen",
        "- Konkrete Handlungsanweisungen und Umsetzungsideen enthalten",
        "- Engaging und für die Zielgruppe der Plattform optimiert sind",
        "- Verschiedene kreative Ansätze für dasselbe Thema bieten",
        "",
        "Antworte ausschließlich im JSON-Format mit folgendem Schema:",
        _output_contract(category_name),
    ]

    return "\n".join(prompt_lines)
