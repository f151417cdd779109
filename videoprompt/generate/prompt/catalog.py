from typing import Dict, List, Literal, get_args

Platform = Literal["youtube", "tiktok", "instagram", "facebook", "linkedin"]

Tone = Literal[
    "motivierend", "informativ", "unterhaltsam", "seriös", "emotional",
    "provokativ", "persönlich", "dramatisch", "inspirativ", "vertrauensvoll",
]

Style = Literal[
    "dokumentarisch", "cinematisch", "minimalistisch", "dynamisch", "illustrativ",
    "authentisch", "ästhetisch", "humorvoll", "storytelling",
]

CUSTOM_CATEGORY = "diverses"

PLATFORMS: List[str] = ["youtube", "tiktok", "instagram", "facebook", "linkedin"]

TONES: List[str] = list(get_args(Tone))
STYLES: List[str] = list(get_args(Style))

PLATFORM_CATEGORIES: Dict[str, List[str]] = {
    "youtube": ["tutorials", "vlogs", "reviews", "gaming", "comedy", "musik", "dokus", "howtos", "unboxings", "storytelling", CUSTOM_CATEGORY],
    "tiktok": ["trends", "challenges", "dance", "memes", "hacks", "skits", "reactions", "edits", "pov", "storytime", CUSTOM_CATEGORY],
    "instagram": ["reels", "fashion", "food", "travel", "aesthetics", "lifestyle", "quotes", "stories", "diy", "fitness", CUSTOM_CATEGORY],
    "facebook": ["community", "news", "events", "memes", "groups", "reactions", CUSTOM_CATEGORY],
    "linkedin": ["leadership", "networking", "insights", "careers", "skills", "trends", "events", "success", "culture", "learning", CUSTOM_CATEGORY],
}

PLATFORM_LABELS: Dict[str, str] = {
    "youtube": "YouTube",
    "tiktok": "TikTok",
    "instagram": "Instagram",
    "facebook": "Facebook",
    "linkedin": "LinkedIn",
}

CATEGORY_LABELS: Dict[str, str] = {
    "tutorial": "Tutorial",
    "produkt-demo": "Produkt-Demonstration",
    "storytelling": "Storytelling",
}

PLATFORM_GUIDANCE: Dict[str, str] = {
    "youtube": "längere Videos (5-15 Minuten), detaillierte Erklärungen, SEO-optimierte Titel",
    "tiktok": "kurze, dynamische Videos (15-60 Sekunden), Trends, Hashtags, schnelle Cuts",
    "instagram": "quadratische oder vertikale Videos (15-90 Sekunden), ästhetisch ansprechend, Stories/Reels",
    "facebook": "Videos für verschiedene Altersgruppen (1-3 Minuten), Engagement-fokussiert, teilbar",
    "linkedin": "professionelle Inhalte (1-5 Minuten), Business-orientiert, Educational Content",
}

DEFAULT_GUIDANCE = "Social Media Videos"


def allowed_categories(platform: str) -> List[str]:
    return PLATFORM_CATEGORIES.get(platform, [])
