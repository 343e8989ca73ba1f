# app/utils/library_catalog.py

from typing import Any, Dict, List, Optional

ALL = "all"

ARTICLE_CATEGORIES = ["Sleep Development", "Sleep Training", "Sleep Environment"]
AGE_GROUPS = ["0-3 months", "3-6 months", "4-12 months", "6-24 months", "12+ months", "All ages"]

ARTICLES: List[Dict[str, Any]] = [
    {
        "id": "newborn-sleep-patterns",
        "title": "Understanding Newborn Sleep Patterns",
        "excerpt": "Learn about normal sleep cycles and what to expect in the first few months.",
        "content": (
            "Newborns typically sleep 14-17 hours per day, but in short 2-4 hour stretches. "
            "Their sleep cycles are different from adults, with more REM sleep for brain development."
        ),
        "category": "Sleep Development",
        "age_group": "0-3 months",
        "read_time": "5 min read",
        "last_updated": "2024-01-15",
        "tags": ["newborn", "sleep cycles", "development"],
    },
    {
        "id": "sleep-regression-4months",
        "title": "The 4-Month Sleep Regression",
        "excerpt": "Why your baby's sleep suddenly changes and how to navigate this challenging phase.",
        "content": (
            "Around 4 months, babies' sleep patterns mature, leading to more frequent night wakings. "
            "This is actually a positive developmental milestone."
        ),
        "category": "Sleep Development",
        "age_group": "3-6 months",
        "read_time": "7 min read",
        "last_updated": "2024-01-20",
        "tags": ["sleep regression", "development", "4 months"],
    },
    {
        "id": "gentle-sleep-training",
        "title": "Gentle Sleep Training Methods",
        "excerpt": "Evidence-based approaches to help your baby learn independent sleep skills.",
        "content": (
            "Step-by-step guide to gentle sleep training methods including the pick-up-put-down "
            "method, gradual retreat, and check-and-console approaches."
        ),
        "category": "Sleep Training",
        "age_group": "4-12 months",
        "read_time": "10 min read",
        "last_updated": "2024-01-10",
        "tags": ["sleep training", "gentle methods", "independent sleep"],
    },
    {
        "id": "optimal-sleep-environment",
        "title": "Creating the Perfect Sleep Environment",
        "excerpt": "Science-backed tips for designing a nursery that promotes better sleep.",
        "content": (
            "Learn about optimal room temperature (68-70°F), lighting conditions, noise levels, "
            "and safe sleep practices for better rest."
        ),
        "category": "Sleep Environment",
        "age_group": "All ages",
        "read_time": "6 min read",
        "last_updated": "2024-01-25",
        "tags": ["nursery", "environment", "safe sleep"],
    },
]

AUDIO_TRACKS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Brahms Lullaby - Classical",
        "description": "Traditional German lullaby with gentle piano",
        "duration": 180,
        "category": "Classical Lullaby",
        "url": "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav",
    },
    {
        "id": "2",
        "title": "Twinkle Twinkle Little Star",
        "description": "Beloved nursery rhyme in soft instrumental",
        "duration": 120,
        "category": "Nursery Rhyme",
        "url": "https://www2.cs.uic.edu/~i101/SoundFiles/BabyElephantWalk60.wav",
    },
    {
        "id": "3",
        "title": "Gentle Forest Sounds",
        "description": "Birds chirping softly with nature ambiance",
        "duration": 300,
        "category": "Nature Sounds",
        "url": "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav",
    },
    {
        "id": "4",
        "title": "Rock-a-bye Baby",
        "description": "Classic English lullaby with music box melody",
        "duration": 150,
        "category": "Traditional Lullaby",
        "url": "https://www2.cs.uic.edu/~i101/SoundFiles/BabyElephantWalk60.wav",
    },
    {
        "id": "5",
        "title": "Soft Harp Melodies",
        "description": "Peaceful harp compositions for deep sleep",
        "duration": 240,
        "category": "Instrumental",
        "url": "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav",
    },
    {
        "id": "6",
        "title": "Ocean Waves with Seagulls",
        "description": "Calming beach sounds with distant seagulls",
        "duration": 350,
        "category": "Nature Sounds",
        "url": "https://www2.cs.uic.edu/~i101/SoundFiles/BabyElephantWalk60.wav",
    },
    {
        "id": "7",
        "title": "Mary Had a Little Lamb",
        "description": "Gentle instrumental version of the classic",
        "duration": 100,
        "category": "Nursery Rhyme",
        "url": "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav",
    },
    {
        "id": "8",
        "title": "Soft Rain on Leaves",
        "description": "Gentle rainfall with rustling leaves",
        "duration": 400,
        "category": "Rain Sounds",
        "url": "https://www2.cs.uic.edu/~i101/SoundFiles/BabyElephantWalk60.wav",
    },
    {
        "id": "9",
        "title": "Silent Night - Music Box",
        "description": "Christmas lullaby in delicate music box style",
        "duration": 200,
        "category": "Holiday Lullaby",
        "url": "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav",
    },
    {
        "id": "10",
        "title": "Gentle Celtic Melodies",
        "description": "Soft Celtic harp and flute combinations",
        "duration": 280,
        "category": "Celtic",
        "url": "https://www2.cs.uic.edu/~i101/SoundFiles/BabyElephantWalk60.wav",
    },
]


def _matches(value: str, wanted: Optional[str]) -> bool:
    return not wanted or wanted == ALL or value == wanted


def filter_articles(category: Optional[str] = None, age_group: Optional[str] = None) -> List[Dict[str, Any]]:
    """Intersection of both filters; 'all' or None disables a filter."""
    return [
        article for article in ARTICLES
        if _matches(article["category"], category) and _matches(article["age_group"], age_group)
    ]


def find_article(article_id: str) -> Optional[Dict[str, Any]]:
    return next((a for a in ARTICLES if a["id"] == article_id), None)


def audio_categories() -> List[str]:
    return sorted({track["category"] for track in AUDIO_TRACKS})


def filter_audio(category: Optional[str] = None, query: Optional[str] = None) -> List[Dict[str, Any]]:
    tracks = [t for t in AUDIO_TRACKS if _matches(t["category"], category)]
    if query and query.strip():
        needle = query.strip().lower()
        tracks = [t for t in tracks if needle in t["title"].lower() or needle in t["category"].lower()]
    return tracks


def find_audio_track(track_id: str) -> Optional[Dict[str, Any]]:
    return next((t for t in AUDIO_TRACKS if t["id"] == track_id), None)
