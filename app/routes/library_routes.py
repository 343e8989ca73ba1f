from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from app.schemas.library_schema import ArticleOut, AudioTrackOut
from app.utils.library_catalog import (
    AGE_GROUPS,
    ARTICLE_CATEGORIES,
    audio_categories,
    filter_articles,
    filter_audio,
    find_article,
    find_audio_track,
)

router = APIRouter(prefix="/library", tags=["library"])


@router.get("/articles", response_model=List[ArticleOut])
def list_articles(
    category: Optional[str] = Query(None),
    age_group: Optional[str] = Query(None),
):
    """Curated articles matching both filters; an empty match is an empty list."""
    return filter_articles(category=category, age_group=age_group)


@router.get("/articles/filters")
def get_article_filters():
    return {"categories": ARTICLE_CATEGORIES, "age_groups": AGE_GROUPS}


@router.get("/articles/{article_id}", response_model=ArticleOut)
def get_article(article_id: str):
    article = find_article(article_id)
    if not article:
        raise HTTPException(status_code=404, detail="Article not found.")
    return article


@router.get("/audio", response_model=List[AudioTrackOut])
def list_audio_tracks(
    category: Optional[str] = Query(None),
    q: Optional[str] = Query(None, description="Matches title or category"),
):
    return filter_audio(category=category, query=q)


@router.get("/audio/categories", response_model=List[str])
def list_audio_categories():
    return audio_categories()


@router.get("/audio/{track_id}", response_model=AudioTrackOut)
def get_audio_track(track_id: str):
    track = find_audio_track(track_id)
    if not track:
        raise HTTPException(status_code=404, detail="Audio track not found.")
    return track
