# app/schemas/library_schema.py

from typing import List
from pydantic import BaseModel


class ArticleOut(BaseModel):
    id: str
    title: str
    excerpt: str
    content: str
    category: str
    age_group: str
    read_time: str
    last_updated: str
    tags: List[str]


class AudioTrackOut(BaseModel):
    id: str
    title: str
    description: str
    duration: int
    category: str
    url: str
