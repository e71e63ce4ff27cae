"""
Shared dependencies for routes.
"""

import redis

from anagrammer.config import Settings
from anagrammer.core.search import Anagrammer
from anagrammer.core.state import get_active_dictionary
from anagrammer.core.store import DictionaryStore


# (db, name) → (created_at, Anagrammer); a newer created_at in Redis means a rebuild
_ANAGRAMMERS: dict[tuple[int, str], tuple[str, Anagrammer]] = {}


def get_redis(db: int = 0):
    settings = Settings.from_env()
    return redis.Redis(host=settings.redis_host, port=settings.redis_port, db=db)


def get_dictionary_store(db: int = 0) -> DictionaryStore:
    return DictionaryStore(get_redis(db))


def resolve_dictionary_name(name: str | None, db: int = 0) -> str:
    if name:
        return name
    return get_active_dictionary(get_redis(db))


def get_anagrammer(name: str, db: int = 0) -> Anagrammer | None:
    """Cached Anagrammer for a stored dictionary, None if it does not exist."""
    store = get_dictionary_store(db)
    info = store.get_info(name)
    if info is None:
        _ANAGRAMMERS.pop((db, name), None)
        return None

    key = (db, name)
    cached = _ANAGRAMMERS.get(key)
    if cached is not None and cached[0] == info.created_at:
        return cached[1]

    words = store.get_words(name)
    if words is None:
        return None
    anagrammer = Anagrammer(words)
    _ANAGRAMMERS[key] = (info.created_at, anagrammer)
    return anagrammer


def invalidate_anagrammer(name: str, db: int = 0) -> None:
    _ANAGRAMMERS.pop((db, name), None)
