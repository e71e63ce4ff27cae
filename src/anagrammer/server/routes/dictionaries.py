"""
Dictionary routes: /api/dictionaries
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from anagrammer.server.deps import get_dictionary_store, invalidate_anagrammer


router = APIRouter(prefix="/api/dictionaries", tags=["dictionaries"])


class CreateDictionaryRequest(BaseModel):
    name: str
    words: list[str]


@router.get("")
async def list_dictionaries(db: int = 0):
    """List all stored dictionaries."""
    store = get_dictionary_store(db)
    return {"dictionaries": [info.to_dict() for info in store.list_all()]}


@router.post("")
async def create_dictionary(req: CreateDictionaryRequest, db: int = 0):
    """Store a word list, replacing any dictionary with the same name."""
    store = get_dictionary_store(db)
    try:
        info = store.create(req.name, req.words)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    invalidate_anagrammer(req.name, db)
    return info.to_dict()


@router.get("/{name}")
async def get_dictionary(name: str, db: int = 0):
    """Get a dictionary with its words."""
    store = get_dictionary_store(db)
    info = store.get_info(name)
    if not info:
        raise HTTPException(status_code=404, detail="Dictionary not found")
    return {**info.to_dict(), "words": store.get_words(name) or []}


@router.delete("/{name}")
async def delete_dictionary(name: str, db: int = 0):
    """Delete a dictionary."""
    store = get_dictionary_store(db)
    if not store.delete(name):
        raise HTTPException(status_code=404, detail="Dictionary not found")
    invalidate_anagrammer(name, db)
    return {"deleted": name}
