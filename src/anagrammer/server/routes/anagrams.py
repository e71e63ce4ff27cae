"""
Anagram routes: /api/anagrams
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from anagrammer.core.search import Anagrammer
from anagrammer.core.signature import sentence_signature, word_signature
from anagrammer.server.deps import get_anagrammer, resolve_dictionary_name


router = APIRouter(prefix="/api/anagrams", tags=["anagrams"])


class WordRequest(BaseModel):
    word: str
    dictionary: str | None = None


class SentenceRequest(BaseModel):
    sentence: list[str]
    dictionary: str | None = None


def _anagrammer_or_404(dictionary: str | None, db: int) -> Anagrammer:
    name = resolve_dictionary_name(dictionary, db)
    anagrammer = get_anagrammer(name, db)
    if anagrammer is None:
        raise HTTPException(status_code=404, detail=f"Dictionary not found: {name}")
    return anagrammer


@router.post("/word")
async def word_anagrams(req: WordRequest, db: int = 0):
    """Dictionary words made of exactly the letters of a word."""
    anagrammer = _anagrammer_or_404(req.dictionary, db)
    return {
        "word": req.word,
        "signature": word_signature(req.word),
        "anagrams": anagrammer.word_anagrams(req.word),
    }


@router.post("/sentence")
async def sentence_anagrams(req: SentenceRequest, db: int = 0):
    """All sentences of dictionary words using exactly the letters of a sentence."""
    anagrammer = _anagrammer_or_404(req.dictionary, db)
    anagrams = anagrammer.sentence_anagrams(req.sentence)
    return {
        "sentence": req.sentence,
        "signature": sentence_signature(req.sentence),
        "count": len(anagrams),
        "anagrams": anagrams,
    }
