"""
State routes: /api/state
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from anagrammer.core.state import get_active_dictionary, set_active_dictionary
from anagrammer.server.deps import get_dictionary_store, get_redis


router = APIRouter(prefix="/api/state", tags=["state"])


class ActiveDictionaryRequest(BaseModel):
    name: str


@router.get("/dictionary")
async def get_active(db: int = 0):
    """Name of the dictionary used when a query names none."""
    return {"dictionary": get_active_dictionary(get_redis(db)), "db": db}


@router.put("/dictionary")
async def set_active(req: ActiveDictionaryRequest, db: int = 0):
    """Switch the active dictionary; it must already be stored."""
    if get_dictionary_store(db).get_info(req.name) is None:
        raise HTTPException(status_code=404, detail=f"Dictionary not found: {req.name}")
    try:
        previous = set_active_dictionary(get_redis(db), req.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"dictionary": req.name, "previous": previous, "db": db}
