"""
Signature routes: /api/signatures
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from anagrammer.core.signature import subtract, validate_signature, word_signature


router = APIRouter(prefix="/api/signatures", tags=["signatures"])


class SignatureRequest(BaseModel):
    text: str


class SubtractRequest(BaseModel):
    minuend: list[tuple[str, int]]
    subtrahend: list[tuple[str, int]]


@router.post("")
async def compute_signature(req: SignatureRequest):
    return {"text": req.text, "signature": word_signature(req.text)}


@router.post("/subtract")
async def subtract_signatures(req: SubtractRequest):
    # InvalidSubtraction is a ValueError too
    try:
        x = validate_signature(req.minuend)
        y = validate_signature(req.subtrahend)
        result = subtract(x, y)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"signature": result}
