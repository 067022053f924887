from fastapi import APIRouter, Depends, HTTPException
from ..schemas import Receipt, ProcessResponse, PointsResponse
from ..services.scoring import score_receipt
from ..identifiers import new_receipt_id
from ..repository import ScoreStore, get_store
from ..utils.logging import logger


router = APIRouter(prefix="/receipts", tags=["receipts"])

@router.post("/process", response_model=ProcessResponse)
def process_receipt(payload: Receipt, store: ScoreStore = Depends(get_store)):
    result = score_receipt(payload)
    receipt_id = new_receipt_id()
    store.put(receipt_id, result["points"])
    logger.info("Receipt %s from %r scored %s (%s)",
                receipt_id, payload.retailer, result["points"], ",".join(result["reasons"]) or "no rules")
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    points = store.get(receipt_id)
    if points is None:
        logger.warning("Points requested for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt ID not found")
    logger.info("Points lookup for receipt %s: %s", receipt_id, points)
    return PointsResponse(points=points)
