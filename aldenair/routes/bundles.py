"""Bundle offer API routes"""

from fastapi import APIRouter, HTTPException

from ..models.bundle import BundleOffer
from ..database.bundles import bundle_db

router = APIRouter(prefix="/api/bundles", tags=["Bundles"])


@router.get("", response_model=list[BundleOffer])
async def list_bundles():
    """List active bundle offers"""
    return bundle_db.list_bundles()


@router.get("/{bundle_id}", response_model=BundleOffer)
async def get_bundle(bundle_id: str):
    bundle = bundle_db.get_bundle(bundle_id)
    if not bundle or not bundle.is_active:
        raise HTTPException(status_code=404, detail="Bundle not found")
    return bundle
