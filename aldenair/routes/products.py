"""Catalog API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..models.catalog import CatalogEntry, ProductCategory, ProductSearchResponse
from ..database.catalog import catalog_db

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    query: Optional[str] = Query(None, description="Search query"),
    category: Optional[ProductCategory] = Query(None, description="Filter by category"),
    in_stock_only: bool = Query(False, description="Only show items with a variant in stock"),
    limit: int = Query(20, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
):
    """Search the perfume catalog"""
    products, total = catalog_db.search(
        query=query,
        category=category,
        in_stock_only=in_stock_only,
        limit=limit,
        offset=offset,
    )

    return ProductSearchResponse(
        products=products,
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return [c.value for c in ProductCategory]


@router.get("/{item_id}", response_model=CatalogEntry)
async def get_product(item_id: str):
    """Get a catalog item with its variants"""
    entry = catalog_db.get_entry(item_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Product not found")
    return entry
