"""Catalog models for the perfume storefront"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class ProductCategory(str, Enum):
    WOMEN = "damen"
    MEN = "herren"
    UNISEX = "unisex"


class CatalogItem(BaseModel):
    """Perfume in the catalog"""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    brand: str
    name: str
    image: Optional[str] = None
    category: ProductCategory
    size: str
    description: Optional[str] = None


class Variant(BaseModel):
    """Purchasable SKU of a catalog item, priced in minor units (cents)"""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    parent_item_id: str
    number: str
    name: str
    price_minor_units: int = Field(ge=0)
    in_stock: bool = True


class CatalogEntry(BaseModel):
    """Catalog item together with its variants"""
    item: CatalogItem
    variants: list[Variant] = []

    @property
    def in_stock(self) -> bool:
        return any(v.in_stock for v in self.variants)


class ProductSearchResponse(BaseModel):
    """Response from catalog search"""
    products: list[CatalogEntry]
    total: int
    limit: int
    offset: int
