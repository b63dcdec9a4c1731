"""Perfume catalog"""

from typing import Optional

from ..cart.pricing import euros_to_minor_units
from ..models.catalog import CatalogEntry, CatalogItem, ProductCategory, Variant


def _variant(item_id: str, size: str, name: str, price: str, in_stock: bool = True) -> Variant:
    # Prices are written in euros here and converted once, exactly
    return Variant(
        id=f"{item_id}-{size}",
        parent_item_id=item_id,
        number=f"{item_id.upper()}-{size.upper()}",
        name=name,
        price_minor_units=euros_to_minor_units(price),
        in_stock=in_stock,
    )


CATALOG: dict[str, CatalogEntry] = {
    "ald-001": CatalogEntry(
        item=CatalogItem(
            id="ald-001",
            brand="Maison Luxe",
            name="Elégance Or",
            image="/static/images/perfume-1.jpg",
            category=ProductCategory.WOMEN,
            size="50ml",
            description="Bergamotte, weiße Blumen und sanfter Moschus.",
        ),
        variants=[
            _variant("ald-001", "50ml", "Elégance Or 50ml", "44.99"),
            _variant("ald-001", "15ml", "Elégance Or Reisegröße", "19.99"),
        ],
    ),
    "ald-002": CatalogEntry(
        item=CatalogItem(
            id="ald-002",
            brand="Parfum Royal",
            name="Rose Mystique",
            image="/static/images/perfume-2.jpg",
            category=ProductCategory.WOMEN,
            size="75ml",
            description="Rose mit einem Hauch von Vanille und Amber.",
        ),
        variants=[
            _variant("ald-002", "50ml", "Rose Mystique 50ml", "44.99"),
            _variant("ald-002", "30ml", "Rose Mystique 30ml", "29.99"),
        ],
    ),
    "ald-003": CatalogEntry(
        item=CatalogItem(
            id="ald-003",
            brand="Black Diamond",
            name="Noir Intense",
            image="/static/images/perfume-3.jpg",
            category=ProductCategory.MEN,
            size="100ml",
            description="Dunkle Holznoten, schwarzer Pfeffer und Leder.",
        ),
        variants=[
            _variant("ald-003", "100ml", "Noir Intense 100ml", "59.99"),
            _variant("ald-003", "30ml", "Noir Intense 30ml", "29.99", in_stock=False),
        ],
    ),
    "ald-004": CatalogEntry(
        item=CatalogItem(
            id="ald-004",
            brand="Pure Essence",
            name="Crystal Pure",
            image="/static/images/perfume-4.jpg",
            category=ProductCategory.UNISEX,
            size="60ml",
            description="Zitrusnoten und aquatische Akkorde.",
        ),
        variants=[
            _variant("ald-004", "60ml", "Crystal Pure 60ml", "39.99"),
            _variant("ald-004", "30ml", "Crystal Pure 30ml", "29.99"),
        ],
    ),
    "ald-005": CatalogEntry(
        item=CatalogItem(
            id="ald-005",
            brand="ALDENAIR",
            name="Ambre Nuit",
            image="/static/images/perfume-5.jpg",
            category=ProductCategory.UNISEX,
            size="50ml",
            description="Warmer Amber, Tonkabohne und Vanille.",
        ),
        variants=[
            _variant("ald-005", "50ml", "Ambre Nuit 50ml", "49.99", in_stock=False),
        ],
    ),
}


class CatalogDatabase:
    """In-memory catalog provider"""

    def __init__(self):
        self.entries = CATALOG.copy()

    def get_entry(self, item_id: str) -> Optional[CatalogEntry]:
        return self.entries.get(item_id)

    def get_item(self, item_id: str) -> Optional[CatalogItem]:
        entry = self.entries.get(item_id)
        return entry.item if entry else None

    def get_variant(self, item_id: str, variant_id: str) -> Optional[Variant]:
        """Get a variant, only if it belongs to the given item"""
        entry = self.entries.get(item_id)
        if not entry:
            return None
        return next((v for v in entry.variants if v.id == variant_id), None)

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[ProductCategory] = None,
        in_stock_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[CatalogEntry], int]:
        """
        Search the catalog with filters.

        Returns:
            Tuple of (matching entries, total count)
        """
        results = list(self.entries.values())

        if query:
            query_lower = query.lower()
            results = [
                e for e in results
                if query_lower in e.item.name.lower()
                or query_lower in e.item.brand.lower()
                or query_lower in (e.item.description or "").lower()
            ]

        if category:
            results = [e for e in results if e.item.category == category]

        if in_stock_only:
            results = [e for e in results if e.in_stock]

        total = len(results)
        return results[offset : offset + limit], total


# Singleton instance
catalog_db = CatalogDatabase()
