"""Bundle offers"""

from typing import Optional

from ..models.bundle import BundleOffer

BUNDLES: dict[str, BundleOffer] = {
    "duo-set": BundleOffer(
        id="duo-set",
        name="Duo-Set",
        description="Zwei Düfte, 10% gespart.",
        discount_percent=10,
        quantity_required=2,
    ),
    "sparset-3": BundleOffer(
        id="sparset-3",
        name="3er Sparset",
        description="Drei Düfte nach Wahl mit 20% Rabatt.",
        discount_percent=20,
        quantity_required=3,
    ),
    "sparset-5": BundleOffer(
        id="sparset-5",
        name="5er Sparset",
        description="Fünf Düfte nach Wahl mit 25% Rabatt.",
        discount_percent=25,
        quantity_required=5,
    ),
    "winter-special": BundleOffer(
        id="winter-special",
        name="Winter Special",
        description="Saisonangebot, derzeit nicht verfügbar.",
        discount_percent=15,
        quantity_required=2,
        is_active=False,
    ),
}


class BundleDatabase:
    """In-memory bundle offer storage"""

    def __init__(self):
        self.bundles = BUNDLES.copy()

    def get_bundle(self, bundle_id: str) -> Optional[BundleOffer]:
        return self.bundles.get(bundle_id)

    def list_bundles(self, active_only: bool = True) -> list[BundleOffer]:
        bundles = list(self.bundles.values())
        if active_only:
            bundles = [b for b in bundles if b.is_active]
        return bundles


# Singleton instance
bundle_db = BundleDatabase()
