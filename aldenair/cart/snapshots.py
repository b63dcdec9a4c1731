"""
Best-effort cart snapshots.

Each cart is written to <directory>/<cart_id>.json after every change so
abandoned carts can be followed up. Snapshots are never read back; a
failed write is logged and ignored.

When an executor is given, file I/O runs on it instead of in the caller.
Use a single worker so writes and removals for a cart stay in order.
"""

import logging
from concurrent.futures import Executor
from pathlib import Path
from typing import Optional

from ..models.cart import Cart

logger = logging.getLogger(__name__)


class CartSnapshotWriter:
    """Writes cart snapshots to a directory"""

    def __init__(self, directory: str, executor: Optional[Executor] = None):
        self.directory = Path(directory)
        self.executor = executor

    def path_for(self, cart_id: str) -> Path:
        return self.directory / f"{cart_id}.json"

    def write(self, cart: Cart) -> None:
        try:
            payload = cart.model_dump_json(indent=2)
        except ValueError as e:
            logger.warning(f"Could not serialize snapshot for cart {cart.cart_id}: {e}")
            return
        self._submit(self._write_file, cart.cart_id, payload)

    def discard(self, cart_id: str) -> None:
        self._submit(self._remove_file, cart_id)

    def _submit(self, fn, *args) -> None:
        if self.executor is None:
            fn(*args)
        else:
            self.executor.submit(fn, *args)

    def _write_file(self, cart_id: str, payload: str) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self.path_for(cart_id).write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write snapshot for cart {cart_id}: {e}")

    def _remove_file(self, cart_id: str) -> None:
        try:
            self.path_for(cart_id).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove snapshot for cart {cart_id}: {e}")
