"""JSON-file-backed implementation of ProductRepository.

The file holds a JSON array of catalog records.  ``id``, ``name``,
``price`` and ``stockQuantity`` are read into the ``Product``; every
other key is kept untouched in ``Product.details``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository

_CORE_FIELDS = ("id", "name", "price", "stockQuantity")


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._currency = currency

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise ValidationError(f"Catalog {self._file_path} is not UTF-8 text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog {self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"Catalog {self._file_path} must hold a JSON array, got {type(raw).__name__}"
            )
        products = (self._to_product(item) for item in raw)
        return {p.id: p for p in products}

    def _to_product(self, item: Any) -> Product:
        if not isinstance(item, dict):
            raise ValidationError(
                f"Catalog record must be a JSON object, got {type(item).__name__}"
            )
        missing = [key for key in _CORE_FIELDS if key not in item]
        if missing:
            raise ValidationError(
                f"Catalog record {item.get('id', '?')!r} is missing {', '.join(missing)}"
            )
        return Product(
            id=str(item["id"]),
            name=item["name"],
            price=Money.of(item["price"], self._currency),
            stock_quantity=item["stockQuantity"],
            details={k: v for k, v in item.items() if k not in _CORE_FIELDS},
        )
