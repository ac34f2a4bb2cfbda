"""Lender catalog parsing and loading.

The catalog is provided from outside (a JSON export, a DB query, the
built-in seed list). One bad record must never sink the whole match, so
parsing is tolerant: invalid records are logged and left out.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.eligibility.products import PRODUCTS
from src.schemas.eligibility import LenderProduct

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """A catalog source could not be read at all."""


class InvalidProductError(ValueError):
    """A product definition is structurally broken (upstream catalog bug)."""

    def __init__(self, product_id: str, errors: list[str]) -> None:
        self.product_id = product_id
        self.errors = errors
        super().__init__(f"Invalid product {product_id!r}: " + "; ".join(errors))


def _normalize_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Accept lender-table rows, which split the speed range into two columns."""
    data = dict(record)
    if "speed_days_min" in data and "speed_days_max" in data:
        data.setdefault("speed_days", [data.pop("speed_days_min"), data.pop("speed_days_max")])
    return data


def iter_valid_products(records: Iterable[LenderProduct | Mapping[str, Any]] | None) -> Iterator[LenderProduct]:
    """Yield validated products, skipping anything that isn't one."""
    if records is None:
        return
    try:
        items = iter(records)
    except TypeError:
        logger.warning("Catalog is not iterable (%s), treating as empty", type(records).__name__)
        return

    for position, record in enumerate(items):
        if isinstance(record, LenderProduct):
            yield record
            continue
        if not isinstance(record, Mapping):
            logger.warning("Skipping catalog record #%d: unsupported type %s", position, type(record).__name__)
            continue
        try:
            yield LenderProduct.model_validate(_normalize_record(record))
        except ValidationError as exc:
            logger.warning(
                "Skipping catalog record #%d (id=%s): %d validation error(s)",
                position,
                record.get("id"),
                exc.error_count(),
            )


def parse_catalog(records: Iterable[LenderProduct | Mapping[str, Any]] | None) -> list[LenderProduct]:
    """Validate a raw catalog into products. Never raises on bad records."""
    return list(iter_valid_products(records))


def load_catalog(path: str | Path | None = None) -> list[LenderProduct]:
    """Load the catalog from a JSON file, or the built-in seed list when no path is given.

    The file holds either a list of product records or ``{"lenders": [...]}``.

    Raises:
        CatalogError: If the file can't be read or isn't valid JSON.
    """
    if path is None:
        return list(PRODUCTS)

    catalog_path = Path(path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Cannot load catalog from {catalog_path}: {exc}"
        raise CatalogError(msg) from exc

    if isinstance(raw, Mapping):
        raw = raw.get("lenders")
    if not isinstance(raw, list):
        msg = f"Catalog {catalog_path} must be a list of lenders or an object with a 'lenders' list"
        raise CatalogError(msg)

    products = parse_catalog(raw)
    logger.info("Loaded %d of %d catalog records from %s", len(products), len(raw), catalog_path)
    return products
