"""Tests for catalog parsing, loading and product validation."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from src.eligibility import PRODUCTS, CatalogError, load_catalog, parse_catalog
from src.eligibility.products import PRODUCT_TYPE_EXPLAINERS
from src.models.enums import ProductType
from src.schemas.eligibility import LenderProduct

RECORD = {
    "id": "acme-term",
    "provider": "Acme Finance",
    "productType": "Term Loan",
    "amountMin": 20_000,
    "amountMax": 500_000,
    "minYears": 1,
    "minMonthlyTurnover": 40_000,
    "speedDays": [2, 4],
    "provincesAllowed": ["Gauteng"],
}


class TestSeedCatalog:
    def test_ten_lenders(self):
        assert len(PRODUCTS) == 10
        assert len({p.id for p in PRODUCTS}) == 10

    def test_default_load(self):
        assert load_catalog() == list(PRODUCTS)

    def test_every_product_type_explained(self):
        for product in PRODUCTS:
            assert product.product_type in PRODUCT_TYPE_EXPLAINERS


class TestLenderProduct:
    def test_camel_case_input(self):
        product = LenderProduct.model_validate(RECORD)
        assert product.provinces_allowed == ("Gauteng",)
        assert product.speed_days == (2, 4)
        assert product.vat_required is False
        assert product.collateral_required is None

    def test_reversed_amounts_rejected(self):
        with pytest.raises(ValidationError):
            LenderProduct.model_validate({**RECORD, "amountMin": 600_000})

    def test_reversed_speed_rejected(self):
        with pytest.raises(ValidationError):
            LenderProduct.model_validate({**RECORD, "speedDays": [5, 2]})

    def test_zero_minimum_rejected(self):
        with pytest.raises(ValidationError):
            LenderProduct.model_validate({**RECORD, "amountMin": 0})

    def test_unknown_product_type_rejected(self):
        with pytest.raises(ValidationError):
            LenderProduct.model_validate({**RECORD, "productType": "Crowdfunding"})

    def test_frozen(self):
        product = LenderProduct.model_validate(RECORD)
        with pytest.raises(ValidationError):
            product.amount_min = 1


class TestParseCatalog:
    def test_skips_bad_records(self):
        products = parse_catalog([RECORD, {"id": "nope"}, None, 7])
        assert [p.id for p in products] == ["acme-term"]

    def test_keeps_product_instances(self):
        assert parse_catalog(PRODUCTS[:2]) == list(PRODUCTS[:2])

    def test_lender_table_row(self):
        row = {
            "id": "row-lender",
            "provider": "Row Lender",
            "product_type": "Asset Finance",
            "amount_min": 100_000,
            "amount_max": 900_000,
            "min_years": 2,
            "min_monthly_turnover": 80_000,
            "speed_days_min": 7,
            "speed_days_max": 10,
            "collateral_required": True,
        }
        (product,) = parse_catalog([row])
        assert product.product_type is ProductType.ASSET_FINANCE
        assert product.speed_days == (7, 10)

    def test_none(self):
        assert parse_catalog(None) == []


class TestLoadCatalog:
    def test_list_file(self, tmp_path):
        path = tmp_path / "lenders.json"
        path.write_text(json.dumps([RECORD]), encoding="utf-8")
        assert [p.id for p in load_catalog(path)] == ["acme-term"]

    def test_wrapped_file(self, tmp_path):
        path = tmp_path / "lenders.json"
        path.write_text(json.dumps({"lenders": [RECORD, {"id": "broken"}]}), encoding="utf-8")
        assert [p.id for p in load_catalog(str(path))] == ["acme-term"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "lenders.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "lenders.json"
        path.write_text(json.dumps({"products": [RECORD]}), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)
