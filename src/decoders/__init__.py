"""Deterministic data decoders: province lookups."""

from src.decoders.province import normalize_province, province_key

__all__ = ["normalize_province", "province_key"]
