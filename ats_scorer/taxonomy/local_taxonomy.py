from __future__ import annotations

import json
import re
from pathlib import Path

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, synonyms_path: str | Path | None = None) -> None:
        path = Path(synonyms_path) if synonyms_path else Path(__file__).with_name("synonyms.json")
        self._synonyms = self._load_synonyms(path)
        self._canonicals = frozenset(self._synonyms.values())

    @staticmethod
    def _load_synonyms(path: Path) -> dict[str, str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid synonym table '{path}': expected a JSON object.")
        return {_clean(key): _clean(value) for key, value in raw.items()}

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        normalized = _clean(raw)
        canonical = self._synonyms.get(normalized)
        if canonical is None and normalized in self._canonicals:
            canonical = normalized
        return normalized, canonical

    @property
    def phrases(self) -> frozenset[str]:
        """Multi-word surface forms; the extractor treats them as single units."""
        return frozenset(key for key in self._synonyms if " " in key)


def _clean(value: object) -> str:
    return re.sub(r"\s+", " ", str(value).strip().lower())
