from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

import pandas as pd
from pydantic import ValidationError

from .exceptions import CandidateStoreError
from .models import Candidate, Seller

logger = logging.getLogger(__name__)

ACTIVE_STATUS = "active"

_DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "processed" / "projects.csv"


def default_catalog_path() -> Path:
    return Path(os.getenv("PROJECT_CATALOG_PATH", str(_DEFAULT_CATALOG)))


class CandidateStore(Protocol):
    def fetch_active_candidates(self) -> list[Candidate]: ...


class InMemoryCandidateStore:
    """Candidate store over an in-process list of listings."""

    def __init__(self, candidates: list[Candidate]) -> None:
        self._candidates = list(candidates)

    def fetch_active_candidates(self) -> list[Candidate]:
        return [c for c in self._candidates if c.status == ACTIVE_STATUS]


def _split_technologies(value: str) -> list[str]:
    return [t.strip() for t in value.split(",") if t.strip()]


def _row_to_candidate(row: pd.Series) -> Candidate:
    seller = None
    if row.get("seller_id"):
        seller = Seller(
            id=row["seller_id"],
            name=row.get("seller_name") or "",
            email=row.get("seller_email") or "",
            role=row.get("seller_role") or "developer",
        )

    budget = row.get("budget")
    return Candidate(
        id=str(row["id"]),
        title=row.get("title") or "",
        description=row.get("description") or "",
        technologies=_split_technologies(row.get("technologies") or ""),
        budget=float(budget) if pd.notna(budget) else None,
        category=row.get("category") or "",
        requirements=row.get("requirements") or "",
        status=row.get("status") or ACTIVE_STATUS,
        seller=seller,
    )


class CsvCandidateStore:
    """
    Read-only candidate store backed by a CSV catalog.

    Expected columns: id, title, description, technologies (comma separated),
    budget, category, requirements, status, seller_id, seller_name,
    seller_email, seller_role. Rows without a status count as active; rows
    that fail validation are logged and skipped.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_catalog_path()

    def _load(self) -> pd.DataFrame:
        try:
            df = pd.read_csv(self.path, dtype=str, keep_default_na=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise CandidateStoreError(f"Cannot read project catalog {self.path}: {exc}") from exc

        if "id" not in df.columns:
            raise CandidateStoreError(f"Project catalog {self.path} has no 'id' column")

        df["budget"] = pd.to_numeric(df.get("budget", pd.Series(dtype=str)), errors="coerce")
        return df

    def fetch_active_candidates(self) -> list[Candidate]:
        df = self._load()
        if "status" in df.columns:
            status = df["status"].str.strip().str.lower()
            df = df.loc[(status == ACTIVE_STATUS) | (status == "")]
        candidates: list[Candidate] = []
        for _, row in df.iterrows():
            try:
                candidates.append(_row_to_candidate(row))
            except ValidationError:
                logger.warning("Skipping invalid catalog row %s in %s", row.get("id"), self.path, exc_info=True)
        return candidates
