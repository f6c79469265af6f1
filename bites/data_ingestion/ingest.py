from __future__ import annotations

import logging
from typing import List

import pandas as pd
import redis
from pydantic import ValidationError

from ..restaurants.models import RestaurantCreate
from ..restaurants.service import create_restaurant
from ..store.bootstrap import bootstrap_store
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: List[str] = ["name", "location", "cuisines"]


def load_rows(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> pd.DataFrame:
    df = pd.read_csv(config.source_path, dtype=str)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{config.source_path} is missing columns: {', '.join(missing)}")

    df = df[REQUIRED_COLUMNS].fillna("")
    df["cuisines_list"] = df["cuisines"].apply(
        lambda s: [c.strip() for c in s.split(config.cuisine_separator) if c.strip()]
    )
    return df


def run_ingestion(
    client: redis.Redis,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> dict[str, int]:
    """
    Import restaurants from the configured CSV.

    Steps:
    - Create the search index and Bloom filter if needed.
    - Validate every row against the create model.
    - Store valid rows; rows the Bloom filter has seen are skipped.
    """
    if config.bootstrap:
        bootstrap_store(client)

    df = load_rows(config)
    summary = {"created": 0, "skipped": 0, "invalid": 0}

    for position, row in df.iterrows():
        try:
            data = RestaurantCreate(
                name=row["name"],
                location=row["location"],
                cuisines=row["cuisines_list"],
            )
        except ValidationError:
            logger.warning("Row %s is invalid, skipping", position, exc_info=True)
            summary["invalid"] += 1
            continue

        if create_restaurant(client, data) is None:
            summary["skipped"] += 1
        else:
            summary["created"] += 1

    return summary


if __name__ == "__main__":
    from ..store.client import connect

    logging.basicConfig(level=logging.INFO)
    result = run_ingestion(connect())
    print(f"Ingestion complete: {result}")
