from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the bulk restaurant import.
    """

    source_path: Path = Path("data/restaurants.csv")
    cuisine_separator: str = ","
    bootstrap: bool = True


DEFAULT_INGESTION_CONFIG = IngestionConfig()
