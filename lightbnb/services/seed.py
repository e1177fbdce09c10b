"""
Seeding from the bundled LightBnB dataset.

The dataset is four JSON files keyed by row id: users.json,
properties.json, reservations.json and property_reviews.json. Rows are
inserted without their dataset ids so the store's sequences stay in step,
and foreign keys are remapped to the ids the store hands out.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from lightbnb.database import Store
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.review import PropertyReviewRepository
from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertyCreate
from lightbnb.schemas.reservation import ReservationCreate
from lightbnb.schemas.review import PropertyReviewCreate
import json
import logging

logger = logging.getLogger(__name__)

DATASET_FILES = ("users", "properties", "reservations", "property_reviews")


def load_dataset(data_dir: Path) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """
    Read every dataset file in `data_dir`.

    Raises:
        FileNotFoundError: If a dataset file is missing
        ValueError: If a file is not a JSON object keyed by id
    """
    dataset = {}
    for name in DATASET_FILES:
        path = Path(data_dir) / f"{name}.json"
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, dict):
            raise ValueError(f"{path} must contain an object keyed by id")
        dataset[name] = rows
        logger.debug(f"Loaded {len(rows)} rows from {path}")
    return dataset


def _id_map(keys: List[str], rows: List[Any]) -> Dict[int, int]:
    return {int(key): row.id for key, row in zip(keys, rows)}


def _remap(row: Dict[str, Any], field: str, id_map: Dict[int, int]) -> Dict[str, Any]:
    dataset_id = row.get(field)
    if dataset_id is None:
        return row
    try:
        return {**row, field: id_map[int(dataset_id)]}
    except KeyError:
        raise ValueError(f"{field}={dataset_id} does not reference a seeded row")


async def seed_store(store: Store, data_dir: Optional[Path] = None) -> Dict[str, int]:
    """
    Insert the bundled dataset into the store.

    Each table is inserted in one transaction, parents before children, so
    the ids handed out for one table can be mapped into the next.

    Args:
        store: Store to seed; its tables must already exist
        data_dir: Directory holding the dataset files (defaults to lightbnb/data)

    Returns:
        Number of rows inserted per table
    """
    data_dir = data_dir or Path(__file__).resolve().parent.parent / "data"
    dataset = load_dataset(data_dir)

    async with store.session() as session:
        user_keys = list(dataset["users"])
        users = await UserRepository(session).bulk_create([
            UserCreate.model_validate(dataset["users"][key]).model_dump()
            for key in user_keys
        ])
        user_ids = _id_map(user_keys, users)

        property_keys = list(dataset["properties"])
        properties = await PropertyRepository(session).bulk_create([
            PropertyCreate.model_validate(
                _remap(dataset["properties"][key], "owner_id", user_ids)
            ).model_dump()
            for key in property_keys
        ])
        property_ids = _id_map(property_keys, properties)

        reservation_keys = list(dataset["reservations"])
        reservations = await ReservationRepository(session).bulk_create([
            ReservationCreate.model_validate(
                _remap(_remap(dataset["reservations"][key], "guest_id", user_ids), "property_id", property_ids)
            ).model_dump()
            for key in reservation_keys
        ])
        reservation_ids = _id_map(reservation_keys, reservations)

        review_rows = []
        for row in dataset["property_reviews"].values():
            row = _remap(_remap(row, "guest_id", user_ids), "property_id", property_ids)
            row = _remap(row, "reservation_id", reservation_ids)
            review_rows.append(PropertyReviewCreate.model_validate(row).model_dump())
        reviews = await PropertyReviewRepository(session).bulk_create(review_rows)

    counts = {
        "users": len(users),
        "properties": len(properties),
        "reservations": len(reservations),
        "property_reviews": len(reviews),
    }
    logger.info(f"Seeded store: {counts}")
    return counts
