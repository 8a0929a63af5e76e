"""Registry of the JSON-backed collections and their response messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from api.repositories.json_storage import JsonDocumentStore, RecordCollection


@dataclass(frozen=True)
class CollectionSpec:
    name: str
    id_field: Optional[str]
    read_error: str
    save_error: str
    update_error: str = ""
    delete_error: str = ""
    not_found: str = ""
    deleted: str = ""
    overwritten: str = ""

    @property
    def has_records(self) -> bool:
        return self.id_field is not None


GOLD = CollectionSpec(
    name="gold",
    id_field="id",
    read_error="Failed to read gold data",
    save_error="Failed to save gold data",
    update_error="Failed to update record",
    delete_error="Failed to delete record",
    not_found="Record not found",
    deleted="Record deleted successfully",
)

ANIMAL = CollectionSpec(
    name="animal",
    id_field="id",
    read_error="Failed to read animal data",
    save_error="Failed to save animal data",
    update_error="Failed to update animal record",
    delete_error="Failed to delete animal record",
    not_found="Animal record not found",
    deleted="Animal record deleted successfully",
)

CROPS = CollectionSpec(
    name="crops",
    id_field="crop_code",
    read_error="Failed to read crop data",
    save_error="Failed to save crop data",
    update_error="Failed to update crop record",
    delete_error="Failed to delete crop record",
    not_found="Crop record not found",
    deleted="Crop record deleted successfully",
)

KCC_DATA = CollectionSpec(
    name="kccdata",
    id_field=None,
    read_error="Error reading data",
    save_error="Error saving data",
    overwritten="Data overwritten successfully.",
)

KCCAH_DATA = CollectionSpec(
    name="kccahdata",
    id_field=None,
    read_error="Error reading data",
    save_error="Error saving data",
    overwritten="Data overwritten successfully.",
)

RECORD_COLLECTIONS = (GOLD, ANIMAL, CROPS)
DOCUMENT_COLLECTIONS = (KCC_DATA, KCCAH_DATA)
ALL_COLLECTIONS = RECORD_COLLECTIONS + DOCUMENT_COLLECTIONS


def record_collection(store: JsonDocumentStore, spec: CollectionSpec) -> RecordCollection:
    if not spec.has_records:
        raise ValueError(f"{spec.name} has no per-record identity")
    return RecordCollection(store, spec.name, spec.id_field)


def initialize_collections(store: JsonDocumentStore) -> list[str]:
    """Create every collection file that does not exist yet as ``[]``."""
    return store.ensure_all(spec.name for spec in ALL_COLLECTIONS)
