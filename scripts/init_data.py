#!/usr/bin/env python3
"""
Prepare a deployment: create the empty collection files and, optionally,
the user_details table.

Usage:
  python scripts/init_data.py [--data-dir ./data] [--create-tables]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from api.core.config import get_settings
from api.repositories.json_storage import JsonDocumentStore
from api.services.collections import ALL_COLLECTIONS, initialize_collections


def main() -> None:
    ap = argparse.ArgumentParser(description="Initialize data files for the records API")
    ap.add_argument("--data-dir", help="Directory for the JSON files (default: DATA_DIR / settings)")
    ap.add_argument("--create-tables", action="store_true", help="Also create the user_details table (needs DATABASE_URL)")
    args = ap.parse_args()

    data_dir = Path(args.data_dir) if args.data_dir else get_settings().data_dir
    store = JsonDocumentStore(data_dir)
    created = initialize_collections(store)
    for spec in ALL_COLLECTIONS:
        state = "created" if spec.name in created else "exists"
        print(f"  {store.path(spec.name)}: {state}")

    if args.create_tables:
        from api.db.create_tables import create_all

        created_tables = create_all()
        print(f"OK: tables created: {', '.join(created_tables) or 'none (already present)'}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
