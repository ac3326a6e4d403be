#!/usr/bin/env python3
"""Import overrides from the legacy single-table layout.

The old plugin kept everything in one SQLite table:
  UserSpecificFunctions(UserID, Prefix, Suffix, Color, Permissions)
with permissions joined by commas. Each row is PUT to the admin API.

Usage:
    export API_URL=http://localhost:8000 API_TOKEN=...
    python scripts/import_legacy.py path/to/tshock.sqlite [--dry-run]
"""
from __future__ import annotations

import argparse
import os
import sqlite3
import sys

import httpx

from useroverrides.domain.entities import PermissionSet
from useroverrides.domain.exceptions import InvalidArgument


def read_rows(path: str) -> tuple[list[dict], list[str]]:
    """Rows ready to PUT, and a message for every row that could not be read."""
    with sqlite3.connect(path) as conn:
        cur = conn.execute(
            "SELECT UserID, Prefix, Suffix, Color, Permissions FROM UserSpecificFunctions"
        )
        rows = cur.fetchall()

    parsed = []
    rejected = []
    for r in rows:
        try:
            permissions = [str(p) for p in PermissionSet.deserialize(r[4])]
        except InvalidArgument as e:
            rejected.append(f"User {r[0]}: {e} in {r[4]!r}")
            continue
        parsed.append(
            {
                "user_id": r[0],
                "prefix": r[1] or None,
                "suffix": r[2] or None,
                "color": r[3] or None,
                "permissions": permissions,
            }
        )
    return parsed, rejected


def main() -> int:
    parser = argparse.ArgumentParser(description="Import legacy overrides")
    parser.add_argument("database", help="Path to the legacy SQLite database")
    parser.add_argument("--dry-run", action="store_true", help="Print rows without uploading")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    token = os.environ.get("API_TOKEN", "")
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    rows, rejected = read_rows(args.database)
    print(f"Found {len(rows) + len(rejected)} legacy rows")
    for message in rejected:
        print(message, file=sys.stderr)
    if args.dry_run:
        for row in rows:
            print(row)
        return 1 if rejected else 0

    imported = 0
    errors = len(rejected)
    with httpx.Client(timeout=30.0) as client:
        for row in rows:
            user_id = row.pop("user_id")
            r = client.put(f"{api_url}/v1/overrides/{user_id}", json=row, headers=headers)
            if r.status_code in (200, 204):
                imported += 1
            else:
                errors += 1
                print(f"User {user_id}: {r.status_code} {r.text}", file=sys.stderr)

    print(f"Imported {imported} rows, {errors} errors")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
