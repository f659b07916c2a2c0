"""Shared sample documents.

All fixtures return fresh objects, so tests may mutate them freely.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def person_document() -> dict[str, Any]:
    """The end-to-end example: scalars, a string list, an object, an object list."""
    return {
        "name": "Ann",
        "age": 30,
        "tags": ["x", "y"],
        "address": {"city": "NY"},
        "items": [{"id": 1}],
    }


@pytest.fixture
def order_document() -> dict[str, Any]:
    """A deeper document exercising every scalar kind and nested lists."""
    return {
        "orderId": 9_000_000_000,
        "paid": True,
        "total": 12.5,
        "note": None,
        "customer": {
            "name": "Bo",
            "contact": {"email": "bo@example.com", "phones": ["555-0100"]},
        },
        "lines": [
            {"sku": "A-1", "qty": 2, "options": [{"code": "gift"}]},
            {"sku": "B-2", "qty": 1},
        ],
        "matrix": [[1, 2], [3, 4]],
        "history": [],
    }


@pytest.fixture
def person_file(tmp_path: Path, person_document: dict[str, Any]) -> Path:
    """``person_document`` written to a temporary JSON file."""
    path = tmp_path / "person.json"
    path.write_text(json.dumps(person_document), encoding="utf-8")
    return path
