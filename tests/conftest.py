from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from cv_integrity.schema_loader import SchemaLoader

ROOT = Path(__file__).resolve().parents[1]
SCHEMA_FILE = ROOT / "cv_integrity" / "schema" / "cv.schema.json"
SAMPLE_CV = ROOT / "data" / "cv.json"

_sample = json.loads(SAMPLE_CV.read_text(encoding="utf-8"))


@pytest.fixture
def cv() -> dict:
    return copy.deepcopy(_sample)


@pytest.fixture
def loader() -> SchemaLoader:
    return SchemaLoader(SCHEMA_FILE)
