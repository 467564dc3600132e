import logging
from pathlib import Path

import pytest

from core.models import CallContext
from core.reference_data import ReferenceData

FIXED_TS = "2025-01-01T00:00:00.000Z"
RESOURCE_DIR = Path(__file__).resolve().parent.parent / "resources"


@pytest.fixture
def reference():
    """Reference data loaded from the repository's resources/ directory."""
    return ReferenceData(RESOURCE_DIR)


@pytest.fixture
def fallback_reference(tmp_path):
    """Reference data pointed at an empty directory, so the built-in tables load."""
    return ReferenceData(tmp_path)


@pytest.fixture
def context(reference):
    """A call context with a pinned clock."""
    return CallContext(
        now=lambda: FIXED_TS,
        logger=logging.getLogger("logistics.tests"),
        reference=reference,
    )
