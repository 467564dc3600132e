# =============================================================================
# core/reference_data.py  —  Incoterm & HS-Code Reference Tables
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Loads the two lookup tables the validators check against:
#     - resources/incoterm.yaml  →  the set of accepted Incoterm codes
#     - resources/hs2022.csv     →  HS code → commodity description
#
# LOAD ONCE, READ FOREVER:
#   Each table is read the first time it's asked for and then kept for the
#   lifetime of the ReferenceData object.  There is no refresh; restart the
#   process to pick up edited files.  A lock makes the first load happen
#   exactly once even if two tool calls race for it.
#
# DEGRADE, DON'T DIE:
#   A missing or malformed file must not take the server down.  We log a
#   warning and fall back to a small built-in table, so the tools keep
#   answering (with a narrower vocabulary) instead of failing at startup.
# =============================================================================

import csv
from functools import lru_cache
import logging
from pathlib import Path
import threading
from typing import Optional

import yaml

from core.config import AppConfig

logger = logging.getLogger("logistics.reference")

INCOTERM_FILE = "incoterm.yaml"
HS_CODE_FILE = "hs2022.csv"

FALLBACK_INCOTERMS = frozenset(
    ["EXW", "FCA", "FAS", "FOB", "CFR", "CIF", "CPT", "CIP", "DAP", "DPU", "DDP"]
)
FALLBACK_HS_CODES = {
    "850490": "Parts for static converters",
    "850422": "Transformers exceeding 650 kVA but not exceeding 10,000 kVA",
    "853710": "Boards with voltage <= 1,000 V",
}


def load_incoterms(path: Path) -> frozenset[str]:
    """Read the `incoterms:` list of a YAML file as an uppercase set."""
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    items = data.get("incoterms") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise ValueError(f"{path.name}: 'incoterms' must be a list")
    return frozenset(str(item).strip().upper() for item in items)


def load_hs_codes(path: Path) -> dict[str, str]:
    """Read a header-plus-rows CSV of (code, description) pairs.

    Rows with an empty code or description are skipped.  Unquoted commas in
    the description are kept as part of the description.
    """
    with open(path, encoding="utf-8", newline="") as fh:
        rows = [row for row in csv.reader(fh) if any(cell.strip() for cell in row)]
    records: dict[str, str] = {}
    for row in rows[1:]:
        code = row[0].strip()
        description = ",".join(row[1:]).strip()
        if code and description:
            records[code] = description
    return records


class ReferenceData:
    """Lazily loaded, cached Incoterm set and HS-code map."""

    def __init__(self, resource_dir: Optional[Path] = None):
        self.resource_dir = Path(resource_dir) if resource_dir is not None else AppConfig.RESOURCE_DIR
        self._lock = threading.Lock()
        self._incoterms: Optional[frozenset[str]] = None
        self._hs_codes: Optional[dict[str, str]] = None

    @property
    def incoterms(self) -> frozenset[str]:
        if self._incoterms is None:
            with self._lock:
                if self._incoterms is None:
                    self._incoterms = self._load_incoterms()
        return self._incoterms

    @property
    def hs_codes(self) -> dict[str, str]:
        if self._hs_codes is None:
            with self._lock:
                if self._hs_codes is None:
                    self._hs_codes = self._load_hs_codes()
        return self._hs_codes

    def _load_incoterms(self) -> frozenset[str]:
        try:
            incoterms = load_incoterms(self.resource_dir / INCOTERM_FILE)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning(f"incoterm load failed: {exc}")
            return FALLBACK_INCOTERMS
        logger.info(f"Loaded {len(incoterms)} incoterms from {self.resource_dir}")
        return incoterms

    def _load_hs_codes(self) -> dict[str, str]:
        try:
            hs_codes = load_hs_codes(self.resource_dir / HS_CODE_FILE)
        except (OSError, ValueError, csv.Error) as exc:
            logger.warning(f"hs code load failed: {exc}")
            return dict(FALLBACK_HS_CODES)
        logger.info(f"Loaded {len(hs_codes)} HS codes from {self.resource_dir}")
        return hs_codes


@lru_cache(maxsize=None)
def get_reference_data() -> ReferenceData:
    """The process-wide ReferenceData instance."""
    return ReferenceData()
