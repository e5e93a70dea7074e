"""
Error records produced by the schema validator and the consistency checker.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# Schema validator codes
TYPE = "type"
REQUIRED = "required"
MIN_ITEMS = "minItems"

# Consistency codes
SECTION_ORDER_MISMATCH = "section_order_mismatch"
MISSING_LANGUAGE = "missing_language"
NAVIGATION_MISMATCH = "navigation_mismatch"
MISSING_SECTION = "missing_section"
DUPLICATE_IDS = "duplicate_ids"
ICON_INVALID = "icon_invalid"


@dataclass(frozen=True)
class SchemaError:
    path: str
    code: str
    expected: Optional[str] = None
    actual: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ConsistencyError:
    path: str
    code: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class ValidationResult:
    errors: List[SchemaError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": [e.to_dict() for e in self.errors]}


@dataclass
class ConsistencyResult:
    critical: List[ConsistencyError] = field(default_factory=list)
    warnings: List[ConsistencyError] = field(default_factory=list)

    @property
    def may_persist(self) -> bool:
        """Warnings never block persistence; criticals do."""
        return not self.critical

    def to_dict(self) -> Dict[str, Any]:
        return {
            "critical": [e.to_dict() for e in self.critical],
            "warnings": [e.to_dict() for e in self.warnings],
        }
