"""
Runs the whole gate on a CV document: schema first, then consistency,
then messages in the document's language.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .config import get_message_language
from .cv_consistency import validate_consistency
from .error_messages import format_error_messages
from .icon_set import is_icon_id
from .records import TYPE, ConsistencyResult, ValidationResult
from .schema_loader import SchemaLoader
from .schema_validate import validate_cv_schema

logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    lang: str
    schema: ValidationResult
    consistency: ConsistencyResult = field(default_factory=ConsistencyResult)
    critical_messages: List[str] = field(default_factory=list)
    warning_messages: List[str] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return bool(self.schema.errors or self.consistency.critical)

    @property
    def may_persist(self) -> bool:
        return not self.blocked

    @property
    def headline(self) -> Optional[str]:
        """The first message to surface when the document is rejected."""
        return self.critical_messages[0] if self.critical_messages else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lang": self.lang,
            "blocked": self.blocked,
            "schema": self.schema.to_dict(),
            "consistency": self.consistency.to_dict(),
            "critical_messages": self.critical_messages,
            "warning_messages": self.warning_messages,
        }


def load_document(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _is_roughly_shaped(schema: ValidationResult) -> bool:
    return not any(e.path == "$" and e.code == TYPE for e in schema.errors)


async def run_checks(
    document: Any,
    lang: str | None = None,
    loader: SchemaLoader | None = None,
    is_icon: Callable[[Any], bool] = is_icon_id,
) -> CheckReport:
    """Validate a document and collect its messages in one report."""
    lang = get_message_language(document, lang)
    schema = await validate_cv_schema(document, loader)
    report = CheckReport(lang=lang, schema=schema)

    if _is_roughly_shaped(schema):
        report.consistency = validate_consistency(document, is_icon)
    else:
        logger.debug("Document root is not an object; consistency checks skipped")

    report.critical_messages = (
        format_error_messages(schema.errors, lang)
        + format_error_messages(report.consistency.critical, lang)
    )
    report.warning_messages = format_error_messages(report.consistency.warnings, lang)
    logger.debug(
        "Checked document: %d schema errors, %d critical, %d warnings",
        len(schema.errors), len(report.consistency.critical), len(report.consistency.warnings),
    )
    return report
