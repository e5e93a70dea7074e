"""
Cross-locale consistency checks that the structural schema cannot express.

• meta.section_order must list exactly the ids declared in meta.sections
• every available language needs a locale, a matching navigation map and
  one content record per section
• card ids must be unique within a collection (they key the rendered cards)
• card icons should exist in the icon set (warning only: unknown icons
  fall back to a default glyph)
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List

from .icon_set import is_icon_id
from .records import (
    DUPLICATE_IDS,
    ICON_INVALID,
    MISSING_LANGUAGE,
    MISSING_SECTION,
    NAVIGATION_MISMATCH,
    SECTION_ORDER_MISMATCH,
    ConsistencyError,
    ConsistencyResult,
)

# (section, key) of every list of cards
CARD_COLLECTIONS = (
    ("development", "skills"),
    ("foundation", "experience"),
    ("mindset", "blocks"),
)


def _as_dict(value: Any) -> Dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List:
    return value if isinstance(value, list) else []


def section_ids(cv: Any) -> List[str]:
    sections = _as_list(_as_dict(_as_dict(cv).get("meta")).get("sections"))
    return [s["id"] for s in sections if isinstance(s, dict) and s.get("id") and isinstance(s["id"], str)]


def duplicate_ids(items: List[Any]) -> List[Any]:
    seen, dupes = set(), []
    for item in items:
        if not isinstance(item, dict) or not item.get("id"):
            continue
        item_id = item["id"]
        if not isinstance(item_id, (str, int, float)):
            continue
        if item_id in seen and item_id not in dupes:
            dupes.append(item_id)
        seen.add(item_id)
    return dupes


def _check_section_order(meta: Dict, ids: List[str], critical: List[ConsistencyError]) -> None:
    order = meta.get("section_order")
    if not isinstance(order, list):
        return
    missing = [i for i in ids if i not in order]
    extra = [i for i in order if i not in ids]
    if missing or extra:
        critical.append(ConsistencyError(
            "$.meta.section_order",
            SECTION_ORDER_MISMATCH,
            {"missingInOrder": missing, "extraInOrder": extra},
        ))


def _check_locale(lang: str, locale: Any, ids: List[str], critical: List[ConsistencyError]) -> None:
    base = f"$.localized.{lang}"
    if locale is None:
        critical.append(ConsistencyError(base, MISSING_LANGUAGE))
        return

    # a locale of the wrong shape is present but holds nothing
    locale = _as_dict(locale)
    nav = _as_dict(locale.get("navigation"))
    missing_nav = [i for i in ids if i not in nav]
    extra_nav = [k for k in nav if k not in ids]
    if missing_nav or extra_nav:
        critical.append(ConsistencyError(
            f"{base}.navigation",
            NAVIGATION_MISMATCH,
            {"missingNav": missing_nav, "extraNav": extra_nav},
        ))

    for section_id in ids:
        if locale.get(section_id) is None:
            critical.append(ConsistencyError(f"{base}.{section_id}", MISSING_SECTION))


def _check_cards(cv: Dict, languages: List[str], section: str, key: str,
                 is_icon: Callable[[Any], bool], result: ConsistencyResult) -> None:
    localized = _as_dict(cv.get("localized"))
    for lang in languages:
        cards = _as_dict(_as_dict(localized.get(lang)).get(section)).get(key)
        if not isinstance(cards, list):
            continue
        path = f"$.localized.{lang}.{section}.{key}"
        dupes = duplicate_ids(cards)
        if dupes:
            result.critical.append(ConsistencyError(path, DUPLICATE_IDS, {"ids": dupes}))
        for index, card in enumerate(cards):
            icon = card.get("icon") if isinstance(card, dict) else None
            if icon and not is_icon(icon):
                result.warnings.append(ConsistencyError(f"{path}[{index}].icon", ICON_INVALID))


def validate_consistency(cv: Any, is_icon: Callable[[Any], bool] = is_icon_id) -> ConsistencyResult:
    """
    Run every consistency check on a CV document.

    No check stops the others; problems come back as data in the
    `critical` and `warnings` lists, never as exceptions.
    """
    result = ConsistencyResult()
    cv = _as_dict(cv)
    meta = _as_dict(cv.get("meta"))
    ids = section_ids(cv)

    _check_section_order(meta, ids, result.critical)

    languages = [lang for lang in _as_list(meta.get("availableLanguages")) if isinstance(lang, str)]
    localized = _as_dict(cv.get("localized"))
    for lang in languages:
        _check_locale(lang, localized.get(lang), ids, result.critical)

    for section, key in CARD_COLLECTIONS:
        _check_cards(cv, languages, section, key, is_icon, result)

    return result
