from __future__ import annotations

from cv_integrity.cv_consistency import duplicate_ids, section_ids, validate_consistency
from cv_integrity.records import (
    DUPLICATE_IDS,
    ICON_INVALID,
    MISSING_LANGUAGE,
    MISSING_SECTION,
    NAVIGATION_MISMATCH,
    SECTION_ORDER_MISMATCH,
)


def _add_section(cv: dict, section_id: str) -> None:
    cv["meta"]["sections"].append({"id": section_id, "type": section_id})


def test_sample_document_is_consistent(cv) -> None:
    result = validate_consistency(cv)
    assert result.critical == []
    assert result.warnings == []
    assert result.may_persist


def test_section_order_missing_a_declared_section(cv) -> None:
    cv["meta"]["sections"] = [{"id": i, "type": i} for i in ("overview", "contact", "now")]
    cv["meta"]["section_order"] = ["overview", "contact"]

    critical = [e for e in validate_consistency(cv).critical if e.code == SECTION_ORDER_MISMATCH]

    assert len(critical) == 1
    assert critical[0].path == "$.meta.section_order"
    assert critical[0].details == {"missingInOrder": ["now"], "extraInOrder": []}


def test_section_order_with_extra_entry(cv) -> None:
    cv["meta"]["section_order"].append("highlights")
    [err] = validate_consistency(cv).critical
    assert err.code == SECTION_ORDER_MISMATCH
    assert err.details == {"missingInOrder": [], "extraInOrder": ["highlights"]}


def test_absent_section_order_is_not_checked(cv) -> None:
    del cv["meta"]["section_order"]
    assert validate_consistency(cv).critical == []


def test_navigation_missing_a_section(cv) -> None:
    for lang in ("pt", "en"):
        cv["localized"][lang]["extra"] = {"summary": "x"}
    _add_section(cv, "extra")
    cv["meta"]["section_order"].append("extra")
    cv["localized"]["en"]["navigation"]["extra"] = "Extra"

    [err] = validate_consistency(cv).critical

    assert err.code == NAVIGATION_MISMATCH
    assert err.path == "$.localized.pt.navigation"
    assert err.details == {"missingNav": ["extra"], "extraNav": []}


def test_navigation_with_stray_key(cv) -> None:
    cv["localized"]["pt"]["navigation"]["blog"] = "Blog"
    [err] = validate_consistency(cv).critical
    assert err.details == {"missingNav": [], "extraNav": ["blog"]}


def test_missing_language_skips_other_locale_checks(cv) -> None:
    cv["meta"]["availableLanguages"].append("es")
    result = validate_consistency(cv)
    assert [(e.path, e.code) for e in result.critical] == [("$.localized.es", MISSING_LANGUAGE)]


def test_null_locale_counts_as_missing_language(cv) -> None:
    cv["localized"]["en"] = None
    result = validate_consistency(cv)
    assert [(e.path, e.code) for e in result.critical] == [("$.localized.en", MISSING_LANGUAGE)]


def test_locale_of_wrong_shape_is_present_but_empty(cv) -> None:
    cv["localized"]["en"] = ["a"]
    ids = section_ids(cv)

    result = validate_consistency(cv)

    assert [(e.path, e.code) for e in result.critical] == (
        [("$.localized.en.navigation", NAVIGATION_MISMATCH)]
        + [(f"$.localized.en.{i}", MISSING_SECTION) for i in ids]
    )
    assert result.critical[0].details == {"missingNav": ids, "extraNav": []}
    assert MISSING_LANGUAGE not in [e.code for e in result.critical]


def test_missing_section_reported_per_language_and_id(cv) -> None:
    del cv["localized"]["en"]["now"]
    cv["localized"]["en"]["contact"] = None
    result = validate_consistency(cv)
    assert [(e.path, e.code) for e in result.critical] == [
        ("$.localized.en.now", MISSING_SECTION),
        ("$.localized.en.contact", MISSING_SECTION),
    ]


def test_duplicate_skill_ids(cv) -> None:
    skills = cv["localized"]["pt"]["development"]["skills"]
    skills.append({"id": "python", "title": "Python again"})
    skills.append({"id": "python", "title": "And again"})

    [err] = validate_consistency(cv).critical

    assert err.code == DUPLICATE_IDS
    assert err.path == "$.localized.pt.development.skills"
    assert err.details == {"ids": ["python"]}


def test_cards_without_ids_are_never_duplicates(cv) -> None:
    cv["localized"]["en"]["mindset"]["blocks"] = [{"title": "a"}, {"title": "b"}, {"id": ""}, {"id": ""}]
    assert validate_consistency(cv).critical == []


def test_unknown_icon_is_only_a_warning(cv) -> None:
    cv["localized"]["en"]["foundation"]["experience"][0]["icon"] = "unicorn"

    result = validate_consistency(cv)

    assert result.critical == []
    assert [(e.path, e.code) for e in result.warnings] == [
        ("$.localized.en.foundation.experience[0].icon", ICON_INVALID),
    ]
    assert result.may_persist


def test_icon_catalog_is_injectable(cv) -> None:
    result = validate_consistency(cv, is_icon=lambda value: False)
    assert len(result.warnings) == 8
    assert result.critical == []


def test_all_checks_run_together(cv) -> None:
    cv["meta"]["section_order"] = ["overview"]
    cv["meta"]["availableLanguages"].append("fr")
    cv["localized"]["pt"]["navigation"].pop("now")
    cv["localized"]["en"]["mindset"]["blocks"].append({"id": "clarity", "icon": "nope"})

    result = validate_consistency(cv)

    assert [e.code for e in result.critical] == [
        SECTION_ORDER_MISMATCH,
        NAVIGATION_MISMATCH,
        MISSING_LANGUAGE,
        DUPLICATE_IDS,
    ]
    assert [e.path for e in result.warnings] == ["$.localized.en.mindset.blocks[1].icon"]


def test_tolerates_badly_shaped_documents() -> None:
    assert validate_consistency(None).critical == []
    result = validate_consistency({"meta": {"sections": "x", "availableLanguages": ["pt"]}, "localized": []})
    assert [e.code for e in result.critical] == [MISSING_LANGUAGE]


def test_does_not_mutate_document(cv) -> None:
    cv["meta"]["section_order"] = ["overview"]
    before = repr(cv)
    validate_consistency(cv)
    assert repr(cv) == before


def test_helpers() -> None:
    assert section_ids({"meta": {"sections": [{"id": "a"}, {"type": "b"}, {"id": ""}, "c"]}}) == ["a"]
    assert duplicate_ids([{"id": "a"}, {"id": "b"}, {"id": "a"}, {"id": "a"}, {"id": "b"}]) == ["a", "b"]
