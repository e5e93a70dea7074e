"""
Turns error records into messages for people.

Hand-written messages are keyed by `<path>.<code>`, with the locale
segment of `$.localized.<lang>...` left out so one entry covers every
language of the document. Records without an entry get a generic
sentence for their code, and failing that an "invalid data" line.
"""

from __future__ import annotations
import re
from typing import Any, Dict, Iterable, List

ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "pt": {
        "$.meta.defaultLanguage.required": "Falta o idioma predefinido (meta.defaultLanguage).",
        "$.meta.availableLanguages.required": "Falta a lista de idiomas disponíveis (meta.availableLanguages).",
        "$.meta.availableLanguages.minItems": "Indique pelo menos um idioma em meta.availableLanguages.",
        "$.meta.section_order.required": "Falta a ordem das secções (meta.section_order).",
        "$.meta.sections.required": "Falta a lista de secções (meta.sections).",
        "$.meta.sections.minItems": "Defina pelo menos uma secção (meta.sections).",
        "$.localized.required": "Faltam os conteúdos localizados (localized).",
        "$.localized.navigation.required": "Falta a navegação (navigation) num idioma.",
        "$.localized.overview.headline.required": "Falta o título principal da Identidade (overview.headline).",
        "$.localized.overview.intro_text.required": "Falta o texto introdutório da Identidade (overview.intro_text).",
        "$.localized.development.skills.type": "Competências (development.skills) deve ser uma lista.",
        "$.localized.foundation.experience.type": "Experiência (foundation.experience) deve ser uma lista.",
        "$.localized.mindset.blocks.type": "Blocos de Mentalidade (mindset.blocks) deve ser uma lista.",
        "$.localized.now.summary.required": "Falta o resumo em Agora (now.summary).",
        "$.localized.contact.cta_label.required": "Falta o texto do botão CTA em Contacto.",
        "$.localized.contact.cta_link.required": "Falta o link do CTA em Contacto.",
    },
    "es": {
        "$.meta.defaultLanguage.required": "Falta el idioma por defecto (meta.defaultLanguage).",
        "$.meta.availableLanguages.required": "Falta la lista de idiomas disponibles (meta.availableLanguages).",
        "$.meta.availableLanguages.minItems": "Indica al menos un idioma en meta.availableLanguages.",
        "$.meta.section_order.required": "Falta el orden de secciones (meta.section_order).",
        "$.meta.sections.required": "Falta la lista de secciones (meta.sections).",
        "$.meta.sections.minItems": "Define al menos una sección (meta.sections).",
        "$.localized.required": "Faltan contenidos localizados (localized).",
        "$.localized.navigation.required": "Falta la navegación (navigation) en un idioma.",
        "$.localized.overview.headline.required": "Falta el título principal de Identidad (overview.headline).",
        "$.localized.overview.intro_text.required": "Falta el texto introductorio de Identidad (overview.intro_text).",
        "$.localized.development.skills.type": "Competencias (development.skills) debe ser una lista.",
        "$.localized.foundation.experience.type": "Experiencia (foundation.experience) debe ser una lista.",
        "$.localized.mindset.blocks.type": "Bloques de Mentalidad (mindset.blocks) debe ser una lista.",
        "$.localized.now.summary.required": "Falta el resumen en Ahora (now.summary).",
        "$.localized.contact.cta_label.required": "Falta el texto del botón CTA en Contacto.",
        "$.localized.contact.cta_link.required": "Falta el enlace del CTA en Contacto.",
    },
    "en": {
        "$.meta.defaultLanguage.required": "Missing default language (meta.defaultLanguage).",
        "$.meta.availableLanguages.required": "Missing available languages list (meta.availableLanguages).",
        "$.meta.availableLanguages.minItems": "List at least one language in meta.availableLanguages.",
        "$.meta.section_order.required": "Missing section order (meta.section_order).",
        "$.meta.sections.required": "Missing sections list (meta.sections).",
        "$.meta.sections.minItems": "Declare at least one section (meta.sections).",
        "$.localized.required": "Missing localized content (localized).",
        "$.localized.navigation.required": "Missing navigation in a language.",
        "$.localized.overview.headline.required": "Missing Overview headline (overview.headline).",
        "$.localized.overview.intro_text.required": "Missing Overview intro text (overview.intro_text).",
        "$.localized.development.skills.type": "Development skills must be a list.",
        "$.localized.foundation.experience.type": "Foundation experience must be a list.",
        "$.localized.mindset.blocks.type": "Mindset blocks must be a list.",
        "$.localized.now.summary.required": "Missing Now summary (now.summary).",
        "$.localized.contact.cta_label.required": "Missing Contact CTA label.",
        "$.localized.contact.cta_link.required": "Missing Contact CTA link.",
    },
}

# pt / es / en wording per code; any other language reads Portuguese
_CODE_MESSAGES: Dict[str, tuple] = {
    "missing_language": (
        "Falta um idioma completo em localized.",
        "Falta un idioma completo en localized.",
        "Missing a full language in localized.",
    ),
    "navigation_mismatch": (
        "A navegação não coincide com as secções.",
        "La navegación no coincide con las secciones.",
        "Navigation does not match sections.",
    ),
    "section_order_mismatch": (
        "A ordem das secções não coincide com sections.",
        "El orden de secciones no coincide con sections.",
        "Section order does not match sections.",
    ),
    "missing_section": (
        "Falta uma secção num idioma.",
        "Falta una sección en un idioma.",
        "Missing a section in a language.",
    ),
    "duplicate_ids": (
        "IDs duplicados numa lista de cartões.",
        "IDs duplicados en una lista de tarjetas.",
        "Duplicate IDs in a card list.",
    ),
    "icon_invalid": (
        "Ícone inválido: não existe no conjunto.",
        "Icono inválido: no existe en el conjunto.",
        "Invalid icon: not in icon set.",
    ),
}

_LIST_TYPE_MESSAGES = (
    (".skills", ("Competências devem ser uma lista.", "Competencias debe ser una lista.", "Skills must be a list.")),
    (".experience", ("Experiência deve ser uma lista.", "Experiencia debe ser una lista.", "Experience must be a list.")),
    (".blocks", ("Blocos devem ser uma lista.", "Bloques deben ser una lista.", "Blocks must be a list.")),
)

_LOCALE_SEGMENT = re.compile(r"^\$\.localized\.[^.\[]+(?=[.\[]|$)")


def _pick(lang: str, variants: tuple) -> str:
    if lang == "es":
        return variants[1]
    if lang == "en":
        return variants[2]
    return variants[0]


def _field(error: Any, name: str) -> Any:
    if isinstance(error, dict):
        return error.get(name)
    return getattr(error, name, None)


def fallback_message(path: str, code: str, lang: str) -> str:
    prefix = _pick(lang, ("Dados inválidos", "Dato inválido", "Invalid data"))
    if code in _CODE_MESSAGES:
        return _pick(lang, _CODE_MESSAGES[code])
    if code == "required":
        return _pick(lang, (
            f"{prefix}: falta {path}.",
            f"{prefix}: falta {path}.",
            f"{prefix}: missing {path}.",
        ))
    if code == "type":
        for marker, variants in _LIST_TYPE_MESSAGES:
            if path.endswith(marker):
                return _pick(lang, variants)
        return _pick(lang, (
            f"{prefix}: tipo inválido em {path}.",
            f"{prefix}: tipo inválido en {path}.",
            f"{prefix}: wrong type at {path}.",
        ))
    if code == "minItems":
        return _pick(lang, (
            f"{prefix}: {path} tem elementos a menos.",
            f"{prefix}: {path} tiene muy pocos elementos.",
            f"{prefix}: {path} has too few items.",
        ))
    return f"{prefix}: {path}."


def format_error_message(error: Any, lang: str) -> str:
    bundle = ERROR_MESSAGES.get(lang, ERROR_MESSAGES["pt"])
    path = str(_field(error, "path") or "$")
    code = str(_field(error, "code") or "")

    key = f"{path}.{code}"
    if key in bundle:
        return bundle[key]
    shared_key = _LOCALE_SEGMENT.sub("$.localized", path) + f".{code}"
    if shared_key in bundle:
        return bundle[shared_key]
    return fallback_message(path, code, lang)


def format_error_messages(errors: Iterable[Any], lang: str) -> List[str]:
    """One message per error record, in the same order."""
    return [format_error_message(error, lang) for error in errors or ()]
