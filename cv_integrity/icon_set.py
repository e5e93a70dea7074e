"""
Icon ids the site can render. Anything else falls back to a default glyph.
"""

ICON_IDS = frozenset({
    "award",
    "book",
    "briefcase",
    "brain",
    "chart",
    "cloud",
    "code",
    "compass",
    "cpu",
    "database",
    "globe",
    "github",
    "graduation-cap",
    "heart",
    "layers",
    "lightbulb",
    "linkedin",
    "mail",
    "map-pin",
    "message",
    "phone",
    "puzzle",
    "rocket",
    "server",
    "shield",
    "sparkles",
    "star",
    "target",
    "terminal",
    "tool",
    "users",
})


def is_icon_id(value) -> bool:
    return isinstance(value, str) and value in ICON_IDS
