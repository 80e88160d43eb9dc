"""HTML entity escaping for text and attribute values"""


# Ampersand must come first so the entities below are not double-escaped.
_ENTITIES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#39;'),
)


def escape_html(text: str) -> str:
    """Replace & < > " ' with their HTML entities. Apply once per insertion point."""
    for char, entity in _ENTITIES:
        text = text.replace(char, entity)
    return text
