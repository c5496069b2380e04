# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

# Fixed entity table for text stored in the catalog. Ampersand goes first so
# entities produced by later replacements are not escaped twice.
HTML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
)


def escape_html(text: str) -> str:
    """
    Escape HTML-significant characters in a string.

    Applied to free-text product fields before they are written so that
    they are safe to render later.

    Args:
        text: Raw text from the client

    Returns:
        Text with &, <, >, " and ' replaced by character entities

    Example:
        escape_html('<b>"Big" & bold</b>')
        # '&lt;b&gt;&quot;Big&quot; &amp; bold&lt;/b&gt;'
    """
    for char, entity in HTML_ENTITIES:
        text = text.replace(char, entity)
    return text
