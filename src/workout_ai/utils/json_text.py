"""Helpers for cleaning JSON text returned by language models."""

CODE_FENCE_MARKERS = ("```json", "```")


def clean_json_string(text: str) -> str:
    """Strip markdown code-fence markers and surrounding whitespace.

    Models often wrap JSON in ```json ... ``` blocks. Every occurrence of the
    markers is removed, not only leading and trailing ones. The result is not
    validated as JSON.

    Examples:
        "```json\\n{\\"a\\": 1}\\n```" -> "{\\"a\\": 1}"
    """
    if not text or not text.strip():
        return text

    for marker in CODE_FENCE_MARKERS:
        text = text.replace(marker, "")
    return text.strip()


def preview(text: str, limit: int = 200) -> str:
    """Truncate text for log output."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
