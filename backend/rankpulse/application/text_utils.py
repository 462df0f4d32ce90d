"""Small text-formatting helpers shared by article services."""


def to_capitalized_case(text: str | None) -> str:
    """Convert text to Capitalized Case (first letter of each word upper-cased).

    Examples:
        "how to make a landing page"  → "How To Make A Landing Page"
        "BEST WEBSITE BUILDERS"       → "Best Website Builders"
        "top 10 email tools: 2025 guide" → "Top 10 Email Tools: 2025 Guide"

    Words are split on single spaces, so runs of spaces are kept as-is.
    """
    if not text:
        return ""

    return " ".join(
        word[0].upper() + word[1:] if word else word
        for word in text.lower().split(" ")
    )
