"""Client-side validation of new facts."""

from pydantic import HttpUrl, TypeAdapter, ValidationError

from .categories import Category

DEFAULT_MAX_FACT_LENGTH = 200

_http_url = TypeAdapter(HttpUrl)


def is_valid_url(url: str) -> bool:
    """Check that a source is an absolute http(s) URL with a host."""
    try:
        _http_url.validate_python(url)
    except ValidationError:
        return False
    return True


def validate_new_fact(
    text: str,
    source: str,
    category: str,
    max_length: int = DEFAULT_MAX_FACT_LENGTH,
) -> list[str]:
    """Validate a draft fact.

    Args:
        text: The fact text
        source: The source URL
        category: The category name, empty when none was chosen
        max_length: Maximum number of characters allowed in the text

    Returns:
        A list of human readable problems, empty when the draft is valid
    """
    errors: list[str] = []

    stripped = text.strip()
    if not stripped:
        errors.append("Please share a fact.")
    elif len(stripped) > max_length:
        errors.append(f"A fact can be at most {max_length} characters long.")

    if not source.strip():
        errors.append("Please provide a source.")
    elif not is_valid_url(source.strip()):
        errors.append("The source must be a valid http(s) URL.")

    if not category:
        errors.append("Please choose a category.")
    else:
        try:
            Category(category)
        except ValueError:
            errors.append(f"Unknown category '{category}'.")

    return errors
