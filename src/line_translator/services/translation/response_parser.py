"""Response parser - extracts the translation object from a chat completion body."""

import json
import re
from typing import Any


class ResponseParseError(ValueError):
    """Raised when a completion body does not hold a translation object."""


# ```json ... ``` fences some models wrap around structured output
_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


def extract_message_content(body: Any) -> str:
    """
    Return the first choice's message content.

    Raises:
        ResponseParseError: if the body has no choices or no string content.
    """
    try:
        content = body["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ResponseParseError("Translation failed or no content received") from e

    if not isinstance(content, str) or not content.strip():
        raise ResponseParseError("Translation failed or no content received")
    return content


def normalize_content(content: str) -> str:
    """
    Prepare model output for JSON decoding.

    Single quotes are replaced with backticks so apostrophes inside
    translations can't be mistaken for string delimiters, and a surrounding
    Markdown code fence is removed.
    """
    text = content.strip().replace("'", "`")
    match = _CODE_FENCE.match(text)
    if match:
        text = match.group(1)
    return text


def parse_translations(content: str) -> dict[str, Any]:
    """
    Decode the model output into a language code -> translation mapping.

    Raises:
        ResponseParseError: if the content is not a JSON object.
    """
    try:
        data = json.loads(normalize_content(content))
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Could not parse translation object: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError(
            f"Expected a translation object, got {type(data).__name__}"
        )
    return data


def parse_completion(body: Any) -> dict[str, Any]:
    """Extract and decode the translation object of a completion body."""
    return parse_translations(extract_message_content(body))
