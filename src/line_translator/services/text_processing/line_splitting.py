"""Line splitting utilities for the translation pipeline."""


def split_lines(text: str) -> list[str]:
    """
    Split pasted text into translatable lines.

    Rules:
    - Split on any line boundary (\\n, \\r\\n, \\r)
    - Trim leading and trailing whitespace of each line
    - Drop lines that are empty after trimming
    - Keep the original order, duplicates included

    Args:
        text: Raw multi-line input.

    Returns:
        List of trimmed, non-empty lines.
    """
    return [line.strip() for line in text.splitlines() if line.strip()]
