"""
Fenced code block extraction.

Pulls the component markup (```jsx / ```tsx) and stylesheet (```css) out of
an assistant response. The first block per language wins; block contents are
taken verbatim and never validated.
"""

import re
from typing import Any, Optional

from playground.models.generation import ExtractedCode

# Opening fence: language tag then end of line. Capture stops at the nearest
# closing fence; the newline in front of that fence is not part of the content.
# Content and its trailing newline are optional together so an empty block
# closes on its own fence.
_MARKUP_BLOCK = re.compile(r"```(?:jsx|tsx)[ \t]*\r?\n(?:(.*?)\r?\n)??```", re.DOTALL)
_STYLE_BLOCK = re.compile(r"```css[ \t]*\r?\n(?:(.*?)\r?\n)??```", re.DOTALL)


def _first_block(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    return match.group(1) or None


def extract_code_blocks(text: Any) -> ExtractedCode:
    """
    Extract the first markup block and the first stylesheet block from text.

    Args:
        text: Raw assistant response. Anything that is not a string yields
            an empty result.

    Returns:
        ExtractedCode with markup/style set to the block contents, or None
        when no block of that language is present
    """
    if not isinstance(text, str) or not text:
        return ExtractedCode()

    return ExtractedCode(
        markup=_first_block(_MARKUP_BLOCK, text),
        style=_first_block(_STYLE_BLOCK, text),
    )
