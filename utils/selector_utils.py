from typing import Optional
from common.constants import CSS_ENGINE_PREFIX, XPATH_ENGINE_PREFIX
from enums.locate_strategy import LocateStrategy

BRACKET_PAIRS = {"]": "[", ")": "("}


def strip_engine_prefix(selector: str) -> str:
    """
    Remove a leading Playwright engine prefix ("xpath=" or "css=").

    Examples:
        strip_engine_prefix("xpath=//div") → "//div"
        strip_engine_prefix("#login") → "#login"
    """
    for prefix in (XPATH_ENGINE_PREFIX, CSS_ENGINE_PREFIX):
        if selector.startswith(prefix):
            return selector[len(prefix):]
    return selector


def detect_strategy(selector: str) -> LocateStrategy:
    """
    Guess the locate strategy of a selector: an explicit engine prefix
    wins, otherwise selectors starting with "/", ".." or "(" are XPath
    and everything else is CSS.
    """
    selector = selector.strip()

    if selector.startswith(XPATH_ENGINE_PREFIX):
        return LocateStrategy.XPATH
    if selector.startswith(CSS_ENGINE_PREFIX):
        return LocateStrategy.CSS
    if selector.startswith(("/", "..", "(")):
        return LocateStrategy.XPATH

    return LocateStrategy.CSS


def find_xpath_syntax_error(xpath: str) -> Optional[str]:
    """
    Check that brackets and quotes in an XPath expression are balanced.
    Characters inside string literals are ignored.

    Returns:
        str | None: Description of the first problem found, or None if the
        expression looks well formed.

    Example:
        find_xpath_syntax_error('//div[contains(@class, "a"]')
        → "Mismatched ']' at position 26, expected ')'"
    """
    stack = []
    quote = None

    for position, char in enumerate(xpath):
        if quote:
            if char == quote:
                quote = None
            continue

        if char in ("'", '"'):
            quote = char
        elif char in ("[", "("):
            stack.append((char, position))
        elif char in BRACKET_PAIRS:
            if not stack:
                return f"Unexpected '{char}' at position {position}"
            opening, _ = stack.pop()
            if opening != BRACKET_PAIRS[char]:
                expected = "]" if opening == "[" else ")"
                return f"Mismatched '{char}' at position {position}, expected '{expected}'"

    if quote:
        return f"Unterminated string literal starting with {quote}"
    if stack:
        opening, position = stack[-1]
        return f"Unclosed '{opening}' at position {position}"

    return None


def to_playwright_selector(selector: str, strategy: LocateStrategy) -> str:
    """
    Build a Playwright selector string with an explicit engine prefix so
    page.locator() never has to guess the strategy.
    """
    selector = strip_engine_prefix(selector)

    if strategy == LocateStrategy.XPATH:
        return f"{XPATH_ENGINE_PREFIX}{selector}"
    return f"{CSS_ENGINE_PREFIX}{selector}"
