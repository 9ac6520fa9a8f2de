from playwright.sync_api import Locator

HIGHLIGHT_STYLE = "outline: 2px solid red !important;"


def highlight_element(locator: Locator, style: str = HIGHLIGHT_STYLE):
    """
    Outline an element so it is easy to follow a headed test run.
    Returns the element's original 'style' attribute (None if it had none)
    so restore_element_style() can put it back.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        "(el, extra) => el.setAttribute('style', (el.getAttribute('style') || '') + '; ' + extra)",
        style,
    )
    return original_style


def restore_element_style(locator: Locator, original_style):
    """Undo highlight_element() for the given locator."""
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)
