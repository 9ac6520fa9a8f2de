from playwright.sync_api import Error as InteractionError


class PageObjectError(Exception):
    """Base class for errors raised by the page object layer itself."""


class NotFoundError(PageObjectError, LookupError):
    """
    Raised when a locator or command name is not declared on a page.
    Nothing is sent to the browser before this error is raised.
    """

    def __init__(self, kind: str, name: str, page: str):
        self.kind = kind
        self.name = name
        self.page = page
        super().__init__(f"Unknown {kind} '{name}' on page '{page}'")


class PageDefinitionError(PageObjectError, ValueError):
    """Raised when a page definition is inconsistent or has a broken selector."""


__all__ = [
    "InteractionError",
    "NotFoundError",
    "PageDefinitionError",
    "PageObjectError",
]
