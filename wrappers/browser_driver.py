import time
from abc import ABC, abstractmethod
from playwright.sync_api import Page
from utils.config_utils import parse_bool
from utils.web_utils import highlight_element, restore_element_style
from wrappers.page_definition import Locator


class BrowserDriver(ABC):
    """
    Primitive browser interactions used by page commands.
    Implementations raise their backend's own errors and never retry.
    """

    @abstractmethod
    def click(self, locator: Locator):
        ...

    @abstractmethod
    def set_value(self, locator: Locator, value):
        ...

    @abstractmethod
    def clear_value(self, locator: Locator):
        ...

    @abstractmethod
    def get_text(self, locator: Locator) -> str:
        ...

    @abstractmethod
    def find(self, locator: Locator):
        """Return the backend's native handle for the locator."""

    @abstractmethod
    def url(self, address: str):
        ...


class PlaywrightDriver(BrowserDriver):
    """
    BrowserDriver on top of a Playwright sync Page.

    Config keys read:
    - highlight: outline each element while it is being used.
    - step_delay: pause in milliseconds before each interaction.
    - log_steps: print every interaction.
    """

    def __init__(self, page: Page, config: dict):
        self.page = page
        self.config = config

    def find(self, locator: Locator):
        return self.page.locator(locator.playwright_selector)

    def click(self, locator: Locator):
        self._interact("click", locator, lambda element: element.click())

    def set_value(self, locator: Locator, value):
        self._interact("set_value", locator, lambda element: element.fill(str(value)), value)

    def clear_value(self, locator: Locator):
        self._interact("clear_value", locator, lambda element: element.clear())

    def get_text(self, locator: Locator) -> str:
        return self._interact("get_text", locator, lambda element: element.inner_text())

    def url(self, address: str):
        self._log_step(f"url {address}")
        self.page.goto(address)

    def _interact(self, action: str, locator: Locator, interaction, *values):
        element = self.find(locator)
        self._log_step(f"{action} {locator.name}", *values)
        self._wait_step_delay()

        if not parse_bool(self.config.get("highlight", False)):
            return interaction(element)

        element_style = highlight_element(element)
        result = interaction(element)
        # Element can be gone after a click that navigates or closes a dialog
        if element.count() > 0:
            restore_element_style(element, element_style)
        return result

    def _wait_step_delay(self):
        try:
            step_delay_seconds = float(self.config.get("step_delay", 0)) / 1000.0
        except (TypeError, ValueError):
            step_delay_seconds = 0.0

        if step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)

    def _log_step(self, message: str, *values):
        if parse_bool(self.config.get("log_steps", False)):
            suffix = f" = {values[0]!r}" if values else ""
            print(f"[STEP] {message}{suffix}")
