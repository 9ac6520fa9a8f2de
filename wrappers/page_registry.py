from common.exceptions import NotFoundError
from wrappers.browser_driver import BrowserDriver
from wrappers.page_definition import Locator, PageDefinition

ELEMENT_KIND = "locator"
COMMAND_KIND = "command"


class PageObjectRegistry:
    """
    PageObjectRegistry binds a static PageDefinition to a live browser driver:
    - resolve_url() builds the page address from the configured base URL.
    - get_locator() looks up declared elements and sections by name.
    - run_command() plays a declared command against the driver.
    - Commands are also available as chainable attributes:
      page.open_add_service_client().enter_service_client_search_word("x")

    Nothing is cached between calls; the browser state lives in the driver.
    """

    def __init__(self, definition: PageDefinition, driver: BrowserDriver, config: dict):
        self.definition = definition
        self.driver = driver
        self.config = config
        base_url = str(config.get("base_url") or "")
        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url

    def resolve_url(self, *params) -> str:
        return self.definition.build_url(self.base_url, *params)

    def get_locator(self, name: str) -> Locator:
        locator = self.definition.find_locator(name)

        if locator is None:
            raise NotFoundError(ELEMENT_KIND, name, self.definition.name)
        return locator

    def has_locator(self, name: str) -> bool:
        return self.definition.find_locator(name) is not None

    def run_command(self, name: str, *args) -> "PageObjectRegistry":
        command = self.definition.commands.get(name)

        if command is None:
            raise NotFoundError(COMMAND_KIND, name, self.definition.name)

        command.execute(self.driver, self.get_locator, args)
        return self

    def navigate(self, *params) -> "PageObjectRegistry":
        self.driver.url(self.resolve_url(*params))
        return self

    def get_text(self, name: str) -> str:
        return self.driver.get_text(self.get_locator(name))

    def element(self, name: str):
        """Native driver handle for a declared locator, e.g. for Playwright expect()."""
        return self.driver.find(self.get_locator(name))

    def __getattr__(self, item):
        # Only reached for names not found the normal way
        definition = self.__dict__.get("definition")

        if definition is not None and item in definition.commands:
            def command(*args):
                return self.run_command(item, *args)

            command.__name__ = item
            return command

        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{item}'")

    def __str__(self):
        return f"<PageObjectRegistry {self.definition.name}>"

    __repr__ = __str__
