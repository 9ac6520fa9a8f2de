from playwright.sync_api import Page
from decorators.class_decorators import auto_getters
from enums.locate_strategy import LocateStrategy
from wrappers.browser_driver import PlaywrightDriver
from wrappers.page_definition import (Command, PageDefinition,
                                      clear_value, click, set_value)
from wrappers.page_registry import PageObjectRegistry

XPATH = LocateStrategy.XPATH

SERVICE_CLIENTS_TAB_SELECTOR = ('//div[contains(@class, "xrd-view-common") and '
                                './/*[contains(@class, "v-tab--active") and contains(text(), "service clients")]]')


def service_clients_url(base_url: str, subsystem_id) -> str:
    return f"{base_url}/#/subsystem/serviceclients/{subsystem_id}"


SERVICE_CLIENTS_PAGE = PageDefinition(
    name="ServiceClientsPage",
    url=service_clients_url,
    elements={
        "add_service_client_button": ('//button[@data-test="add-service-client"]', XPATH),
        "unregister_button": ('//button[@data-test="unregister-client-button"]', XPATH),
        "add_subject_wizard_header": ('//div[@data-test="add-subject-title"]//span[contains(@class, "cert-headline") '
                                      'and contains(text(), "Add a subject")]', XPATH),
        "search_field": ('//input[contains(@data-test, "search-service-client")]', XPATH),
        "service_clients_tab": (SERVICE_CLIENTS_TAB_SELECTOR, XPATH),
    },
    sections={
        "service_clients_tab": (SERVICE_CLIENTS_TAB_SELECTOR, XPATH),
        "wizard_select_services": ('//div[contains(@class, "view-wrap")]//div[contains(@class, "v-stepper")]'
                                   '//span[contains(@class, "primary") and contains(text(), "2")]', XPATH),
    },
    commands=[
        Command("open_add_service_client",
                click("add_service_client_button")),
        Command("enter_service_client_search_word",
                clear_value("search_field"),
                set_value("search_field")),
    ],
)


@auto_getters
class ServiceClientsPage(PageObjectRegistry):
    """Service clients tab of a subsystem."""

    def __init__(self, page: Page, config: dict):
        super().__init__(SERVICE_CLIENTS_PAGE, PlaywrightDriver(page, config), config)
