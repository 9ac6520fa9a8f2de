from pages.service_clients_page import ServiceClientsPage


class ServiceClientsService:

    def open_service_clients(self, page, config, subsystem_id) -> ServiceClientsPage:
        service_clients_page = ServiceClientsPage(page, config)
        service_clients_page.navigate(subsystem_id)
        return service_clients_page

    def search_service_clients(self, page, config, subsystem_id, search_word) -> ServiceClientsPage:
        service_clients_page = self.open_service_clients(page, config, subsystem_id)
        return service_clients_page.enter_service_client_search_word(search_word)

    def start_adding_service_client(self, page, config, subsystem_id) -> ServiceClientsPage:
        service_clients_page = self.open_service_clients(page, config, subsystem_id)
        return service_clients_page.open_add_service_client()
