# Error taxonomy raised by the catalog service and mapped to HTTP statuses by the routes


class CatalogError(Exception):
    """Base class for catalog errors reported back to the caller"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DashboardNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, dashboard_id: int):
        super().__init__("Dashboard not found")
        self.dashboard_id = dashboard_id


class InvalidInputError(CatalogError):
    status_code = 400


class AlreadyExistsError(CatalogError):
    status_code = 400


class NotInFavoritesError(InvalidInputError):
    def __init__(self, dashboard_id: int):
        super().__init__("Dashboard not in favorites")
        self.dashboard_id = dashboard_id
