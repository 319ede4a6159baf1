"""
Domain errors raised by the service layer and mapped to HTTP responses
"""


class HotelAdminError(Exception):
    """Base class for service-layer errors"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HotelAdminError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(HotelAdminError):
    status_code = 400


class PermissionDeniedError(HotelAdminError):
    status_code = 403


class InvalidOperationError(HotelAdminError):
    status_code = 400


class AuthenticationError(HotelAdminError):
    status_code = 401
