from fastapi import status


class PortalError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationFailed(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationFailed(PortalError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDenied(PortalError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(PortalError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(PortalError):
    status_code = status.HTTP_409_CONFLICT


class InvalidTransition(Conflict):
    """Status change not allowed from the submission's current state."""


class StorageError(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST
