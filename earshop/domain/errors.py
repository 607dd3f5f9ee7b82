# earshop/domain/errors.py
"""
Domain errors raised by repositories, services and the access gate.
`earshop.main` turns each of them into a JSON response carrying `status_code`.
"""


class AppError(Exception):
    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ResourceNotFound(AppError):
    status_code = 404
    message = "Resource not found"


class Conflict(AppError):
    status_code = 409
    message = "Resource already exists"


class InvalidCredentials(AppError):
    status_code = 401
    message = "Invalid email or password"


class AuthError(AppError):
    status_code = 403
    message = "Your access token is invalid"


class MissingToken(AuthError):
    message = "You must provide an access token to access this route"
