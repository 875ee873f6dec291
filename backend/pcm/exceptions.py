from typing import Any, Dict


class PCMError(Exception):
    """Erro de domínio com status HTTP e campos extras de orientação ao cliente."""

    status_code = 500

    def __init__(self, message: str, **hints: Any):
        super().__init__(message)
        self.message = message
        self.hints = hints

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, **self.hints}


class BadRequest(PCMError):
    status_code = 400


class Unauthorized(PCMError):
    status_code = 401


class Unauthenticated(Unauthorized):
    pass


class Forbidden(PCMError):
    status_code = 403


class NotFound(PCMError):
    status_code = 404


class Conflict(PCMError):
    status_code = 409
