from dataclasses import dataclass, field
from typing import Optional

AUTH_ERROR_REASON = 'authError'
AUTH_ERROR_MESSAGE = 'Invalid Credentials'
HTTP_ERROR_REASON = 'httpError'


@dataclass(frozen=True)
class ApiError:
    code: Optional[int] = None
    message: str = ''
    errors: list = field(default_factory=list)

    @classmethod
    def from_data(cls, data) -> Optional['ApiError']:
        if not isinstance(data, dict):
            return None
        errors = data.get('errors')
        if not isinstance(errors, list):
            errors = []
        return cls(
            code=data.get('code'),
            message=data.get('message') or '',
            errors=list(errors),
        )

    @classmethod
    def from_status(cls, status_code) -> 'ApiError':
        message = f"HTTP {status_code} without a structured error body"
        return cls(
            code=status_code,
            message=message,
            errors=[{'reason': HTTP_ERROR_REASON, 'code': status_code, 'message': message}],
        )

    @property
    def is_auth_error(self) -> bool:
        return any(
            isinstance(e, dict)
            and e.get('reason') == AUTH_ERROR_REASON
            and e.get('message') == AUTH_ERROR_MESSAGE
            for e in self.errors
        )


@dataclass(frozen=True)
class ApiResponse:
    """Parsed Content API response.

    ``data`` is the decoded JSON object, or an empty dict for empty and
    non-object bodies, so error inspection never has to guess at shape.
    An error status without a structured error body still reports an
    ``httpError`` entry.
    """

    status_code: int
    data: dict = field(default_factory=dict)

    @classmethod
    def from_http(cls, response) -> 'ApiResponse':
        try:
            data = response.json() if response.content else {}
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        return cls(status_code=response.status_code, data=data)

    @property
    def error(self) -> Optional[ApiError]:
        error = ApiError.from_data(self.data.get('error'))
        if error is None and self.status_code >= 400:
            return ApiError.from_status(self.status_code)
        return error

    @property
    def has_auth_error(self) -> bool:
        error = self.error
        return error is not None and error.is_auth_error

    @property
    def remote_id(self) -> Optional[str]:
        if self.error is not None:
            return None
        return self.data.get('id')
