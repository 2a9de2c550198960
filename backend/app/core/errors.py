from typing import Optional


class SkylightError(Exception):
    """Base error. Carries the HTTP status and the client-facing reason."""
    status_code: int = 500

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(SkylightError):
    status_code = 500


class BadRequestError(SkylightError):
    status_code = 400


class UpstreamError(SkylightError):
    """The Sunsethue call failed: transport, non-2xx status or undecodable body."""
    status_code = 502

    def __init__(self, reason: str, status_code: Optional[int] = None, upstream_status: Optional[int] = None):
        super().__init__(reason, status_code)
        self.upstream_status = upstream_status
