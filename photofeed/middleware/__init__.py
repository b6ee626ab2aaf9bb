"""HTTP middleware: timeout, request ID, security headers.

Applied in main app; order matters (last added = outermost).
"""

from photofeed.middleware.request_id import RequestIDMiddleware
from photofeed.middleware.security_headers import SecurityHeadersMiddleware
from photofeed.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
