"""HTTP middleware: request size limit, request ID, security headers.

Applied in create_app; order matters (last added = outermost).
"""

from template_generator.middleware.request_id import RequestIDMiddleware
from template_generator.middleware.request_size_limit import RequestSizeLimitMiddleware
from template_generator.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
]
