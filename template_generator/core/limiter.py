"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and route modules use the same instance
without circular imports. Decorated endpoints must accept `request: Request`.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

UPLOAD_LIMIT = "30/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"

limit_upload = limiter.limit(UPLOAD_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
