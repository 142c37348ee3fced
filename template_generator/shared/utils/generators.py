"""ID and value generators (e.g. CUID, upload file names)."""

import secrets
import time

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# Placeholder actor when the client does not identify itself.
SYSTEM_ACTOR_ID = "00000000-0000-0000-0000-000000000000"


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_upload_filename(original_filename: str) -> str:
    """Return '<epoch-ms>-<random>-<original>' so concurrent uploads never collide."""
    unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    return f"{unique_suffix}-{original_filename}"
