import secrets
import time
from typing import Callable

Clock = Callable[[], float]

def make_identifier(clock: Clock = time.time, unique: bool = False) -> str:
    """Build a sample identifier from the wall clock at second resolution.

    Two calls within the same second return the same identifier unless
    ``unique`` is set, in which case a random token is appended.
    """
    identifier = str(int(clock()))
    if unique:
        identifier = f"{identifier}-{secrets.token_hex(4)}"
    return identifier
