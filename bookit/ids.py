# bookit/ids.py

import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str = "id") -> str:
    # unique enough for a single device, not a security token
    stamp = int(time.time() * 1000)
    suffix = "".join(random.choice(_ALPHABET) for _ in range(9))
    return f"{prefix}_{stamp}_{suffix}"
