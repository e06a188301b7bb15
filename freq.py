from typing import Dict
import numpy as np
from errors import Overflow

# count field in the container header is u64
COUNT_MAX = (1 << 64) - 1

def count_bytes(data: bytes) -> Dict[int, int]:
    """
    Byte value -> occurrence count, zero counts omitted.
    Empty input gives an empty dict.
    """
    if len(data) > COUNT_MAX:
        raise Overflow(f"input of {len(data)} bytes exceeds count field")
    if len(data) == 0:
        return {}
    hist = np.bincount(np.frombuffer(bytes(data), dtype=np.uint8), minlength=256)
    return {int(s): int(c) for s, c in enumerate(hist) if c}
