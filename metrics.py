from typing import Dict
import numpy as np

def entropy(freqs: Dict[int, int]) -> float:
    """Shannon entropy in bits/symbol."""
    if not freqs:
        return 0.0
    p = np.array(list(freqs.values()), dtype=np.float64)
    p = p / p.sum()
    return float(-np.sum(p * np.log2(p)))

def avg_code_length(freqs: Dict[int, int], lengths: Dict[int, int]) -> float:
    if not freqs:
        return 0.0
    syms = sorted(freqs)
    w = np.array([freqs[s] for s in syms], dtype=np.float64)
    L = np.array([lengths[s] for s in syms], dtype=np.float64)
    return float(np.sum(w * L) / np.sum(w))

def compression_ratio(raw_len: int, comp_len: int) -> float:
    if comp_len == 0:
        return float("inf")
    return float(raw_len) / float(comp_len)
