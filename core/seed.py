# =============================================================================
# core/seed.py  —  Deterministic Seed Function
# =============================================================================
#
# Every "random-looking" number this server produces (ETA days, progress %,
# risk buckets, voyage codes) is derived from hash_to_int().  Same input,
# same number, on every run and every machine.  That makes tool calls
# idempotent: the agent can retry freely and always see the same answer.
#
# Callers carve ranges out of the seed with modulo arithmetic, e.g.
#     50 + seed % 41    →   50..90 inclusive
# =============================================================================

_MASK_32 = 0xFFFFFFFF


def _code_unit(char: str) -> int:
    """Leading UTF-16 code unit of a character."""
    code_point = ord(char)
    if code_point > 0xFFFF:
        # Astral characters contribute their high surrogate.
        return 0xD800 + ((code_point - 0x10000) >> 10)
    return code_point


def hash_to_int(value) -> int:
    """Hash any value into a 32-bit non-negative integer (djb2, ×33 variant).

    `None` hashes like the empty string; anything else is hashed via str().
    Never raises.
    """
    text = "" if value is None else str(value)
    acc = 5381
    for char in text:
        acc = (acc * 33 + _code_unit(char)) & _MASK_32
    return acc
