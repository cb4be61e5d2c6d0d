# gammonmax/utils/bitmask.py

def bits_from_indices(indices):
    """Build a mask from board point indices (0-based)."""
    mask = 0
    for i in indices:
        mask |= 1 << int(i)
    return mask


def indices_from_bits(mask: int) -> list[int]:
    """Return the set bits of mask as ascending point indices."""
    idxs = []
    mask = int(mask)
    while mask:
        lsb = mask & -mask
        idxs.append(lsb.bit_length() - 1)
        mask &= mask - 1
    return idxs


def is_bit_set(idx, mask):
    """Check whether the bit for point idx is set. Negative indices are never set."""
    if idx < 0:
        return False
    return (mask & (1 << idx)) != 0


def set_all_bits(start, end):
    """Mask with every bit from start to end (inclusive) set; empty if start > end."""
    if start > end:
        return 0
    return ((1 << (end + 1)) - 1) & ~((1 << start) - 1)


def remove_from_mask(mask, remove):
    """
    Remove all bits set in remove from mask.
    """
    return mask & ~remove
