def identity_mapping(block_size):
    """Return the identity mapping [0 ... block_size-1]."""
    return list(range(block_size))


def is_permutation(mapping, block_size=None):
    """Returns True if mapping is a permutation of range(block_size).

    Args:
        mapping: sequence of bit positions
        block_size: optional expected length of mapping.
            Defaults to len(mapping).
    """
    if block_size is None:
        block_size = len(mapping)
    return len(mapping) == block_size and \
            all(isinstance(p, int) for p in mapping) and \
            sorted(mapping) == list(range(block_size))


def permute(n, mapping):
    """Scramble the low bits of integer n.

    The low len(mapping) bits of n are permuted so that
    sequential integers do not produce sequential results.
    Bit i of the block is moved to bit position
    mapping[block_size - 1 - i], so the mapping is read in
    reverse. With the identity mapping this reverses the
    bits of the block.

    Bits at or above len(mapping) are passed through
    unchanged, which allows integers larger than the
    block to be reversed with unpermute().

    Args:
        n: non-negative integer to permute
        mapping: permutation of range(block_size)
    Returns:
        Permuted integer.
    """
    block_size = len(mapping)
    mask = (1 << block_size) - 1
    block = n & mask

    result = 0
    for i, position in enumerate(reversed(mapping)):
        if block & (1 << i):
            result |= 1 << position

    return (n & ~mask) | result


def unpermute(n, mapping):
    """Inverse of permute().

    Args:
        n: integer returned by permute()
        mapping: permutation used by permute()
    Returns:
        Original integer.
    """
    block_size = len(mapping)
    mask = (1 << block_size) - 1
    block = n & mask

    result = 0
    for i, position in enumerate(reversed(mapping)):
        if block & (1 << position):
            result |= 1 << i

    return (n & ~mask) | result
