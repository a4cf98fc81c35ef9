#Default alphabet for enbase / debase.
#Lookalike characters (0/o, 1/l/i) are omitted so identifiers
#can be read back by a human without ambiguity.
DEFAULT_ALPHABET = "mn6j2c4rv8bpygw95z7hsdaetxuk3fq"


class EncodeException(ValueError):
    """Integer can not be encoded (negative value)."""
    pass

class DecodeException(ValueError):
    """String contains a character absent from the alphabet."""
    pass


def alphabet_map(alphabet):
    """Return map from alphabet character to digit value.

    Args:
        alphabet: alphabet string or list
    Returns:
        dict of character to integer value.
    """
    result = {}
    for index, c in enumerate(alphabet):
        result[c] = index
    return result


def _base(base, alphabet):
    if base is None:
        base = len(alphabet)
    if base < 2 or base > len(alphabet):
        raise ValueError("base must be between 2 and %d" % len(alphabet))
    return base


def enbase(n, base=None, alphabet=DEFAULT_ALPHABET):
    """Encode integer n to arbitary base string.

    Converts a non-negative integer n to an arbitrary
    base string, most significant digit first, using
    alphabet[d] as the character for digit value d.

    Args:
        n: non-negative integer to convert
        base: optional base to convert to. Defaults
            to the length of the alphabet.
        alphabet: optional alphabet string or list.

    Returns:
        Encoded string value for n.

    Raises:
        EncodeException if n is negative.
    """
    base = _base(base, alphabet)

    if n < 0:
        raise EncodeException("unable to encode negative integer %d" % n)

    result = []
    if n == 0:
        result.append(alphabet[0])
    else:
        while n:
            n, digit = divmod(n, base)
            result.append(alphabet[digit])
        result.reverse()

    return "".join(result)


def debase(s, base=None, alphabet=DEFAULT_ALPHABET):
    """Decode arbitary base string to base 10 integer.

    Every character of s is significant, including any
    padding added by pad(). The last character is the
    least significant digit.

    Args:
        s: string to convert
        base: optional base for string. Defaults to
            the length of the alphabet.
        alphabet: optional alphabet string, list, or
            map (character to value). Providing a map
            will perform better than a string or list
            which requires a linear search to determine
            the value of each character.
    Returns:
        Decoded base 10 integer value for s.

    Raises:
        DecodeException if s contains a character which
        is not in the alphabet or whose value is not
        less than base.
    """
    base = _base(base, alphabet)

    result = 0
    for c in s:
        result *= base
        try:
            if isinstance(alphabet, dict):
                value = alphabet[c]
            else:
                value = alphabet.index(c)
        except (KeyError, ValueError):
            raise DecodeException("invalid character %r in %r" % (c, s))
        if value >= base:
            raise DecodeException("character %r in %r exceeds base %d" % (c, s, base))

        result += value
    return result


def pad(s, min_length, pad_char):
    """Pad s to min_length by appending pad_char.

    Padding is appended to the end of s, not prepended.
    Identifiers already issued depend on this, so it
    must not change. debase() will read the padding as
    trailing zero digits.

    Args:
        s: encoded string
        min_length: minimum length of the result
        pad_char: character to pad with, normally
            the alphabet's zero digit.
    Returns:
        Padded string.
    """
    if len(s) < min_length:
        s += pad_char * (min_length - len(s))
    return s
