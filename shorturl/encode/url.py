import logging

from shorturl.encode import basic
from shorturl.encode.basic import DEFAULT_ALPHABET, EncodeException
from shorturl.encode.permute import identity_mapping, is_permutation, \
        permute, unpermute

DEFAULT_BLOCK_SIZE = 24
MIN_LENGTH = 5


class ConfigException(ValueError):
    """Invalid URLEncoder configuration."""
    pass


class URLEncoder(object):
    """Reversible short identifier encoder.

    Maps non-negative integers to short strings for Tiny URL
    and bit.ly like URLs, and back again. Encoding scrambles
    the low block_size bits of the integer (encode) and then
    converts the result to a string over the alphabet (enbase).
    Decoding reverses both steps.

    URLEncoder objects are immutable once created and may be
    shared freely.
    """

    def __init__(self, alphabet=DEFAULT_ALPHABET,
            block_size=DEFAULT_BLOCK_SIZE, mapping=None):
        """URLEncoder constructor.

        Args:
            alphabet: string of unique characters used as
                digits. The position of a character is its
                digit value, and alphabet[0] is used for
                padding.
            block_size: number of low order bits which
                are permuted.
            mapping: optional permutation of range(block_size).
                Defaults to the identity mapping.
        Raises:
            ConfigException if the configuration is invalid.
        """
        if len(alphabet) < 2:
            raise ConfigException("Alphabet must contain at least two characters.")
        if len(set(alphabet)) != len(alphabet):
            raise ConfigException("Alphabet must not contain duplicate characters.")
        if not isinstance(block_size, int) or block_size < 0:
            raise ConfigException("block_size must be a non-negative integer.")

        if mapping is None:
            mapping = identity_mapping(block_size)
        mapping = tuple(mapping)
        if not is_permutation(mapping, block_size):
            raise ConfigException("mapping must be a permutation of range(%d)." % block_size)

        self._alphabet = alphabet
        self._alphabet_map = basic.alphabet_map(alphabet)
        self._block_size = block_size
        self._mask = (1 << block_size) - 1
        self._mapping = mapping

        self._log = logging.getLogger("%s.%s" % (__name__, self.__class__.__name__))
        self._log.debug("created encoder (base=%d, block_size=%d)" % \
                (len(alphabet), block_size))

    def __repr__(self):
        return "%s(alphabet=%r, block_size=%d)" % \
                (self.__class__.__name__, self._alphabet, self._block_size)

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def block_size(self):
        return self._block_size

    @property
    def mask(self):
        return self._mask

    @property
    def mapping(self):
        return self._mapping

    def encode(self, n):
        """Permute the low block_size bits of n."""
        return permute(n, self._mapping)

    def decode(self, n):
        """Reverse encode()."""
        return unpermute(n, self._mapping)

    def enbase(self, x, min_length=MIN_LENGTH):
        """Convert x to a string padded to min_length.

        Padding characters (alphabet[0]) are appended
        to the end of the string.
        """
        result = basic.enbase(x, len(self._alphabet), self._alphabet)
        return basic.pad(result, min_length, self._alphabet[0])

    def debase(self, x):
        """Convert string x to an integer.

        Raises:
            DecodeException if x contains a character
            which is not in the alphabet.
        """
        return basic.debase(x, len(self._alphabet), self._alphabet_map)

    def encode_url(self, n, min_length=MIN_LENGTH):
        """Encode integer n as a short identifier.

        Args:
            n: non-negative integer
            min_length: minimum length of the identifier
        Returns:
            identifier string
        Raises:
            EncodeException if n is negative.
        """
        if n < 0:
            raise EncodeException("unable to encode negative integer %d" % n)
        return self.enbase(self.encode(n), min_length)

    def decode_url(self, s):
        """Decode identifier s back to an integer.

        Raises:
            DecodeException if s contains a character
            which is not in the alphabet.
        """
        return self.decode(self.debase(s))


def create_encoder(alphabet=DEFAULT_ALPHABET, block_size=DEFAULT_BLOCK_SIZE,
        mapping=None):
    """Create a new URLEncoder.

    Raises:
        ConfigException if the configuration is invalid.
    """
    return URLEncoder(alphabet, block_size, mapping)

def encode_url(encoder, n, min_length=MIN_LENGTH):
    return encoder.encode_url(n, min_length)

def decode_url(encoder, s):
    return encoder.decode_url(s)


DEFAULT_ENCODER = URLEncoder()

def encode(n):
    return DEFAULT_ENCODER.encode(n)

def decode(n):
    return DEFAULT_ENCODER.decode(n)

def enbase(x, min_length=MIN_LENGTH):
    return DEFAULT_ENCODER.enbase(x, min_length)

def debase(x):
    return DEFAULT_ENCODER.debase(x)

def encode_url_simple(n, min_length=MIN_LENGTH):
    """Encode integer n with the default encoder."""
    return DEFAULT_ENCODER.encode_url(n, min_length)

def decode_url_simple(s):
    """Decode identifier s with the default encoder."""
    return DEFAULT_ENCODER.decode_url(s)
