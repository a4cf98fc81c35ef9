from shorturl.encode.basic import DEFAULT_ALPHABET, EncodeException, DecodeException
from shorturl.encode.url import DEFAULT_BLOCK_SIZE, MIN_LENGTH, DEFAULT_ENCODER, \
        ConfigException, URLEncoder, create_encoder, encode_url, decode_url, \
        encode_url_simple, decode_url_simple
