from murmurbloom.base import Filter
from murmurbloom.bloom import (
    INDEX_SIZE,
    BloomFilter,
    bucket_count_for,
    estimate_false_positive_probability,
    optimal_k,
    size_for,
)
from murmurbloom.config import FilterConfig, configure_logging
from murmurbloom.encoding import Encoder, default_encoder, encode_item, text_encoder
from murmurbloom.exceptions import (
    InvalidParameterError,
    MurmurBloomError,
    UnencodableItemError,
)
from murmurbloom.murmur import int_from_bytes, int_to_bytes, murmur2, to_int32
