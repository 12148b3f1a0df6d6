from .models.results import CompressionResult, DecompressionResult
from .service import CodecOptions, compress, decompress

# Convenience re-exports for direct functional use (optional)
from .utils.rle import rle_encode, rle_decode, RleDecodeError, RleOutputLimitError
from .metrics.ratios import compression_ratio, expansion_ratio
