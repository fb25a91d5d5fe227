"""
Default limits and defaults for the operation tables.

Operations READ from this config but never mutate it.
"""

DEFAULT_CONFIG = {
    # ------------------------------------------------------------------
    # id provider
    # ------------------------------------------------------------------
    "id": {
        "nanoid_size": 21,
        "nanoid_alphabet": "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "max_nanoid_size": 1024,
        "snowflake_worker_mask": 0x3FF,  # 10 bits
        "snowflake_sequence_mask": 0xFFF,  # 12 bits
    },
    # ------------------------------------------------------------------
    # random provider
    # ------------------------------------------------------------------
    "random": {
        "int_min": 0,
        "int_max": 100,
        "float_min": 0.0,
        "float_max": 1.0,
        "bytes_size": 16,
        "max_bytes_size": 1024,
    },
    # ------------------------------------------------------------------
    # string provider
    # ------------------------------------------------------------------
    "string": {
        "trim_cutset": " \t\n\r",
        "separator": ",",
        "max_repeat_count": 10000,
    },
    # ------------------------------------------------------------------
    # list provider
    # ------------------------------------------------------------------
    "list": {
        "separator": ",",
    },
    # ------------------------------------------------------------------
    # fake provider
    # ------------------------------------------------------------------
    "fake": {
        "locale": "en_US",
        "sentence_words": 10,
        "paragraph_sentences": 3,
        "lorem_words": 50,
        "price_min": 1.0,
        "price_max": 1000.0,
    },
}
