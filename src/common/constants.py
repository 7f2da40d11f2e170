"""Shared constants for the museum API.

For environment-based configuration (upstream origin, page size, etc.), use the env module:
    from common.env import env
    base_url = env.collection_base_url()
"""

API_TITLE = "Museum Collection API"
API_VERSION = "0.1.0"

# Word the collections site appends to its result counter ("1 234 résultats")
RESULT_COUNT_WORD = "résultat"

# Bucket name for images whose record carries no type
UNSPECIFIED_IMAGE_TYPE = "unspecified"
ALL_IMAGE_TYPES = "all"

SORT_BY_DATE = "date"
SORT_BY_POPULARITY = "popularity"
