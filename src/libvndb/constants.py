"""
API endpoint constants for the VNDB Kana API.
"""

BASE_URL = "https://api.vndb.org/kana"


class Endpoint:
    """Endpoint paths relative to the API base URL."""

    # POST query endpoints, one per entity category
    VN = "/vn"
    RELEASE = "/release"
    PRODUCER = "/producer"
    CHARACTER = "/character"
    STAFF = "/staff"
    TAG = "/tag"
    TRAIT = "/trait"
    ULIST = "/ulist"

    # GET endpoints
    STATS = "/stats"
    USER = "/user"
    AUTHINFO = "/authinfo"
    ULIST_LABELS = "/ulist_labels"


POST_ENDPOINTS = {
    "vn": Endpoint.VN,
    "release": Endpoint.RELEASE,
    "producer": Endpoint.PRODUCER,
    "character": Endpoint.CHARACTER,
    "staff": Endpoint.STAFF,
    "tag": Endpoint.TAG,
    "trait": Endpoint.TRAIT,
    "ulist": Endpoint.ULIST,
}

USER_STATS_FIELDS = "lengthvotes,lengthvotes_sum"
ULIST_LABEL_FIELDS = "count"
