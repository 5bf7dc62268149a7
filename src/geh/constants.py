"""Shared constants."""

DEFAULT_BACKGROUND_COLOR = "#000000"

# Root window property other background setters use to find the current pixmap.
ROOT_PIXMAP_ATOM = "_XROOTPMAP_ID"

# Length of the "http://" prefix skipped before looking for the host end; the
# extra character also covers the colon of "https:".
URI_SCHEME_PREFIX_LENGTH = 8

DOCUMENT_READ_CHUNK_SIZE = 64 * 1024
