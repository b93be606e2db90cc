"""Common literal values used across mksite.

These constants keep directory names, limits, and month tables centralized so
the loader, renderer, builder, and tests can import the same values without
drifting. Intended for internal use within the mksite package.

Examples
--------
>>> from mksite import _constants
>>> _constants.PAGE_FILENAME_TEMPLATE.format(slug="hello-world")
'hello-world.html'
>>> _constants.MONTHS_ABBR[0]
'Jan'
"""

CONTENT_DIR = "content"
PUBLIC_DIR = "public"
ASSET_DIR = "assets"
ARCHIVE_DIR = "posts"
FAVICON_NAME = "favicon.svg"
INDEX_NAME = "index.html"
SOURCE_SUFFIX = ".txt"
PAGE_FILENAME_TEMPLATE = "{slug}.html"

ARCHIVE_TITLE = "Blog Index"
ARCHIVE_HEADING = "Blog Posts"

SCRATCH_BUFFER_SIZE = 8 * 1024
SLUG_MAX_LENGTH = 255
FRONT_MATTER_TERMINATOR = "---"

MONTHS_FULL = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTHS_ABBR = tuple(month[:3] for month in MONTHS_FULL)
