"""Constants for page image extraction."""

# Generated image names, without extension
IMAGE_NAME_TEMPLATE = "page-{page:03d}-img-{index:04d}"
IMAGE_EXTENSION = ".png"

# Default extraction output format
DEFAULT_IMAGE_FORMAT = 'PNG'

# zlib default, same as the rendering library's own PNG writer
PNG_COMPRESS_LEVEL = 6

# Page selection
LAST_PAGE_TOKEN = 'N'
DEFAULT_PAGE_RANGE = '1-N'
PAGE_RANGE_CHARS = frozenset('0123456789N-,')

# CLI defaults
DEFAULT_OUTPUT_DIR = '.'
DEFAULT_PASSWORD = ''

# Environment entry point defaults
DEFAULT_ENV_OUTPUT_DIR = '/OUTPUT'

# Structured text block type for images
BLOCK_TYPE_IMAGE = 1

# Colorspace names
COLORSPACE_GRAY = 'DeviceGray'
COLORSPACE_RGB = 'DeviceRGB'
