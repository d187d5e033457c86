"""Constants for datebucket."""

# Tokens searched for (case-insensitive) anywhere in a file path
EXTENSION_TOKENS = (".JPG", ".JPEG", ".PNG", ".PDF", ".JS")

# Bucket folder names, e.g. 2024.01.05
BUCKET_DATE_FORMAT = "%Y.%m.%d"

# Empty inputs or failed scans allowed before giving up
DEFAULT_MAX_ATTEMPTS = 2

PROMPT_LINES = (
    "Drag and drop needed folder to terminal to get the path.",
    "Or copy path manually.",
    "The path is needed to start sorting files in the source folder.",
    "Let's do it:",
)
