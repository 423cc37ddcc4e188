"""
Application-wide constants for Grave Finder.

This module contains the default values used when repairing incomplete
registry documents, the fixed fragments of the text format, and the
exit codes used by the command-line interface.
"""

# Grave defaults
DEFAULT_GRAVE_NAME = ""
DEFAULT_GRAVE_DATES = ""
GENERATIONAL_SUFFIXES = ("JR", "SR")

# Row defaults
DEFAULT_ROW_NAME = "The Row"
DEFAULT_NUM_NICHES = 5
DEFAULT_URNS = 1

# Face defaults
DEFAULT_COLUMBARIUM_NAME = "Columbarium A"
DEFAULT_FACE_NAME = "North Face"
DEFAULT_SHORT_NAME = "SN"
DEFAULT_NUM_ROWS = 3

# Columbarium defaults
DEFAULT_NUM_FACES = 4

# Plot defaults
DEFAULT_PLOT_ID = -1
DEFAULT_PLOT_ANGLE = 0.0
DEFAULT_PLOT_CAPACITY = 6
DEFAULT_LAT = 0.0
DEFAULT_LNG = 0.0

# Breadcrumb names used when a niche index is not applicable
INVALID_FACE_NAME = "Invalid Face"
INVALID_ROW_NAME = "Invalid Row"
INVALID_URN_COUNT = 0

# Text format indentation
ROW_GRAVE_PADDING = "      "
FACE_ROW_PADDING = "    "
COLUMBARIUM_FACE_PADDING = "      "
PLOT_COLUMBARIUM_PADDING = "      "
CEMETERY_GRAVE_PADDING = "      "

# Storage
DEFAULT_DATA_FILE = "./assets/cemeteries.txt"
DOCUMENT_ENCODING = "utf-8"
BACKUP_SUFFIX = ".bak"

# Locator segments from the outermost container inwards
LOCATION_SEGMENTS = ("cemetery", "plot", "grave", "columbarium", "face", "row", "niche")

# Logging and file constants
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_KB

# CLI exit codes
EXIT_CANCELLED = 1
EXIT_ADDRESSING_ERROR = 2
EXIT_CONFIGURATION_ERROR = 3
EXIT_DOCUMENT_ERROR = 4
EXIT_PERMISSION_ERROR = 5
EXIT_STORAGE_ERROR = 6
EXIT_CLI_ERROR = 9
EXIT_GENERAL_ERROR = 10
EXIT_UNEXPECTED_ERROR = 11
