# === Segment Config ===
WILDCARD = "*"  # Variable segment text and shape-hash token; set before building formats
SORT_VARIABLE_VALUES = False  # Sort observed values on output (False = insertion order)

# === Display Config ===
SHORT_ID_LENGTH = 8  # Display only, ~32 bits, not a primary key
COUNT_WIDTH = 6
ENABLE_COLOR = None  # None = only when stdout is a terminal
HIGHLIGHT_COLOR = "red"

# === Logging Config ===
LOG_LEVEL = "INFO"
LOG_FILE = None  # e.g. "logpattern.log"

# === YAML Config Loader ===
YAML_CONFIG = {}
