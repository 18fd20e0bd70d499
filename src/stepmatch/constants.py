"""Constants for stepmatch."""

# Leading keywords of a step line, in recognition order
STEP_KEYWORDS = ("Given", "When", "Then", "And")

# Continuation keyword, compatible with every step type
AND_KEYWORD = "And"

# Weight given to a same-type candidate when the line has no body text yet.
# Pattern weighting never scores a real overlap below PARTIAL_MATCH_FLOOR.
BLANK_BODY_WEIGHT = 0.1
PARTIAL_MATCH_FLOOR = 0.5

DEFAULT_PRIORITY = 0
NO_DOCUMENTATION = "No documentation found"

CONFIG_FILENAME = "stepmatch.toml"
DEFAULT_CATALOG_FILENAME = "steps.toml"
