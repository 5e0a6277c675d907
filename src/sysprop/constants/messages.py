"""Message templates for lookup errors and checker output."""

EMPTY_KEY = "Property key must not be empty"

NOT_SET = "Property not set: {key}"
OPTIONAL_NOT_SET = "Optional property not set: {key}"
MANDATORY_NOT_SET = "Mandatory property not set: {key}"

# ── Checker report lines ──────────────────────────────────────────────────
STATUS_OK = "[OK]     "
STATUS_MISSING = "[MISSING]"  # mandatory, not set
STATUS_UNSET = "[UNSET]  "  # optional, not set

MASKED_VALUE = "****"
