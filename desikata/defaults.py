"""
desikata Default Configuration
==============================
All default values for the exercises. These can be overridden by config.yaml.
This file serves as the single source of truth for initial/default configurations.

Usage:
    from desikata.defaults import DEFAULT_SETTINGS, DEFAULT_SMALL_WORDS
"""

# ============================================================================
# TITLE CASE
# ============================================================================
# Words kept lower case unless they open the title
DEFAULT_SMALL_WORDS = [
    "ka", "ki", "ke", "se", "aur", "ya", "the", "of", "in", "a", "an"
]

# ============================================================================
# REPORT CARD GRADES
# ============================================================================
# Checked top to bottom; first band whose floor the percentage reaches wins
DEFAULT_GRADES = [
    [90, "A+"],
    [80, "A"],
    [70, "B"],
    [60, "C"],
    [40, "D"],
]

# ============================================================================
# DEFAULT SETTINGS
# ============================================================================
DEFAULT_SETTINGS = {
    "upi": {
        "large_transaction_threshold": 5000,
        "small_transaction_ceiling": 100,
    },
    "titles": {
        "small_words": DEFAULT_SMALL_WORDS,
    },
    "report_card": {
        "max_mark": 100,
        "pass_mark": 40,
        "grades": DEFAULT_GRADES,
        "fail_grade": "F",
    },
    "logging": {
        "level": "INFO",
    },
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_default_settings():
    """Return a fresh copy of default settings."""
    import copy
    return copy.deepcopy(DEFAULT_SETTINGS)
