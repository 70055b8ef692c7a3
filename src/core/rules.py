"""
Legal constants for travel compliance.

These are facts about immigration and tax law, not tunables. Every
threshold and membership list used by the calculators lives here.
"""

# Schengen Area member states, matched by display name
SCHENGEN_COUNTRIES: frozenset[str] = frozenset(
    {
        "Austria",
        "Belgium",
        "Croatia",
        "Czech Republic",
        "Denmark",
        "Estonia",
        "Finland",
        "France",
        "Germany",
        "Greece",
        "Hungary",
        "Iceland",
        "Italy",
        "Latvia",
        "Liechtenstein",
        "Lithuania",
        "Luxembourg",
        "Malta",
        "Netherlands",
        "Norway",
        "Poland",
        "Portugal",
        "Slovakia",
        "Slovenia",
        "Spain",
        "Sweden",
        "Switzerland",
    }
)

# 183-day tax residency rule
TAX_RESIDENCY_THRESHOLD_DAYS = 183
TAX_RESIDENCY_WARNING_DAYS = 150
TAX_RESIDENCY_CRITICAL_DAYS = 180

# Schengen 90/180 rule
SCHENGEN_MAX_STAY_DAYS = 90
SCHENGEN_WINDOW_DAYS = 180
SCHENGEN_WARNING_REMAINING_DAYS = 20
SCHENGEN_CRITICAL_REMAINING_DAYS = 10
