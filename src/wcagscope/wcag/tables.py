"""Static WCAG lookup tables — principle names, criterion titles, teams."""

from __future__ import annotations

from types import MappingProxyType

PRINCIPLES: MappingProxyType[int, str] = MappingProxyType(
    {
        1: "Perceivable",
        2: "Operable",
        3: "Understandable",
        4: "Robust",
    }
)

BEST_PRACTICES = "Best Practices"

# Keyed by "<principle>_<criterion>_<sub-criterion>", e.g. "1_4_3"
TITLES: MappingProxyType[str, str] = MappingProxyType(
    {
        "1_1_1": "Missing Alternative Text for Images",
        "1_2_1": "No Captions for Audio/Video Content",
        "1_3_1": "Content Not Adaptable (Use Semantic HTML)",
        "1_4_3": "Low Contrast Text (Hard to Read)",
        "1_4_6": "Insufficient Contrast for AAA Compliance",
        "1_4_10": "User Zoom Restricted (Viewport Issues)",
        "1_4_11": "Non-Descriptive Focus Indicators (Low Visibility)",
        "2_1_1": "Keyboard Navigation Not Supported",
        "2_2_2": "Users Don't Have Enough Time to Read/Interact",
        "2_3_1": "Flashing Content (Seizure Risk)",
        "2_4_2": "No Clear Page Title (Hard to Identify Content)",
        "2_4_4": "Missing Descriptive Links (Improve Click Clarity)",
        "2_4_6": "Headings Are Not Descriptive",
        "2_5_3": "Pointer Gestures Require Multi-Touch or Path-Based Actions",
        "3_1_1": "Difficult Language (Simplify Content)",
        "3_2_3": "Unexpected Behavior When Navigating",
        "3_2_5": "Links Open in a New Window Without Indicating",
        "3_3_1": "No Input Error Identification (User Confusion)",
        "4_1_1": "Invalid HTML (Parsing Issues)",
        "4_1_2": "Forms & Components Not Accessible to Assistive Tech",
        "4_1_3": "Status Messages Are Not Read by Assistive Tech",
    }
)

DEFAULT_TITLE = "Accessibility Issue Detected"
UNKNOWN_KEY = "Unknown"

DESIGN_TEAM = "Design Team"
DEVELOPMENT_TEAM = "Development Team"
CONTENT_TEAM = "Content Team"
GENERAL_COMPLIANCE = "General Accessibility Compliance"

# Checked in order; first substring found in the code wins
RESPONSIBILITIES: tuple[tuple[str, str], ...] = (
    ("1_", DESIGN_TEAM),
    ("2_", DEVELOPMENT_TEAM),
    ("3_", CONTENT_TEAM),
    ("4_", DEVELOPMENT_TEAM),
)

HELP_URL_TEMPLATE = "https://www.w3.org/WAI/WCAG22/quickref/?showtechniques=1#{code}"
