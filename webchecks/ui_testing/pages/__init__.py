"""
================================================================================
Page Objects
================================================================================

Translation-aware page objects for the search property and its linked pages.

Each page class encapsulates:
    - A ``{langCode}`` URL template
    - Selectors derived from the translations of the requested language
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .challenge_page import ChallengePage
from .images_home_page import ImagesHomePage
from .mail_home_page import MailHomePage
from .search_home_page import SearchHomePage

__all__ = [
    "ChallengePage",
    "ImagesHomePage",
    "MailHomePage",
    "SearchHomePage",
]
