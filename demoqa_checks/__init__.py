"""Page objects and API checks for the demoqa practice form."""

from .errors import AssertionFailed, CheckError, ElementNotReady, StaleElement
from .locators import PRACTICE_FORM_LOCATORS, Locator, LocatorRegistry, Strategy
from .conditions import Readiness
from .page import DemoQa

__all__ = [
    "AssertionFailed",
    "CheckError",
    "DemoQa",
    "ElementNotReady",
    "Locator",
    "LocatorRegistry",
    "PRACTICE_FORM_LOCATORS",
    "Readiness",
    "StaleElement",
    "Strategy",
]

__version__ = "0.1.0"
