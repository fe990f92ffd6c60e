"""Symbolic field names bound to selectors on the practice form."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum

from selenium.webdriver.common.by import By


class Strategy(Enum):
    ID = By.ID
    XPATH = By.XPATH


@dataclass(frozen=True)
class Locator:
    name: str
    strategy: Strategy
    selector: str

    @classmethod
    def by_id(cls, name, selector):
        return cls(name, Strategy.ID, selector)

    @classmethod
    def by_xpath(cls, name, selector):
        return cls(name, Strategy.XPATH, selector)

    @property
    def by(self):
        """The ``(By.*, value)`` tuple Selenium expects."""
        return (self.strategy.value, self.selector)

    def format(self, **values):
        """Fill ``{placeholders}`` in the selector and return a new Locator."""
        return replace(self, selector=self.selector.format(**values))


class LocatorRegistry(Mapping):
    """Read-only mapping of field name to :class:`Locator`."""

    def __init__(self, locators):
        self._locators = {locator.name: locator for locator in locators}

    def __getitem__(self, name):
        return self._locators[name]

    def __iter__(self):
        return iter(self._locators)

    def __len__(self):
        return len(self._locators)

    def __repr__(self):
        return f"LocatorRegistry({sorted(self._locators)!r})"

    def replace(self, **locators):
        """Return a new registry with some fields pointed at other selectors.

        Keyword values may be a Locator or a bare id string.
        """
        merged = dict(self._locators)
        for name, value in locators.items():
            if isinstance(value, str):
                value = Locator.by_id(name, value)
            merged[name] = replace(value, name=name)
        return LocatorRegistry(merged.values())


PRACTICE_FORM_LOCATORS = LocatorRegistry([
    Locator.by_id("firstName", "firstName"),
    Locator.by_xpath("genderLabel", "//label[@for='gender-radio-{index}']"),
    Locator.by_id("genderInput", "gender-radio-{index}"),
    Locator.by_xpath("hobbiesLabel", "//label[@for='hobbies-checkbox-{index}']"),
    Locator.by_id("hobbiesInput", "hobbies-checkbox-{index}"),
    Locator.by_id("uploadPicture", "uploadPicture"),
    Locator.by_xpath("statePlaceholder", "//div[contains(text(),'Select State')]"),
    Locator.by_id("state", "state"),
    Locator.by_xpath("stateOption", "//div[text()='{state}']"),
    Locator.by_id("submit", "submit"),
])
