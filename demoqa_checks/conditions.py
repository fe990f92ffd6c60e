"""Readiness conditions a located element must meet before it is used."""

from enum import Enum

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.support import expected_conditions as EC


class Readiness(str, Enum):
    PRESENT = "present"
    VISIBLE = "visible"
    CLICKABLE = "clickable"
    SELECTED = "selected"

    def __str__(self):
        return self.value

    def expectation(self, by):
        """Build the WebDriverWait predicate for a ``(By.*, value)`` tuple.

        Every predicate returns the element once the condition holds.
        """
        if self is Readiness.PRESENT:
            return EC.presence_of_element_located(by)
        if self is Readiness.VISIBLE:
            return EC.visibility_of_element_located(by)
        if self is Readiness.CLICKABLE:
            return EC.element_to_be_clickable(by)
        return _selected_element_located(by)


def _selected_element_located(by):
    # EC.element_located_to_be_selected returns a bool, not the element
    def _predicate(driver):
        try:
            element = driver.find_element(*by)
            return element if element.is_selected() else False
        except StaleElementReferenceException:
            return False

    return _predicate
