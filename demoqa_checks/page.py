"""
Page object for the demoqa automation practice form.

Every public operation follows the same steps: resolve a locator, block until
its readiness condition holds, perform one action, return the result. The page
object holds a non-owning reference to the WebDriver; opening and quitting the
browser is the caller's job.
"""

import logging
import threading

from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.support.ui import WebDriverWait

from .conditions import Readiness
from .errors import ElementNotReady, StaleElement
from .locators import PRACTICE_FORM_LOCATORS

logger = logging.getLogger(__name__)

PRACTICE_FORM_URL = "https://demoqa.com/automation-practice-form"

GENDERS = {"Male": 1, "Female": 2, "Other": 3}
HOBBIES = {"Sports": 1, "Reading": 2, "Music": 3}

CLICK_SCRIPT = "arguments[0].click();"
SCROLL_SCRIPT = "arguments[0].scrollIntoView();"


def _state_name(state):
    # the name is placed inside a single-quoted XPath literal
    if "'" in state:
        raise ValueError(f"State name {state!r} must not contain a single quote")
    return state


def _index(choices, name, kind):
    try:
        return choices[name]
    except KeyError:
        raise ValueError(f"Unknown {kind} {name!r}, expected one of {sorted(choices)}") from None


class DemoQa:
    """Wait-gated interactions with the practice form.

    One instance is bound to one WebDriver and to the thread that created it.
    Calls from any other thread raise RuntimeError, because a browser session
    accepts one writer at a time.
    """

    def __init__(self, driver, timeout=10, poll_frequency=0.5, registry=PRACTICE_FORM_LOCATORS):
        self.driver = driver
        self.timeout = timeout
        self.poll_frequency = poll_frequency
        self.locators = registry
        self._owner_thread = threading.get_ident()

    # ------------------------- plumbing -------------------------
    def _check_thread(self):
        current = threading.get_ident()
        if current != self._owner_thread:
            raise RuntimeError(
                f"DemoQa is bound to thread {self._owner_thread}, called from thread {current}"
            )

    def _wait(self, field, condition, **values):
        """Block until ``field`` meets ``condition`` and return the element."""
        self._check_thread()
        locator = self.locators[field]
        if values:
            locator = locator.format(**values)
        logger.debug("Waiting for %s (%s=%s) to be %s", field, locator.strategy.name, locator.selector, condition)
        wait = WebDriverWait(self.driver, self.timeout, poll_frequency=self.poll_frequency)
        try:
            return wait.until(condition.expectation(locator.by))
        except TimeoutException as e:
            logger.warning("%s not %s after %ss", field, condition, self.timeout)
            raise ElementNotReady(field, condition, self.timeout) from e
        except StaleElementReferenceException as e:
            logger.warning("%s went stale while waiting to be %s", field, condition)
            raise StaleElement(field, condition) from e

    def _interact(self, field, condition, action, **values):
        element = self._wait(field, condition, **values)
        try:
            return action(element)
        except StaleElementReferenceException as e:
            logger.warning("%s went stale after becoming %s", field, condition)
            raise StaleElement(field, condition) from e

    def _enforced_click(self, element):
        # Clicks through overlays and onto styled labels that hide the real input
        self.driver.execute_script(CLICK_SCRIPT, element)

    def wait_for(self, field, condition=Readiness.PRESENT, **values):
        """Block until any registered field meets ``condition``; return the element."""
        return self._wait(field, Readiness(condition), **values)

    # ------------------------- navigation -------------------------
    def open(self, url=PRACTICE_FORM_URL):
        self._check_thread()
        logger.info("Opening %s", url)
        self.driver.get(url)

    # ------------------------- submit -------------------------
    def validate_submit_button_exists(self):
        """True when the submit button is present and visible.

        A button that is present but stays hidden for the whole wait gives
        False. A missing button raises ElementNotReady.
        """
        self._wait("submit", Readiness.PRESENT)
        try:
            element = self._wait("submit", Readiness.VISIBLE)
        except ElementNotReady:
            return False
        try:
            return element.is_displayed()
        except StaleElementReferenceException as e:
            raise StaleElement("submit", Readiness.VISIBLE) from e

    def scroll_to_submit(self):
        self._interact("submit", Readiness.VISIBLE,
                       lambda el: self.driver.execute_script(SCROLL_SCRIPT, el))

    def submit(self, enforced=False):
        click = self._enforced_click if enforced else (lambda el: el.click())
        self._interact("submit", Readiness.CLICKABLE, click)
        logger.info("Form submitted")

    # ------------------------- first name -------------------------
    def enter_first_name(self, first_name):
        self._interact("firstName", Readiness.CLICKABLE, lambda el: el.send_keys(first_name))

    def validate_first_name_is_entered(self):
        return self._interact("firstName", Readiness.PRESENT, lambda el: el.get_attribute("value"))

    # ------------------------- gender -------------------------
    def select_gender(self, gender="Male"):
        """Click the gender radio's label.

        The styled label covers the input, so the click is enforced through a
        script. Clicking an already selected radio leaves it selected.
        """
        index = _index(GENDERS, gender, "gender")
        self._interact("genderLabel", Readiness.PRESENT, self._enforced_click, index=index)

    def validate_gender_is_selected(self, gender):
        index = _index(GENDERS, gender, "gender")
        return self._interact("genderInput", Readiness.PRESENT, lambda el: el.is_selected(), index=index)

    def validate_male_gender_is_selected(self):
        return self.validate_gender_is_selected("Male")

    # ------------------------- hobbies -------------------------
    def select_hobby(self, hobby="Sports"):
        """Toggle a hobby checkbox by clicking its label. A second call unchecks it."""
        index = _index(HOBBIES, hobby, "hobby")
        self._interact("hobbiesLabel", Readiness.PRESENT, self._enforced_click, index=index)

    def validate_hobby_is_selected(self, hobby):
        index = _index(HOBBIES, hobby, "hobby")
        return self._interact("hobbiesInput", Readiness.PRESENT, lambda el: el.is_selected(), index=index)

    # ------------------------- picture -------------------------
    def upload_picture(self, path):
        self._interact("uploadPicture", Readiness.PRESENT, lambda el: el.send_keys(str(path)))

    # ------------------------- state -------------------------
    def validate_state_placeholder_shown(self):
        return self._interact("statePlaceholder", Readiness.PRESENT, lambda el: el.is_displayed())

    def select_state(self, state="NCR"):
        state = _state_name(state)
        self._interact("state", Readiness.CLICKABLE, lambda el: el.click())
        self._interact("stateOption", Readiness.CLICKABLE, lambda el: el.click(), state=state)

    def validate_state_is_selected(self, state):
        return self._interact("stateOption", Readiness.PRESENT, lambda el: el.is_displayed(), state=_state_name(state))
