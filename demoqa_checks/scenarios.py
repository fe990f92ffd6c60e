"""Form scenarios as data, plus the one driver that walks them through the page."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .errors import AssertionFailed

logger = logging.getLogger(__name__)


def check(condition, message):
    if not condition:
        raise AssertionFailed(message)


@dataclass(frozen=True)
class FormScenario:
    name: str
    first_name: Optional[str] = None
    gender: Optional[str] = None
    hobby: Optional[str] = None
    picture: Optional[str] = None
    state: Optional[str] = None
    check_submit_visible: bool = False
    submit: bool = False


SCENARIOS = {
    "first_test": FormScenario(
        name="first_test",
        first_name="John",
        gender="Male",
        check_submit_visible=True,
    ),
    "simple": FormScenario(name="simple", first_name="John"),
    "practice": FormScenario(
        name="practice",
        first_name="John",
        gender="Male",
        hobby="Sports",
        picture="README.md",
        state="NCR",
        check_submit_visible=True,
        submit=True,
    ),
}


def run_form_scenario(page, scenario):
    """Fill the form in field order and check each step's result.

    Raises AssertionFailed on a wrong result, and lets ElementNotReady or
    StaleElement from the page propagate.
    """
    logger.info("Running form scenario %s", scenario.name)

    if scenario.check_submit_visible:
        check(page.validate_submit_button_exists(), "submit button is not visible")

    if scenario.first_name is not None:
        page.enter_first_name(scenario.first_name)
        entered = page.validate_first_name_is_entered()
        check(entered == scenario.first_name,
              f"first name is {entered!r}, expected {scenario.first_name!r}")

    if scenario.gender is not None:
        page.select_gender(scenario.gender)
        check(page.validate_gender_is_selected(scenario.gender),
              f"gender {scenario.gender} is not selected")

    if scenario.hobby is not None:
        page.select_hobby(scenario.hobby)
        check(page.validate_hobby_is_selected(scenario.hobby),
              f"hobby {scenario.hobby} is not selected")

    if scenario.picture is not None:
        page.upload_picture(os.path.abspath(scenario.picture))

    if scenario.state is not None:
        page.scroll_to_submit()
        page.select_state(scenario.state)
        check(page.validate_state_is_selected(scenario.state),
              f"state {scenario.state} is not shown as selected")

    if scenario.submit:
        page.submit()

    logger.info("Form scenario %s passed", scenario.name)
