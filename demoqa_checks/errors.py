"""Failures raised by the page object, the scenario driver and the API client."""


class CheckError(Exception):
    """Base class for every failure raised by demoqa_checks."""


class ElementNotReady(CheckError):
    """A readiness condition did not hold before the wait timed out."""

    def __init__(self, field, condition, timeout=None):
        self.field = field
        self.condition = condition
        self.timeout = timeout
        message = f"{field}: element not {condition}"
        if timeout is not None:
            message += f" after {timeout}s"
        super().__init__(message)


class StaleElement(CheckError):
    """The element detached from the document between lookup and action."""

    def __init__(self, field, condition):
        self.field = field
        self.condition = condition
        super().__init__(f"{field}: element went stale while {condition}")


class AssertionFailed(CheckError, AssertionError):
    """A check on a returned value did not hold."""
