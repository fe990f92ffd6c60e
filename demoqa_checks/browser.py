"""Chrome sessions for the UI checks. The caller owns the session's lifetime."""

import logging
from contextlib import contextmanager

from selenium import webdriver
from selenium.webdriver.chrome.options import Options

logger = logging.getLogger(__name__)


def chrome_options(headless=True):
    chrome_options = Options()
    if headless:
        chrome_options.add_argument("--headless")
    chrome_options.add_argument("--no-sandbox")
    chrome_options.add_argument("--disable-dev-shm-usage")
    chrome_options.add_argument("--disable-gpu")
    chrome_options.add_argument("--window-size=1920,1080")
    return chrome_options


@contextmanager
def browser_session(headless=True):
    driver = webdriver.Chrome(options=chrome_options(headless))
    logger.info("Started Chrome session %s", driver.session_id)
    try:
        yield driver
    finally:
        driver.quit()
        logger.info("Chrome session closed")
