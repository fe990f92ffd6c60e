# conftest.py
import os
import threading
import time
from dataclasses import replace

import pytest
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from werkzeug.serving import make_server

from demoqa_checks.browser import chrome_options
from demoqa_checks.reporting import save_screenshot, upload_configured_report
from demoqa_checks.settings import Settings
from demoqa_checks.stub_site import create_app

from tests.fakes import practice_form_driver


@pytest.fixture(scope="session")
def settings():
    return Settings.from_env()


@pytest.fixture(scope="session")
def stub_server():
    """Serve the local practice form and /posts API on a free port."""
    server = make_server("127.0.0.1", 0, create_app(), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    thread.join(timeout=5)


@pytest.fixture
def fake_driver():
    return practice_form_driver()


@pytest.fixture(scope="function")
def driver(request, settings):
    try:
        driver = webdriver.Chrome(options=chrome_options(settings.headless))
    except WebDriverException as e:
        pytest.skip(f"Chrome is not available: {e.msg}")
    yield driver
    driver.quit()


# Hook to take screenshot and embed in HTML report on failure
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()

    if rep.when == "call" and rep.failed:
        driver = item.funcargs.get("driver")
        if driver:
            screenshots_dir = Settings.from_env().screenshots_dir
            screenshot_file = save_screenshot(driver, item.name, screenshots_dir)

            # Attach screenshot to pytest-html report
            if item.config.pluginmanager.hasplugin("html"):
                from pytest_html import extras
                extra = getattr(rep, "extras", [])
                extra.append(extras.image(os.path.abspath(screenshot_file)))
                rep.extras = extra


# Hook to upload report after the entire test session
def pytest_terminal_summary(terminalreporter, exitstatus, config):
    report_file = getattr(config.option, "htmlpath", None)
    if not report_file:
        return

    # Wait for pytest-html to finish writing final report
    time.sleep(1)

    settings = Settings.from_env()
    settings = replace(settings, report_file=report_file)
    try:
        upload_configured_report(settings)
    except Exception as e:
        print("Failed to upload report:", e)
