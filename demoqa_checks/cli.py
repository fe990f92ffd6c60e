import argparse
from dataclasses import replace

import requests
from selenium.common.exceptions import WebDriverException

from .api import API_CHECKS, ApiClient, run_api_check
from .browser import browser_session
from .errors import CheckError
from .log import configure_logging
from .page import DemoQa
from .reporting import upload_configured_report
from .scenarios import SCENARIOS, run_form_scenario
from .settings import Settings


# ------------------------- commands -------------------------
def run_form(settings, scenario_name):
    scenario = SCENARIOS[scenario_name]
    with browser_session(headless=settings.headless) as driver:
        page = DemoQa(driver, timeout=settings.wait_timeout, poll_frequency=settings.poll_frequency)
        page.open(settings.form_url)
        run_form_scenario(page, scenario)
    print(f"Form scenario {scenario_name} passed.")


def run_api(settings):
    with ApiClient(settings.api_base_url, timeout=settings.wait_timeout) as client:
        for check in API_CHECKS:
            response = run_api_check(client, check)
            print(f"{check.name}: {response.describe()} OK")
    print(f"{len(API_CHECKS)} API checks passed.")


def serve(port):
    from .stub_site import create_app

    create_app().run(host="0.0.0.0", port=port)


# ------------------------- CLI -------------------------
def build_parser():
    parser = argparse.ArgumentParser(prog="demoqa-checks", description="UI and API checks for the demoqa practice form")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    commands = parser.add_subparsers(dest="command", required=True)

    form = commands.add_parser("form", help="Fill the practice form in a fresh Chrome session")
    form.add_argument("--scenario", choices=sorted(SCENARIOS), default="first_test")
    form.add_argument("--base-url", help="Site root (default: $DEMOQA_BASE_URL or https://demoqa.com)")

    api = commands.add_parser("api", help="Run the JSON API checks")
    api.add_argument("--base-url", help="API root (default: $API_BASE_URL or jsonplaceholder)")

    srv = commands.add_parser("serve", help="Serve the local copy of the form and API")
    srv.add_argument("--port", type=int, default=8080)

    commands.add_parser("upload-report", help="Upload report.html and screenshots to the configured bucket")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    settings = Settings.from_env()

    try:
        if args.command == "form":
            if args.base_url:
                settings = replace(settings, base_url=args.base_url)
            run_form(settings, args.scenario)
        elif args.command == "api":
            if args.base_url:
                settings = replace(settings, api_base_url=args.base_url)
            run_api(settings)
        elif args.command == "serve":
            serve(args.port)
        elif args.command == "upload-report":
            upload_configured_report(settings)
    except CheckError as e:
        print(f"FAILED: {e}")
        return 1
    except requests.RequestException as e:
        print(f"FAILED: request error: {e}")
        return 1
    except WebDriverException as e:
        print(f"FAILED: browser error: {e.msg}")
        return 1
    return 0
