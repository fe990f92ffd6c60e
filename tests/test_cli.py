from unittest import mock

import pytest
from selenium.common.exceptions import WebDriverException

from demoqa_checks import cli
from demoqa_checks.errors import ElementNotReady
from demoqa_checks.conditions import Readiness


def test_commands_need_no_flags():
    parser = cli.build_parser()
    assert parser.parse_args(["form"]).scenario == "first_test"
    assert parser.parse_args(["api"]).base_url is None
    assert parser.parse_args(["serve"]).port == 8080
    assert parser.parse_args(["upload-report"]).command == "upload-report"


def test_unknown_scenario_is_rejected():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["form", "--scenario", "nope"])


def test_api_command_against_stub(stub_server, capsys):
    assert cli.main(["api", "--base-url", stub_server]) == 0
    out = capsys.readouterr().out
    assert "get_post: GET" in out
    assert "2 API checks passed." in out


def test_api_command_failure_exit_status(stub_server, capsys):
    assert cli.main(["api", "--base-url", stub_server + "/missing"]) == 1
    assert "FAILED:" in capsys.readouterr().out


def test_form_command_reports_failed_field(capsys):
    error = ElementNotReady("submit", Readiness.PRESENT, 10)
    with mock.patch.object(cli, "run_form", side_effect=error) as run_form:
        assert cli.main(["form", "--base-url", "http://127.0.0.1:9"]) == 1
    settings, scenario = run_form.call_args.args
    assert settings.base_url == "http://127.0.0.1:9"
    assert scenario == "first_test"
    assert "FAILED: submit: element not present after 10s" in capsys.readouterr().out


def test_upload_report_command():
    with mock.patch.object(cli, "upload_configured_report", return_value=[]) as upload:
        assert cli.main(["upload-report"]) == 0
    upload.assert_called_once()


def test_api_command_connection_error(capsys):
    assert cli.main(["api", "--base-url", "http://127.0.0.1:9"]) == 1
    assert "FAILED: request error:" in capsys.readouterr().out


def test_form_command_browser_error(capsys):
    error = WebDriverException("chrome not found")
    with mock.patch.object(cli, "run_form", side_effect=error):
        assert cli.main(["form"]) == 1
    assert "FAILED: browser error: chrome not found" in capsys.readouterr().out
