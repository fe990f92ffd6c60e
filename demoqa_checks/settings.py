"""Runtime settings read from environment variables."""

import os
from dataclasses import dataclass
from typing import Optional


def _flag(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    base_url: str = "https://demoqa.com"
    form_path: str = "/automation-practice-form"
    api_base_url: str = "https://jsonplaceholder.typicode.com"
    wait_timeout: float = 10.0
    poll_frequency: float = 0.5
    headless: bool = True
    screenshots_dir: str = "screenshots"
    report_file: str = "report.html"
    resource_log_file: str = "gcp_created_resources.json"
    report_bucket: Optional[str] = None
    credentials_file: Optional[str] = None

    @property
    def form_url(self):
        return self.base_url.rstrip("/") + self.form_path

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            base_url=env.get("DEMOQA_BASE_URL", defaults.base_url),
            form_path=env.get("DEMOQA_FORM_PATH", defaults.form_path),
            api_base_url=env.get("API_BASE_URL", defaults.api_base_url),
            wait_timeout=float(env.get("WAIT_TIMEOUT", defaults.wait_timeout)),
            poll_frequency=float(env.get("POLL_FREQUENCY", defaults.poll_frequency)),
            headless=_flag(env.get("HEADLESS", "true")),
            screenshots_dir=env.get("SCREENSHOTS_DIR", defaults.screenshots_dir),
            report_file=env.get("REPORT_FILE", defaults.report_file),
            resource_log_file=env.get("RESOURCE_LOG_FILE", defaults.resource_log_file),
            report_bucket=env.get("REPORT_BUCKET") or None,
            credentials_file=env.get("GOOGLE_APPLICATION_CREDENTIALS") or None,
        )
