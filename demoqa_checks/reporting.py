"""Failure screenshots and upload of the pytest-html report to Cloud Storage."""

import json
import os

from google.cloud import storage
from google.oauth2 import service_account


def save_screenshot(driver, name, directory="screenshots"):
    os.makedirs(directory, exist_ok=True)
    screenshot_file = os.path.join(directory, f"{name}.png")
    driver.save_screenshot(screenshot_file)
    return screenshot_file


def get_bucket_name(resource_file):
    """First bucket listed in the resource log, or None.

    The log is written by the provisioning script that creates the report
    bucket outside this project, as {"buckets": ["name", ...]}. REPORT_BUCKET
    takes precedence over it.
    """
    if os.path.exists(resource_file):
        with open(resource_file) as f:
            data = json.load(f)
        buckets = data.get("buckets") or [None]
        return buckets[0]
    return None


def load_credentials(json_path):
    """Load GCP service account credentials from a JSON file."""
    if not json_path or not os.path.exists(json_path):
        raise FileNotFoundError(f"Service account JSON not found: {json_path}")
    return service_account.Credentials.from_service_account_file(json_path)


def upload_report(report_file, screenshots_dir, bucket_name, credentials=None, client=None):
    """Upload the HTML report and any PNG screenshots; return the uploaded gs:// URIs."""
    if client is None:
        client = storage.Client(credentials=credentials)
    bucket = client.bucket(bucket_name)
    uploaded = []

    blob = bucket.blob("report.html")
    blob.upload_from_filename(report_file)
    uploaded.append(f"gs://{bucket_name}/report.html")
    print(f"Uploaded pytest HTML report to gs://{bucket_name}/report.html")

    if os.path.isdir(screenshots_dir):
        for file in sorted(os.listdir(screenshots_dir)):
            if file.endswith(".png"):
                screenshot_path = os.path.join(screenshots_dir, file)
                bucket.blob(f"screenshots/{file}").upload_from_filename(screenshot_path)
                uploaded.append(f"gs://{bucket_name}/screenshots/{file}")
                print(f"Uploaded screenshot {file} to gs://{bucket_name}/screenshots/{file}")

    return uploaded


def upload_configured_report(settings):
    """Upload using Settings; skip quietly when no report or bucket is configured."""
    if not os.path.exists(settings.report_file):
        print("Report not found, skipping upload.")
        return []

    bucket_name = settings.report_bucket or get_bucket_name(settings.resource_log_file)
    if not bucket_name:
        print("No GCP bucket found. Skipping upload.")
        return []

    credentials = None
    if settings.credentials_file:
        credentials = load_credentials(settings.credentials_file)
    return upload_report(settings.report_file, settings.screenshots_dir, bucket_name, credentials=credentials)
