#!/usr/bin/env python3
"""
Upload the Ersatz fixture document before a Dredd run.

The fixture file is forwarded verbatim to the local Ersatz server, which then
serves the canned responses the API under test depends on. A missing fixture
file is not an error: the run simply proceeds without one.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

import requests
import yaml


FIXTURES_FILE = Path("_ft") / "ersatz-fixtures.yml"
CONFIGURE_URL = "http://localhost:9000/__configure"
CONTENT_TYPE = "application/x-yaml"
RELEASE_DELAY_SECONDS = 2.0
REQUEST_TIMEOUT_SECONDS = 10


def load_fixtures(path: Path) -> Optional[str]:
    """Return the fixture document, or None when there is none."""
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def upload_fixtures(contents: str, url: str = CONFIGURE_URL) -> None:
    """POST the fixture document to the Ersatz configure endpoint."""
    response = requests.post(
        url,
        data=contents.encode("utf-8"),
        headers={"Content-Type": CONTENT_TYPE},
        timeout=REQUEST_TIMEOUT_SECONDS,
    )
    # Ersatz answers with a plain acknowledgement; nothing to inspect.
    response.close()


def configure_fixtures(
    path: Path = FIXTURES_FILE,
    url: str = CONFIGURE_URL,
    delay: float = RELEASE_DELAY_SECONDS,
) -> bool:
    """
    Push fixtures to Ersatz and hold the run until the server has settled.

    Returns True when a fixture document was uploaded, False when the file was
    absent and the step was skipped.
    """
    contents = load_fixtures(path)
    if contents is None:
        print("No fixtures found, skipping hook.", flush=True)
        return False

    upload_fixtures(contents, url)
    print("Waiting before releasing", flush=True)
    time.sleep(delay)
    return True


def check_fixtures(path: Path) -> List[str]:
    """Parse the fixture file as YAML and list any problems found."""
    contents = load_fixtures(path)
    if contents is None:
        return [f"Fixture file not found: {path}"]

    try:
        documents = [doc for doc in yaml.safe_load_all(contents) if doc is not None]
    except yaml.YAMLError as e:
        return [f"YAML parsing error: {e}"]

    if not documents:
        return [f"Fixture file is empty: {path}"]
    return []


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Upload Ersatz fixtures ahead of a Dredd run"
    )
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=FIXTURES_FILE,
        help=f"Fixture document to upload (default: {FIXTURES_FILE})",
    )
    parser.add_argument(
        "--url",
        default=CONFIGURE_URL,
        help=f"Ersatz configure endpoint (default: {CONFIGURE_URL})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=RELEASE_DELAY_SECONDS,
        help=f"Seconds to wait after uploading (default: {RELEASE_DELAY_SECONDS})",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only validate the fixture YAML, do not upload it",
    )

    args = parser.parse_args()

    if args.check:
        problems = check_fixtures(args.fixtures)
        if problems:
            for problem in problems:
                print(f"⚠️  {problem}", file=sys.stderr)
            return 1
        print(f"✓ {args.fixtures} is valid YAML")
        return 0

    if configure_fixtures(args.fixtures, args.url, args.delay):
        print(f"✓ Fixtures from {args.fixtures} posted to {args.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
