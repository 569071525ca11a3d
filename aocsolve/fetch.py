"""Download a day's puzzle input and store it as both part inputs."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Sequence
from pathlib import Path

import requests

BASE_URL = "https://adventofcode.com"
YEAR = 2024
INPUT_FILES = ("input1.txt", "input2.txt")

_DAY = re.compile(r"day-([0-9]+)")
_U32_MAX = 2**32 - 1


def parse_day(text: str) -> int:
    """Read the day number from a name such as ``day-01``."""
    match = _DAY.match(text)
    if match is None or int(match[1]) > _U32_MAX:
        raise ValueError(f"day `{text}` must be formatted as `day-01`")
    return int(match[1])


def input_url(day: int) -> str:
    """URL of the puzzle input for the given day."""
    return f"{BASE_URL}/{YEAR}/day/{day}/input"


def fetch_input(day: int, session: str) -> str:
    """Download the input text for a day using the session cookie."""
    response = requests.get(
        input_url(day), headers={"Cookie": f"session={session}"}, timeout=30
    )
    return response.text


def save_input(data: str, directory: str | os.PathLike[str], day_name: str) -> list[Path]:
    """Write the input into the day's directory under both part names."""
    paths = []
    for filename in INPUT_FILES:
        path = Path(directory) / day_name / filename
        path.write_text(data)
        paths.append(path)
    return paths


def main(argv: Sequence[str] | None = None) -> int:
    session = os.environ.get("SESSION")
    if session is None:
        raise SystemExit("should have a session token set")

    parser = argparse.ArgumentParser(description="Fetch a day's puzzle input.")
    parser.add_argument(
        "-d", "--day", required=True, help="day formatted as `day-01`"
    )
    parser.add_argument(
        "--current-working-directory",
        required=True,
        type=Path,
        help="root directory holding the day directories",
    )
    args = parser.parse_args(argv)
    try:
        day = parse_day(args.day)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"sending to `{input_url(day)}`")
    try:
        data = fetch_input(day, session)
    except requests.RequestException as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in save_input(data, args.current_working_directory, args.day):
        print(f"wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())