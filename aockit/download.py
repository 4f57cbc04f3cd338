"""Fetching personal puzzle inputs from the puzzle website."""

from __future__ import annotations

import logging
import urllib.request
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

AOC_BASE_URL = "https://adventofcode.com"
VALID_DAYS = tuple(f"{day:02d}" for day in range(1, 26))


def _normalize_day(day: Union[int, str]) -> str:
    text = f"{day:02d}" if isinstance(day, int) else day
    if text not in VALID_DAYS:
        raise ValueError(f"invalid day {day!r}: expected one of 01 to 25")
    return text


def input_url(year: int, day: Union[int, str]) -> str:
    """URL of the puzzle input of ``day`` (written ``01`` to ``25``) in ``year``."""
    return f"{AOC_BASE_URL}/{int(year)}/day/{int(_normalize_day(day))}/input"


def download_input(
    year: int,
    day: Union[int, str],
    session: str,
    resources: Union[str, Path] = "resources",
) -> Path:
    """Download the input into ``resources/<year>/day<DD>/input.txt`` and return its path."""
    if not session:
        raise ValueError("a session cookie is needed to download puzzle input")
    day_text = _normalize_day(day)
    directory = Path(resources) / str(year) / f"day{day_text}"
    directory.mkdir(parents=True, exist_ok=True)
    url = input_url(year, day_text)
    request = urllib.request.Request(url, headers={"Cookie": f"session={session}"})
    logger.info("downloading %s", url)
    with urllib.request.urlopen(request) as response:
        content = response.read()
    target = directory / "input.txt"
    target.write_bytes(content)
    return target