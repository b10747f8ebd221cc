"""
Common utility functions for data fetching and lightweight helpers used by
both the batch jobs and the Streamlit pages.

This module contains network helpers (a small requests.Session wrapper for
the J.League data site), JSON snapshot readers/writers for the data
directory, and the text helpers used to turn scraped cells into sortable or
numeric values (`parse_match_date`, `parse_attendance`, `nfkc`).

Nothing here imports Streamlit, so the jobs can run from a plain shell.
"""

# Import libraries
from __future__ import annotations
import json, logging, re, unicodedata
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional
import requests
from .constants import DATA_DIR, JLEAGUE_BASE_URL, REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})

def jleague_url(path: str) -> str:
    return f"{JLEAGUE_BASE_URL.rstrip('/')}/{path.lstrip('/')}"

def jleague_get(path: str, params: Optional[Dict[str, Any]] = None) -> str:
    """GET a page from the J.League data site and return its HTML text."""
    url = jleague_url(path)
    logger.debug(f"get from: {url} params={params}")
    resp = SESSION.get(url, params=params, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.text

def jleague_post(path: str, data: Dict[str, Any]) -> Any:
    """POST a form to the J.League data site and return the decoded JSON body."""
    url = jleague_url(path)
    logger.debug(f"post to: {url}, with body: {data}")
    resp = SESSION.post(
        url,
        data=data,
        headers={"Content-Type": "application/x-www-form-urlencoded; charset=UTF-8"},
        timeout=REQUEST_TIMEOUT,
    )
    resp.raise_for_status()
    return resp.json()

# ---------- JSON snapshots ----------

def data_path(file_name: str, data_dir: Optional[Path] = None) -> Path:
    return Path(data_dir or DATA_DIR) / file_name

def read_json(file_name: str, data_dir: Optional[Path] = None) -> Any:
    path = data_path(file_name, data_dir)
    logger.debug(f"read from: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)

def write_json(file_name: str, payload: Any, data_dir: Optional[Path] = None) -> Path:
    path = data_path(file_name, data_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"write to: {path}")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return path

# ---------- Text helpers ----------

def nfkc(text: Any) -> str:
    """Fold full-width letters/digits to ASCII ('Ｊ１リーグ' -> 'J1リーグ')."""
    return unicodedata.normalize("NFKC", str(text or "")).strip()

_DATE_RE = re.compile(r"^(?:(\d{2,4})/)?(\d{1,2})/(\d{1,2})")

def parse_match_date(raw: Any, year: Any = None) -> Optional[date]:
    """
    Parse the match-day cell into a date.
    Accepts '25/02/14(金)', '2025/02/14' and '02/14(金)' (year taken from `year`).
    Returns None when the cell does not look like a date (e.g. '未定').
    """
    m = _DATE_RE.match(nfkc(raw))
    if not m:
        return None
    y, mo, d = m.groups()
    if y is None:
        y = nfkc(year)[:4]
        if not y.isdigit():
            return None
    yy = int(y)
    if yy < 100:
        yy += 2000
    try:
        return date(yy, int(mo), int(d))
    except ValueError:
        return None

def sort_date(raw: Any, year: Any = None) -> str:
    """ISO string of `parse_match_date`, '' when unparseable (ordered last by the match query)."""
    d = parse_match_date(raw, year)
    return d.isoformat() if d else ""

def parse_attendance(raw: Any) -> int:
    digits = re.sub(r"[^\d]", "", nfkc(raw))
    return int(digits) if digits else 0
