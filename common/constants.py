import os
from pathlib import Path
from dotenv import load_dotenv

# `.env` values fill in unset variables only
load_dotenv(override=False)

# Project root = .../j-match-map
APP_ROOT = Path(__file__).resolve().parents[1]

JLEAGUE_BASE_URL  = "https://data.j-league.or.jp"
MATCH_SEARCH_PATH = "/SFMS01/search"
VENUE_SEARCH_PATH = "/SFCM02/search"
WIKIPEDIA_API_URL = "https://ja.wikipedia.org/w/api.php"
USER_AGENT    = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36"
)
REQUEST_TIMEOUT = (10, 20)

# ----- Config (env or defaults) -----
DATA_DIR          = Path(os.getenv("JMATCH_DATA_DIR", str(APP_ROOT / "data")))
COMPETITION_YEARS = os.getenv("COMPETITION_YEARS", "2025")
REQUEST_DELAY     = float(os.getenv("JMATCH_REQUEST_DELAY", "1.0"))
LOG_LEVEL         = os.getenv("JMATCH_LOG_LEVEL", "INFO")

# Wikipedia rejects more titles than this in one query
GEOCODE_BATCH_SIZE = 50

VENUE_NAMES_FILE       = "venue-names.json"
VENUE_COORDINATES_FILE = "venue-coordinates.json"
VENUE_INCOMPLETE_FILE  = "venue-incomplete-coordinates.json"
VENUES_FILE            = "venues.json"

# Column order of the results table on the match search page
MATCH_FIELDS = [
    "year",         # 年度
    "tournaments",  # 大会
    "section",      # 節
    "date",         # 試合日
    "kickoff",      # K/O時刻
    "home",         # ホーム
    "score",        # スコア
    "away",         # アウェイ
    "venue",        # スタジアム
    "attendance",   # 入場者数
    "broadcast",    # インターネット中継・TV放送
]

# Division labels, matched in NFKC-folded tournament names such as
# "明治安田J1リーグ", "J1リーグ" or plain "J1" ("J1昇格プレーオフ" is not a league)
LEAGUES = ("J1", "J2", "J3")
LEAGUE_PATTERN = r"J([1-3])\s*(?:リーグ|$)"
OTHER_LEAGUE = "Other"


def matches_file_name(years: str = COMPETITION_YEARS) -> str:
    return f"matches-{years}.json"
