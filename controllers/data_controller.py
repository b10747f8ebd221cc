"""
Data controller helpers that glue the JSON snapshots to the Streamlit pages.

This module exposes the cached loaders used by pages:
    - `load_matches()` / `load_venues()` return the raw records from the data
        directory (cached with `st.cache_data`).
    - `get_database()` returns the shared in-memory `MatchDatabase` built from
        both files (cached with `st.cache_resource`, one per process).
    - `get_view_controller()` returns this session's `ViewController`,
        creating it and running the initial all-teams load on first use.

Batch jobs never go through this module; they write the files it reads.
"""

from __future__ import annotations
from typing import Any, Dict, List

import streamlit as st

from common.constants import COMPETITION_YEARS, DATA_DIR, VENUES_FILE, matches_file_name
from common.query import MatchDatabase
from common.utils import read_json
from controllers.view_controller import ViewController

CONTROLLER_KEY = "view_controller"


@st.cache_data(ttl=3600, show_spinner=False)
def load_matches(years: str = COMPETITION_YEARS, data_dir: str = str(DATA_DIR)) -> List[Dict[str, Any]]:
    return read_json(matches_file_name(years), data_dir)


@st.cache_data(ttl=3600, show_spinner=False)
def load_venues(data_dir: str = str(DATA_DIR)) -> List[Dict[str, Any]]:
    return read_json(VENUES_FILE, data_dir)


@st.cache_resource(show_spinner=False)
def get_database(years: str = COMPETITION_YEARS, data_dir: str = str(DATA_DIR)) -> MatchDatabase:
    return MatchDatabase(load_matches(years, data_dir), load_venues(data_dir))


def get_view_controller() -> ViewController:
    ctrl = st.session_state.get(CONTROLLER_KEY)
    if ctrl is None:
        ctrl = ViewController(get_database())
        ctrl.load()
        st.session_state[CONTROLLER_KEY] = ctrl
    return ctrl
