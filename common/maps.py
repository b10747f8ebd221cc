# common/maps.py
from __future__ import annotations
from typing import Any, Dict, List, Optional

import pandas as pd
import pydeck as pdk

from common.view import popup_html

# Centre of Honshu, zoomed to show every J.League venue
JAPAN_VIEW = {"latitude": 36.2, "longitude": 138.25, "zoom": 4.3}
SELECTED_ZOOM = 9

MARKER_COLOR   = [30, 100, 200, 180]
SELECTED_COLOR = [220, 40, 40, 230]
MARKER_RADIUS  = 4000

MARKER_COLUMNS = ["shortName", "longName", "lat", "lon", "count", "popup"]


def markers_frame(features: List[Dict[str, Any]]) -> pd.DataFrame:
    """Flatten venue features into the point table the scatter layer draws."""
    rows = []
    for f in features:
        lon, lat = f["geometry"]["coordinates"]
        props = f["properties"]
        rows.append({
            "shortName": props["shortName"],
            "longName": props["longName"],
            "lat": lat,
            "lon": lon,
            "count": len(props["matches"]),
            "popup": popup_html(f),
        })
    return pd.DataFrame(rows, columns=MARKER_COLUMNS)


def _layer(df: pd.DataFrame, color: List[int], radius_scale: float, layer_id: str) -> pdk.Layer:
    return pdk.Layer(
        "ScatterplotLayer",
        data=df,
        id=layer_id,
        get_position="[lon, lat]",
        get_fill_color=color,
        get_radius=MARKER_RADIUS,
        radius_scale=radius_scale,
        radius_min_pixels=4,
        pickable=True,
    )


def build_deck(markers: pd.DataFrame, selected: Optional[str] = None) -> pdk.Deck:
    """
    Deck with one scatter layer for every marker plus, when a venue is
    selected, a larger highlighted marker centred in the view.
    """
    layers = [_layer(markers, MARKER_COLOR, 1.0, "venues")]
    view = dict(JAPAN_VIEW)

    hit = markers.loc[markers["shortName"] == selected] if selected else markers.iloc[0:0]
    if not hit.empty:
        layers.append(_layer(hit, SELECTED_COLOR, 2.0, "selected-venue"))
        view.update(latitude=float(hit.iloc[0]["lat"]), longitude=float(hit.iloc[0]["lon"]), zoom=SELECTED_ZOOM)

    return pdk.Deck(
        layers=layers,
        initial_view_state=pdk.ViewState(**view),
        tooltip={"html": "{popup}"},
        map_style=None,
    )
