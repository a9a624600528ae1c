# -*- coding: utf-8 -*-
"""Gradio admin and path-finder UI for the campus navigator.

Run with ``python apps/app.py``; the port comes from ``CNAV_SERVER_PORT``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import gradio as gr

from campus_nav.config import configure_logging, get_config
from campus_nav.container import get_container
from campus_nav.domain.errors import CampusNavError
from campus_nav.presentation import (
    estimate_message,
    format_error,
    format_path_result,
    locations_table,
    map_iframe,
    run_action,
)
from campus_nav.services import CampusNavigatorService

configure_logging()

CAMPUS_CHOICES: List[str] = ["North", "South"]
LOCATION_HEADERS: List[str] = ["name", "lat", "lng", "campus"]


def _service() -> CampusNavigatorService:
    return get_container().navigator


def _map_html(path: Optional[List[str]] = None) -> str:
    try:
        return map_iframe(_service().render_map(path=path))
    except CampusNavError as e:
        return f"<p>{format_error(e)}</p>"


def _refresh() -> Tuple[dict, dict, dict, dict, dict, dict]:
    """New choices for every node dropdown plus the graph JSON."""
    nodes = _service().list_nodes()
    return (
        gr.update(choices=nodes),
        gr.update(choices=nodes),
        gr.update(choices=nodes),
        gr.update(choices=nodes),
        gr.update(choices=nodes),
        _service().graph().to_dict(),
    )


# ============================ HANDLERS ============================
def find_path(source: str, destination: str) -> Tuple[str, str]:
    if not source or not destination:
        return "source, destination required", _map_html()
    result = _service().find_path(source, destination)
    return format_path_result(result, source, destination), _map_html(list(result.path))


def add_location(name: str):
    name = (name or "").strip()
    message = run_action(
        lambda: _service().add_location(name), f"Location '{name}' added"
    )
    return (message, *_refresh())


def add_path(source: str, target: str, distance: Optional[float]):
    if not source or not target or distance is None:
        return ("from, to, distance required", *_refresh())
    message = run_action(
        lambda: _service().add_path(source, target, distance),
        f"Path added: {source} <-> {target} ({distance:g}m)",
    )
    return (message, *_refresh())


def remove_path(source: str, target: str):
    message = run_action(
        lambda: _service().remove_path(source, target),
        f"Path removed between {source} and {target}",
    )
    return (message, *_refresh())


def delete_location(name: str):
    message = run_action(
        lambda: _service().delete_location(name), f"Location '{name}' deleted"
    )
    return (message, *_refresh())


def estimate(source: str, target: str) -> Tuple[str, Optional[float]]:
    try:
        meters = _service().estimate_distance(source, target)
    except CampusNavError as e:
        return format_error(e), None
    return estimate_message(source, target, meters), meters


def save_gps_location(
    name: str, lat: Optional[float], lng: Optional[float], campus: str, update: bool
) -> Tuple[str, list]:
    service = _service()
    if update:
        message = run_action(
            lambda: service.update_gps_location(name, lat, lng, campus),
            "GPS location updated successfully",
        )
    else:
        message = run_action(
            lambda: service.add_gps_location(name, lat, lng, campus),
            "GPS location added successfully",
        )
    return message, locations_table(service.list_gps_locations())


# ============================ UI ============================
with gr.Blocks(title="Campus Navigation") as app:
    gr.Markdown(
        """
# 🗺️ Campus Navigation
Find the shortest path across campus using Dijkstra's Algorithm
"""
    )

    initial_nodes = _service().list_nodes()

    with gr.Tab("🧭 Find path"):
        with gr.Row():
            source_dd = gr.Dropdown(initial_nodes, label="📍 Source")
            destination_dd = gr.Dropdown(initial_nodes, label="🏁 Destination")
        btn_find = gr.Button("🚀 Find path")
        result_md = gr.Markdown()
        map_view = gr.HTML(value=_map_html())

    with gr.Tab("🛠️ Manage graph"):
        with gr.Row():
            new_location_tb = gr.Textbox(label="New location name")
            btn_add_location = gr.Button("➕ Add location")
        with gr.Row():
            path_from_dd = gr.Dropdown(initial_nodes, label="From")
            path_to_dd = gr.Dropdown(initial_nodes, label="To")
            distance_nb = gr.Number(label="Distance (m)", minimum=0)
        with gr.Row():
            btn_estimate = gr.Button("📏 Estimate from GPS")
            btn_add_path = gr.Button("🔗 Add / update path")
            btn_remove_path = gr.Button("✂️ Remove path")
        with gr.Row():
            delete_dd = gr.Dropdown(initial_nodes, label="Location to delete")
            btn_delete = gr.Button("🗑️ Delete location", variant="stop")
        status_tb = gr.Textbox(label="Status", lines=2)
        graph_json = gr.JSON(value=_service().graph().to_dict(), label="Graph")

    with gr.Tab("🛰️ GPS locations"):
        with gr.Row():
            gps_name_tb = gr.Textbox(label="Name")
            gps_lat_nb = gr.Number(label="Latitude")
            gps_lng_nb = gr.Number(label="Longitude")
            gps_campus_dd = gr.Dropdown(CAMPUS_CHOICES, value="North", label="Campus")
        gps_update_cb = gr.Checkbox(label="Update existing location", value=False)
        btn_save_gps = gr.Button("💾 Save GPS location")
        gps_status_tb = gr.Textbox(label="Status", lines=1)
        gps_table = gr.Dataframe(
            value=locations_table(_service().list_gps_locations()),
            headers=LOCATION_HEADERS,
            interactive=False,
        )

    refresh_outputs = [
        source_dd,
        destination_dd,
        path_from_dd,
        path_to_dd,
        delete_dd,
        graph_json,
    ]

    btn_find.click(
        find_path, inputs=[source_dd, destination_dd], outputs=[result_md, map_view]
    )
    btn_add_location.click(
        add_location, inputs=new_location_tb, outputs=[status_tb, *refresh_outputs]
    )
    btn_add_path.click(
        add_path,
        inputs=[path_from_dd, path_to_dd, distance_nb],
        outputs=[status_tb, *refresh_outputs],
    )
    btn_remove_path.click(
        remove_path,
        inputs=[path_from_dd, path_to_dd],
        outputs=[status_tb, *refresh_outputs],
    )
    btn_delete.click(
        delete_location, inputs=delete_dd, outputs=[status_tb, *refresh_outputs]
    )
    btn_estimate.click(
        estimate, inputs=[path_from_dd, path_to_dd], outputs=[status_tb, distance_nb]
    )
    btn_save_gps.click(
        save_gps_location,
        inputs=[gps_name_tb, gps_lat_nb, gps_lng_nb, gps_campus_dd, gps_update_cb],
        outputs=[gps_status_tb, gps_table],
    )


if __name__ == "__main__":
    app.launch(server_port=get_config().server_port)
