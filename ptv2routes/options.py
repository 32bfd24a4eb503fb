"""Run-time options of the public transport export."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Options:
    """Settings that control which layers are written and how."""

    location_index_type: str = "sparse_mem_array"
    output_format: str = "SQlite"
    output_directory: str = ""
    verbose: bool = False
    crossings: bool = True
    platforms: bool = True
    points: bool = True
    railway_details: bool = True
    stations: bool = True
    stops: bool = True