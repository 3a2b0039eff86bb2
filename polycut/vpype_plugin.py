"""vpype plugin for polycut.

This module provides vpype integration, allowing closed paths in a vpype
pipeline to be split along a cut path.

Usage:
    vpype read input.svg polycut --cut "150,0 150,300" write output.svg
"""

import logging

import click
import numpy as np
import vpype
import vpype_cli

from .cutting import split_polygon, choose_piece
from .geometry import Point, PolycutError, project_cut_endpoints
from .geometry.polygon import open_ring
from .svg_io import parse_points

logger = logging.getLogger(__name__)

CLOSED_TOLERANCE = 0.1
SNAP_TOLERANCE = 10.0


def line_to_polygon(line: np.ndarray):
    """Convert a closed vpype line to an open vertex loop, or None if it is open."""
    # vpype lines are complex arrays (x + yj)
    if len(line) < 4 or abs(line[-1] - line[0]) > CLOSED_TOLERANCE:
        return None
    points = [Point(float(p.real), float(p.imag)) for p in line[:-1]]
    return open_ring(points)


def polygon_to_line(polygon) -> np.ndarray:
    """Convert an open vertex loop back to a closed vpype line."""
    coords = [complex(p.x, p.y) for p in polygon]
    coords.append(coords[0])
    return np.array(coords, dtype=complex)


def cut_line_collection(
    lines: vpype.LineCollection,
    cut,
    keep_point=None,
    tolerance: float = SNAP_TOLERANCE,
) -> vpype.LineCollection:
    """Replace every closed line the cut crosses with the pieces it splits into.

    A closed line is only split when both ends of the cut lie within
    ``tolerance`` of its boundary; every other line is kept as-is.
    """
    result = vpype.LineCollection()
    for line in lines:
        polygon = line_to_polygon(line)
        if polygon is None or len(polygon) < 3:
            result.append(line)
            continue

        try:
            start, end = project_cut_endpoints(polygon, cut)
            if start.distance > tolerance or end.distance > tolerance:
                result.append(line)
                continue
            pieces = split_polygon(polygon, cut)
        except PolycutError as e:
            logger.warning("leaving path unsplit: %s", e)
            result.append(line)
            continue

        if keep_point is not None:
            result.append(polygon_to_line(choose_piece(pieces, keep_point)))
        else:
            for piece in pieces:
                if len(piece) >= 3:
                    result.append(polygon_to_line(piece))
    return result


@click.command()
@click.option('--cut', '-c', 'cut_text', required=True,
              help='Cut path as "x,y x,y ..." in document units')
@click.option('--keep-point', '-k', default=None,
              help='Keep only the piece containing this x,y point')
@click.option('--tolerance', '-t', default=SNAP_TOLERANCE, type=click.FloatRange(min=0),
              help=f'Max distance from cut ends to a path for it to be split (default: {SNAP_TOLERANCE})')
@vpype_cli.layer_processor
def polycut(lines: vpype.LineCollection, cut_text: str, keep_point, tolerance: float) -> vpype.LineCollection:
    """Split closed paths along a cut path.

    Open paths, and closed paths whose boundary is not within --tolerance
    of both cut ends, are passed through unchanged.
    """
    cut = parse_points(cut_text)
    if len(cut) < 2:
        raise click.BadParameter("cut path needs at least 2 points", param_hint='--cut')

    target = None
    if keep_point is not None:
        points = parse_points(keep_point)
        if len(points) != 1:
            raise click.BadParameter(f"expected a single x,y pair, got {keep_point!r}",
                                     param_hint='--keep-point')
        target = points[0]

    return cut_line_collection(lines, cut, keep_point=target, tolerance=tolerance)
