"""SVG input/output utilities for polycut."""

import math
import re
import sys
from typing import Dict, List, Optional, Tuple
from xml.etree import ElementTree as ET

from .geometry import Point
from .geometry.polygon import open_ring

NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')
COMMAND_RE = re.compile(r'[MLHVCSQTAZ][^MLHVCSQTAZ]*', re.IGNORECASE)

# Number of arguments per path command, and where its endpoint sits in them
PATH_ARITY = {'M': 2, 'L': 2, 'T': 2, 'H': 1, 'V': 1, 'C': 6, 'S': 4, 'Q': 4, 'A': 7}

SHAPE_TAGS = ('path', 'polygon', 'polyline', 'rect', 'circle', 'ellipse')
ELLIPSE_SEGMENTS = 32
CUT_TAGS = ('path', 'polyline', 'polygon', 'line')


def parse_points(text: str) -> List[Point]:
    """Parse a whitespace/comma separated coordinate list like ``"0,0 10,0 10,10"``."""
    coords = [float(v) for v in NUMBER_RE.findall(text or '')]
    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords) - 1, 2)]


def parse_path_d(d: str) -> List[Point]:
    """Parse SVG path d attribute into points.

    Only the first subpath is read. Curves are approximated as straight
    lines to their endpoints.
    """
    points: List[Point] = []
    x, y = 0.0, 0.0

    for cmd in COMMAND_RE.findall(d or ''):
        kind = cmd[0]
        upper = kind.upper()
        relative = kind.islower()
        args = [float(v) for v in NUMBER_RE.findall(cmd[1:])]

        if upper == 'Z':
            break
        if upper == 'M' and points:
            break

        arity = PATH_ARITY[upper]
        for i in range(0, len(args) - arity + 1, arity):
            chunk = args[i:i + arity]
            if upper == 'H':
                x = x + chunk[0] if relative else chunk[0]
            elif upper == 'V':
                y = y + chunk[0] if relative else chunk[0]
            else:
                ex, ey = chunk[-2], chunk[-1]
                if relative:
                    x, y = x + ex, y + ey
                else:
                    x, y = ex, ey
            points.append(Point(x, y))

    return points


def element_to_points(element: ET.Element) -> List[Point]:
    """Convert a path, polygon, polyline, line, rect, circle or ellipse element to its points.

    Circles and ellipses are approximated by ELLIPSE_SEGMENTS vertices.
    """
    tag = element.tag.split('}')[-1].lower()  # Remove namespace

    if tag == 'path':
        return parse_path_d(element.get('d', ''))

    if tag in ('polygon', 'polyline'):
        return parse_points(element.get('points', ''))

    if tag == 'line':
        return [
            Point(float(element.get('x1', 0)), float(element.get('y1', 0))),
            Point(float(element.get('x2', 0)), float(element.get('y2', 0))),
        ]

    if tag == 'rect':
        x = float(element.get('x', 0))
        y = float(element.get('y', 0))
        w = float(element.get('width', 0))
        h = float(element.get('height', 0))
        return [Point(x, y), Point(x + w, y), Point(x + w, y + h), Point(x, y + h)]

    if tag in ('circle', 'ellipse'):
        cx = float(element.get('cx', 0))
        cy = float(element.get('cy', 0))
        if tag == 'circle':
            rx = ry = float(element.get('r', 0))
        else:
            rx = float(element.get('rx', 0))
            ry = float(element.get('ry', 0))
        return [
            Point(
                cx + rx * math.cos(2 * math.pi * i / ELLIPSE_SEGMENTS),
                cy + ry * math.sin(2 * math.pi * i / ELLIPSE_SEGMENTS),
            )
            for i in range(ELLIPSE_SEGMENTS)
        ]

    return []


def extract_shapes_from_svg(
    svg_content: str,
    cut_id: str = 'cut',
) -> Tuple[List[List[Point]], Optional[List[Point]], Dict[str, str]]:
    """Extract polygons and an optional cut path from SVG content.

    The element whose id equals ``cut_id`` is read as the cut path; every
    other path, polygon, polyline, rect, circle and ellipse with at least 3
    distinct points is a shape. Polylines are closed implicitly.

    Returns:
        Tuple of (list of polygons, cut path or None, SVG metadata dict
        with viewBox, width, height)
    """
    root = ET.fromstring(svg_content)

    metadata = {
        'viewBox': root.get('viewBox', ''),
        'width': root.get('width', ''),
        'height': root.get('height', ''),
    }

    shapes: List[List[Point]] = []
    cut: Optional[List[Point]] = None

    for elem in root.iter():
        tag = elem.tag.split('}')[-1].lower()
        if cut_id and elem.get('id') == cut_id and tag in CUT_TAGS:
            cut = element_to_points(elem)
        elif tag in SHAPE_TAGS:
            points = open_ring(element_to_points(elem))
            if len(points) >= 3:
                shapes.append(points)

    return shapes, cut, metadata


def polygon_points_attr(polygon: List[Point], precision: int = 2) -> str:
    return ' '.join(f"{p.x:.{precision}f},{p.y:.{precision}f}" for p in polygon)


def create_svg_from_polygons(
    polygons: List[List[Point]],
    viewbox: str = '',
    width: str = '',
    height: str = '',
    stroke: str = 'black',
    stroke_width: str = '1',
    precision: int = 2,
) -> str:
    """Create a complete SVG document with one <polygon> per piece.

    Args:
        polygons: Open vertex loops
        viewbox: SVG viewBox attribute
        width: SVG width attribute
        height: SVG height attribute
        stroke: Stroke color
        stroke_width: Stroke width
        precision: Decimal places written per coordinate

    Returns:
        Complete SVG document as string
    """
    attrs = ['xmlns="http://www.w3.org/2000/svg"']
    if viewbox:
        attrs.append(f'viewBox="{viewbox}"')
    if width:
        attrs.append(f'width="{width}"')
    if height:
        attrs.append(f'height="{height}"')

    elements = [
        f'  <polygon id="piece-{i + 1}" points="{polygon_points_attr(poly, precision)}" '
        f'fill="none" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        for i, poly in enumerate(polygons)
    ]

    body = '\n'.join(elements)
    return f'''<?xml version="1.0" encoding="UTF-8"?>
<svg {' '.join(attrs)}>
{body}
</svg>'''


def read_svg(path: Optional[str] = None) -> str:
    """Read SVG content from file or stdin.

    Args:
        path: File path, or None to read from stdin

    Returns:
        SVG content as string
    """
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout."""
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
