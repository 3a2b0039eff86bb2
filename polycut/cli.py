"""Command-line interface for polycut."""

import logging
import sys
import time
import click

from .svg_io import (
    read_svg,
    write_svg,
    extract_shapes_from_svg,
    create_svg_from_polygons,
    parse_points,
)
from .cutting import split_polygon, choose_piece
from .geometry import PolycutError, closest_point_on_polygon
from .geometry.polygon import translate_polygon


def _point_option(ctx, param, value):
    if value is None:
        return None
    points = parse_points(value)
    if len(points) != 1:
        raise click.BadParameter(f"expected a single x,y pair, got {value!r}")
    return points[0]


def _path_option(ctx, param, value):
    if value is None:
        return None
    return parse_points(value)


def _configure_logging(verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_shape(input, cut_id, shape_index, verbose):
    try:
        svg_content = read_svg(input if input != '-' else None)
    except Exception as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Read {len(svg_content)} bytes", err=True)

    shapes, cut, metadata = extract_shapes_from_svg(svg_content, cut_id=cut_id)

    if verbose:
        click.echo(f"Found {len(shapes)} shapes", err=True)

    if not 0 <= shape_index < len(shapes):
        click.echo(f"No shape #{shape_index} in input ({len(shapes)} found)", err=True)
        sys.exit(1)

    return shapes[shape_index], cut, metadata


@click.group()
@click.version_option()
def main():
    """polycut: split polygons along a cut path.

    Reads a polygon from an SVG file, snaps both ends of a cut path onto its
    boundary and writes the two resulting pieces.

    Examples:

        polycut split shape.svg --cut "150,0 150,300" -o pieces.svg

        cat shape.svg | polycut split --keep-point 10,10 > kept.svg
    """
    pass


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--cut', 'cut_text', callback=_path_option,
              help='Cut path as "x,y x,y ..." (default: read from the SVG)')
@click.option('--cut-id', default='cut',
              help='id of the SVG element holding the cut path (default: cut)')
@click.option('--shape', 'shape_index', default=0, type=click.IntRange(min=0),
              help='Index of the shape to cut, in document order (default: 0)')
@click.option('--keep', default='both',
              type=click.Choice(['both', 'first', 'second']),
              help='Which pieces to write (default: both)')
@click.option('--keep-point', callback=_point_option,
              help='Write only the piece containing this x,y point')
@click.option('--offset', callback=_point_option,
              help='Translate the shape by dx,dy before cutting')
@click.option('--stroke', default='black', help='Stroke color (default: black)')
@click.option('--stroke-width', default='1', help='Stroke width (default: 1)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def split(input, output, cut_text, cut_id, shape_index, keep, keep_point, offset,
          stroke, stroke_width, verbose):
    """Split a shape in an SVG file along a cut path.

    INPUT: SVG file path, or - for stdin (default)

    The cut path comes from --cut, or else from the element with id
    --cut-id in the same file. Its first and last points are snapped onto
    the shape's boundary.
    """
    _configure_logging(verbose)
    start_time = time.time()

    polygon, svg_cut, metadata = _load_shape(input, cut_id, shape_index, verbose)
    cut = cut_text if cut_text is not None else svg_cut
    if cut is None:
        click.echo(f"No cut path given and no element with id '{cut_id}' in input", err=True)
        sys.exit(1)

    if offset is not None:
        polygon = translate_polygon(polygon, offset.x, offset.y)

    try:
        result = split_polygon(polygon, cut)
    except PolycutError as e:
        click.echo(f"Error cutting shape: {e}", err=True)
        sys.exit(1)

    if keep_point is not None:
        pieces = [choose_piece(result, keep_point)]
    elif keep == 'first':
        pieces = [result.first]
    elif keep == 'second':
        pieces = [result.second]
    else:
        pieces = list(result)

    if verbose:
        click.echo(
            f"Split {len(polygon)} vertices into pieces of "
            f"{len(result.first)} and {len(result.second)}",
            err=True,
        )

    output_svg = create_svg_from_polygons(
        pieces,
        viewbox=metadata.get('viewBox', ''),
        width=metadata.get('width', ''),
        height=metadata.get('height', ''),
        stroke=stroke,
        stroke_width=stroke_width,
    )

    try:
        write_svg(output_svg, output if output != '-' else None)
    except Exception as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('--point', required=True, callback=_point_option,
              help='Point to snap, as x,y')
@click.option('--cut-id', default='cut',
              help='id of an SVG cut element to skip when picking shapes (default: cut)')
@click.option('--shape', 'shape_index', default=0, type=click.IntRange(min=0),
              help='Index of the shape to snap onto (default: 0)')
@click.option('--verbose', '-v', is_flag=True, help='Print statistics')
def project(input, point, cut_id, shape_index, verbose):
    """Snap a point onto the boundary of a shape.

    Prints the closest boundary point, the index of the edge it lies on and
    the distance to it.
    """
    _configure_logging(verbose)
    polygon, _, _ = _load_shape(input, cut_id, shape_index, verbose)

    try:
        projection = closest_point_on_polygon(polygon, point)
    except PolycutError as e:
        click.echo(f"Error projecting point: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"{projection.point.x:g},{projection.point.y:g} "
        f"edge={projection.edge_index} distance={projection.distance:g}"
    )


if __name__ == '__main__':
    main()
