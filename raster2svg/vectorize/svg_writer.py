"""SVG 1.1 document emission.

Output layout:
    <?xml version="1.0" encoding="UTF-8" standalone="no"?>
    <!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"
      "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
    <svg width="W" height="H"
         xmlns="http://www.w3.org/2000/svg" version="1.1">
     <path d=" M x,y L x,y ... Z M ... Z" style="fill:rgb(r,g,b); fill-opacity:a; stroke:none;" />
    </svg>

One path per region (not per color). All of a region's contours go into the
same path as independent closed sub-paths, so holes render through the
default nonzero fill rule thanks to their opposite winding. Coordinates are
plain integers in corner-lattice units.
"""

from typing import Iterable, List, Sequence, Tuple

from .contours import Contour
from .pixels import Color

SVG_HEADER_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"\n'
    '  "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
    '<svg width="{width}" height="{height}"\n'
    '     xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)

SVG_FOOTER = "</svg>\n"


def svg_header(width: int, height: int) -> str:
    """Document prologue and opening root element for a W×H canvas."""
    return SVG_HEADER_TEMPLATE.format(width=width, height=height)


def path_data(contours: Iterable[Sequence[Tuple[int, int]]]) -> str:
    """Build a path "d" attribute: M/L per contour, each closed with Z.

    Empty contours are skipped; the result is "" when nothing remains.
    """
    parts: List[str] = []
    for contour in contours:
        if not contour:
            continue
        x, y = contour[0]
        parts.append(f" M {x},{y}")
        parts.extend(f" L {px},{py}" for px, py in contour[1:])
        parts.append(" Z")
    return "".join(parts)


def format_opacity(alpha: int) -> str:
    """alpha / 255 as a short decimal ("1" for opaque, "0.501961" for 128)."""
    return f"{alpha / 255:g}"


def fill_style(color: Color) -> str:
    """Style attribute: flat fill with alpha as fill-opacity, no stroke."""
    r, g, b, a = color
    return f"fill:rgb({r},{g},{b}); fill-opacity:{format_opacity(a)}; stroke:none;"


def render_path(color: Color, contours: Sequence[Contour]) -> str:
    """One <path> element line, or "" if the contours are all empty."""
    d = path_data(contours)
    if not d:
        return ""
    return f' <path d="{d}" style="{fill_style(color)}" />\n'


def render_svg(
    width: int,
    height: int,
    shapes: Iterable[Tuple[Color, Sequence[Contour]]]
) -> str:
    """Serialize a whole document.

    Parameters
    ----------
    width, height : int
        Canvas size in pixels
    shapes : Iterable[Tuple[Color, Sequence[Contour]]]
        One (color, contours) entry per region, in output order

    Returns
    -------
    str
        Complete SVG text; header and footer only when no shape has contours
    """
    out = [svg_header(width, height)]
    for color, contours in shapes:
        out.append(render_path(color, contours))
    out.append(SVG_FOOTER)
    return "".join(out)
