import logging
from collections import namedtuple

from .arc_text import ArcSpec, FORWARD, DEFAULT_FONT_FAMILY, layout_arc_text
from .coordinates import Point, round_value
from .scene import RingSpec, TextPlacement, StampScene

logger = logging.getLogger(__name__)


# trailing decorative glyph appended to every legend
LEGEND_ORNAMENT = "★"

# ring geometry, in canvas units. The offsets are additive so the center
# block keeps roughly the same visual size whatever the stamp size.
OUTER_MARGIN = 4
INNER_RING_OFFSET = 8
CENTER_RING_OFFSET = 38
LEGEND_INSET = 5
FONT_SIZE_DIVISOR = 18

OUTER_STROKE_WIDTH = 3
INNER_STROKE_WIDTH = 2
CENTER_STROKE_WIDTH = 2

# legend sweep leaves a gap at the bottom of the stamp
LEGEND_START_ANGLE = 30
LEGEND_END_ANGLE = 360

# center text baselines and size, as multiples of the legend font size
NUMBER_LINE_OFFSET = -0.3
REGISTRATION_LINE_OFFSET = 1.1
CENTER_TEXT_SCALE = 0.95


StampParameters = namedtuple(
    "StampParameters",
    ["company_name",
     "company_number",
     "registration_code",
     "size",
     "stroke_color",
     "overall_rotation_degrees",
     "legend_rotation_degrees",
     "font_family"],
    defaults=[
        "A E STAMP MALAYSIA SDN. BHD.",
        "199301030815",
        "(285554-A)",
        300,
        "#000000",
        0,
        0,
        DEFAULT_FONT_FAMILY])


StampLayout = namedtuple(
    "StampLayout",
    ["center", "outer_radius", "inner_radius", "center_radius", "legend_radius", "font_size"])


def derive_layout(size):
    half = size / 2

    outer_radius = half - OUTER_MARGIN
    inner_radius = outer_radius - INNER_RING_OFFSET
    center_radius = inner_radius - CENTER_RING_OFFSET

    return StampLayout(
        center=Point(half, half),
        outer_radius=outer_radius,
        inner_radius=inner_radius,
        center_radius=center_radius,
        legend_radius=(inner_radius + center_radius) / 2 - LEGEND_INSET,
        font_size=size / FONT_SIZE_DIVISOR)


def round_layout(layout):
    return StampLayout(
        center=Point(round_value(layout.center.x), round_value(layout.center.y)),
        outer_radius=round_value(layout.outer_radius),
        inner_radius=round_value(layout.inner_radius),
        center_radius=round_value(layout.center_radius),
        legend_radius=round_value(layout.legend_radius),
        font_size=round_value(layout.font_size))


def _rings(rounded_layout):
    center = rounded_layout.center

    return (
        RingSpec(center, rounded_layout.outer_radius, OUTER_STROKE_WIDTH),
        RingSpec(center, rounded_layout.inner_radius, INNER_STROKE_WIDTH),
        RingSpec(center, rounded_layout.center_radius, CENTER_STROKE_WIDTH),
    )


def _legend_arc(layout, legend_rotation_degrees):
    return ArcSpec(
        center=layout.center,
        radius=layout.legend_radius,
        start_angle_degrees=LEGEND_START_ANGLE + legend_rotation_degrees,
        end_angle_degrees=LEGEND_END_ANGLE + legend_rotation_degrees,
        direction=FORWARD)


def _center_line(text, layout, line_offset, fill, font_family):
    cx, cy = layout.center

    return TextPlacement(
        text=text,
        position=Point(round_value(cx), round_value(cy + layout.font_size * line_offset)),
        font_size=round_value(layout.font_size * CENTER_TEXT_SCALE),
        fill=fill,
        font_family=font_family)


def compose_stamp(params):
    """
    Build the complete scene for ``params``.

    Nothing is validated or clamped: a small ``size`` gives rings with zero or
    negative radius and a very long company name packs its glyphs until they
    overlap. Both still produce a well formed scene.
    """
    layout = derive_layout(params.size)

    if layout.center_radius <= 0:
        logger.warning("Stamp size %s leaves no room for the center ring (radius %s)",
                       params.size, layout.center_radius)

    legend = layout_arc_text(
        params.company_name + LEGEND_ORNAMENT,
        _legend_arc(layout, params.legend_rotation_degrees),
        layout.font_size,
        letter_spacing=0,
        fill=params.stroke_color,
        font_family=params.font_family)

    center_text = (
        _center_line(params.company_number, layout, NUMBER_LINE_OFFSET,
                     params.stroke_color, params.font_family),
        _center_line(params.registration_code, layout, REGISTRATION_LINE_OFFSET,
                     params.stroke_color, params.font_family),
    )

    logger.debug("Composed stamp of size %s with %d legend glyphs", params.size, len(legend))

    # glyph geometry is computed from the unrounded layout, the scene stores the rounded one
    rounded_layout = round_layout(layout)

    return StampScene(
        size=params.size,
        center=rounded_layout.center,
        stroke_color=params.stroke_color,
        rotation_degrees=params.overall_rotation_degrees,
        layout=rounded_layout,
        rings=_rings(rounded_layout),
        legend=tuple(legend),
        center_text=center_text)
