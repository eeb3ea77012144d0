from collections import namedtuple

import numpy as np

from .coordinates import Coordinates, round_value


FORWARD = "forward"
REVERSED = "reversed"

ALPHABETIC = "alphabetic"
HANGING = "hanging"

DEFAULT_FONT_FAMILY = "Arial, sans-serif"
DEFAULT_FILL = "#000000"


ArcSpec = namedtuple(
    "ArcSpec",
    ["center", "radius", "start_angle_degrees", "end_angle_degrees", "direction"],
    defaults=[FORWARD])

GlyphPlacement = namedtuple(
    "GlyphPlacement",
    ["character", "position", "rotation_degrees", "font_size", "baseline",
     "fill", "font_family", "letter_spacing"])


def angle_step(arc, count):
    return (arc.end_angle_degrees - arc.start_angle_degrees) / max(count - 1, 1)


def glyph_angles(arc, count):
    """
    Angles (degrees, stamp convention) of ``count`` glyphs spread evenly over
    ``arc``. Forward arcs run from start to end, reversed arcs from end to
    start. The last angle lands exactly on the far end only when there are at
    least two glyphs; a single glyph sits at the arc's first angle.
    """
    if arc.direction not in (FORWARD, REVERSED):
        raise ValueError(f"Unknown arc direction: {arc.direction}")

    offsets = np.arange(count) * angle_step(arc, count)

    if arc.direction == REVERSED:
        angles = arc.end_angle_degrees - offsets
    else:
        angles = arc.start_angle_degrees + offsets

    return [float(a) for a in angles]


def layout_arc_text(text,
                    arc,
                    font_size,
                    letter_spacing=0,
                    fill=DEFAULT_FILL,
                    font_family=DEFAULT_FONT_FAMILY):
    # one glyph per code point, combining sequences are not merged
    characters = list(text)

    angles = glyph_angles(arc, len(characters))
    positions = Coordinates.arc(arc.center, arc.radius, angles)

    is_reversed = arc.direction == REVERSED
    rotation_offset = 180 if is_reversed else 0
    baseline = HANGING if is_reversed else ALPHABETIC

    return [
        GlyphPlacement(
            character=c,
            position=p,
            rotation_degrees=round_value(a + rotation_offset),
            font_size=round_value(font_size),
            baseline=baseline,
            fill=fill,
            font_family=font_family,
            letter_spacing=letter_spacing)
        for c, p, a in zip(characters, positions, angles)
    ]
