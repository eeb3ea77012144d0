from .coordinates import Point, Coordinates, polar_to_point, round_value
from .arc_text import (
    ArcSpec,
    GlyphPlacement,
    FORWARD,
    REVERSED,
    ALPHABETIC,
    HANGING,
    layout_arc_text,
)
from .scene import RingSpec, TextPlacement, StampScene
from .composer import StampParameters, StampLayout, LEGEND_ORNAMENT, compose_stamp, derive_layout
from .errors import StampExportError, VectorExportError, RasterExportError
