import json
from collections import namedtuple


RingSpec = namedtuple("RingSpec", ["center", "radius", "stroke_width"])

# straight text, horizontally centered on its position
TextPlacement = namedtuple("TextPlacement", ["text", "position", "font_size", "fill", "font_family"])


class StampScene(namedtuple("StampScene", [
        "size",
        "center",
        "stroke_color",
        "rotation_degrees",
        "layout",
        "rings",
        "legend",
        "center_text"])):
    """
    Renderer independent description of one stamp.

    ``rings`` and ``center_text`` are tuples of RingSpec / TextPlacement,
    ``legend`` a tuple of GlyphPlacement in reading order. ``rotation_degrees``
    is a rigid rotation of the whole scene about ``center`` that renderers
    apply on top of everything else.
    """

    __slots__ = ()

    @property
    def glyph_count(self):
        return len(self.legend)

    @property
    def legend_text(self):
        return "".join(g.character for g in self.legend)

    @property
    def texts(self):
        return [t.text for t in self.center_text]

    def to_dict(self):
        return {
            "size": self.size,
            "center": list(self.center),
            "stroke_color": self.stroke_color,
            "rotation_degrees": self.rotation_degrees,
            "layout": self.layout._asdict(),
            "rings": [
                {"center": list(r.center), "radius": r.radius, "stroke_width": r.stroke_width}
                for r in self.rings
            ],
            "legend": [
                {
                    "character": g.character,
                    "position": list(g.position),
                    "rotation_degrees": g.rotation_degrees,
                    "font_size": g.font_size,
                    "baseline": g.baseline,
                    "fill": g.fill,
                    "font_family": g.font_family,
                    "letter_spacing": g.letter_spacing,
                }
                for g in self.legend
            ],
            "center_text": [
                {
                    "text": t.text,
                    "position": list(t.position),
                    "font_size": t.font_size,
                    "fill": t.fill,
                    "font_family": t.font_family,
                }
                for t in self.center_text
            ],
        }

    def to_json(self, indent=None):
        return json.dumps(self.to_dict(), sort_keys=True, indent=indent, ensure_ascii=False)
