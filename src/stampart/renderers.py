import contextlib
import logging
import math
import os
import re
import tempfile
from xml.etree.ElementTree import Element, SubElement, tostring

import cairo

from defusedxml import ElementTree as etree

from .arc_text import HANGING
from .errors import RasterExportError, VectorExportError
from .geometry import GeometryRenderer, ring_geometry

logger = logging.getLogger(__name__)


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_PROLOG = '<?xml version="1.0" standalone="no"?>\n'

NAMED_COLORS = {
    "black": "#000000",
    "red": "#ff0000",
    "blue": "#0000ff",
    "green": "#008000",
}

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def parse_color(color):
    """Returns an (r, g, b, a) tuple in [0, 1] for a hex string or preset name."""
    value = NAMED_COLORS.get(color.lower(), color)

    if not _HEX_COLOR.fullmatch(value):
        raise ValueError(f"Unsupported color: {color!r}")

    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    return tuple(int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4)) + (1.0,)


def format_number(value):
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def primary_font_family(font_family):
    # cairo's toy font api takes a single family, not a css fallback list
    return font_family.split(",")[0].strip().strip("'\"") or "sans-serif"


def _write_atomically(output_file_path, write):
    directory = os.path.dirname(os.path.abspath(output_file_path))
    fd, temp_path = tempfile.mkstemp(dir=directory, prefix=".stampart-", suffix=".tmp")

    try:
        with os.fdopen(fd, "wb") as f:
            write(f)

        os.chmod(temp_path, 0o644)
        os.replace(temp_path, output_file_path)
    except Exception:
        with contextlib.suppress(FileNotFoundError):
            os.remove(temp_path)
        raise


class PrimitiveRenderer:

    def init_canvas(self):
        raise NotImplementedError()

    def begin_rotation(self, angle_degrees, cx, cy):
        raise NotImplementedError()

    def end_rotation(self):
        raise NotImplementedError()

    def start_path(self, x0, y0):
        raise NotImplementedError()

    def path_point(self, x0, y0):
        raise NotImplementedError()

    def stroke_path(self, color, line_width):
        raise NotImplementedError()

    def draw_ring(self, ring, color):
        GeometryRenderer().render(ring_geometry(ring), self, color, ring.stroke_width)

    def draw_text(self, text, x, y, font_size, fill, font_family,
                  rotation_degrees=0, baseline=None, letter_spacing=0):
        raise NotImplementedError()

    def finish_canvas(self):
        raise NotImplementedError()


class SVGPrimitiveRenderer(PrimitiveRenderer):

    def __init__(self, output_file_path, size, fill_background=False):
        self._output_file_path = output_file_path
        self._size = size
        self._fill_background = fill_background

        self.root = None
        self._parents = []

    @property
    def _parent(self):
        return self._parents[-1]

    def init_canvas(self):
        if self.root is not None:
            raise RuntimeError("Canvas already initialized.")

        size = format_number(self._size)

        self.root = Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "width": size,
            "height": size,
            "viewBox": f"0 0 {size} {size}",
        })
        self._parents = [self.root]

        if self._fill_background:
            SubElement(self.root, "rect", {
                "x": "0", "y": "0", "width": size, "height": size, "fill": "#ffffff"})

    def begin_rotation(self, angle_degrees, cx, cy):
        group = SubElement(self._parent, "g", {
            "transform": f"rotate({format_number(angle_degrees)} {format_number(cx)} {format_number(cy)})"})
        self._parents.append(group)

    def end_rotation(self):
        if len(self._parents) == 1:
            raise RuntimeError("No rotation to end.")

        self._parents.pop()

    def draw_ring(self, ring, color):
        SubElement(self._parent, "circle", {
            "cx": format_number(ring.center[0]),
            "cy": format_number(ring.center[1]),
            "r": format_number(ring.radius),
            "stroke": color,
            "stroke-width": format_number(ring.stroke_width),
            "fill": "none",
        })

    def draw_text(self, text, x, y, font_size, fill, font_family,
                  rotation_degrees=0, baseline=None, letter_spacing=0):
        attributes = {
            "x": format_number(x),
            "y": format_number(y),
            "font-size": format_number(font_size),
            "text-anchor": "middle",
        }

        if baseline is not None:
            attributes["dominant-baseline"] = baseline

        if rotation_degrees:
            attributes["transform"] = \
                f"rotate({format_number(rotation_degrees)} {format_number(x)} {format_number(y)})"

        if letter_spacing:
            attributes["letter-spacing"] = format_number(letter_spacing)

        attributes["font-family"] = font_family
        attributes["fill"] = fill

        element = SubElement(self._parent, "text", attributes)
        element.text = text

    def to_string(self):
        if self.root is None:
            raise RuntimeError("Canvas not initialized.")

        document = tostring(self.root, encoding="unicode")

        # round trip through the parser so a malformed document is never written
        etree.fromstring(document)

        return SVG_PROLOG + document

    def finish_canvas(self):
        document = self.to_string().encode("utf-8")

        _write_atomically(self._output_file_path, lambda f: f.write(document))

        self.root = None


class PNGPrimitiveRenderer(PrimitiveRenderer):

    def __init__(self, output_file_path, size, fill_background=False):
        self._output_file_path = output_file_path
        self._size = size
        self._fill_background = fill_background

        self.surface = None
        self.context = None

    def init_canvas(self):
        if self.surface is not None:
            raise RuntimeError("Surface already initialized.")

        pixels = int(round(self._size))
        if pixels < 1:
            raise ValueError(f"Raster size must be at least one pixel, got {self._size}")

        self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, pixels, pixels)
        self.context = cairo.Context(self.surface)

        if self._fill_background:
            self.context.set_source_rgb(1, 1, 1)
            self.context.rectangle(0, 0, pixels, pixels)
            self.context.fill()

        self.context.set_line_join(cairo.LINE_JOIN_MITER)

    def begin_rotation(self, angle_degrees, cx, cy):
        self.context.save()
        self.context.translate(cx, cy)
        self.context.rotate(math.radians(angle_degrees))
        self.context.translate(-cx, -cy)

    def end_rotation(self):
        self.context.restore()

    def start_path(self, x0, y0):
        self.context.new_path()
        self.context.move_to(x0, y0)

    def path_point(self, x0, y0):
        self.context.line_to(x0, y0)

    def stroke_path(self, color, line_width):
        self.context.close_path()
        self.context.set_source_rgba(*parse_color(color))
        self.context.set_line_width(line_width)
        self.context.stroke()

    def draw_text(self, text, x, y, font_size, fill, font_family,
                  rotation_degrees=0, baseline=None, letter_spacing=0):
        # letter_spacing is not applied, cairo's toy text api has no tracking
        c = self.context

        c.save()
        c.set_source_rgba(*parse_color(fill))
        c.select_font_face(primary_font_family(font_family), cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
        c.set_font_size(font_size)

        c.translate(x, y)
        c.rotate(math.radians(rotation_degrees))

        extents = c.text_extents(text)
        dy = c.font_extents()[0] if baseline == HANGING else 0

        c.move_to(-extents.x_advance / 2, dy)
        c.show_text(text)
        c.restore()

    def finish_canvas(self):
        if self.surface is None:
            raise RuntimeError("Surface already completed.")

        self.surface.flush()

        try:
            _write_atomically(self._output_file_path, self.surface.write_to_png)
        finally:
            self.surface.finish()
            self.surface = None
            self.context = None


class SceneRenderer:

    @staticmethod
    def render(scene, primitive_renderer):
        primitive_renderer.init_canvas()
        SceneRenderer.draw(scene, primitive_renderer)
        primitive_renderer.finish_canvas()

    @staticmethod
    def draw(scene, primitive_renderer):
        rotated = bool(scene.rotation_degrees)
        if rotated:
            primitive_renderer.begin_rotation(scene.rotation_degrees, *scene.center)

        for ring in scene.rings:
            if ring.radius <= 0:
                logger.warning("Ring radius %s is not positive; the stamp will look degenerate", ring.radius)

            primitive_renderer.draw_ring(ring, scene.stroke_color)

        for glyph in scene.legend:
            primitive_renderer.draw_text(
                glyph.character,
                glyph.position.x,
                glyph.position.y,
                glyph.font_size,
                glyph.fill,
                glyph.font_family,
                rotation_degrees=glyph.rotation_degrees,
                baseline=glyph.baseline,
                letter_spacing=glyph.letter_spacing)

        for line in scene.center_text:
            primitive_renderer.draw_text(
                line.text,
                line.position.x,
                line.position.y,
                line.font_size,
                line.fill,
                line.font_family)

        if rotated:
            primitive_renderer.end_rotation()


def render_svg_string(scene, fill_background=False):
    renderer = SVGPrimitiveRenderer(None, scene.size, fill_background)
    renderer.init_canvas()

    SceneRenderer.draw(scene, renderer)

    return renderer.to_string()


def export_svg(scene, output_file_path, fill_background=False):
    logger.debug("Writing SVG stamp to %s", output_file_path)

    try:
        SceneRenderer.render(scene, SVGPrimitiveRenderer(output_file_path, scene.size, fill_background))
    except (OSError, etree.ParseError) as e:
        raise VectorExportError(f"SVG export to {output_file_path} failed: {e}") from e

    return output_file_path


def export_png(scene, output_file_path, fill_background=False):
    logger.debug("Writing PNG stamp to %s", output_file_path)

    try:
        SceneRenderer.render(scene, PNGPrimitiveRenderer(output_file_path, scene.size, fill_background))
    except (cairo.Error, ValueError, OverflowError, OSError, MemoryError) as e:
        raise RasterExportError(f"PNG export to {output_file_path} failed: {e}") from e

    return output_file_path


class RenderBuilder:

    EXPORTERS = {
        "svg": export_svg,
        "png": export_png,
    }

    def __init__(self):
        self._fill_background = False
        self._filename = None
        self._append_dimensions_to_file_name = False
        self._output_format = None

    def file(self, filename):
        self._filename = filename
        return self

    def svg(self):
        return self.format("svg")

    def png(self):
        return self.format("png")

    def format(self, output_format):
        if output_format not in RenderBuilder.EXPORTERS:
            raise ValueError(f"Unknown output format: {output_format}")

        self._output_format = output_format
        return self

    def append_dimensions_to_file_name(self, on=True):
        self._append_dimensions_to_file_name = on
        return self

    def fill_background(self, on=True):
        self._fill_background = on
        return self

    def _get_output_file_path(self, scene):
        if self._filename is None:
            raise ValueError("No output file specified")

        result = self._filename

        if self._append_dimensions_to_file_name:
            size = format_number(scene.size)
            result = result + f"_{size}_{size}"

        return result + "." + self._output_format

    def __call__(self, scene):
        if self._output_format is None:
            raise ValueError("No output format specified")

        exporter = RenderBuilder.EXPORTERS[self._output_format]

        return exporter(scene, self._get_output_file_path(scene), self._fill_background)
