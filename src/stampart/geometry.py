import shapely as sh
import shapely.geometry


def ring_geometry(ring, resolution=64):
    """
    Circle of ``ring`` as a shapely LinearRing, ``resolution`` segments per
    quarter circle. Empty when the radius is not positive.
    """
    if ring.radius <= 0:
        return sh.geometry.LinearRing()

    return sh.geometry.Point(ring.center[0], ring.center[1]).buffer(ring.radius, resolution).exterior


class GeometryRenderer:

    def render(self, geometry, primitive_renderer, color, line_width):
        if geometry.is_empty:
            return

        if geometry.geom_type not in ("LineString", "LinearRing"):
            raise ValueError(f"Unsupported geometry type: {geometry.geom_type}")

        coords = list(geometry.coords)

        primitive_renderer.start_path(*coords[0])

        for c in coords[1:]:
            primitive_renderer.path_point(*c)

        primitive_renderer.stroke_path(color, line_width)
