import math
from collections import namedtuple


# number of fractional digits kept in scene coordinates
PRECISION = 2

Point = namedtuple("Point", ["x", "y"])


def round_value(value, precision=PRECISION):
    # adding 0.0 turns -0.0 into 0.0 so identical geometry serializes identically
    return round(value, precision) + 0.0


def polar_to_point(center, radius, angle_degrees):
    """
    Map a polar description onto the canvas.

    Angles follow the stamp convention: 0 degrees is straight up from the
    center ("12 o'clock") and angles grow clockwise. The canvas has y pointing
    down, as SVG and cairo do.
    """
    rad = (angle_degrees - 90) * (math.pi / 180)

    return Point(
        round_value(center[0] + radius * math.cos(rad)),
        round_value(center[1] + radius * math.sin(rad)))


class Coordinates:

    def __init__(self, values):
        self.values = [Point(*v) for v in values]

    def __iter__(self):
        return self.values.__iter__()

    @staticmethod
    def arc(center, radius, angles):
        return Coordinates([polar_to_point(center, radius, a) for a in angles])
