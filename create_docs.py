#!/usr/bin/env python3

import os

from stampart import StampParameters, compose_stamp
from stampart.renderers import RenderBuilder

os.makedirs("doc", exist_ok=True)

# Default stamp, black on transparent
default_stamp = compose_stamp(StampParameters())

RenderBuilder().svg().file("doc/default")(default_stamp)
RenderBuilder().png().file("doc/default")(default_stamp)


# Parameters are immutable, derive variants with _replace()
red = StampParameters(stroke_color="#ff0000")

RenderBuilder().svg().file("doc/red-tilted").fill_background()(
    compose_stamp(red._replace(overall_rotation_degrees=12)))


# Moving the gap in the legend
RenderBuilder().svg().file("doc/legend-rotation")(
    compose_stamp(red._replace(legend_rotation_degrees=90)))


# Ring offsets are fixed, so small stamps keep a readable center block
for size in (150, 300, 600):
    RenderBuilder().svg().file("doc/size").append_dimensions_to_file_name()(
        compose_stamp(StampParameters(size=size)))
