from stampart import StampParameters, compose_stamp
from stampart.renderers import RenderBuilder

if __name__ == "__main__":

    params = StampParameters(
        company_name="A E STAMP MALAYSIA SDN. BHD.",
        company_number="199301030815",
        registration_code="(285554-A)",
        size=300,
        stroke_color="#0000ff",
        overall_rotation_degrees=-8)

    scene = compose_stamp(params)

    RenderBuilder().svg().file("company-stamp")(scene)
    RenderBuilder().png().file("company-stamp").append_dimensions_to_file_name()(scene)
