class StampExportError(Exception):
    """Writing a rendered stamp to disk failed."""


class VectorExportError(StampExportError):
    pass


class RasterExportError(StampExportError):
    pass
