import logging

logger = logging.getLogger(__name__)


class ImageExporter:
    @staticmethod
    def save_png(engine, filename) -> bool:
        """Writes the visible surface to `filename` as PNG."""
        data = engine.export_active_surface_as_image()
        try:
            with open(filename, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error("Export to %s failed: %s", filename, e)
            return False

        logger.info("Exported %d bytes to %s", len(data), filename)
        return True
