import logging

logger = logging.getLogger(__name__)

class ReloadMixin(object):
    def reload(self):
        """
        Reload the catalog and configuration from disk, and drop the internal caches
        """
        self.do_url("reload","put")
        logger.debug("Succeed to reload the geoserver catalogue.")

    def reset(self):
        """
        Reset all store, raster and schema caches
        """
        self.do_url("reset","put")
        logger.debug("Succeed to reset the geoserver's store, raster and schema caches.")
