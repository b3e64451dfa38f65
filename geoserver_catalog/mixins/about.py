import logging
import re

logger = logging.getLogger(__name__)

class AboutMixin(object):
    def get_version(self,component="geoserver"):
        """
        Return the version of the component as a list of int; or a dict of all components if component is None
        """
        if self._versions is None:
            doc = self.get_xml(self.build_url("about","version"))
            data = {}
            for resource in doc.findall("resource"):
                version = resource.findtext("Version")
                if resource.get("name") and version:
                    data[resource.get("name").lower()] = [int(i) for i in re.findall("\\d+",version)]
            self._versions = data

        if component:
            return self._versions.get(component.lower()) or None
        else:
            return self._versions
