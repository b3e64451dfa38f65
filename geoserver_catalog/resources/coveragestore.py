import logging
import os

from .resource import ResourceInfo,Field,boolean,name_of
from .. import settings
from ..exceptions import *

logger = logging.getLogger(__name__)

COVERAGESTORE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<coverageStore>
    <name>{{ name }}</name>
{% if description %}
    <description>{{ description }}</description>
{% endif %}
{% if type %}
    <type>{{ type }}</type>
{% endif %}
{% if enabled is not none %}
    <enabled>{{ enabled|xmlbool }}</enabled>
{% endif %}
    <workspace>
        <name>{{ workspace }}</name>
    </workspace>
{% if url %}
    <url>{{ url }}</url>
{% endif %}
</coverageStore>
"""

class CoverageStore(ResourceInfo):
    resource_type = "coverageStore"
    route = "coveragestores"
    root_xpath = "coverageStore/name"
    member_xpath = ".//coverageStore"
    template = COVERAGESTORE_TEMPLATE

    description = Field("description")
    type = Field("type")
    enabled = Field("enabled",boolean)
    url = Field("url")

    def __init__(self,catalog,name=None,workspace=None,**attributes):
        if not workspace:
            raise InvalidArgument("CoverageStore requires a workspace")
        self.workspace = name_of(workspace)
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace)]

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        return context

    @property
    def coverages(self):
        from .coverage import Coverage
        doc = self.catalog.parse_xml(self.catalog.search(workspaces=self.workspace,coveragestores=self.key,coverages=None))
        return ResourceInfo.list(Coverage,self.catalog,Coverage.find_names(doc),{"workspace":self.workspace,"coverage_store":self.key})

    def upload_file(self,file,data_type="geotiff",method="file",configure="first",coverage_name=None):
        """
        Upload a raster into the coverage store, the coverage store is created if it doesn't exist
        method: "file" uploads the local file, "url" and "external" send the url or the server side path as the request body
        """
        if method not in ("file","url","external"):
            raise InvalidArgument("Upload method({}) Not Support".format(method))
        url = self.catalog.build_url(
            *self._segments(self.key),
            "{}.{}".format(method,data_type),
            configure=configure,
            coverageName=coverage_name
        )
        if method == "file":
            with open(file,'rb') as f:
                self.catalog.put(url,f,headers=self.catalog.contenttype_header("zip" if file.lower().endswith(".zip") else data_type),timeout=settings.UPLOAD_TIMEOUT)
        else:
            self.catalog.put(url,file,headers=self.catalog.contenttype_header("text"),timeout=settings.UPLOAD_TIMEOUT)
        logger.debug("Succeed to upload the file({}) into the coveragestore({})".format(file,self))
        self.refresh()
        return self

    def delete(self,recurse=False,purge=None):
        """
        purge: "none", "metadata" or "all", whether to delete the underlying files
        """
        return super().delete(recurse=recurse,purge=purge)
