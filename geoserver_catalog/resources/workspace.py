import logging

from .resource import ResourceInfo,Field,boolean

logger = logging.getLogger(__name__)

WORKSPACE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<workspace>
    <name>{{ name }}</name>
{% if isolated is not none %}
    <isolated>{{ isolated|xmlbool }}</isolated>
{% endif %}
</workspace>
"""

class Workspace(ResourceInfo):
    resource_type = "workspace"
    route = "workspaces"
    root_xpath = "workspace/name"
    member_xpath = ".//workspace"
    template = WORKSPACE_TEMPLATE

    isolated = Field("isolated",boolean)

    def _list(self,klass,collection,options=None):
        """
        Return the resources of klass listed in the collection of the workspace
        """
        doc = self.catalog.parse_xml(self.catalog.search(workspaces=self.key,**{collection:None}))
        return ResourceInfo.list(klass,self.catalog,klass.find_names(doc),dict(options or {},workspace=self.key))

    @property
    def data_stores(self):
        from .datastore import DataStore
        return self._list(DataStore,"datastores")

    @property
    def coverage_stores(self):
        from .coveragestore import CoverageStore
        return self._list(CoverageStore,"coveragestores")

    @property
    def wms_stores(self):
        from .wmsstore import WmsStore
        return self._list(WmsStore,"wmsstores")

    @property
    def layer_groups(self):
        from .layergroup import LayerGroup
        return self._list(LayerGroup,"layergroups")

    @property
    def styles(self):
        from .style import Style
        return self._list(Style,"styles")

    def delete(self,recurse=False,purge=None):
        return super().delete(recurse=recurse)
