import logging

from .resource import ResourceInfo,Field,boolean,integer,name_of
from ..exceptions import *

logger = logging.getLogger(__name__)

WMSSTORE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<wmsStore>
    <name>{{ name }}</name>
{% if description %}
    <description>{{ description }}</description>
{% endif %}
    <type>{{ type or "WMS" }}</type>
    <enabled>{{ (true if enabled is none else enabled)|xmlbool }}</enabled>
    <workspace>
        <name>{{ workspace }}</name>
    </workspace>
    <metadata>
        <entry key="useConnectionPooling">true</entry>
    </metadata>
    <capabilitiesURL>{{ capabilities_url }}</capabilitiesURL>
{% if user %}
    <user>{{ user }}</user>
{% endif %}
{% if password %}
    <password>{{ password }}</password>
{% endif %}
    <maxConnections>{{ max_connections or 10 }}</maxConnections>
    <readTimeout>{{ read_timeout or 60 }}</readTimeout>
    <connectTimeout>{{ connect_timeout or 30 }}</connectTimeout>
</wmsStore>
"""

class WmsStore(ResourceInfo):
    resource_type = "wmsStore"
    route = "wmsstores"
    root_xpath = "wmsStore/name"
    member_xpath = ".//wmsStore"
    template = WMSSTORE_TEMPLATE

    description = Field("description")
    type = Field("type")
    enabled = Field("enabled",boolean)
    capabilities_url = Field("capabilitiesURL")
    user = Field("user")
    password = Field("password")
    max_connections = Field("maxConnections",integer)
    read_timeout = Field("readTimeout",integer)
    connect_timeout = Field("connectTimeout",integer)

    def __init__(self,catalog,name=None,workspace=None,**attributes):
        if not workspace:
            raise InvalidArgument("WmsStore requires a workspace")
        self.workspace = name_of(workspace)
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace)]

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        return context

    def save(self,**params):
        if not self.capabilities_url:
            raise InvalidArgument("WmsStore({}) requires a capabilities url".format(self))
        return super().save(**params)

    @property
    def layer_names(self):
        """
        Return the names of the wms layers published from the store
        """
        doc = self.catalog.parse_xml(self.catalog.search(workspaces=self.workspace,wmsstores=self.key,wmslayers=None))
        return [n.text.strip() for n in doc.findall("wmsLayer/name") if n.text]
