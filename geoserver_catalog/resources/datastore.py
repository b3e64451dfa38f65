import logging
import os

from .resource import ResourceInfo,Field,boolean,entries,name_of
from .. import settings
from ..exceptions import *

logger = logging.getLogger(__name__)

DATASTORE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<dataStore>
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
{% if connection_parameters %}
    <connectionParameters>
{% for key,value in connection_parameters.items() %}
        <entry key="{{ key }}">{{ value|xmlvalue }}</entry>
{% endfor %}
    </connectionParameters>
{% endif %}
</dataStore>
"""

def guess_data_type(file):
    ext = file.rsplit(".",1)[1].lower() if "." in file else ""
    if ext in ("gpkg","geopackage"):
        return "gpkg"
    elif ext in ("zip","shp"):
        return "shp"
    else:
        raise InvalidArgument("Can't determine the data format of the file({})".format(file))

class DataStore(ResourceInfo):
    resource_type = "dataStore"
    route = "datastores"
    root_xpath = "dataStore/name"
    member_xpath = ".//dataStore"
    template = DATASTORE_TEMPLATE

    description = Field("description")
    type = Field("type")
    enabled = Field("enabled",boolean)
    connection_parameters = Field("connectionParameters",entries)

    def __init__(self,catalog,name=None,workspace=None,**attributes):
        if not workspace:
            raise InvalidArgument("DataStore requires a workspace")
        self.workspace = name_of(workspace)
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace)]

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        return context

    @property
    def feature_types(self):
        from .featuretype import FeatureType
        doc = self.catalog.parse_xml(self.catalog.search(workspaces=self.workspace,datastores=self.key,featuretypes=None))
        return ResourceInfo.list(FeatureType,self.catalog,FeatureType.find_names(doc),{"workspace":self.workspace,"data_store":self.key})

    def upload_file(self,file,data_type=None,method="file",configure="first",update="overwrite",filename=None):
        """
        Upload a dataset into the datastore, the datastore is created if it doesn't exist
        method : The upload method. Can be "url", "file", "external".
            file: uploads a local file; the body of the request is the file itself.
            url: the body of the request is a URL pointing to the file to upload, visible from the server.
            external: the body of the request is the absolute path to an existing file on the server.
        data_type: The type of source data (e.g., "shp", "gpkg"); guessed from the file extension if missing
        configure: first: (Default) Sets up only the first feature type available in the data store.
                   none: Does not configure any feature types.
                   all: Configures all feature types.
        """
        if method not in ("file","url","external"):
            raise InvalidArgument("Upload method({}) Not Support".format(method))
        if not data_type:
            data_type = guess_data_type(file)
        if method == "file" and not filename:
            filename = os.path.split(file)[1]

        url = self.catalog.build_url(
            *self._segments(self.key),
            "{}.{}".format(method,data_type),
            configure=configure,
            update=update,
            filename=filename if method == "file" else None
        )
        if method == "file":
            with open(file,'rb') as f:
                self.catalog.put(url,f,headers=self.catalog.contenttype_header(data_type),timeout=settings.UPLOAD_TIMEOUT)
        else:
            self.catalog.put(url,file,headers=self.catalog.contenttype_header("text"),timeout=settings.UPLOAD_TIMEOUT)
        logger.debug("Succeed to upload the file({}) into the datastore({})".format(file,self))
        self.refresh()
        return self
