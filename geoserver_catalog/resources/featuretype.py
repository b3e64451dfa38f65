import logging

from .resource import ResourceInfo,Field,boolean,strings,names,bbox,name_of
from .. import templates
from ..exceptions import *

logger = logging.getLogger(__name__)

FEATURETYPE_TEMPLATE = templates.BBOX_MACRO + templates.KEYWORDS_MACRO + """<?xml version="1.0" encoding="UTF-8"?>
<featureType>
    <name>{{ name }}</name>
{% if native_name %}
    <nativeName>{{ native_name }}</nativeName>
{% endif %}
    <namespace>
        <name>{{ workspace }}</name>
    </namespace>
    <title>{{ title or name }}</title>
{% if abstract %}
    <abstract>{{ abstract }}</abstract>
{% endif %}
{% if keywords %}
{{ keywords_element(keywords) }}
{% endif %}
{% if native_crs %}
    <nativeCRS>{{ native_crs }}</nativeCRS>
{% endif %}
{% if srs %}
    <srs>{{ srs }}</srs>
{% endif %}
{% if native_bbox %}
{{ bbox_element("nativeBoundingBox",native_bbox) }}
{% endif %}
{% if latlon_bbox %}
{{ bbox_element("latLonBoundingBox",latlon_bbox) }}
{% endif %}
{% if projection_policy %}
    <projectionPolicy>{{ projection_policy }}</projectionPolicy>
{% endif %}
{% if enabled is not none %}
    <enabled>{{ enabled|xmlbool }}</enabled>
{% endif %}
    <store class="dataStore">
        <name>{{ workspace }}:{{ data_store }}</name>
    </store>
</featureType>
"""

class FeatureType(ResourceInfo):
    resource_type = "featureType"
    route = "featuretypes"
    root_xpath = "featureType/name"
    member_xpath = ".//featureType"
    template = FEATURETYPE_TEMPLATE

    native_name = Field("nativeName")
    title = Field("title")
    abstract = Field("abstract")
    keywords = Field("keywords",strings)
    srs = Field("srs")
    native_crs = Field("nativeCRS")
    projection_policy = Field("projectionPolicy")
    enabled = Field("enabled",boolean)
    native_bbox = Field("nativeBoundingBox",bbox)
    latlon_bbox = Field("latLonBoundingBox",bbox)
    attributes = Field("attributes",names,readonly=True)
    store_name = Field("store/name",readonly=True)

    def __init__(self,catalog,name=None,workspace=None,data_store=None,**attributes):
        if not workspace or not data_store:
            raise InvalidArgument("FeatureType requires a workspace and a data store")
        self.workspace = name_of(workspace)
        self.data_store = name_of(data_store)
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace),("datastores",self.data_store)]

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        context["data_store"] = self.data_store
        return context

    def save(self,recalculate=None):
        """
        recalculate: the bounding boxes to recalculate when updating, for example "nativebbox,latlonbbox"
        """
        return super().save(recalculate=recalculate)

    def delete(self,recurse=True,purge=None):
        return super().delete(recurse=recurse)
