from .resource import ResourceInfo,Field,boolean,strings,bbox,name_of
from .. import templates
from ..exceptions import *

COVERAGE_TEMPLATE = templates.BBOX_MACRO + templates.KEYWORDS_MACRO + """<?xml version="1.0" encoding="UTF-8"?>
<coverage>
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
    <store class="coverageStore">
        <name>{{ workspace }}:{{ coverage_store }}</name>
    </store>
</coverage>
"""

class Coverage(ResourceInfo):
    resource_type = "coverage"
    route = "coverages"
    root_xpath = "coverage/name"
    member_xpath = ".//coverage"
    template = COVERAGE_TEMPLATE

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
    native_format = Field("nativeFormat",readonly=True)
    store_name = Field("store/name",readonly=True)

    def __init__(self,catalog,name=None,workspace=None,coverage_store=None,**attributes):
        if not workspace or not coverage_store:
            raise InvalidArgument("Coverage requires a workspace and a coverage store")
        self.workspace = name_of(workspace)
        self.coverage_store = name_of(coverage_store)
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace),("coveragestores",self.coverage_store)]

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        context["coverage_store"] = self.coverage_store
        return context

    def delete(self,recurse=True,purge=None):
        return super().delete(recurse=recurse)
