import logging

from .resource import ResourceInfo,Field,text,boolean,names
from ..exceptions import *
from ..utils import parse_resource_href,split_name

logger = logging.getLogger(__name__)

ATOM_NAMESPACE = "{http://www.w3.org/2005/Atom}"

LAYER_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<layer>
    <name>{{ name }}</name>
{% if path %}
    <path>{{ path }}</path>
{% endif %}
{% if enabled is not none %}
    <enabled>{{ enabled|xmlbool }}</enabled>
{% endif %}
{% if queryable is not none %}
    <queryable>{{ queryable|xmlbool }}</queryable>
{% endif %}
{% if default_style %}
    <defaultStyle>
        <name>{{ default_style }}</name>
    </defaultStyle>
{% endif %}
    <styles class="linked-hash-set">
{% for style in alternate_styles %}
        <style>
            <name>{{ style }}</name>
        </style>
{% endfor %}
    </styles>
{% if attribution %}
    <attribution>
{% for key,value in attribution.items() %}
{% if value is not none %}
        <{{ key }}>{{ value }}</{{ key }}>
{% endif %}
{% endfor %}
    </attribution>
{% endif %}
</layer>
"""

def children(node):
    """
    Return a dict from the child element tags to their texts
    """
    if node is None:
        return {}
    return dict((c.tag,text(c)) for c in node)

def link(node):
    if node is None:
        return None
    atom = node.find("{}link".format(ATOM_NAMESPACE))
    return atom.get("href") if atom is not None else None

def resource_class(node):
    return node.get("class") if node is not None else None

def style_name(style):
    if hasattr(style,"qualified_name"):
        return style.qualified_name
    return style

class Layer(ResourceInfo):
    """
    A published layer; layers are created by publishing a feature type or a coverage
    """
    resource_type = "layer"
    route = "layers"
    root_xpath = "layer/name"
    member_xpath = ".//layer"
    template = LAYER_TEMPLATE

    path = Field("path")
    type = Field("type",readonly=True)
    enabled = Field("enabled",boolean)
    queryable = Field("queryable",boolean)
    default_style = Field("defaultStyle/name")
    alternate_styles = Field("styles",names)
    attribution = Field("attribution",children)
    resource_href = Field("resource",link,readonly=True)
    resource_class = Field("resource",resource_class,readonly=True)

    @property
    def workspace_name(self):
        """
        The workspace of the layer, resolved from the qualified layer name or the layer's resource
        """
        workspace,name = split_name(self.key)
        if workspace:
            return workspace
        resource = parse_resource_href(self.resource_href)
        if resource:
            return resource["workspace"]
        workspace,name = split_name(text(self.dom.find("resource/name")) if self.dom is not None else None)
        return workspace

    @property
    def workspace(self):
        from .workspace import Workspace
        workspace = self.workspace_name
        return Workspace(self.catalog,name=workspace) if workspace else None

    @property
    def resource(self):
        """
        The FeatureType or Coverage published by the layer; None if not resolvable
        """
        resource = parse_resource_href(self.resource_href)
        if not resource:
            return None
        if resource["resourcetype"] == "featuretypes":
            from .featuretype import FeatureType
            return FeatureType(self.catalog,name=resource["name"],workspace=resource["workspace"],data_store=resource["store"])
        elif resource["resourcetype"] == "coverages":
            from .coverage import Coverage
            return Coverage(self.catalog,name=resource["name"],workspace=resource["workspace"],coverage_store=resource["store"])
        else:
            return None

    def message_context(self):
        context = super().message_context()
        context["default_style"] = style_name(context.get("default_style"))
        context["alternate_styles"] = [style_name(s) for s in (context.get("alternate_styles") or [])]
        return context

    def save(self,**params):
        if self.new:
            raise ObjectNotFound("Layer({}) doesn't exist; publish its feature type or coverage first".format(self))
        return super().save(**params)

    def delete(self,recurse=False,purge=None):
        return super().delete(recurse=recurse)
