import logging

from .resource import ResourceInfo,Field,text,strings,bbox,name_of
from .. import templates
from ..exceptions import *

logger = logging.getLogger(__name__)

LAYERGROUP_TEMPLATE = templates.BBOX_MACRO + templates.KEYWORDS_MACRO + """<?xml version="1.0" encoding="UTF-8"?>
<layerGroup>
    <name>{{ name }}</name>
    <mode>{{ mode or "SINGLE" }}</mode>
{% if title %}
    <title>{{ title }}</title>
{% endif %}
{% if abstract %}
    <abstract>{{ abstract }}</abstract>
{% endif %}
{% if workspace %}
    <workspace>
        <name>{{ workspace }}</name>
    </workspace>
{% endif %}
    <publishables>
{% for type,layer in publishables %}
        <published type="{{ type }}">
            <name>{{ layer }}</name>
        </published>
{% endfor %}
    </publishables>
{% if styles %}
    <styles>
{% for style in styles %}
{% if style %}
        <style>
            <name>{{ style }}</name>
        </style>
{% else %}
        <style/>
{% endif %}
{% endfor %}
    </styles>
{% endif %}
{% if bounds %}
{{ bbox_element("bounds",bounds) }}
{% endif %}
{% if keywords %}
{{ keywords_element(keywords) }}
{% endif %}
</layerGroup>
"""

def published(node):
    """
    Return the list of (type,name) of the published layers
    """
    if node is None:
        return []
    return [(p.get("type") or "layer",text(p.find("name"))) for p in node.findall("published")]

def style_names(node):
    """
    Return the style name of each published layer; None if the layer uses its default style
    """
    if node is None:
        return []
    return [text(s.find("name")) for s in node.findall("style")]

class LayerGroup(ResourceInfo):
    resource_type = "layerGroup"
    route = "layergroups"
    root_xpath = "layerGroup/name"
    member_xpath = ".//layerGroup"
    template = LAYERGROUP_TEMPLATE

    mode = Field("mode")
    title = Field("title")
    abstract = Field("abstract")
    workspace_name = Field("workspace/name",readonly=True)
    publishables = Field("publishables",published,readonly=True)
    styles = Field("styles",style_names)
    bounds = Field("bounds",bbox)
    keywords = Field("keywords",strings)

    def __init__(self,catalog,name=None,workspace=None,**attributes):
        self.workspace = name_of(workspace)
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace)] if self.workspace else []

    @property
    def layers(self):
        """
        The names of the published layers and layer groups
        """
        if "layers" in self._changes:
            return self._changes["layers"]
        return [name for type,name in (self.publishables or [])]

    @layers.setter
    def layers(self,layers):
        """
        layers: list of layer names, Layer or LayerGroup objects
        """
        self._changes["layers"] = list(layers)

    def _published_layers(self):
        from .layer import Layer
        existing = dict((name,type) for type,name in (self.publishables or []))
        result = []
        for layer in self.layers:
            if isinstance(layer,LayerGroup):
                result.append(("layerGroup",layer.qualified_name))
            elif isinstance(layer,Layer):
                result.append(("layer",layer.name))
            else:
                result.append((existing.get(layer,"layer"),layer))
        return result

    @property
    def qualified_name(self):
        return "{}:{}".format(self.workspace,self.name) if self.workspace else self.name

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        context["publishables"] = self._published_layers()
        if "layers" in self._changes and "styles" not in self._changes:
            #one style per published layer; the layers kept from the group keep their styles
            existing = dict(zip([name for type,name in (self.publishables or [])],context.get("styles") or []))
            context["styles"] = [existing.get(name) for type,name in context["publishables"]]
        context["styles"] = [name_of(s) for s in (context.get("styles") or [])]
        return context

    def save(self,**params):
        if not self.layers:
            raise InvalidArgument("LayerGroup({}) requires at least one layer".format(self))
        return super().save(**params)
