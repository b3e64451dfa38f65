import logging

from .resource import ResourceInfo,Field,name_of
from ..exceptions import *

logger = logging.getLogger(__name__)

STYLE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<style>
    <name>{{ name }}</name>
{% if workspace %}
    <workspace>
        <name>{{ workspace }}</name>
    </workspace>
{% endif %}
{% if format %}
    <format>{{ format }}</format>
{% endif %}
{% if version %}
    <languageVersion>
        <version>{{ version }}</version>
    </languageVersion>
{% endif %}
{% if filename %}
    <filename>{{ filename }}</filename>
{% endif %}
</style>
"""

SLD_NAMESPACE = "{http://www.opengis.net/sld}"
SE_NAMESPACE = "{http://www.opengis.net/se}"

class Style(ResourceInfo):
    resource_type = "style"
    route = "styles"
    root_xpath = "style/name"
    member_xpath = ".//style"
    template = STYLE_TEMPLATE

    format = Field("format")
    version = Field("languageVersion/version")
    filename = Field("filename")

    def __init__(self,catalog,name=None,workspace=None,**attributes):
        self.workspace = name_of(workspace)
        self._sld_body = None
        self._sld_doc = None
        self._sld_changed = False
        super().__init__(catalog,name=name,**attributes)

    def scope(self):
        return [("workspaces",self.workspace)] if self.workspace else []

    def message_context(self):
        context = super().message_context()
        context["workspace"] = self.workspace
        return context

    @property
    def qualified_name(self):
        return "{}:{}".format(self.workspace,self.name) if self.workspace else self.name

    @property
    def sld_format(self):
        """
        "se" for sld 1.1; otherwise "sld"
        """
        return "se" if self.version in ("1.1.0","1.1") else "sld"

    @property
    def content_type(self):
        return self.catalog.contenttype_header(self.sld_format)["content-type"]

    @property
    def sld_href(self):
        return self.catalog.build_url(*self._segments("{}.sld".format(self.key)))

    @property
    def sld_body(self):
        """
        The style definition, fetched from geoserver if not assigned locally
        """
        if self._sld_body is None and not self.new:
            self._sld_body = self.catalog.get(self.sld_href,headers=self.catalog.accept_header(self.sld_format)).text
        return self._sld_body

    @sld_body.setter
    def sld_body(self,value):
        self._sld_body = value
        self._sld_doc = None
        self._sld_changed = True

    @property
    def sld_doc(self):
        if self._sld_doc is None and self.sld_body:
            self._sld_doc = self.catalog.parse_xml(self.sld_body,url=self.sld_href)
        return self._sld_doc

    def _user_style(self):
        doc = self.sld_doc
        if doc is None:
            return None
        for path in ("{0}NamedLayer/{0}UserStyle","{0}UserLayer/{0}UserStyle"):
            user_style = doc.find(path.format(SLD_NAMESPACE))
            if user_style is not None:
                return user_style
        return None

    def _user_style_field(self,field):
        user_style = self._user_style()
        if user_style is None:
            return None
        for ns in (SLD_NAMESPACE,SE_NAMESPACE):
            node = user_style.find("{}{}".format(ns,field))
            if node is not None:
                return node.text
        return None

    @property
    def sld_name(self):
        return self._user_style_field("Name")

    @property
    def sld_title(self):
        return self._user_style_field("Title")

    def refresh(self):
        self._sld_body = None
        self._sld_doc = None
        self._sld_changed = False
        return super().refresh()

    def save(self,**params):
        """
        Create the style from the assigned sld body if it doesn't exist;
        otherwise update the style info and the sld body if changed.
        """
        if not self.name:
            raise InvalidArgument("Style requires a name")
        sld = self._sld_body if self._sld_changed else None
        content_type = self.content_type
        if self.new:
            if sld is None:
                raise InvalidArgument("Style({}) requires a sld body to create".format(self))
            self.catalog.post(self.catalog.build_url(*self._segments(),name=self.name,**params),data=sld,headers={"content-type":content_type})
            logger.debug("Succeed to create the style({})".format(self))
            self.key = self.name
            return self.refresh()

        if self.changed:
            super().save(**params)

        if sld is not None:
            self.catalog.put(self.href,data=sld,headers={"content-type":content_type})
            logger.debug("Succeed to update the sld of the style({})".format(self))
            self.refresh()
        return self

    def delete(self,recurse=False,purge=True):
        return super().delete(recurse=recurse,purge=purge)
