import logging

from ..exceptions import *
from .. import templates
from .. import timezone
from ..utils import BoundingBox

logger = logging.getLogger(__name__)

def text(node):
    if node is None or node.text is None:
        return None
    return node.text.strip()

def boolean(node):
    value = text(node)
    if value is None:
        return None
    return value.lower() == "true"

def integer(node):
    value = text(node)
    return int(value) if value else None

def strings(node):
    """
    Return the text list of the child elements, for example keywords
    """
    if node is None:
        return []
    return [c.text.strip() for c in node if c.text and c.text.strip()]

def names(node):
    """
    Return the list of 'name' texts of the child elements, for example styles
    """
    if node is None:
        return []
    return [n for n in (text(c.find("name")) for c in node) if n]

def entries(node):
    """
    Return a dict from the <entry key="k">v</entry> child elements
    """
    if node is None:
        return {}
    return dict((e.get("key"),(e.text or "").strip()) for e in node.findall("entry"))

def timestamp(node):
    return timezone.parse_timestamp(text(node))

bbox = BoundingBox.from_node

class Field(object):
    """
    Attribute mirrored from the element located by xpath in the resource's xml.
    Assigned values are kept as pending changes until the resource is saved.
    """
    def __init__(self,xpath,parser=text,readonly=False):
        self.xpath = xpath
        self.parser = parser
        self.readonly = readonly
        self.name = None

    def __set_name__(self,owner,name):
        self.name = name

    def __get__(self,obj,objtype=None):
        if obj is None:
            return self
        if self.name in obj._changes:
            return obj._changes[self.name]
        dom = obj.dom
        if dom is None:
            return None
        return self.parser(dom.find(self.xpath))

    def __set__(self,obj,value):
        if self.readonly:
            raise AttributeError("The field({}) of {} is readonly".format(self.name,obj.__class__.__name__))
        obj._changes[self.name] = value


class NameField(Field):
    """
    The name of the resource, falls back to the name the resource was constructed with
    """
    def __get__(self,obj,objtype=None):
        if obj is None:
            return self
        if self.name not in obj._changes and not obj._loaded:
            return obj.key
        value = super().__get__(obj,objtype)
        return obj.key if value is None else value


def name_of(obj):
    """
    Return the name of a resource object or the value itself if it is a plain string
    """
    if isinstance(obj,ResourceInfo):
        return obj.name
    return obj


class ResourceInfo(object):
    """
    Base class of the geoserver catalog resources.
    resource_type: the root element of the resource xml
    route: the rest path segment of the resource collection
    root_xpath: the xpath of the resource names in the collection xml
    member_xpath: the xpath of the resource element in the resource xml
    template: the jinja2 template of the xml message used to create or update the resource
    """
    resource_type = None
    route = None
    root_xpath = None
    member_xpath = None
    template = None

    name = NameField("name")
    date_created = Field("dateCreated",timestamp,readonly=True)
    date_modified = Field("dateModified",timestamp,readonly=True)

    def __init__(self,catalog,name=None,**attributes):
        self.catalog = catalog
        self.key = name
        self._dom = None
        self._loaded = False
        self._changes = {}
        for k,v in attributes.items():
            setattr(self,k,v)

    @classmethod
    def find_names(cls,doc):
        """
        Return the resource names listed in the collection xml
        """
        return [n.text.strip() for n in doc.findall(cls.root_xpath) if n.text and n.text.strip()]

    @classmethod
    def find_member(cls,doc):
        """
        Return the resource element in the resource xml; None if not found
        """
        if doc is None:
            return None
        if doc.tag == cls.resource_type:
            return doc
        return doc.find(cls.member_xpath)

    def scope(self):
        """
        Return the list of (collection,name) the resource lives under
        """
        return []

    def _segments(self,name=None):
        segments = []
        for collection,value in self.scope():
            segments.append(collection)
            segments.append(value)
        segments.append(self.route)
        if name:
            segments.append(name)
        return segments

    @property
    def href(self):
        return self.catalog.build_url(*self._segments(self.key))

    @property
    def collection_href(self):
        return self.catalog.build_url(*self._segments())

    def _set_dom(self,dom):
        self._dom = dom
        self._loaded = True

    @property
    def dom(self):
        """
        The xml element of the resource, fetched from geoserver on first access; None if the resource doesn't exist
        """
        if not self._loaded:
            if not self.key:
                self._set_dom(None)
            else:
                try:
                    self._set_dom(self.catalog.get_xml(self.href))
                except ResourceNotFound as ex:
                    self._set_dom(None)
        return self._dom

    @property
    def new(self):
        """
        True if the resource doesn't exist in geoserver
        """
        return self.dom is None

    @property
    def changed(self):
        return True if self._changes else False

    def refresh(self):
        """
        Drop the loaded xml and the pending changes
        """
        self._dom = None
        self._loaded = False
        self._changes.clear()
        return self

    def message_context(self):
        """
        Return the values used to render the xml message
        """
        context = {}
        for klass in reversed(type(self).__mro__):
            for k,v in vars(klass).items():
                if isinstance(v,Field) and not v.readonly:
                    context[k] = getattr(self,k)
        return context

    def message(self):
        return templates.render(self.template,**self.message_context())

    def save(self,**params):
        """
        Create the resource if it doesn't exist; otherwise update it.
        Return the resource itself
        """
        if not self.name:
            raise InvalidArgument("{} requires a name".format(self.__class__.__name__))
        data = self.message()
        if self.new:
            self.catalog.post(self.catalog.build_url(*self._segments(),**params),data=data,headers=self.catalog.contenttype_header("xml"))
            logger.debug("Succeed to create the {}({})".format(self.resource_type,self))
        else:
            self.catalog.put(self.catalog.build_url(*self._segments(self.key),**params),data=data,headers=self.catalog.contenttype_header("xml"))
            logger.debug("Succeed to update the {}({})".format(self.resource_type,self))
        if "name" in self._changes:
            self.key = self.name
        self.refresh()
        return self

    def delete(self,recurse=False,purge=None):
        """
        Return True if deleted; otherwise return False if doesn't exist
        """
        try:
            self.catalog.delete(self.catalog.build_url(*self._segments(self.key),recurse=recurse,purge=purge))
        except ResourceNotFound as ex:
            logger.debug("The {}({}) doesn't exist".format(self.resource_type,self))
            return False
        logger.debug("Succeed to delete the {}({})".format(self.resource_type,self))
        self.refresh()
        return True

    @staticmethod
    def list(klass,catalog,names,options=None,check_remote=False):
        """
        Return the resources of class klass with names; drop the resources not existing in geoserver if check_remote is True
        """
        options = options or {}
        result = []
        for name in names:
            obj = klass(catalog,name=name,**options)
            if check_remote and obj.new:
                continue
            result.append(obj)
        return result

    def __eq__(self,other):
        return type(self) is type(other) and self.href == other.href

    def __hash__(self):
        return hash((type(self),self.href))

    def __str__(self):
        scope = [value for collection,value in self.scope()]
        return ":".join(str(s) for s in scope + [self.key])

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__,str(self))
