import logging

from .mixins import *
from .exceptions import *
from .restapiclient import RestApiClient
from .resources import ResourceInfo
from . import settings

logger = logging.getLogger(__name__)

class Catalog(AboutMixin,ReloadMixin,WorkspaceMixin,NamespaceMixin,LayerMixin,LayergroupMixin,StyleMixin,DatastoreMixin,FeaturetypeMixin,CoverageStoreMixin,CoverageMixin,WMSStoreMixin,RestApiClient):
    """
    The entry point of the geoserver rest api
    config: a dict with keys
        url: the geoserver url, with or without the trailing "/rest"
        user: optional
        password: optional
        headers: optional, the extra headers sent with every request
        ssl_verify: optional, default is True
    """
    def __init__(self,config=None,**options):
        config = dict(settings.GEOSERVER if config is None else config)
        config.update(options)
        if not config.get("url"):
            raise InvalidArgument("Catalog: Requires url option")
        self.config = config

        url = config["url"].rstrip("/")
        if url.endswith("/rest"):
            url = url[:-5]
        self.geoserver_url = url
        self.service_url = "{}/rest".format(url)
        self.username = config.get("user")
        self.password = config.get("password")
        self.request_headers = config.get("headers")
        self.ssl_verify = config.get("ssl_verify",True)
        self._versions = None

    def __str__(self):
        return "Catalog: {}".format(self.geoserver_url)

    def headers(self,format="xml"):
        """
        Return the accept and content-type headers of format
        """
        return dict(self.accept_header(format),**self.contenttype_header(format))

    def list(self,klass,names,options=None,check_remote=False):
        """
        Shortcut of ResourceInfo.list for this catalog
        """
        return ResourceInfo.list(klass,self,names,options,check_remote)

    def _search_names(self,klass,**what):
        """
        Return the resource names of klass found in the search result
        """
        try:
            return klass.find_names(self.parse_xml(self.search(**what)))
        except ResourceNotFound as ex:
            raise ObjectNotFound("Cannot find the {} list of {}".format(klass.resource_type,"/".join(str(v) for v in what.values() if v is not None))) from ex

    def _search_member(self,klass,name,options=None,**what):
        """
        Return the resource of klass with the search result loaded; raise ObjectNotFound if not found
        """
        try:
            doc = self.parse_xml(self.search(**what))
        except ResourceNotFound as ex:
            raise ObjectNotFound("Cannot find {} {}".format(klass.resource_type,name)) from ex
        member = klass.find_member(doc)
        if member is None:
            raise ObjectNotFound("Cannot find {} {}".format(klass.resource_type,name))
        obj = klass(self,name=name,**(options or {}))
        obj._set_dom(member)
        return obj


_default_catalog = None
def get_default_catalog():
    """
    Return the catalog configured by the environment; created on first call
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = Catalog()
    return _default_catalog
