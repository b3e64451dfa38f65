import logging
import collections
import requests
import urllib.parse
import xml.etree.ElementTree as ET

from .exceptions import *
from . import settings

logger = logging.getLogger(__name__)

class RestUtils(object):
    @staticmethod
    def urlencode(s):
        return urllib.parse.quote(str(s),safe=":")

    @staticmethod
    def contenttype_header(f = "xml"):
        if f == "xml":
            return {"content-type": "application/xml"}
        elif f == "json":
            return {"content-type": "application/json"}
        elif f == "sld":
            return {"content-type": "application/vnd.ogc.sld+xml"}
        elif f == "se":
            return {"content-type": "application/vnd.ogc.se+xml"}
        elif f in ("zip","shp"):
            return {"content-type": "application/zip"}
        elif f in ("tiff","geotiff"):
            return {"content-type": "image/tiff"}
        elif f in ("gpkg","geopackage"):
            return {"content-type": "application/x-sqlite3"}
        elif f == "text":
            return {"content-type": "text/plain"}
        elif "/" in f:
            return {"content-type": f}
        else:
            raise InvalidArgument("Format({}) Not Support".format(f))

    @staticmethod
    def accept_header(f = "xml"):
        if f == "xml":
            return {"Accept": "application/xml"}
        elif f == "json":
            return {"Accept": "application/json"}
        elif f == "html":
            return {"Accept": "text/html"}
        elif f == "sld":
            return {"Accept": "application/vnd.ogc.sld+xml"}
        elif f == "se":
            return {"Accept": "application/vnd.ogc.se+xml"}
        elif "/" in f:
            return {"Accept": f}
        else:
            raise InvalidArgument("Format({}) Not Support".format(f))

class RestApiClient(RestUtils):
    """
    Mixin to issue the http requests against the geoserver rest api.
    Requires the attributes: service_url, username, password, request_headers, ssl_verify
    """
    def build_url(self,*segments,**params):
        """
        Return the url of the rest resource identified by the path segments
        params are appended as query string; None is ignored and bool is converted to true/false
        """
        url = "/".join([self.service_url] + [self.urlencode(s) for s in segments if s is not None and s != ""])
        query = [(k,("true" if v else "false") if isinstance(v,bool) else str(v)) for k,v in params.items() if v is not None]
        if query:
            url = "{}?{}".format(url,urllib.parse.urlencode(query))
        return url

    def search(self,**what):
        """
        Issue a GET request against the rest path built from the ordered keyword arguments and return the xml text.
        For example: search(workspaces="topp",datastores=None) requests "/workspaces/topp/datastores"
        """
        segments = []
        for k,v in what.items():
            segments.append(k)
            if v is not None:
                segments.append(v)
        return self.get(self.build_url(*segments),headers=self.accept_header("xml")).text

    def do_url(self,subpath,method="get",data=None,headers=None,**params):
        url = self.build_url(*subpath.strip("/").split("/"),**params)
        method = method.lower()
        if method == "get":
            return self.get(url,headers=headers or self.accept_header("xml"))
        elif method == "delete":
            return self.delete(url,headers=headers)
        elif method == "put":
            return self.put(url,data,headers=headers or self.contenttype_header("xml"))
        elif method == "post":
            return self.post(url,data,headers=headers or self.contenttype_header("xml"))
        else:
            raise InvalidArgument("Http method({}) Not Support".format(method))

    @staticmethod
    def parse_xml(text,url=None):
        try:
            return ET.fromstring(text)
        except ET.ParseError as ex:
            raise InvalidResponse("Geoserver gave non-XML response for [GET {0}]: {1}".format(url,text)) from ex

    def get_xml(self,url):
        """
        Return the parsed xml element of the url; raise ResourceNotFound if not found
        """
        return self.parse_xml(self.get(url,headers=self.accept_header("xml")).text,url=url)

    def _handle_response_error(self,res):
        if res.status_code >= 300 and res.status_code < 400:
            raise UnauthorizedException(res)
        elif res.status_code == 401:
            raise UnauthenticatedException(res)
        elif res.status_code == 403:
            raise UnauthorizedException(res)
        elif res.status_code == 404:
            raise ResourceNotFound(res)
        elif res.status_code == 405:
            raise HttpMethodNotSupport(res)
        elif res.status_code >= 400:
            try:
                res.raise_for_status()
            except requests.RequestException as ex:
                msg = """URL: {0}
{1}
{2}""".format(res.request.url,str(ex),res.text)
                raise ex.__class__(msg,response=res)

    def _headers(self,headers):
        if self.request_headers:
            if headers:
                return collections.ChainMap(headers,self.request_headers)
            else:
                return self.request_headers
        return headers

    def get(self,url,headers=RestUtils.accept_header("xml"),timeout=settings.REQUEST_TIMEOUT,error_handler=None):
        logger.debug("GET {}".format(url))
        res = requests.get(url , headers=self._headers(headers), auth=(self.username,self.password),timeout=timeout,verify=self.ssl_verify)
        (error_handler or self._handle_response_error)(res)
        return res

    def has(self,url,headers=RestUtils.accept_header("xml"),timeout=settings.REQUEST_TIMEOUT,error_handler=None):
        try:
            r = self.get(url , headers=headers,timeout=timeout,error_handler=error_handler)
            return True if r.status_code == 200 else False
        except ResourceNotFound as ex:
            return False

    def post(self,url,data,headers=RestUtils.contenttype_header("xml"),timeout=settings.REQUEST_TIMEOUT,error_handler=None):
        logger.debug("POST {}".format(url))
        res = requests.post(url , data=data , headers=self._headers(headers), auth=(self.username,self.password),timeout=timeout,verify=self.ssl_verify)
        (error_handler or self._handle_response_error)(res)
        return res

    def put(self,url,data,headers=RestUtils.contenttype_header("xml"),timeout=settings.REQUEST_TIMEOUT,error_handler=None):
        logger.debug("PUT {}".format(url))
        res = requests.put(url , data=data , headers=self._headers(headers), auth=(self.username,self.password),timeout=timeout,verify=self.ssl_verify)
        (error_handler or self._handle_response_error)(res)
        return res

    def delete(self,url,headers=None,timeout=settings.REQUEST_TIMEOUT,error_handler=None):
        logger.debug("DELETE {}".format(url))
        res = requests.delete(url , auth=(self.username,self.password),headers=self._headers(headers),timeout=timeout,verify=self.ssl_verify)
        (error_handler or self._handle_response_error)(res)
        return res
