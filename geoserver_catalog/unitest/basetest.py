import unittest
import requests
from unittest import mock

from .. import loggingconfig
from ..catalog import Catalog

GEOSERVER_URL = "http://geoserver.test/geoserver"
SERVICE_URL = "{}/rest".format(GEOSERVER_URL)

def make_response(method,url,status_code,text=""):
    res = requests.Response()
    res.status_code = status_code
    res._content = text.encode("utf-8")
    res.encoding = "utf-8"
    res.url = url
    res.request = requests.Request(method,url).prepare()
    return res


class FakeGeoserver(object):
    """
    An in memory geoserver rest api serving the registered xml documents and recording the requests
    """
    def __init__(self):
        self.resources = {}
        self.failures = {}
        self.requests = []

    def add(self,path,xml):
        self.resources["{}{}".format(SERVICE_URL,path)] = xml

    def fail(self,method,path,status_code,text=""):
        self.failures[(method,"{}{}".format(SERVICE_URL,path))] = (status_code,text)

    def requested(self,method=None):
        return [r for r in self.requests if method is None or r["method"] == method]

    def last_request(self,method=None):
        result = self.requested(method)
        return result[-1] if result else None

    def handle(self,method,url,data=None,headers=None,**kwargs):
        if data is not None and hasattr(data,"read"):
            data = data.read()
        path = url.split("?",1)[0]
        self.requests.append({
            "method":method,
            "url":url,
            "path":path,
            "query":url.split("?",1)[1] if "?" in url else "",
            "data":data,
            "headers":dict(headers) if headers else {}
        })
        if (method,path) in self.failures:
            status_code,text = self.failures[(method,path)]
            return make_response(method,url,status_code,text)

        if method == "GET":
            if path in self.resources:
                return make_response(method,url,200,self.resources[path])
            return make_response(method,url,404,"No such resource")
        elif method == "POST":
            return make_response(method,url,201,"")
        elif method == "PUT":
            return make_response(method,url,200,"")
        elif method == "DELETE":
            if path in self.resources:
                del self.resources[path]
                return make_response(method,url,200,"")
            return make_response(method,url,404,"No such resource")


class BaseTest(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        print("=============================Begin to run unittest suit {}==========================================".format(cls.__name__))
        super().setUpClass()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        print("=============================End to run unittest suit {}==========================================".format(cls.__name__))

    def setUp(self):
        super().setUp()
        self.geoserver = FakeGeoserver()
        for method in ("get","post","put","delete"):
            patcher = mock.patch("requests.{}".format(method),side_effect=self._handler(method.upper()))
            patcher.start()
            self.addCleanup(patcher.stop)
        self.catalog = Catalog({"url":GEOSERVER_URL,"user":"admin","password":"geoserver"})

    def _handler(self,method):
        def _handle(url,**kwargs):
            return self.geoserver.handle(method,url,**kwargs)
        return _handle

    def url(self,path):
        return "{}{}".format(SERVICE_URL,path)

    def assertRequested(self,method,path,msg=None):
        paths = [r["path"] for r in self.geoserver.requested(method)]
        self.assertIn(self.url(path),paths,msg or "{} {} should be requested, requested: {}".format(method,path,paths))
