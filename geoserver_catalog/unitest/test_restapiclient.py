import unittest
import requests

from .basetest import BaseTest,GEOSERVER_URL,SERVICE_URL
from . import fixtures
from ..catalog import Catalog
from ..exceptions import *

class RestApiClientTest(BaseTest):
    def test_build_url(self):
        self.assertEqual(self.catalog.build_url("workspaces","topp"),"{}/workspaces/topp".format(SERVICE_URL))
        self.assertEqual(self.catalog.build_url("workspaces","my ws"),"{}/workspaces/my%20ws".format(SERVICE_URL))
        self.assertEqual(self.catalog.build_url("layers","topp:states"),"{}/layers/topp:states".format(SERVICE_URL))
        self.assertEqual(
            self.catalog.build_url("workspaces","topp",recurse=True,purge=None),
            "{}/workspaces/topp?recurse=true".format(SERVICE_URL)
        )

    def test_search(self):
        self.geoserver.add("/workspaces/topp/datastores",fixtures.DATASTORES_TOPP)
        self.assertEqual(self.catalog.search(workspaces="topp",datastores=None),fixtures.DATASTORES_TOPP)
        request = self.geoserver.last_request("GET")
        self.assertEqual(request["path"],"{}/workspaces/topp/datastores".format(SERVICE_URL))
        self.assertEqual(request["headers"]["Accept"],"application/xml")

    def test_do_url(self):
        self.catalog.do_url("reload","put")
        self.assertEqual(self.geoserver.last_request()["method"],"PUT")
        with self.assertRaises(InvalidArgument):
            self.catalog.do_url("reload","patch")

    def test_extra_headers(self):
        catalog = Catalog({"url":GEOSERVER_URL,"headers":{"X-Forwarded-User":"tester"}})
        self.geoserver.add("/workspaces",fixtures.WORKSPACES)
        catalog.get_workspaces()
        headers = self.geoserver.last_request("GET")["headers"]
        self.assertEqual(headers["X-Forwarded-User"],"tester")
        self.assertEqual(headers["Accept"],"application/xml")

    def test_not_found(self):
        with self.assertRaises(ResourceNotFound):
            self.catalog.get_xml(self.catalog.build_url("workspaces","missing"))
        self.assertFalse(self.catalog.has(self.catalog.build_url("workspaces","missing")))
        self.geoserver.add("/workspaces/topp",fixtures.WORKSPACE_TOPP)
        self.assertTrue(self.catalog.has(self.catalog.build_url("workspaces","topp")))

    def test_error_status(self):
        for status_code,exception_class in ((401,UnauthenticatedException),(403,UnauthorizedException),(405,HttpMethodNotSupport)):
            self.geoserver.fail("GET","/workspaces",status_code)
            with self.assertRaises(exception_class):
                self.catalog.get_workspaces()

        self.geoserver.fail("GET","/workspaces",500,"java.lang.NullPointerException")
        with self.assertRaises(requests.HTTPError) as cm:
            self.catalog.get_workspaces()
        self.assertIn("java.lang.NullPointerException",str(cm.exception))

        self.geoserver.fail("POST","/workspaces",409,"Workspace 'topp' already exists")
        with self.assertRaises(requests.RequestException):
            self.catalog.post(self.catalog.build_url("workspaces"),"<workspace><name>topp</name></workspace>")

    def test_invalid_response(self):
        self.geoserver.add("/workspaces","<html><body>Login</body>")
        with self.assertRaises(InvalidResponse):
            self.catalog.get_workspaces()


if __name__ == "__main__":
    unittest.main()
