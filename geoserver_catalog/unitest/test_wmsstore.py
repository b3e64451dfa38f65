import unittest

from .basetest import BaseTest
from . import fixtures
from ..exceptions import *
from ..resources import WmsStore

class WmsStoreTest(BaseTest):
    def setUp(self):
        super().setUp()
        self.geoserver.add("/workspaces",fixtures.WORKSPACES)
        self.geoserver.add("/workspaces/topp",fixtures.WORKSPACE_TOPP)
        self.geoserver.add("/workspaces/nurc",fixtures.WORKSPACE_NURC)
        self.geoserver.add("/workspaces/topp/wmsstores",fixtures.WMSSTORES_TOPP)
        self.geoserver.add("/workspaces/nurc/wmsstores","<wmsStores/>")
        self.geoserver.add("/workspaces/topp/wmsstores/remote_wms",fixtures.WMSSTORE_REMOTE)
        self.geoserver.add("/workspaces/topp/wmsstores/remote_wms/wmslayers",fixtures.WMSLAYERS_REMOTE)

    def test_get_wms_stores(self):
        stores = self.catalog.get_wms_stores()
        self.assertEqual([(s.workspace,s.name) for s in stores],[("topp","remote_wms")])
        self.assertEqual(self.catalog.get_wms_stores("nurc"),[])

    def test_get_wms_store(self):
        store = self.catalog.get_wms_store("topp","remote_wms")
        self.assertEqual(store.capabilities_url,"http://remote.test/wms?request=GetCapabilities&service=WMS")
        self.assertEqual(store.user,"reader")
        self.assertIsNone(store.password)
        self.assertEqual(store.max_connections,6)
        self.assertEqual(store.read_timeout,60)
        self.assertEqual(store.connect_timeout,30)
        self.assertTrue(store.enabled)
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_wms_store("topp","missing")

    def test_layer_names(self):
        store = self.catalog.get_wms_store("topp","remote_wms")
        self.assertEqual(store.layer_names,["roads","rivers"])
        self.assertRequested("GET","/workspaces/topp/wmsstores/remote_wms/wmslayers")

    def test_create_wms_store(self):
        store = WmsStore(
            self.catalog,
            name="basemap",
            workspace="topp",
            capabilities_url="http://basemap.test/wms?service=WMS&request=GetCapabilities"
        )
        store.save()
        request = self.geoserver.last_request("POST")
        self.assertEqual(request["path"],self.url("/workspaces/topp/wmsstores"))
        self.assertIn("<capabilitiesURL>http://basemap.test/wms?service=WMS&amp;request=GetCapabilities</capabilitiesURL>",request["data"])
        self.assertIn("<type>WMS</type>",request["data"])
        self.assertIn("<enabled>true</enabled>",request["data"])
        self.assertIn("<maxConnections>10</maxConnections>",request["data"])
        self.assertNotIn("<user>",request["data"])

    def test_requires_capabilities_url(self):
        store = WmsStore(self.catalog,name="basemap",workspace="topp")
        with self.assertRaises(InvalidArgument):
            store.save()
        self.assertEqual(self.geoserver.requested("POST"),[])

    def test_update_wms_store(self):
        store = self.catalog.get_wms_store("topp","remote_wms")
        store.max_connections = 4
        store.save()
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/topp/wmsstores/remote_wms"))
        self.assertIn("<maxConnections>4</maxConnections>",request["data"])
        self.assertIn("<user>reader</user>",request["data"])
        self.assertIn("GetCapabilities&amp;service=WMS",request["data"])


if __name__ == "__main__":
    unittest.main()
