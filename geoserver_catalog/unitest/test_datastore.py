import unittest
import os
import tempfile

from .basetest import BaseTest
from . import fixtures
from ..exceptions import *
from ..resources import DataStore,FeatureType
from ..utils import BoundingBox

class StatesShapefileTest(BaseTest):
    def setUp(self):
        super().setUp()
        self.geoserver.add("/workspaces",fixtures.WORKSPACES)
        self.geoserver.add("/workspaces/topp",fixtures.WORKSPACE_TOPP)
        self.geoserver.add("/workspaces/nurc",fixtures.WORKSPACE_NURC)
        self.geoserver.add("/workspaces/topp/datastores",fixtures.DATASTORES_TOPP)
        self.geoserver.add("/workspaces/nurc/datastores",fixtures.DATASTORES_EMPTY)
        self.geoserver.add("/workspaces/topp/datastores/states_shapefile",fixtures.DATASTORE_STATES)
        self.geoserver.add("/workspaces/topp/datastores/states_shapefile/featuretypes",fixtures.FEATURETYPES_STATES)
        self.geoserver.add("/workspaces/topp/datastores/states_shapefile/featuretypes/states",fixtures.FEATURETYPE_STATES)


class DatastoreTest(StatesShapefileTest):
    def test_get_data_stores(self):
        stores = self.catalog.get_data_stores()
        self.assertEqual([(s.workspace,s.name) for s in stores],[("topp","states_shapefile"),("topp","taz_shapes")])
        stores = self.catalog.get_data_stores("nurc")
        self.assertEqual(stores,[])
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_data_stores("missing")

    def test_get_data_store(self):
        store = self.catalog.get_data_store("topp","states_shapefile")
        self.assertEqual(store.name,"states_shapefile")
        self.assertEqual(store.workspace,"topp")
        self.assertEqual(store.type,"Shapefile")
        self.assertEqual(store.description,"The US states")
        self.assertTrue(store.enabled)
        self.assertEqual(store.connection_parameters,{
            "url":"file:data/shapefiles/states.shp",
            "namespace":"http://www.openplans.org/topp"
        })
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_data_store("topp","missing")

    def test_requires_workspace(self):
        with self.assertRaises(InvalidArgument):
            DataStore(self.catalog,name="store")

    def test_update_data_store(self):
        store = self.catalog.get_data_store("topp","states_shapefile")
        store.description = "States & territories"
        store.save()
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/topp/datastores/states_shapefile"))
        self.assertIn("<description>States &amp; territories</description>",request["data"])
        self.assertIn('<entry key="url">file:data/shapefiles/states.shp</entry>',request["data"])
        self.assertIn("<enabled>true</enabled>",request["data"])

    def test_create_data_store(self):
        store = DataStore(
            self.catalog,
            name="postgis",
            workspace=self.catalog.get_workspace("topp"),
            type="PostGIS",
            enabled=True,
            connection_parameters={"host":"localhost","port":5432,"dbtype":"postgis","Loose bbox":True}
        )
        self.assertTrue(store.new)
        store.save()
        request = self.geoserver.last_request("POST")
        self.assertEqual(request["path"],self.url("/workspaces/topp/datastores"))
        self.assertIn("<name>postgis</name>",request["data"])
        self.assertIn("<type>PostGIS</type>",request["data"])
        self.assertIn('<entry key="port">5432</entry>',request["data"])
        self.assertIn('<entry key="Loose bbox">true</entry>',request["data"])
        self.assertIn("<workspace>",request["data"])

    def test_delete_data_store(self):
        store = self.catalog.get_data_store("topp","states_shapefile")
        self.assertTrue(store.delete(recurse=True))
        self.assertEqual(self.geoserver.last_request("DELETE")["query"],"recurse=true")
        self.assertFalse(store.delete())

    def test_upload_file(self):
        store = DataStore(self.catalog,name="states_shapefile",workspace="topp")
        with tempfile.NamedTemporaryFile(suffix=".zip",delete=False) as f:
            f.write(b"PK\x03\x04shapefile")
        try:
            store.upload_file(f.name)
        finally:
            os.remove(f.name)
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/topp/datastores/states_shapefile/file.shp"))
        self.assertIn("configure=first",request["query"])
        self.assertIn("filename={}".format(os.path.basename(f.name)),request["query"])
        self.assertEqual(request["headers"]["content-type"],"application/zip")
        self.assertEqual(request["data"],b"PK\x03\x04shapefile")

    def test_upload_external_file(self):
        store = DataStore(self.catalog,name="states_shapefile",workspace="topp")
        store.upload_file("/data/states.gpkg",method="external",configure="all")
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/topp/datastores/states_shapefile/external.gpkg"))
        self.assertNotIn("filename",request["query"])
        self.assertEqual(request["data"],"/data/states.gpkg")

        with self.assertRaises(InvalidArgument):
            store.upload_file("/data/states.csv")


class FeaturetypeTest(StatesShapefileTest):
    def test_get_feature_types(self):
        featuretypes = self.catalog.get_feature_types("topp","states_shapefile")
        self.assertEqual([f.name for f in featuretypes],["states"])
        store = self.catalog.get_data_store("topp","states_shapefile")
        self.assertEqual([f.name for f in store.feature_types],["states"])
        self.assertEqual(store.feature_types[0].data_store,"states_shapefile")
        with self.assertRaises(ObjectNotFound) as cm:
            self.catalog.get_feature_types("topp","missing")
        self.assertIsInstance(cm.exception.__cause__,ResourceNotFound)

    def test_get_feature_type(self):
        featuretype = self.catalog.get_feature_type("topp","states_shapefile","states")
        self.assertEqual(featuretype.title,"USA Population")
        self.assertEqual(featuretype.keywords,["census","united","boundaries"])
        self.assertEqual(featuretype.srs,"EPSG:4326")
        self.assertEqual(featuretype.projection_policy,"FORCE_DECLARED")
        self.assertEqual(featuretype.latlon_bbox,BoundingBox(-124.731422,24.955967,-66.969849,49.371735,"EPSG:4326"))
        self.assertEqual(featuretype.attributes,["the_geom","STATE_NAME","PERSONS"])
        self.assertEqual(featuretype.store_name,"topp:states_shapefile")
        self.assertTrue(featuretype.enabled)
        self.assertIsNotNone(featuretype.date_created)
        with self.assertRaises(AttributeError):
            featuretype.attributes = []
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_feature_type("topp","states_shapefile","missing")

    def test_update_feature_type(self):
        featuretype = self.catalog.get_feature_type("topp","states_shapefile","states")
        featuretype.title = "States"
        featuretype.keywords = ["states"]
        featuretype.save(recalculate="nativebbox,latlonbbox")
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/topp/datastores/states_shapefile/featuretypes/states"))
        self.assertEqual(request["query"],"recalculate=nativebbox%2Clatlonbbox")
        self.assertIn("<title>States</title>",request["data"])
        self.assertIn("<string>states</string>",request["data"])
        self.assertNotIn("<string>census</string>",request["data"])
        self.assertIn("<latLonBoundingBox>",request["data"])
        self.assertIn("<crs>EPSG:4326</crs>",request["data"])
        self.assertIn("<name>topp:states_shapefile</name>",request["data"])

    def test_publish_feature_type(self):
        featuretype = FeatureType(
            self.catalog,
            name="counties",
            workspace="topp",
            data_store="states_shapefile",
            srs="EPSG:4326",
            native_bbox=BoundingBox(-124,24,-66,49,"EPSG:4326")
        )
        featuretype.save()
        request = self.geoserver.last_request("POST")
        self.assertEqual(request["path"],self.url("/workspaces/topp/datastores/states_shapefile/featuretypes"))
        self.assertIn("<title>counties</title>",request["data"])
        self.assertIn("<nativeBoundingBox>",request["data"])
        self.assertIn("<minx>-124.0</minx>",request["data"])
        self.assertNotIn("<latLonBoundingBox>",request["data"])

    def test_delete_feature_type(self):
        featuretype = self.catalog.get_feature_type("topp","states_shapefile","states")
        self.assertTrue(featuretype.delete())
        self.assertEqual(self.geoserver.last_request("DELETE")["query"],"recurse=true")


if __name__ == "__main__":
    unittest.main()
