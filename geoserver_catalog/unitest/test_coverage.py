import unittest
import os
import tempfile

from .basetest import BaseTest
from . import fixtures
from ..exceptions import *
from ..resources import CoverageStore,Coverage
from ..utils import BoundingBox

class CoverageTest(BaseTest):
    def setUp(self):
        super().setUp()
        self.geoserver.add("/workspaces",fixtures.WORKSPACES)
        self.geoserver.add("/workspaces/topp",fixtures.WORKSPACE_TOPP)
        self.geoserver.add("/workspaces/nurc",fixtures.WORKSPACE_NURC)
        self.geoserver.add("/workspaces/topp/coveragestores","<coverageStores/>")
        self.geoserver.add("/workspaces/nurc/coveragestores",fixtures.COVERAGESTORES_NURC)
        self.geoserver.add("/workspaces/nurc/coveragestores/mosaic",fixtures.COVERAGESTORE_MOSAIC)
        self.geoserver.add("/workspaces/nurc/coveragestores/mosaic/coverages",fixtures.COVERAGES_MOSAIC)
        self.geoserver.add("/workspaces/nurc/coveragestores/mosaic/coverages/mosaic",fixtures.COVERAGE_MOSAIC)

    def test_get_coverage_stores(self):
        stores = self.catalog.get_coverage_stores()
        self.assertEqual([(s.workspace,s.name) for s in stores],[("nurc","mosaic"),("nurc","worldImageSample")])
        self.assertEqual(self.catalog.get_coverage_stores("topp"),[])

    def test_get_coverage_store(self):
        store = self.catalog.get_coverage_store("nurc","mosaic")
        self.assertEqual(store.type,"ImageMosaic")
        self.assertEqual(store.description,"Sample ImageMosaic")
        self.assertEqual(store.url,"file:coverages/mosaic_sample/mosaic.shp")
        self.assertTrue(store.enabled)
        self.assertEqual(store.href,self.url("/workspaces/nurc/coveragestores/mosaic"))
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_coverage_store("nurc","missing")

    def test_get_coverages(self):
        coverages = self.catalog.get_coverages("nurc","mosaic")
        self.assertEqual([c.name for c in coverages],["mosaic"])
        store = self.catalog.get_coverage_store("nurc","mosaic")
        self.assertEqual(store.coverages,coverages)
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_coverages("nurc","missing")

    def test_get_coverage(self):
        coverage = self.catalog.get_coverage("nurc","mosaic","mosaic")
        self.assertEqual(coverage.title,"Mosaic")
        self.assertEqual(coverage.keywords,["WCS","ImageMosaic"])
        self.assertEqual(coverage.native_format,"ImageMosaic")
        self.assertEqual(coverage.store_name,"nurc:mosaic")
        self.assertEqual(coverage.native_bbox,BoundingBox(6.346,36.492,20.83,46.591,"EPSG:4326"))
        self.assertIsNone(coverage.latlon_bbox)
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_coverage("nurc","mosaic","missing")
        with self.assertRaises(ObjectNotFound):
            self.catalog.get_coverage("nurc","missing","mosaic")

    def test_create_coverage_store(self):
        store = CoverageStore(self.catalog,name="dem",workspace="nurc",type="GeoTIFF",enabled=True,url="file:data/dem.tif")
        store.save()
        request = self.geoserver.last_request("POST")
        self.assertEqual(request["path"],self.url("/workspaces/nurc/coveragestores"))
        self.assertIn("<type>GeoTIFF</type>",request["data"])
        self.assertIn("<url>file:data/dem.tif</url>",request["data"])
        self.assertIn("<name>nurc</name>",request["data"])

    def test_update_coverage(self):
        coverage = self.catalog.get_coverage("nurc","mosaic","mosaic")
        coverage.abstract = "Blue marble"
        coverage.save()
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/nurc/coveragestores/mosaic/coverages/mosaic"))
        self.assertIn("<abstract>Blue marble</abstract>",request["data"])
        self.assertIn('<store class="coverageStore">',request["data"])
        self.assertIn("<name>nurc:mosaic</name>",request["data"])

    def test_upload_geotiff(self):
        store = CoverageStore(self.catalog,name="dem",workspace="nurc")
        with tempfile.NamedTemporaryFile(suffix=".tif",delete=False) as f:
            f.write(b"II*\x00")
        try:
            store.upload_file(f.name,coverage_name="dem")
        finally:
            os.remove(f.name)
        request = self.geoserver.last_request("PUT")
        self.assertEqual(request["path"],self.url("/workspaces/nurc/coveragestores/dem/file.geotiff"))
        self.assertEqual(request["query"],"configure=first&coverageName=dem")
        self.assertEqual(request["headers"]["content-type"],"image/tiff")
        self.assertEqual(request["data"],b"II*\x00")

        with self.assertRaises(InvalidArgument):
            store.upload_file("/data/dem.tif",method="ftp")

    def test_delete_coverage_store(self):
        store = self.catalog.get_coverage_store("nurc","mosaic")
        self.assertTrue(store.delete(recurse=True,purge="all"))
        self.assertEqual(self.geoserver.last_request("DELETE")["query"],"recurse=true&purge=all")
        self.assertFalse(store.delete())


if __name__ == "__main__":
    unittest.main()
