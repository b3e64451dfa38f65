WORKSPACES = """<?xml version="1.0" encoding="UTF-8"?>
<workspaces xmlns:atom="http://www.w3.org/2005/Atom">
  <workspace>
    <name>topp</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp.xml" type="application/xml"/>
  </workspace>
  <workspace>
    <name>nurc</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/nurc.xml" type="application/xml"/>
  </workspace>
</workspaces>
"""

WORKSPACE_TOPP = """<workspace xmlns:atom="http://www.w3.org/2005/Atom">
  <name>topp</name>
  <isolated>false</isolated>
  <dateCreated>2025-06-18 00:47:24.331 UTC</dateCreated>
  <dataStores>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp/datastores.xml" type="application/xml"/>
  </dataStores>
</workspace>
"""

WORKSPACE_NURC = """<workspace>
  <name>nurc</name>
  <isolated>false</isolated>
</workspace>
"""

WORKSPACE_DEFAULT = """<workspace>
  <name>nurc</name>
  <isolated>false</isolated>
</workspace>
"""

DATASTORES_TOPP = """<dataStores xmlns:atom="http://www.w3.org/2005/Atom">
  <dataStore>
    <name>states_shapefile</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp/datastores/states_shapefile.xml" type="application/xml"/>
  </dataStore>
  <dataStore>
    <name>taz_shapes</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp/datastores/taz_shapes.xml" type="application/xml"/>
  </dataStore>
</dataStores>
"""

DATASTORES_EMPTY = """<dataStores/>"""

DATASTORE_STATES = """<dataStore xmlns:atom="http://www.w3.org/2005/Atom">
  <name>states_shapefile</name>
  <description>The US states</description>
  <type>Shapefile</type>
  <enabled>true</enabled>
  <workspace>
    <name>topp</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp.xml" type="application/xml"/>
  </workspace>
  <connectionParameters>
    <entry key="url">file:data/shapefiles/states.shp</entry>
    <entry key="namespace">http://www.openplans.org/topp</entry>
  </connectionParameters>
  <__default>false</__default>
  <featureTypes>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp/datastores/states_shapefile/featuretypes.xml" type="application/xml"/>
  </featureTypes>
</dataStore>
"""

FEATURETYPES_STATES = """<featureTypes xmlns:atom="http://www.w3.org/2005/Atom">
  <featureType>
    <name>states</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp/datastores/states_shapefile/featuretypes/states.xml" type="application/xml"/>
  </featureType>
</featureTypes>
"""

FEATURETYPE_STATES = """<featureType xmlns:atom="http://www.w3.org/2005/Atom">
  <name>states</name>
  <nativeName>states</nativeName>
  <namespace>
    <name>topp</name>
  </namespace>
  <title>USA Population</title>
  <abstract>This is some census data on the states.</abstract>
  <keywords>
    <string>census</string>
    <string>united</string>
    <string>boundaries</string>
  </keywords>
  <nativeCRS>GEOGCS["GCS_WGS_1984"]</nativeCRS>
  <srs>EPSG:4326</srs>
  <nativeBoundingBox>
    <minx>-124.731422</minx>
    <maxx>-66.969849</maxx>
    <miny>24.955967</miny>
    <maxy>49.371735</maxy>
    <crs>EPSG:4326</crs>
  </nativeBoundingBox>
  <latLonBoundingBox>
    <minx>-124.731422</minx>
    <maxx>-66.969849</maxx>
    <miny>24.955967</miny>
    <maxy>49.371735</maxy>
    <crs>EPSG:4326</crs>
  </latLonBoundingBox>
  <projectionPolicy>FORCE_DECLARED</projectionPolicy>
  <enabled>true</enabled>
  <dateCreated>2025-06-18 00:47:24.331 UTC</dateCreated>
  <store class="dataStore">
    <name>topp:states_shapefile</name>
  </store>
  <attributes>
    <attribute>
      <name>the_geom</name>
    </attribute>
    <attribute>
      <name>STATE_NAME</name>
    </attribute>
    <attribute>
      <name>PERSONS</name>
    </attribute>
  </attributes>
</featureType>
"""

COVERAGESTORES_NURC = """<coverageStores>
  <coverageStore>
    <name>mosaic</name>
  </coverageStore>
  <coverageStore>
    <name>worldImageSample</name>
  </coverageStore>
</coverageStores>
"""

COVERAGESTORE_MOSAIC = """<coverageStore>
  <name>mosaic</name>
  <description>Sample ImageMosaic</description>
  <type>ImageMosaic</type>
  <enabled>true</enabled>
  <workspace>
    <name>nurc</name>
  </workspace>
  <url>file:coverages/mosaic_sample/mosaic.shp</url>
</coverageStore>
"""

COVERAGES_MOSAIC = """<coverages>
  <coverage>
    <name>mosaic</name>
  </coverage>
</coverages>
"""

COVERAGE_MOSAIC = """<coverage>
  <name>mosaic</name>
  <nativeName>mosaic</nativeName>
  <namespace>
    <name>nurc</name>
  </namespace>
  <title>Mosaic</title>
  <keywords>
    <string>WCS</string>
    <string>ImageMosaic</string>
  </keywords>
  <srs>EPSG:4326</srs>
  <nativeBoundingBox>
    <minx>6.346</minx>
    <maxx>20.83</maxx>
    <miny>36.492</miny>
    <maxy>46.591</maxy>
    <crs>EPSG:4326</crs>
  </nativeBoundingBox>
  <enabled>true</enabled>
  <nativeFormat>ImageMosaic</nativeFormat>
  <store class="coverageStore">
    <name>nurc:mosaic</name>
  </store>
</coverage>
"""

WMSSTORES_TOPP = """<wmsStores>
  <wmsStore>
    <name>remote_wms</name>
  </wmsStore>
</wmsStores>
"""

WMSSTORE_REMOTE = """<wmsStore>
  <name>remote_wms</name>
  <type>WMS</type>
  <enabled>true</enabled>
  <workspace>
    <name>topp</name>
  </workspace>
  <capabilitiesURL>http://remote.test/wms?request=GetCapabilities&amp;service=WMS</capabilitiesURL>
  <user>reader</user>
  <maxConnections>6</maxConnections>
  <readTimeout>60</readTimeout>
  <connectTimeout>30</connectTimeout>
</wmsStore>
"""

WMSLAYERS_REMOTE = """<wmsLayers>
  <wmsLayer>
    <name>roads</name>
  </wmsLayer>
  <wmsLayer>
    <name>rivers</name>
  </wmsLayer>
</wmsLayers>
"""

LAYERS = """<layers xmlns:atom="http://www.w3.org/2005/Atom">
  <layer>
    <name>topp:states</name>
  </layer>
  <layer>
    <name>nurc:mosaic</name>
  </layer>
  <layer>
    <name>tiger_roads</name>
  </layer>
</layers>
"""

LAYER_STATES = """<layer xmlns:atom="http://www.w3.org/2005/Atom">
  <name>states</name>
  <path>/</path>
  <type>VECTOR</type>
  <defaultStyle>
    <name>population</name>
  </defaultStyle>
  <styles class="linked-hash-set">
    <style>
      <name>pophatch</name>
    </style>
    <style>
      <name>polygon</name>
    </style>
  </styles>
  <resource class="featureType">
    <name>topp:states</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/topp/datastores/states_shapefile/featuretypes/states.xml" type="application/xml"/>
  </resource>
  <enabled>true</enabled>
  <queryable>true</queryable>
  <attribution>
    <logoWidth>0</logoWidth>
    <logoHeight>0</logoHeight>
  </attribution>
</layer>
"""

LAYER_MOSAIC = """<layer xmlns:atom="http://www.w3.org/2005/Atom">
  <name>mosaic</name>
  <type>RASTER</type>
  <resource class="coverage">
    <name>nurc:mosaic</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/nurc/coveragestores/mosaic/coverages/mosaic.xml" type="application/xml"/>
  </resource>
  <enabled>true</enabled>
</layer>
"""

LAYER_TIGER_ROADS = """<layer xmlns:atom="http://www.w3.org/2005/Atom">
  <name>tiger_roads</name>
  <type>VECTOR</type>
  <resource class="featureType">
    <name>tiger:tiger_roads</name>
    <atom:link rel="alternate" href="http://geoserver.test/geoserver/rest/workspaces/tiger/datastores/nyc/featuretypes/tiger_roads.xml" type="application/xml"/>
  </resource>
  <enabled>true</enabled>
</layer>
"""

LAYERGROUPS = """<layerGroups>
  <layerGroup>
    <name> spearfish </name>
  </layerGroup>
  <layerGroup>
    <name>tasmania</name>
  </layerGroup>
</layerGroups>
"""

LAYERGROUPS_TOPP = """<layerGroups>
  <layerGroup>
    <name>topp_group</name>
  </layerGroup>
</layerGroups>
"""

LAYERGROUP_SPEARFISH = """<layerGroup>
  <name>spearfish</name>
  <mode>SINGLE</mode>
  <title>Spearfish</title>
  <publishables>
    <published type="layer">
      <name>sf:spearfish</name>
    </published>
    <published type="layer">
      <name>sf:streams</name>
    </published>
    <published type="layerGroup">
      <name>tasmania</name>
    </published>
  </publishables>
  <styles>
    <style/>
    <style>
      <name>simple_streams</name>
    </style>
    <style/>
  </styles>
  <bounds>
    <minx>589425.9342365642</minx>
    <maxx>609518.6719560538</maxx>
    <miny>4913959.224611808</miny>
    <maxy>4928082.949945881</maxy>
    <crs class="projected">EPSG:26713</crs>
  </bounds>
  <keywords>
    <string>spearfish</string>
  </keywords>
</layerGroup>
"""

STYLES = """<styles>
  <style>
    <name>point</name>
  </style>
  <style>
    <name>polygon</name>
  </style>
  <style>
    <name>population</name>
  </style>
</styles>
"""

STYLES_TOPP = """<styles>
  <style>
    <name>topp_style</name>
  </style>
</styles>
"""

STYLE_POINT = """<style>
  <name>point</name>
  <format>sld</format>
  <languageVersion>
    <version>1.0.0</version>
  </languageVersion>
  <filename>default_point.sld</filename>
</style>
"""

SLD_POINT = """<?xml version="1.0" encoding="UTF-8"?>
<StyledLayerDescriptor version="1.0.0"
    xmlns="http://www.opengis.net/sld"
    xmlns:ogc="http://www.opengis.net/ogc">
  <NamedLayer>
    <Name>default_point</Name>
    <UserStyle>
      <Name>default_point</Name>
      <Title>Red Square point</Title>
      <FeatureTypeStyle>
        <Rule>
          <PointSymbolizer>
            <Graphic>
              <Mark>
                <WellKnownName>square</WellKnownName>
              </Mark>
              <Size>6</Size>
            </Graphic>
          </PointSymbolizer>
        </Rule>
      </FeatureTypeStyle>
    </UserStyle>
  </NamedLayer>
</StyledLayerDescriptor>
"""

NAMESPACES = """<namespaces>
  <namespace>
    <name>topp</name>
  </namespace>
  <namespace>
    <name>sf</name>
  </namespace>
</namespaces>
"""

NAMESPACE_DEFAULT = """<namespace>
  <prefix>topp</prefix>
  <uri>http://www.openplans.org/topp</uri>
  <isolated>false</isolated>
</namespace>
"""

NAMESPACE_SF = """<namespace>
  <prefix>sf</prefix>
  <uri>http://www.openplans.org/spearfish</uri>
</namespace>
"""

ABOUT_VERSION = """<about>
  <resource name="GeoServer">
    <Build-Timestamp>23-Nov-2023 11:39</Build-Timestamp>
    <Version>2.24.1</Version>
  </resource>
  <resource name="GeoTools">
    <Version>30.1</Version>
  </resource>
  <resource name="GeoWebCache">
    <Version>1.24-SNAPSHOT</Version>
  </resource>
</about>
"""
