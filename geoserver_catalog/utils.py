import re
import urllib.parse

class BoundingBox(object):
    """
    A bounding box (minx,miny,maxx,maxy) in crs
    minx: west longitude
    miny: south latitude
    maxx: east longitude
    maxy: north latitude
    """
    def __init__(self,minx,miny,maxx,maxy,crs=None):
        self.minx = float(minx)
        self.miny = float(miny)
        self.maxx = float(maxx)
        self.maxy = float(maxy)
        self.crs = crs

    @classmethod
    def from_node(cls,node):
        """
        Parse a geoserver bounding box element; return None if node is None or incomplete
        """
        if node is None:
            return None
        coords = [node.findtext(k) for k in ("minx","miny","maxx","maxy")]
        if any(c is None or not c.strip() for c in coords):
            return None
        crs = node.find("crs")
        if crs is not None:
            crs = (crs.text or "").strip() or None
        return cls(*coords,crs=crs)

    def as_list(self):
        return [self.minx,self.miny,self.maxx,self.maxy]

    def __eq__(self,other):
        if not isinstance(other,BoundingBox):
            return False
        return self.as_list() == other.as_list() and self.crs == other.crs

    def __repr__(self):
        return "BoundingBox({0},{1},{2},{3},crs={4})".format(self.minx,self.miny,self.maxx,self.maxy,self.crs)


resource_href_re = re.compile("/workspaces/(?P<workspace>[^/]+)/(?P<storetype>datastores|coveragestores|wmsstores)/(?P<store>[^/]+)/(?P<resourcetype>featuretypes|coverages|wmslayers)/(?P<name>[^/\\.]+)(\\.xml|\\.json)?$")
def parse_resource_href(href):
    """
    Parse the href of a layer's resource
    Return a dict with keys: workspace, storetype, store, resourcetype, name; or None if not match
    """
    if not href:
        return None
    m = resource_href_re.search(href)
    return dict((k,urllib.parse.unquote(v)) for k,v in m.groupdict().items()) if m else None

def split_name(name,default_workspace=None):
    """
    Split the qualified name 'workspace:name'
    Return tuple (workspace,name)
    """
    if name and ":" in name:
        return tuple(name.split(":",1))
    return (default_workspace,name)
