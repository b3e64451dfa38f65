from .resource import ResourceInfo,Field
from .workspace import Workspace
from .namespace import Namespace
from .layer import Layer
from .layergroup import LayerGroup
from .style import Style
from .datastore import DataStore
from .featuretype import FeatureType
from .coveragestore import CoverageStore
from .coverage import Coverage
from .wmsstore import WmsStore
