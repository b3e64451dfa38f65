from .about import *
from .reload import *
from .workspace import *
from .namespace import *
from .layer import *
from .layergroup import *
from .style import *
from .datastore import *
from .coveragestore import *
from .wmsstore import *
