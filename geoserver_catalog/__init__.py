from .exceptions import *
from .catalog import Catalog,get_default_catalog
from .resources import *
from .utils import BoundingBox
