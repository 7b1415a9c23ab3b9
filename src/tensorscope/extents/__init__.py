from ._exceptions import InvalidExtentsError
from ._extents import Extents
from ._parser import parse_extents, parse_named_extents
