from vectils.interfaces import *
from vectils.tools import *
from vectils.geometry import *
from vectils.errors.geometry_errors import *
