from .general import *
from .algebra.all import *
from .symbols import Symbol
from ramify.utilities.runtime import RUNTIME
