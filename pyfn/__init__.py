from colorama import init
init()

from .config import *
from .functional import *
