from .trace import *
