"""
abitbol: class-style object model

Single inheritance, initializer chaining, super dispatch, mixins and
inherited class variables, built on explicit member tables.
"""

__version__ = "1.0.0"


from ._error import *
from ._members import *
from ._method import *
from ._merge import *
from ._instance import *
from ._class import *
