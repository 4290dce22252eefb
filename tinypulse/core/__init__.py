# TinyPulse Module
# -*- coding: utf-8 -*-

from .exceptions import *
from .const import *
from .hex_helper import *
from .message_helper import *
from .pulse_helper import *

from .core import *
from .core import __version__
from .core import __author__
