from .fetch_controller import *  # NOQA
from .fetch_options import *  # NOQA
from .previous import *  # NOQA
