from .gateway_page_source import *  # NOQA
from .in_memory_gateway import *  # NOQA
