from .domain_event import *  # NOQA
from .exceptions import *  # NOQA
from .fetch_events import *  # NOQA
from .filter import *  # NOQA
from .gateway import *  # NOQA
from .pagination import *  # NOQA
from .provider import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
