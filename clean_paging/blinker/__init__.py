from .blinker_event_provider import *  # NOQA
