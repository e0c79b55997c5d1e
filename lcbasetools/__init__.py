"""Building blocks: linked lists, mappers, colors, a polled timer, running averages and text buffers."""

__version__ = "1.0.0"