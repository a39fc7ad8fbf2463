from .output import Output
from .display import NullDisplay
from . import stream
