# cex_trace/frontend/__init__.py

from .base import FrontendBase
from .toy_frontend import ToyFrontend
from .yaml_frontend import YamlFrontend

__all__ = ["FrontendBase", "ToyFrontend", "YamlFrontend"]
