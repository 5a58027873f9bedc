# cex_trace/frontend/base.py
from abc import ABC, abstractmethod
from typing import List
from ..config import Config
from ..ir import ObligationChain


class FrontendBase(ABC):
    """反例前端抽象接口：负责把搜索引擎产出的反例链读进来。"""

    def __init__(self, cfg: Config):
        self.cfg = cfg

    @abstractmethod
    def load_chains(self) -> List[ObligationChain]:
        """返回待解码的反例链，顺序即 Unsafe Program 的编号顺序。"""
        raise NotImplementedError
