# cex_trace/frontend/yaml_frontend.py
from __future__ import annotations
from pathlib import Path
from typing import List

import yaml

from .base import FrontendBase
from ..ir import Cube, ObligationChain


class YamlFrontend(FrontendBase):
    """
    读取序列化后的反例链，每个文件一条链：
      frames:
        - {n_lits: 2, lits: [4, 7, 10, 3]}
        - ...
    """

    def load_chains(self) -> List[ObligationChain]:
        chains = [self.load_chain(p) for p in self.cfg.chain_files]
        print(f"[CEX] YamlFrontend: loaded {len(chains)} chains")
        return chains

    @staticmethod
    def load_chain(path: str) -> ObligationChain:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"chain file not found: {p}")
        with open(p) as f:
            raw = yaml.safe_load(f)

        frames_raw = raw.get("frames") if isinstance(raw, dict) else None
        if not isinstance(frames_raw, list):
            raise ValueError(f"{p}: missing 'frames' list")

        frames: List[Cube] = []
        for i, fr in enumerate(frames_raw):
            if not isinstance(fr, dict):
                raise ValueError(f"{p}: frame {i} must be a mapping")
            if "lits" not in fr:
                raise ValueError(f"{p}: frame {i} has no 'lits'")
            frames.append(Cube([int(l) for l in fr["lits"]], n_lits=int(fr.get("n_lits", 0))))
        return ObligationChain(frames)
