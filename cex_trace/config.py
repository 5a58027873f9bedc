# cex_trace/config.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import yaml


@dataclass
class Config:
    inst_len: int
    n_insts: int
    n_pis: int
    placement_file: str
    reset_var: int = 1
    registers_file: Optional[str] = None
    frontend: str = "yaml"  # "yaml" or "toy"
    chain_files: List[str] = field(default_factory=list)
    out_prefix: str = "out"


def _resolve(base: Path, p: Optional[str]) -> Optional[str]:
    if p is None:
        return None
    path = Path(p)
    if not path.is_absolute():
        path = base / path
    return str(path)


def load_config(path: str) -> Config:
    with open(path) as f:
        cfg_raw = yaml.safe_load(f)
    base = Path(path).resolve().parent
    design = cfg_raw["design"]
    tables = cfg_raw["tables"]
    cex = cfg_raw.get("cex", {})
    output = cfg_raw.get("output", {})
    return Config(
        inst_len=int(design["inst_len"]),
        n_insts=int(design["n_insts"]),
        n_pis=int(design["n_pis"]),
        placement_file=_resolve(base, tables["placement"]),
        reset_var=int(design.get("reset_var", 1)),
        registers_file=_resolve(base, tables.get("registers")),
        frontend=cex.get("frontend", "yaml"),
        chain_files=[_resolve(base, c) for c in cex.get("chains", [])],
        out_prefix=output.get("prefix", "out"),
    )
