# cex_trace/report.py
from typing import Any, Dict, List, Optional, TextIO
import csv
import json

from .ir import Cube
from .mapping import InstMapQuery
from .renderer import BitVectorRenderer
from .trace_types import ExtractedProgram, Rendering


class UnsafeProgramLogger:
    """
    记录每个被发现的 unsafe program：
      - 文本报告写到调用方给的 sink（第 N 个程序，N 从 1 开始递增）
      - 抽取出的程序累积起来，最后统一 dump 成 JSON / CSV
    """

    def __init__(self, renderer: BitVectorRenderer, query: InstMapQuery):
        self.renderer = renderer
        self.query = query
        self.n_blocked = 0
        self.programs: List[Dict[str, Any]] = []
        self.rows: List[Dict[str, Any]] = []

    def log(self, frame: Cube, program: ExtractedProgram, sink: Optional[TextIO]) -> Rendering:
        # 写成功后才计数
        rendering = self.renderer.write(frame, sink, self.n_blocked + 1)
        self.n_blocked += 1

        entry = {"seq": self.n_blocked}
        entry.update(program.as_dict())
        self.programs.append(entry)

        for lit, pi, value, inst, bit in self.query.describe_lits(program.lits, self.renderer.n_pis):
            self.rows.append({
                "seq": self.n_blocked,
                "lit": lit,
                "pi": pi,
                "value": value,
                "inst": inst,
                "bit": bit,
            })
        return rendering

    # ---------- 输出 ---------- #

    def dump_json(self, path: str):
        with open(path, "w") as f:
            json.dump({"programs": self.programs}, f, indent=2)

    def dump_csv(self, path: str):
        if not self.rows:
            return
        fieldnames = ["seq", "lit", "pi", "value", "inst", "bit"]
        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for row in self.rows:
                writer.writerow(row)
