# cex_trace/__init__.py

"""
CEX Trace Decoder

- 把模型检查器（PDR）在 CPU 硬件合约上找到的反例链，还原成指令级程序
- 输出：
    - <prefix>.unsafe.txt     (Concrete / Generalized 两种渲染)
    - <prefix>.programs.json  (最小可回放程序 + blocking clause)
    - <prefix>.programs.csv   (每个保留字面量所在的指令/位)
"""

__all__ = [
    "config",
    "ir",
    "trace_types",
    "tables",
    "mapping",
    "resolver",
    "renderer",
    "extractor",
    "report",
    "decoder",
    "cli",
]
