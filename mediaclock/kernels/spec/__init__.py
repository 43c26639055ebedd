"""
Kernel descriptions.

`mul_div64_v1.yaml` declares the operand domain of the mul-div kernel and a
corpus of conformance vectors. `check_vectors` replays the corpus against the
Python kernel under a given strategy.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..python.mul_div64_v1 import (
    RescaleStrategy,
    mul_div64_native_u64,
    rescale_div_mod_detailed,
)
from ...core.errors import DivisionByZeroError

ERROR_DIVISION_BY_ZERO = "division_by_zero"


@dataclass(frozen=True)
class KernelVector:
    id: str
    num: int
    mul: int
    div: int
    quotient: int | None = None
    error: str | None = None
    wrapped: bool = False
    native: int | None = None


def _spec_path() -> Path:
    return Path(__file__).resolve().parent / "mul_div64_v1.yaml"


@lru_cache(maxsize=1)
def load_kernel_spec() -> Mapping[str, Any]:
    obj = yaml.safe_load(_spec_path().read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise TypeError("kernel spec YAML must be a mapping")
    return obj


def _require_int(obj: Any, *, name: str) -> int:
    if not isinstance(obj, int) or isinstance(obj, bool):
        raise TypeError(f"{name} must be an int")
    return obj


def iter_vectors() -> list[KernelVector]:
    spec = load_kernel_spec()
    bounds = spec["types"]["u64"]
    lo = _require_int(bounds["min"], name="types.u64.min")
    hi = _require_int(bounds["max"], name="types.u64.max")

    out: list[KernelVector] = []
    for i, raw in enumerate(spec.get("vectors") or []):
        if not isinstance(raw, Mapping):
            raise TypeError(f"vectors[{i}] must be a mapping")
        vid = str(raw.get("id") or f"vector_{i}")
        operands = {}
        for name in ("num", "mul", "div"):
            v = _require_int(raw.get(name), name=f"{vid}.{name}")
            if not (lo <= v <= hi):
                raise ValueError(f"{vid}.{name} outside u64 domain: {v}")
            operands[name] = v
        error = raw.get("error")
        quotient = raw.get("quotient")
        if (error is None) == (quotient is None):
            raise ValueError(f"{vid}: exactly one of quotient/error is required")
        native = raw.get("native")
        out.append(
            KernelVector(
                id=vid,
                quotient=None if quotient is None else _require_int(quotient, name=f"{vid}.quotient"),
                error=None if error is None else str(error),
                wrapped=bool(raw.get("wrapped", False)),
                native=None if native is None else _require_int(native, name=f"{vid}.native"),
                **operands,
            )
        )
    return out


def check_vectors(strategy: RescaleStrategy | str | None = None) -> list[str]:
    """Replay the corpus; return one message per mismatch (empty when conformant)."""
    problems: list[str] = []
    for vec in iter_vectors():
        if vec.error is not None:
            if vec.error != ERROR_DIVISION_BY_ZERO:
                problems.append(f"{vec.id}: unknown expected error {vec.error!r}")
                continue
            try:
                rescale_div_mod_detailed(vec.num, vec.mul, vec.div, strategy=strategy)
            except DivisionByZeroError:
                continue
            problems.append(f"{vec.id}: expected {vec.error}, got a result")
            continue

        res = rescale_div_mod_detailed(vec.num, vec.mul, vec.div, strategy=strategy)
        if res.quotient != vec.quotient:
            problems.append(f"{vec.id}: quotient {res.quotient} != expected {vec.quotient}")
        if res.wrapped != vec.wrapped:
            problems.append(f"{vec.id}: wrapped {res.wrapped} != expected {vec.wrapped}")
        if vec.native is not None:
            got = mul_div64_native_u64(vec.num, vec.mul, vec.div)
            if got != vec.native:
                problems.append(f"{vec.id}: native u64 result {got} != expected {vec.native}")
    return problems
