from __future__ import annotations

import argparse
import json
import logging
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.mpz.digits import (
    available_strategies,
    config_from_env,
    digits_add,
    digits_complement,
    digits_from_int,
    digits_mult,
    digits_to_int,
)

logger = logging.getLogger("digits_parity_sweep")


@dataclass
class Agg:
    n: int = 0
    ok: int = 0
    first_mismatch: dict[str, int] | None = None

    def record(self, ok: bool, witness: dict[str, int]) -> None:
        self.n += 1
        if ok:
            self.ok += 1
        elif self.first_mismatch is None:
            self.first_mismatch = dict(witness)

    def to_json(self) -> dict[str, object]:
        return {
            "attempts": self.n,
            "ok": self.ok,
            "mismatches": self.n - self.ok,
            "first_mismatch": self.first_mismatch,
        }


def _check_add(x: int, y: int, *, width: int, radix: int) -> bool:
    a = digits_from_int(x, width, radix=radix)
    b = digits_from_int(y, width, radix=radix)
    out = [0] * width
    carry = digits_add(out, width, a, width, b, width, radix=radix)
    return digits_to_int(out, width, radix=radix) + carry * radix**width == x + y


def _check_complement(x: int, *, width: int, radix: int) -> bool:
    a = digits_from_int(x, width, radix=radix)
    digits_complement(a, width, radix=radix)
    return digits_to_int(a, width, radix=radix) == (radix**width - x) % radix**width


def _check_mult(x: int, y: int, *, width: int, radix: int, strategy: str) -> bool:
    a = digits_from_int(x, width, radix=radix)
    b = digits_from_int(y, width, radix=radix)
    product = [0] * (2 * width)
    digits_mult(product, a, b, width, radix=radix, strategy=strategy)
    return digits_to_int(product, 2 * width, radix=radix) == x * y


def run_sweep(
    *,
    radix: int,
    widths: Sequence[int],
    samples: int,
    strategies: Sequence[str],
    seed: int,
) -> dict[str, dict]:
    """Compare kernel results with Python int arithmetic on random operands."""
    rng = random.Random(seed)
    scenarios: dict[str, dict] = {}
    for width in widths:
        limit = radix**width
        add_agg = Agg()
        comp_agg = Agg()
        mult_aggs = {name: Agg() for name in strategies}
        for _ in range(samples):
            x = rng.randrange(limit)
            y = rng.randrange(limit)
            witness = {"x": x, "y": y}
            add_agg.record(_check_add(x, y, width=width, radix=radix), witness)
            comp_agg.record(_check_complement(x, width=width, radix=radix), witness)
            for name, agg in mult_aggs.items():
                agg.record(_check_mult(x, y, width=width, radix=radix, strategy=name), witness)
        scenarios[f"width_{width}"] = {
            "add": add_agg.to_json(),
            "complement": comp_agg.to_json(),
            "mult": {name: agg.to_json() for name, agg in mult_aggs.items()},
        }
        logger.info("width=%d done", width)
    return scenarios


def _count_mismatches(scenarios: dict[str, dict]) -> int:
    total = 0
    for scenario in scenarios.values():
        total += scenario["add"]["mismatches"] + scenario["complement"]["mismatches"]
        total += sum(m["mismatches"] for m in scenario["mult"].values())
    return total


def _parse_int_list(raw: str) -> list[int]:
    out: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        out.append(int(part))
    if not out:
        raise ValueError("empty list")
    return out


def main(argv: Sequence[str] | None = None) -> int:
    env_cfg = config_from_env()
    ap = argparse.ArgumentParser(description="Randomized parity sweep: digit kernel vs Python int")
    ap.add_argument("--radix", type=int, default=env_cfg.radix)
    ap.add_argument("--widths", type=str, default="1,2,3,8,32")
    ap.add_argument("--samples", type=int, default=200)
    ap.add_argument("--strategies", type=str, default="grade_school,column")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--out", type=str, default="")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.radix < 2:
        raise SystemExit("radix must be >= 2")
    if args.samples <= 0:
        raise SystemExit("samples must be positive")
    widths = _parse_int_list(args.widths)
    if any(w <= 0 for w in widths):
        raise SystemExit("widths must be positive")
    strategies = [s.strip() for s in args.strategies.split(",") if s.strip()]
    unknown = [s for s in strategies if s not in available_strategies()]
    if unknown:
        raise SystemExit(f"unknown strategies: {', '.join(unknown)}")

    start = time.perf_counter()
    scenarios = run_sweep(
        radix=args.radix,
        widths=widths,
        samples=args.samples,
        strategies=strategies,
        seed=args.seed,
    )
    mismatches = _count_mismatches(scenarios)
    report = {
        "schema": "mpz-digits/parity-sweep/v1",
        "radix": args.radix,
        "seed": args.seed,
        "samples": args.samples,
        "scenarios": scenarios,
        "mismatches": mismatches,
        "runtime_s": time.perf_counter() - start,
    }

    payload = json.dumps(report, indent=2, sort_keys=True)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload + "\n", encoding="utf-8")
        print(f"Wrote {out_path}")
    else:
        print(payload)
    return 1 if mismatches else 0


if __name__ == "__main__":
    raise SystemExit(main())
