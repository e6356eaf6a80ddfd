#!/usr/bin/env python3
"""Child side of an isolated load trial.

Reads one JSON payload (``source``, ``variant``, ``count``, ``trial_index``)
from stdin, compiles and instantiates the generated module, and prints one
JSON line: either the two phase durations or an error description. Only the
standard library is imported so the interpreter starts as cold as possible.
"""
from __future__ import annotations

import json
import sys
import time
import traceback
from typing import Any


FACTORY_NAME = "build_objects"


def run_trial(payload: dict[str, Any]) -> dict[str, Any]:
    source = payload["source"]
    variant = payload["variant"]
    count = int(payload["count"])
    trial_index = int(payload["trial_index"])

    try:
        started = time.perf_counter()
        code = compile(source, f"<{variant} trial {trial_index}>", "exec")
        compile_ms = (time.perf_counter() - started) * 1000.0

        started = time.perf_counter()
        namespace: dict[str, Any] = {"__name__": "__load_trial__"}
        exec(code, namespace)
        objects = namespace[FACTORY_NAME]()
        instantiate_ms = (time.perf_counter() - started) * 1000.0
    except Exception as exc:  # noqa: BLE001
        return {
            "type": "error",
            "kind": "exception",
            "message": f"{type(exc).__name__}: {exc}",
            "traceback": traceback.format_exc(),
        }

    if not isinstance(objects, list) or len(objects) != count:
        return {
            "type": "error",
            "kind": "shape_mismatch",
            "message": f"generated {variant} factory did not return expected objects",
            "expected": count,
            "actual": len(objects) if isinstance(objects, list) else None,
        }

    return {
        "type": "result",
        "compile_ms": compile_ms,
        "instantiate_ms": instantiate_ms,
    }


def main() -> int:
    payload = json.loads(sys.stdin.read())
    message = run_trial(payload)
    print(json.dumps(message))
    return 0 if message["type"] == "result" else 1


if __name__ == "__main__":
    raise SystemExit(main())
