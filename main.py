from __future__ import annotations

from fizzbuzz_workflow.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
