"""
Hoard — Basic Usage Example

Locks a small data store under a random key, writes it to disk, reads it
back, and shows what a wrong key looks like through the Result API.
"""

import json
import os
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import hoard
from hoard import HoardStore, hoard_path


def main():
    # Your key — the only way back into your data. Keep it somewhere safe.
    key = os.urandom(32)

    print("=" * 50)
    print("  Hoard — Encrypted JSON at Rest")
    print("=" * 50)

    my_data = {
        "journal": {
            "entries": [
                {"date": "2026-02-10", "text": "Had a breakthrough idea today."},
                {"date": "2026-02-11", "text": "Built the prototype. It works."},
            ]
        },
        "settings": {
            "theme": "dark",
            "language": "en",
        },
    }

    # lock → save
    locked = hoard.lock(json.dumps(my_data).encode("utf-8"), key)
    print(f"\nLocked {len(json.dumps(my_data))} bytes of JSON into {len(locked)} chars")
    print(f"  {locked[:48]}...")

    hoard.save(locked, "./example-hoard")
    path = hoard_path("./example-hoard")
    print(f"Saved to {path}")

    # load → unlock
    loaded = hoard.load(path, key)
    print(f"\nLoaded back: {'MATCH' if loaded == my_data else 'MISMATCH'}")

    # Wrong key: the plain API just says None, try_load says why
    store = HoardStore()
    result = store.try_load(path, os.urandom(32))
    print(f"Wrong key:   ok={result.ok} kind={result.kind.value}")

    path.unlink()


if __name__ == "__main__":
    main()
