"""
Hoard — Integration Tests
Tests the full lock → save → load → unlock pipeline through the public API.
Tests that a hoard written with one key cannot be read with another.
"""

import json
import os
import shutil
import sys
from pathlib import Path

# Add parent to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent))

import hoard
from hoard import ErrorKind, Hoard, HoardStore, hoard_path
from hoard import CryptoJsAesCipher, MIN_KEY_LENGTH

TEST_KEY = b"test-key-do-not-use-in-production"
TEST_HOARD_DIR = Path(__file__).parent / "test-hoard"


def setup():
    """Clean up test directories."""
    if TEST_HOARD_DIR.exists():
        shutil.rmtree(TEST_HOARD_DIR)
    TEST_HOARD_DIR.mkdir(parents=True)


def test_public_api_pipeline():
    """Test full pipeline: lock, save, load."""
    print("Testing public API (full pipeline)...", end=" ")
    setup()
    assert len(TEST_KEY) >= MIN_KEY_LENGTH

    data = {
        "notes": {"entries": [{"text": "Private note 1"}, {"text": "Private note 2"}]},
        "config": {"theme": "dark", "lang": "en"},
        "contacts": {"people": [{"name": "Alice"}, {"name": "Bob"}]},
    }

    locked = hoard.lock(json.dumps(data).encode("utf-8"), TEST_KEY)
    assert locked is not None
    assert "Alice" not in locked

    hoard.save(locked, TEST_HOARD_DIR / "everything")
    loaded = hoard.load(hoard_path(TEST_HOARD_DIR / "everything"), TEST_KEY)
    assert loaded == data
    print("PASS")


def test_many_hoards_reload():
    """Test several hoards saved, then read back by a fresh store."""
    print("Testing multi-hoard reload...", end=" ")
    setup()
    data = {
        "alpha": {"items": [1, 2, 3]},
        "beta": {"items": [4, 5, 6]},
        "gamma": {"items": [7, 8, 9]},
    }

    store = HoardStore()
    for name, payload in data.items():
        store.save(store.hoard.lock(json.dumps(payload).encode(), TEST_KEY), TEST_HOARD_DIR / name)

    # A NEW store instance (simulates restart) — same key
    store2 = HoardStore()
    for name, payload in data.items():
        loaded = store2.load(hoard_path(TEST_HOARD_DIR / name), TEST_KEY)
        assert loaded == payload, f"Hoard {name} mismatch after reload"
    print("PASS")


def test_wrong_key():
    """Test that a wrong key fails to load, and says why."""
    print("Testing wrong key...", end=" ")
    setup()
    store = HoardStore()
    store.save(store.hoard.lock(b'{"secret": {"data": "sensitive"}}', TEST_KEY), TEST_HOARD_DIR / "secret")

    wrong_key = os.urandom(32)
    assert store.load(hoard_path(TEST_HOARD_DIR / "secret"), wrong_key) is None
    result = store.try_load(hoard_path(TEST_HOARD_DIR / "secret"), wrong_key)
    assert result.kind is ErrorKind.AUTHENTICATION_FAILED
    print("PASS")


def test_failure_kinds_are_distinguishable():
    """Test that each failure cause maps to its own kind."""
    print("Testing failure kinds...", end=" ")
    setup()
    store = HoardStore()
    path = hoard_path(TEST_HOARD_DIR / "kinds")
    store.save(store.hoard.lock(b"{}", TEST_KEY), TEST_HOARD_DIR / "kinds")

    kinds = {
        store.try_load(path, b"short").kind,
        store.try_load(TEST_HOARD_DIR / "missing.hoard", TEST_KEY).kind,
        store.try_load(path, os.urandom(32)).kind,
        store.hoard.try_unlock("garbage!", TEST_KEY).kind,
        store.hoard.try_unlock(store.hoard.lock(b"{oops", TEST_KEY), TEST_KEY).kind,
    }
    assert kinds == {
        ErrorKind.INVALID_KEY,
        ErrorKind.NOT_FOUND,
        ErrorKind.AUTHENTICATION_FAILED,
        ErrorKind.MALFORMED_CIPHERTEXT,
        ErrorKind.PAYLOAD_NOT_PARSEABLE,
    }
    print("PASS")


def test_legacy_hoard_readable():
    """Test that a crypto-js format hoard round-trips through disk."""
    print("Testing legacy format...", end=" ")
    setup()
    legacy = HoardStore(hoard=Hoard(cipher=CryptoJsAesCipher()))
    legacy.save(legacy.hoard.lock(b'{"from": "javascript"}', TEST_KEY), TEST_HOARD_DIR / "old")
    assert legacy.load(hoard_path(TEST_HOARD_DIR / "old"), TEST_KEY) == {"from": "javascript"}

    # The default (AES-GCM) store cannot read it
    assert HoardStore().load(hoard_path(TEST_HOARD_DIR / "old"), TEST_KEY) is None
    print("PASS")


def teardown_module(module):
    if TEST_HOARD_DIR.exists():
        shutil.rmtree(TEST_HOARD_DIR)


def main():
    print("=" * 50)
    print("  Hoard Integration Tests")
    print("=" * 50)
    print()

    tests = [
        test_public_api_pipeline,
        test_many_hoards_reload,
        test_wrong_key,
        test_failure_kinds_are_distinguishable,
        test_legacy_hoard_readable,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")

    # Cleanup
    teardown_module(None)

    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
