"""Unit tests.

Purpose
- Verify a single helper module in isolation.

Guidelines
- No real I/O; the environment is patched with monkeypatch where needed.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
