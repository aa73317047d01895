"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O (DB/FS/network/time randomness); use recording fakes at boundaries.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
