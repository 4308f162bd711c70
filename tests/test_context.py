"""Tests for hyperview.context — the request-scoped CSP nonce."""

import asyncio

import pytest

from hyperview.context import get_nonce, nonce_var, set_nonce


class TestNonce:
    def test_empty_outside_context(self) -> None:
        assert get_nonce() == ""

    def test_set_and_reset(self) -> None:
        token = set_nonce("abc123")
        try:
            assert get_nonce() == "abc123"
        finally:
            nonce_var.reset(token)
        assert get_nonce() == ""

    @pytest.mark.asyncio
    async def test_task_isolation(self) -> None:
        seen: dict[str, str] = {}

        async def handle(name: str) -> None:
            set_nonce(f"nonce-{name}")
            await asyncio.sleep(0)
            seen[name] = get_nonce()

        await asyncio.gather(handle("a"), handle("b"))
        assert seen == {"a": "nonce-a", "b": "nonce-b"}
        assert get_nonce() == ""
