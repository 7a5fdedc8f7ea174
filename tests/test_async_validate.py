"""Tests for async post-validation checks."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import pytest

from vouch import rules
from vouch.async_validate import AsyncCheck, AsyncRule, AsyncValidationContext, validate_async
from vouch.exceptions import AsyncCheckError, ValidationError
from vouch.spec.declare import constrained, validated
from vouch.validation import plan_of


@validated
@dataclass
class Signup:
    email: str = constrained(rules.email())
    username: str = constrained(rules.min_len(3))


class UserStore:
    def __init__(self, emails: Iterable[str] = (), usernames: Iterable[str] = ()) -> None:
        self.emails = set(emails)
        self.usernames = set(usernames)
        self.lookups: list[str] = []

    async def email_exists(self, email: str) -> bool:
        self.lookups.append(email)
        await asyncio.sleep(0.02)
        return email in self.emails

    async def username_exists(self, username: str) -> bool:
        self.lookups.append(username)
        return username in self.usernames


async def email_available(value: str, ctx: AsyncValidationContext) -> ValidationError | None:
    store = ctx.get_resource("users", UserStore)
    if store is None:
        raise RuntimeError("user store is not configured")
    if await store.email_exists(value):
        return ValidationError.single(None, "email_taken", "Email is already registered")
    return None


async def username_available(value: str, ctx: AsyncValidationContext) -> ValidationError | None:
    store = ctx.get_resource("users", UserStore)
    if store is not None and await store.username_exists(value):
        return ValidationError.single(None, "username_taken", "Username is already taken")
    return None


CHECKS = [
    AsyncCheck.for_field("email", AsyncRule(email_available, "email_available")),
    AsyncCheck.for_field("username", AsyncRule(username_available, "username_available")),
]


def _run(instance: Any, ctx: AsyncValidationContext | None = None, **kwargs: Any) -> ValidationError:
    return asyncio.run(validate_async(instance, CHECKS, ctx, **kwargs))


class TestValidationContext:
    def test_with_resource_returns_new_context(self) -> None:
        store = UserStore()
        base = AsyncValidationContext()

        extended = base.with_resource("users", store)

        assert "users" not in base
        assert extended.get_resource("users") is store

    def test_typed_lookup(self) -> None:
        ctx = AsyncValidationContext({"users": UserStore(), "limit": 5})

        assert isinstance(ctx.get_resource("users", UserStore), UserStore)
        assert ctx.get_resource("limit", UserStore) is None
        assert ctx.get_resource("missing") is None


class TestValidateAsync:
    def test_all_checks_pass(self) -> None:
        ctx = AsyncValidationContext({"users": UserStore()})

        assert not _run(Signup(email="new@example.com", username="newbie"), ctx)

    def test_async_violation_is_placed_under_field(self) -> None:
        ctx = AsyncValidationContext({"users": UserStore(emails={"taken@example.com"})})

        err = _run(Signup(email="taken@example.com", username="newbie"), ctx)

        assert err.codes() == ["email_taken"]
        assert [str(v.path) for v in err] == ["email"]

    def test_results_merge_in_check_order(self) -> None:
        store = UserStore(emails={"taken@example.com"}, usernames={"taken"})

        err = _run(Signup(email="taken@example.com", username="taken"), AsyncValidationContext({"users": store}))

        assert err.codes() == ["email_taken", "username_taken"]
        assert store.lookups == ["taken@example.com", "taken"]

    def test_sync_failures_skip_async_checks(self) -> None:
        store = UserStore()

        err = _run(Signup(email="bad", username="ok-name"), AsyncValidationContext({"users": store}))

        assert err.codes() == ["invalid_email"]
        assert store.lookups == []

    def test_mapping_instance_with_explicit_plan(self) -> None:
        ctx = AsyncValidationContext({"users": UserStore(usernames={"taken"})})

        err = _run({"email": "a@b.co", "username": "taken"}, ctx, plan=plan_of(Signup))

        assert err.codes() == ["username_taken"]

    def test_check_at_root_path(self) -> None:
        async def same_prefix(value: Signup, _ctx: AsyncValidationContext) -> ValidationError | None:
            if value.username not in value.email:
                return ValidationError.single("username", "mismatch", "Username must appear in email")
            return None

        root_check = AsyncCheck.of(None, lambda instance: instance, AsyncRule(same_prefix))

        err = asyncio.run(validate_async(Signup(email="alice@example.com", username="bob"), [root_check]))

        assert [str(v.path) for v in err] == ["username"]


class TestAsyncFailures:
    def test_raising_check_becomes_async_check_error(self) -> None:
        with pytest.raises(AsyncCheckError, match="user store is not configured") as excinfo:
            _run(Signup(email="a@b.co", username="alice"))

        assert excinfo.value.path == "email"
        assert isinstance(excinfo.value.cause, RuntimeError)

    def test_timeout_becomes_async_check_error(self) -> None:
        async def slow(_value: Any, _ctx: AsyncValidationContext) -> None:
            await asyncio.sleep(5)

        slow_check = AsyncCheck.for_field("email", AsyncRule(slow, "slow"))

        with pytest.raises(AsyncCheckError) as excinfo:
            asyncio.run(validate_async(Signup(email="a@b.co", username="alice"), [slow_check], timeout=0.01))

        assert isinstance(excinfo.value.cause, TimeoutError)
