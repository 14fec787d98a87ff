import asyncio

import pytest

from social_media_api.app.core.errors import AuthenticationFailed, StoreError, ValidationFailed
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


def run(coro):
    return asyncio.run(coro)


def test_register_and_login(database):
    account = run(AccountService.register("bob", "pass"))

    assert run(AccountService.login("bob", "pass")) == account
    assert run(AccountService.get_account(account.id)) == account
    with pytest.raises(AuthenticationFailed):
        run(AccountService.login("bob", "wrong"))


def test_register_race_on_username_is_validation_failure(database, monkeypatch):
    AccountRepository.insert_account("bob", "pass")
    # Simulate a concurrent registration that slipped past the pre-check.
    monkeypatch.setattr(AccountRepository, "find_account_by_username", classmethod(lambda cls, name: None))

    with pytest.raises(ValidationFailed):
        run(AccountService.register("bob", "pass"))


def test_register_store_failure_is_validation_failure(database, monkeypatch):
    def broken_insert(cls, username, password):
        raise StoreError("disk full")

    monkeypatch.setattr(AccountRepository, "insert_account", classmethod(broken_insert))

    with pytest.raises(ValidationFailed):
        run(AccountService.register("bob", "pass"))


def test_post_message_checks_account_before_text(database):
    # Unknown account and blank text: the account rule fails first.
    with pytest.raises(ValidationFailed, match="does not exist"):
        run(MessageService.post_message(1, "", 0))


def test_update_message_text_reads_back_current_row(database):
    bob = run(AccountService.register("bob", "pass"))
    msg = run(MessageService.post_message(bob.id, "hello", 10))

    updated = run(MessageService.update_message_text(msg.id, "edited"))

    assert updated.id == msg.id
    assert updated.text == "edited"
    assert updated.posted_at_epoch == 10


def test_update_message_text_rejects_unknown_id(database):
    with pytest.raises(ValidationFailed):
        run(MessageService.update_message_text(1, "text"))
