import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from landing.exceptions import InvalidInputError, StorageError
from landing.services.registration import RegistrationStatus, validate_email

from tests.conftest import OFFSET


def test_register_new_email(service, store):
    result = service.register("a@example.com")

    assert result.status is RegistrationStatus.OK
    assert result.message == "Welcome to the future."
    assert result.registration.email == "a@example.com"
    assert store.count() == 1


def test_register_twice_counts_once(service, store):
    first = service.register("a@example.com")
    second = service.register("a@example.com")

    assert first.status is RegistrationStatus.OK
    assert second.status is RegistrationStatus.DUPLICATE
    assert second.message == "You're already on the list!"
    assert store.count() == 1


@pytest.mark.parametrize("email", [
    "not-an-email",
    "",
    None,
    42,
    ["a@example.com"],
    {"email": "a@example.com"},
])
def test_register_invalid_input(service, store, email):
    result = service.register(email)

    assert result.status is RegistrationStatus.INVALID
    assert result.message == "Invalid email"
    assert store.count() == 0


def test_validate_email_accepts_any_string_with_at_sign():
    assert validate_email("@") == "@"
    assert validate_email("Mixed@Case.COM") == "Mixed@Case.COM"


def test_validate_email_rejects_missing_at_sign():
    with pytest.raises(InvalidInputError):
        validate_email("example.com")


def test_storage_fault_maps_to_internal_error(service, monkeypatch):
    def broken_insert(email):
        raise StorageError("disk I/O error")

    monkeypatch.setattr(service.store, "insert", broken_insert)

    result = service.register("a@example.com")

    assert result.status is RegistrationStatus.INTERNAL_ERROR
    assert result.message == "Something went wrong"


def test_display_count_adds_offset(service):
    assert service.get_display_count() == OFFSET

    service.register("a@example.com")
    assert service.get_display_count() == OFFSET + 1

    service.register("a@example.com")
    service.register("nope")
    assert service.get_display_count() == OFFSET + 1
    assert service.get_display_count() == service.store.count() + OFFSET


def test_concurrent_duplicate_registrations(service, store):
    workers = 8
    barrier = threading.Barrier(workers)

    def submit():
        barrier.wait()
        return service.register("race@example.com").status

    with ThreadPoolExecutor(max_workers=workers) as executor:
        statuses = list(executor.map(lambda _: submit(), range(workers)))

    assert statuses.count(RegistrationStatus.OK) == 1
    assert statuses.count(RegistrationStatus.DUPLICATE) == workers - 1
    assert store.count() == 1


def test_signups_do_not_log_email_at_info(service, caplog):
    caplog.set_level(logging.INFO, logger="landing.services.registration")

    service.register("private@example.com")
    service.register("private@example.com")

    assert caplog.records
    assert all("private@example.com" not in r.getMessage() for r in caplog.records)
