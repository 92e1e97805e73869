from __future__ import annotations

import json

import pytest

from ownership_oracle.adapters.manifest import classify_manifest_response, manifest_owner
from ownership_oracle.domain.model import Claimed, Revoked, Unchanged
from tests.helpers.http_fakes import ADDRESS, OTHER_ADDRESS


def _manifest(drips: object) -> bytes:
    return json.dumps({"drips": drips}).encode()


def test_success_with_owner_for_network_is_claimed() -> None:
    body = _manifest({"ethereum": {"ownedBy": ADDRESS.lower()}})

    assert classify_manifest_response(200, body, network="ethereum") == Claimed(ADDRESS)


def test_owner_is_read_for_the_requested_network_only() -> None:
    body = _manifest(
        {"ethereum": {"ownedBy": ADDRESS}, "optimism-sepolia": {"ownedBy": OTHER_ADDRESS}}
    )

    outcome = classify_manifest_response(200, body, network="optimism-sepolia")

    assert outcome == Claimed(OTHER_ADDRESS)


@pytest.mark.parametrize("status_code", [403, 404])
def test_forbidden_and_not_found_revoke(status_code: int) -> None:
    assert classify_manifest_response(status_code, b"", network="ethereum") == Revoked()


@pytest.mark.parametrize("status_code", [301, 400, 401, 410, 429, 500, 502, 503])
def test_other_statuses_leave_owner_unchanged(status_code: int) -> None:
    body = _manifest({"ethereum": {"ownedBy": ADDRESS}})

    outcome = classify_manifest_response(status_code, body, network="ethereum")

    assert isinstance(outcome, Unchanged)
    assert str(status_code) in outcome.reason


@pytest.mark.parametrize(
    "body",
    [
        b"<html>not json</html>",
        b"",
        b"{",
        b"\xff\xfe\x00",
        b"[" * 200_000 + b"]" * 200_000,
        b'{"drips": ' + b"1" * 5_000 + b"}",
    ],
    ids=["html", "empty", "truncated", "binary", "deeply-nested", "oversized-integer"],
)
def test_success_without_json_is_unchanged(body: bytes) -> None:
    assert isinstance(classify_manifest_response(200, body, network="ethereum"), Unchanged)


@pytest.mark.parametrize(
    "payload",
    [
        {"drips": {"optimism": {"ownedBy": ADDRESS}}},
        {"drips": {}},
        {"drips": {"ethereum": {}}},
        {"drips": {"ethereum": {"ownedBy": 12}}},
        {"drips": {"ethereum": "0x"}},
        {"drips": []},
        {"funding": {}},
        [],
        "manifest",
    ],
)
def test_manifest_without_entry_for_network_revokes(payload: object) -> None:
    body = json.dumps(payload).encode()

    assert classify_manifest_response(200, body, network="ethereum") == Revoked()


@pytest.mark.parametrize(
    "owner",
    ["0x1234", "0x5AAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", "vitalik.eth"],
)
def test_invalid_owner_address_revokes(owner: str) -> None:
    body = _manifest({"ethereum": {"ownedBy": owner}})

    assert classify_manifest_response(200, body, network="ethereum") == Revoked()


def test_broken_entry_for_another_network_does_not_hide_owner() -> None:
    payload = {"drips": {"ethereum": {"ownedBy": ADDRESS}, "optimism": {"owned": None}}}

    assert manifest_owner(payload, "ethereum") == ADDRESS
    assert manifest_owner(payload, "optimism") is None
