from __future__ import annotations

import threading

import pytest

from deepseek_client.base.cancellation import CancellationToken
from deepseek_client.base.errors import DeepseekError, ErrorCode


def test_cancel_is_idempotent_and_keeps_first_reason():
    token = CancellationToken()
    assert not token.cancelled  # nosec B101
    token.raise_if_cancelled()
    token.cancel("first")
    token.cancel("second")
    assert token.cancelled  # nosec B101
    assert token.reason == "first"  # nosec B101
    with pytest.raises(DeepseekError) as ei:
        token.raise_if_cancelled()
    assert ei.value.code is ErrorCode.CANCELLED  # nosec B101
    assert ei.value.message == "first"  # nosec B101


def test_default_cancel_message():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(DeepseekError) as ei:
        token.raise_if_cancelled()
    assert ei.value.message == "operation cancelled"  # nosec B101


def test_cancel_cascades_to_children():
    parent = CancellationToken()
    child = parent.child()
    grandchild = CancellationToken(parent=child)
    parent.cancel("shutdown")
    assert child.cancelled and grandchild.cancelled  # nosec B101
    assert grandchild.reason == "shutdown"  # nosec B101


def test_child_linked_after_cancel_is_cancelled():
    parent = CancellationToken()
    parent.cancel("late")
    assert parent.child().cancelled  # nosec B101


def test_cancel_from_another_thread():
    token = CancellationToken()
    t = threading.Thread(target=token.cancel, args=("bg",))
    t.start()
    t.join()
    assert token.cancelled  # nosec B101
