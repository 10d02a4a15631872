"""Tests for the read-only session context manager."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from storefront_lite.infra.db.session import get_read_session


def test_read_session_rolls_back_and_closes() -> None:
    session = Mock()
    with patch(
        "storefront_lite.infra.db.session.get_session_local",
        return_value=Mock(return_value=session),
    ):
        with get_read_session() as yielded:
            assert yielded is session

    session.rollback.assert_called_once()
    session.close.assert_called_once()
    session.commit.assert_not_called()


def test_read_session_closes_on_error() -> None:
    session = Mock()
    with patch(
        "storefront_lite.infra.db.session.get_session_local",
        return_value=Mock(return_value=session),
    ):
        with pytest.raises(RuntimeError):
            with get_read_session():
                raise RuntimeError("query failed")

    session.close.assert_called_once()
