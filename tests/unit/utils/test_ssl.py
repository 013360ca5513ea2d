"""Tests for the SSL utilities module."""

import ssl
from unittest.mock import MagicMock, patch

from requests.adapters import HTTPAdapter
from requests.sessions import Session

from confluence_sdk.utils.ssl import SSLIgnoreAdapter, configure_ssl_verification


def test_ssl_ignore_adapter_cert_verify():
    """Test that SSLIgnoreAdapter overrides cert verification."""
    adapter = SSLIgnoreAdapter()
    connection = MagicMock()

    with patch.object(HTTPAdapter, "cert_verify") as mock_super_cert_verify:
        adapter.cert_verify(connection, "https://example.com", verify=True, cert=None)

        mock_super_cert_verify.assert_called_once_with(
            connection, "https://example.com", verify=False, cert=None
        )


def test_ssl_ignore_adapter_init_poolmanager():
    """Test that the connection pool is created with verification disabled."""
    adapter = SSLIgnoreAdapter()

    with patch("ssl.create_default_context") as mock_create_context:
        mock_context = MagicMock()
        mock_create_context.return_value = mock_context

        with patch("confluence_sdk.utils.ssl.PoolManager") as mock_pool_manager_cls:
            adapter.init_poolmanager(5, 10, block=True)

            assert mock_context.check_hostname is False
            assert mock_context.verify_mode == ssl.CERT_NONE
            _, kwargs = mock_pool_manager_cls.call_args
            assert kwargs["num_pools"] == 5
            assert kwargs["maxsize"] == 10
            assert kwargs["block"] is True
            assert kwargs["ssl_context"] == mock_context


def test_configure_ssl_verification_disabled():
    """Test configure_ssl_verification when SSL verification is disabled."""
    session = MagicMock()

    with patch("confluence_sdk.utils.ssl.SSLIgnoreAdapter") as mock_adapter_class:
        mock_adapter = mock_adapter_class.return_value

        configure_ssl_verification("https://wiki.example.com/path", session, False)

        assert session.mount.call_count == 2
        session.mount.assert_any_call("https://wiki.example.com", mock_adapter)
        session.mount.assert_any_call("http://wiki.example.com", mock_adapter)


def test_configure_ssl_verification_enabled():
    """Test configure_ssl_verification when SSL verification is enabled."""
    session = MagicMock()

    with patch("confluence_sdk.utils.ssl.SSLIgnoreAdapter") as mock_adapter_class:
        configure_ssl_verification("https://wiki.example.com", session, True)

        mock_adapter_class.assert_not_called()
        assert session.mount.call_count == 0


def test_configure_ssl_verification_with_real_session():
    """A real session gets the adapter for the configured host only."""
    session = Session()

    configure_ssl_verification("https://wiki.example.com", session, False)

    assert isinstance(session.get_adapter("https://wiki.example.com/x"), SSLIgnoreAdapter)
    assert not isinstance(session.get_adapter("https://other.com/x"), SSLIgnoreAdapter)
