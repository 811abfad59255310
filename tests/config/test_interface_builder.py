"""Tests for InterfaceBuilder parse-and-set operations."""

from ipaddress import ip_address, ip_interface

import pytest

from awg_interface.common.exceptions import ConfigurationError
from awg_interface.config import (
    BadConfigError,
    InterfaceBuilder,
    Location,
    Reason,
    Section,
)


class TestInterfaceBuilder:
    """Test InterfaceBuilder functionality."""

    def test_minimal_build(self, private_key_b64, key_pair):
        """Test a private key alone builds an interface."""
        interface = InterfaceBuilder().parse_private_key(private_key_b64).build()
        assert interface.key_pair == key_pair
        assert interface.addresses == ()
        assert interface.listen_port is None

    def test_method_chaining(self, private_key_b64):
        """Test parse methods return the builder."""
        builder = InterfaceBuilder()
        assert builder.parse_addresses("10.0.0.2/32") is builder
        assert builder.parse_private_key(private_key_b64) is builder
        assert builder.parse_mtu("1420") is builder

    def test_missing_private_key(self):
        """Test build without a key pair names the private key."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_addresses("10.0.0.2/32").build()

        error = exc_info.value
        assert error.section == Section.INTERFACE
        assert error.location == Location.PRIVATE_KEY
        assert error.reason == Reason.MISSING_ATTRIBUTE
        assert isinstance(error, ConfigurationError)

    def test_full_build(self, full_interface, key_pair):
        """Test every field reaches the interface."""
        assert full_interface.addresses == (
            ip_interface("10.0.0.2/32"),
            ip_interface("fd00::2/128"),
        )
        assert full_interface.dns_servers == (
            ip_address("1.1.1.1"),
            ip_address("2606:4700:4700::1111"),
        )
        assert full_interface.dns_search_domains == ("corp.example.com",)
        assert full_interface.excluded_applications == (
            "com.example.bank",
            "com.example.maps",
        )
        assert full_interface.key_pair == key_pair
        assert full_interface.listen_port == 51820
        assert full_interface.mtu == 1420
        assert (full_interface.jc, full_interface.jmin, full_interface.jmax) == (4, 40, 70)
        assert (full_interface.s1, full_interface.s2) == (15, 18)
        assert (
            full_interface.h1,
            full_interface.h2,
            full_interface.h3,
            full_interface.h4,
        ) == (1, 2, 3, 4)


class TestBuilderAddresses:
    """Test address and DNS parsing."""

    def test_address_without_prefix(self, private_key_b64):
        """Test a bare address gets a host prefix."""
        interface = (
            InterfaceBuilder()
            .parse_addresses("10.0.0.2")
            .parse_private_key(private_key_b64)
            .build()
        )
        assert interface.addresses == (ip_interface("10.0.0.2/32"),)

    def test_malformed_address(self):
        """Test the offending entry is reported."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_addresses("10.0.0.2/32, 10.0.0.300/24")

        assert exc_info.value.location == Location.ADDRESS
        assert exc_info.value.reason == Reason.SYNTAX_ERROR
        assert exc_info.value.text == "10.0.0.300/24"
        assert "10.0.0.300/24" in str(exc_info.value)

    def test_failed_parse_stores_nothing(self, private_key_b64):
        """Test a failing call leaves earlier entries out."""
        builder = InterfaceBuilder()
        with pytest.raises(BadConfigError):
            builder.parse_addresses("10.0.0.2/32, nope")

        interface = builder.parse_private_key(private_key_b64).build()
        assert interface.addresses == ()

    def test_dns_split_by_syntax(self, private_key_b64):
        """Test search domains are recognized regardless of position."""
        interface = (
            InterfaceBuilder()
            .parse_dns_servers("corp.example.com, 9.9.9.9, lan")
            .parse_private_key(private_key_b64)
            .build()
        )
        assert interface.dns_servers == (ip_address("9.9.9.9"),)
        assert interface.dns_search_domains == ("corp.example.com", "lan")

    def test_malformed_dns(self):
        """Test DNS entries that are neither IPs nor host names."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_dns_servers("1.1.1.1, not a host")

        assert exc_info.value.location == Location.DNS
        assert exc_info.value.text == "not a host"


class TestBuilderApplications:
    """Test application split tunnelling sets."""

    def test_exclude_preserves_order_and_dedupes(self, private_key_b64):
        """Test duplicates collapse to first occurrence."""
        interface = (
            InterfaceBuilder()
            .exclude_applications(["b", "a", "b"])
            .parse_private_key(private_key_b64)
            .build()
        )
        assert interface.excluded_applications == ("b", "a")

    def test_both_sets_rejected(self):
        """Test including after excluding fails."""
        builder = InterfaceBuilder().exclude_applications(["a"])
        with pytest.raises(BadConfigError) as exc_info:
            builder.include_applications(["b"])

        assert exc_info.value.location == Location.INCLUDED_APPLICATIONS
        assert exc_info.value.reason == Reason.INVALID_VALUE

    def test_excluding_after_including_rejected(self):
        """Test the check is symmetric."""
        builder = InterfaceBuilder().include_applications(["a"])
        with pytest.raises(BadConfigError) as exc_info:
            builder.exclude_applications(["b"])
        assert exc_info.value.location == Location.EXCLUDED_APPLICATIONS

    def test_blank_application(self):
        """Test blank identifiers are rejected."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().include_applications(["a", "  "])
        assert exc_info.value.location == Location.INCLUDED_APPLICATIONS


class TestBuilderNumbers:
    """Test numeric parse-and-set operations."""

    @pytest.mark.parametrize(
        "method",
        ["set_key_pair", "parse_listen_port", "parse_mtu", "parse_jc", "parse_jmin",
         "parse_jmax", "parse_s1", "parse_s2", "parse_h1", "parse_h2", "parse_h3", "parse_h4"],
    )
    def test_setters_are_documented(self, method):
        """Test each public setter documents its field."""
        assert getattr(InterfaceBuilder, method).__doc__

    def test_listen_port_out_of_range(self):
        """Test an out-of-range port names the field and input."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_listen_port("99999")

        error = exc_info.value
        assert error.location == Location.LISTEN_PORT
        assert error.reason == Reason.INVALID_VALUE
        assert error.text == "99999"
        assert "ListenPort" in str(error)
        assert "between 0 and 65535" in str(error)

    def test_listen_port_not_numeric(self):
        """Test non-numeric text is an invalid number."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_listen_port("port")
        assert exc_info.value.reason == Reason.INVALID_NUMBER

    def test_listen_port_zero_means_unset(self, private_key_b64):
        """Test port 0 leaves the listen port absent."""
        interface = (
            InterfaceBuilder()
            .parse_listen_port("51820")
            .parse_listen_port("0")
            .parse_private_key(private_key_b64)
            .build()
        )
        assert interface.listen_port is None

    @pytest.mark.parametrize(
        "method, text, location",
        [
            ("parse_mtu", "1279", Location.MTU),
            ("parse_mtu", "65536", Location.MTU),
            ("parse_jc", "129", Location.JC),
            ("parse_jmin", "-1", Location.JMIN),
            ("parse_jmax", "1281", Location.JMAX),
            ("parse_s1", "1133", Location.S1),
            ("parse_s2", "-5", Location.S2),
            ("parse_h1", "4294967296", Location.H1),
            ("parse_h2", "-1", Location.H2),
            ("parse_h3", "4294967296", Location.H3),
            ("parse_h4", "-1", Location.H4),
        ],
    )
    def test_out_of_range(self, method, text, location):
        """Test each numeric field rejects values outside its range."""
        with pytest.raises(BadConfigError) as exc_info:
            getattr(InterfaceBuilder(), method)(text)
        assert exc_info.value.location == location
        assert exc_info.value.reason == Reason.INVALID_VALUE

    def test_upper_bounds_accepted(self, private_key_b64):
        """Test the largest values in each range."""
        interface = (
            InterfaceBuilder()
            .parse_mtu("65535")
            .parse_jc("128")
            .parse_jmax("1280")
            .parse_s1("1132")
            .parse_h1("4294967295")
            .parse_private_key(private_key_b64)
            .build()
        )
        assert interface.mtu == 65535
        assert interface.h1 == 4294967295

    def test_jmin_greater_than_jmax(self, private_key_b64):
        """Test the junk size bounds are checked at build."""
        builder = (
            InterfaceBuilder()
            .parse_jmin("100")
            .parse_jmax("50")
            .parse_private_key(private_key_b64)
        )
        with pytest.raises(BadConfigError) as exc_info:
            builder.build()
        assert exc_info.value.location == Location.JMIN
        assert exc_info.value.text == "100"


class TestBuilderPrivateKey:
    """Test private key parsing."""

    @pytest.mark.parametrize("text", ["not-a-key", "A" * 42 + "==", "!" * 43 + "="])
    def test_malformed_key(self, text):
        """Test malformed keys are attributed to the private key."""
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_private_key(text)
        assert exc_info.value.location == Location.PRIVATE_KEY
        assert exc_info.value.reason == Reason.INVALID_KEY

    def test_key_not_echoed_in_message(self, private_key_b64):
        """Test the diagnostic masks key material."""
        bad = private_key_b64[:-2] + "=="
        with pytest.raises(BadConfigError) as exc_info:
            InterfaceBuilder().parse_private_key(bad)
        assert bad not in str(exc_info.value)
        assert bad[-4:] in str(exc_info.value)

    def test_private_key_not_logged(self, mock_logger, private_key_b64):
        """Test builder logs never contain the private key."""
        InterfaceBuilder().parse_private_key(private_key_b64).build()

        assert mock_logger.debug.called
        for call in mock_logger.debug.call_args_list:
            assert private_key_b64 not in str(call)
