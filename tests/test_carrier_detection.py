"""Tests for carrier detection."""

import itertools
import string

import pytest

from trackpkg.models import Carrier
from trackpkg.services.classifier import (
    classify_tracking_number,
    identify_tracking_number,
    tracking_url,
)

VALID_NUMBERS = {
    "1Z999AA10123456784": (Carrier.UPS, "standard"),
    "1Z12345E0205271688": (Carrier.UPS, "standard"),
    "1Zabcdefghijklmno3": (Carrier.UPS, "standard"),
    "123456789012": (Carrier.FEDEX, "express"),
    "798774000672": (Carrier.FEDEX, "express"),
    "123456789090": (Carrier.FEDEX, "express"),
    "961234567890121": (Carrier.FEDEX, "ground"),
    "001234567890128": (Carrier.FEDEX, "ground"),
    "961234567890190": (Carrier.FEDEX, "ground"),
    "9612019012345678901231": (Carrier.FEDEX, "ground"),
    "9101234567890123456781": (Carrier.USPS, "tracking"),
    "7100000000000000000008": (Carrier.USPS, "tracking"),
    "7301234567890123456785": (Carrier.USPS, "tracking"),
    "7712345678901234567892": (Carrier.USPS, "tracking"),
    "8111111111111111111116": (Carrier.USPS, "tracking"),
    "9123456789012345678910": (Carrier.USPS, "tracking"),
    "91019400111899223197428497": (Carrier.USPS, "tracking"),
}


class TestCarrierDetection:
    """Test carrier classification from tracking numbers."""

    @pytest.mark.parametrize("number,expected", VALID_NUMBERS.items())
    def test_classify(self, loader, number, expected):
        carrier, service = expected
        assert classify_tracking_number(number, loader) == carrier
        match = identify_tracking_number(number, loader)
        assert match.service == service
        assert match.tracking_number == number

    @pytest.mark.parametrize("number", VALID_NUMBERS)
    def test_exactly_one_carrier_matches(self, loader, number):
        assert len(loader.detect_carrier(number)) == 1

    @pytest.mark.parametrize(
        "number",
        [
            "",
            "   ",
            "INVALID",
            "1Z",
            "12345678901",
            "1Z999AA1012345678",
            "1Z999AA101234567846",
            "123456789013",
            "961234567890122",
            "9101234567890123456782",
            "9400111899223197428490",  # 94 is not a recognised USPS service
            "420123459101234567890123456781",
            "1Z999AA 0123456784",
        ],
    )
    def test_no_match(self, loader, number):
        assert classify_tracking_number(number, loader) is None
        assert identify_tracking_number(number, loader) is None
        assert tracking_url(number, loader) is None

    @pytest.mark.parametrize("number", VALID_NUMBERS)
    def test_whitespace_insensitive(self, loader, number):
        assert classify_tracking_number(f" {number} ", loader) == classify_tracking_number(
            number, loader
        )
        assert identify_tracking_number(f"\t{number}\n", loader).tracking_number == number

    @pytest.mark.parametrize("number", ["1Z999AA10123456784", "961234567890121", "bogus"])
    def test_idempotent(self, loader, number):
        first = identify_tracking_number(number, loader)
        assert identify_tracking_number(number, loader) == first

    def test_express_tried_before_ground(self, loader):
        carrier = loader.get_carrier("fedex")
        assert [s.id for s in carrier.config.services] == ["express", "ground"]

    def test_default_loader(self):
        assert classify_tracking_number("1Z999AA10123456784") == Carrier.UPS


class TestPrefixExclusivity:
    """No two-character prefix passes more than one carrier's prefix gate."""

    def test_mod10_prefixes_are_disjoint(self, loader):
        ground = loader.get_config("fedex").services[1]
        usps = loader.get_config("usps").services[0]
        alphabet = string.digits + string.ascii_uppercase

        for prefix in map("".join, itertools.product(alphabet, repeat=2)):
            gates = [
                prefix == "1Z",
                prefix in ground.prefixes,
                prefix in usps.prefixes,
            ]
            assert sum(gates) <= 1, prefix

    def test_lengths_separate_express_from_ground(self, loader):
        ground = loader.get_config("fedex").services[1]
        assert ground.window > 12


class TestTrackingURL:
    """Test tracking URL construction."""

    def test_ups(self, loader):
        assert (
            tracking_url("1Z999AA10123456784", loader)
            == "http://wwwapps.ups.com/tracking/tracking.cgi?tracknum=1Z999AA10123456784"
        )

    def test_fedex(self, loader):
        assert (
            tracking_url("961234567890121", loader)
            == "http://www.fedex.com/Tracking?tracknumbers=961234567890121"
        )
        assert (
            tracking_url("123456789012", loader)
            == "http://www.fedex.com/Tracking?tracknumbers=123456789012"
        )

    def test_usps(self, loader):
        assert tracking_url("9101234567890123456781", loader) == (
            "http://trkcnfrm1.smi.usps.com/PTSInternetWeb/InterLabelInquiry.do"
            "?strOrigTrackNum=9101234567890123456781"
        )

    def test_raw_number_substituted_verbatim(self, loader):
        """The untrimmed input goes into the URL unchanged."""
        url = tracking_url(" 1Z999AA10123456784 ", loader)
        assert url.endswith("tracknum= 1Z999AA10123456784 ")
