"""Tests for the query string encoder."""

from forecast_api.query import encode_query, encode_value
from forecast_api.wire import ExcludeBlock, ExtendBy, Lang, Units


class TestEncodeValue:
    def test_none_is_absent(self):
        assert encode_value(None) is None

    def test_empty_string_is_absent(self):
        assert encode_value("") is None

    def test_empty_sequence_is_absent(self):
        assert encode_value([]) is None
        assert encode_value(()) is None

    def test_enum_uses_codec(self):
        assert encode_value(Units.UK) == "uk2"

    def test_enum_sequence_joined_with_comma(self):
        blocks = [ExcludeBlock.HOURLY, ExcludeBlock.DAILY, ExcludeBlock.ALERTS]
        assert encode_value(blocks) == "hourly,daily,alerts"

    def test_scalar_uses_str(self):
        assert encode_value(666) == "666"
        assert encode_value("abc") == "abc"


class TestEncodeQuery:
    def test_all_present_in_given_order(self):
        query = encode_query([
            ("exclude", [ExcludeBlock.HOURLY, ExcludeBlock.DAILY, ExcludeBlock.ALERTS]),
            ("extend", ExtendBy.HOURLY),
            ("lang", Lang.ARABIC),
            ("units", Units.IMPERIAL),
        ])
        assert query == "exclude=hourly,daily,alerts&extend=hourly&lang=ar&units=us"

    def test_order_is_not_sorted(self):
        query = encode_query([("units", Units.SI), ("lang", Lang.GERMAN)])
        assert query == "units=si&lang=de"

    def test_absent_values_omitted(self):
        query = encode_query([
            ("exclude", []),
            ("extend", None),
            ("lang", Lang.FRENCH),
            ("units", None),
        ])
        assert query == "lang=fr"

    def test_empty_scalar_omitted(self):
        query = encode_query([("exclude", ""), ("lang", "ar")])
        assert query == "lang=ar"

    def test_sequence_of_empty_strings_omitted(self):
        assert encode_query([("exclude", [""]), ("units", "si")]) == "units=si"

    def test_nothing_present(self):
        assert encode_query([("exclude", []), ("lang", None)]) == ""

    def test_duplicates_preserved(self):
        query = encode_query([("exclude", [ExcludeBlock.FLAGS, ExcludeBlock.FLAGS])])
        assert query == "exclude=flags,flags"

    def test_comma_left_unescaped(self):
        assert encode_query([("k", "a,b")]) == "k=a,b"

    def test_reserved_characters_escaped(self):
        assert encode_query([("k", "a b&c=d/e")]) == "k=a%20b%26c%3Dd%2Fe"

    def test_hyphenated_tokens_unescaped(self):
        assert encode_query([("lang", Lang.IGPAY_ATINLAY)]) == "lang=x-pig-latin"
