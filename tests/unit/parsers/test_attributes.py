import pytest

from block_kit.parsers.attributes import MalformedAttributesError, parse_attributes


class TestParseAttributes:
    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_blank_payload_is_empty_mapping(self, raw: str) -> None:
        assert parse_attributes(raw) == {}

    def test_parses_json_object(self) -> None:
        assert parse_attributes('{"ref":313}') == {"ref": 313}

    def test_preserves_key_order(self) -> None:
        result = parse_attributes('{"z": 1, "a": 2, "m": 3}')

        assert list(result) == ["z", "a", "m"]

    def test_nested_values(self) -> None:
        result = parse_attributes(
            '{ "is": "fast", "size": 1.5, "tags": ["a", null, true], "o": {} }'
        )

        assert result == {
            "is": "fast",
            "size": 1.5,
            "tags": ["a", None, True],
            "o": {},
        }

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_attributes('  {"a": 1}  ') == {"a": 1}


class TestParseAttributesErrors:
    @pytest.mark.parametrize(
        "raw",
        ['{"ref":', "{oops}", "not json", '{"a": 1} trailing'],
    )
    def test_malformed_json_raises(self, raw: str) -> None:
        with pytest.raises(MalformedAttributesError, match="Invalid block attributes"):
            parse_attributes(raw)

    @pytest.mark.parametrize("raw", ["[1, 2]", "true", "42", '"text"'])
    def test_non_object_json_raises(self, raw: str) -> None:
        with pytest.raises(MalformedAttributesError):
            parse_attributes(raw)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_attributes("{")

    def test_lone_surrogate_payload_raises(self) -> None:
        """Text that cannot be encoded as UTF-8 is malformed, not fatal."""
        with pytest.raises(MalformedAttributesError):
            parse_attributes('{"a": "\ud800"}')
