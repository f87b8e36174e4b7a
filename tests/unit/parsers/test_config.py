import pytest

from block_kit.parsers.config import ParserConfig


class TestParserConfig:
    def test_default_namespace_is_core(self) -> None:
        assert ParserConfig().default_namespace == "core"

    @pytest.mark.parametrize("namespace", ["acme", "my-plugin", "a1_b"])
    def test_accepts_valid_namespace(self, namespace: str) -> None:
        assert ParserConfig(default_namespace=namespace).default_namespace == namespace

    @pytest.mark.parametrize("namespace", ["", "Core", "1abc", "a/b", "with space"])
    def test_rejects_invalid_namespace(self, namespace: str) -> None:
        with pytest.raises(ValueError, match="default_namespace must match"):
            ParserConfig(default_namespace=namespace)

    def test_config_is_frozen(self) -> None:
        config = ParserConfig()

        with pytest.raises(AttributeError):
            config.default_namespace = "other"  # type: ignore
