"""
Tests for explorer configuration loading.
"""

from schematree import ExplorerConfig, KeyMap, RenderStyle


class TestKeyMap:
    def test_default_bindings(self):
        keys = KeyMap()

        assert keys.action_for("j") == "down"
        assert keys.action_for("up") == "up"
        assert keys.action_for(" ") == "toggle"
        assert keys.action_for("escape") == "clear"
        assert keys.action_for("x") is None

    def test_from_dict_accepts_single_string(self):
        keys = KeyMap.from_dict({"toggle_mode": "m", "down": ["n"], "bogus": ["z"]})

        assert keys.toggle_mode == ("m",)
        assert keys.down == ("n",)
        assert keys.action_for("j") is None
        assert keys.action_for("k") == "up"


class TestExplorerConfig:
    def test_defaults(self):
        config = ExplorerConfig()

        assert config.height == 24
        assert config.default_instance_name == "main"
        assert config.style == RenderStyle()
        assert config.keys == KeyMap()

    def test_from_dict_with_nested_overrides(self):
        config = ExplorerConfig.from_dict(
            {
                "height": 10,
                "style": {"fork": "+--"},
                "keys": {"toggle_mode": ["m"]},
                "unknown": True,
            }
        )

        assert config.height == 10
        assert config.width == 80
        assert config.style.fork == "+--"
        assert config.style.leaf == "└──"
        assert config.keys.toggle_mode == ("m",)

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "explorer.yaml"
        config_file.write_text(
            "height: 12\n"
            "default_instance_name: this\n"
            "style:\n"
            "  roots_without_prefix: true\n"
            "keys:\n"
            "  up: [w]\n"
        )

        config = ExplorerConfig.from_yaml(config_file)

        assert config.height == 12
        assert config.default_instance_name == "this"
        assert config.style.roots_without_prefix is True
        assert config.keys.up == ("w",)

    def test_from_empty_yaml(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert ExplorerConfig.from_yaml(str(config_file)) == ExplorerConfig()
