from __future__ import annotations

import json

import pytest

from next2d_autoloader.config import merge_config, merge_document, merge_routing, merge_stage, seed_config
from next2d_autoloader.errors import AutoLoaderError, ConfigParseError


class TestMergeFunctions:
    """Tests for the per-bucket merge functions"""

    def test_seed_has_all_buckets(self):
        assert seed_config("web") == {"platform": "web", "stage": {}, "routing": {}}

    def test_environment_overlay_then_all(self):
        config = seed_config("web")
        merge_document(config, {"local": {"platform": "a", "api": "x"}, "all": {"platform": "b"}}, "local")
        assert config["platform"] == "b"
        assert config["api"] == "x"

    def test_other_environment_is_ignored(self):
        config = seed_config("web")
        merge_document(config, {"production": {"api": "prod"}}, "local")
        assert "api" not in config

    def test_overlay_replaces_bucket_wholesale(self):
        config = seed_config("web")
        config["stage"]["width"] = 240
        merge_document(config, {"all": {"stage": {"fps": 60}}}, "local")
        assert config["stage"] == {"fps": 60}

    def test_null_overlays_are_ignored(self):
        config = seed_config("web")
        merge_document(config, {"local": None, "all": {"a": 1}}, "local")
        assert config == {"platform": "web", "stage": {}, "routing": {}, "a": 1}

    def test_non_object_all_overlay_is_ignored(self):
        config = seed_config("web")
        merge_document(config, {"local": {"a": 1}, "all": 5}, "local")
        assert config["a"] == 1

    def test_empty_all_overlay_is_skipped(self):
        config = seed_config("web")
        merge_document(config, {"all": {}}, "local")
        assert config == seed_config("web")

    def test_stage_and_routing_merge_key_by_key(self):
        config = seed_config("web")
        config["stage"]["width"] = 240
        merge_stage(config, {"height": 240})
        merge_routing(config, {"top": {"requests": []}})
        assert config["stage"] == {"width": 240, "height": 240}
        assert config["routing"] == {"top": {"requests": []}}


class TestMergeConfig:
    """Tests for merging the configuration files of a project"""

    def test_no_files(self, project):
        assert merge_config(project.root, "local", "web") == {"platform": "web", "stage": {}, "routing": {}}

    def test_all_overrides_environment(self, project):
        project.write_json("src/config/config.json", {"local": {"platform": "a"}, "all": {"platform": "b"}})
        assert merge_config(project.root, "local", "web")["platform"] == "b"

    def test_full_precedence(self, project):
        project.write_json(
            "src/config/config.json",
            {
                "local": {"api": {"endPoint": "http://localhost"}, "stage": {"width": 100}},
                "all": {"spa": True},
            },
        )
        project.write_json("src/config/stage.json", {"height": 200, "fps": 60})
        project.write_json("src/config/routing.json", {"top": {"requests": []}})

        config = merge_config(project.root, "local", "web")

        assert config == {
            "platform": "web",
            "stage": {"width": 100, "height": 200, "fps": 60},
            "routing": {"top": {"requests": []}},
            "api": {"endPoint": "http://localhost"},
            "spa": True,
        }

    def test_stage_merges_keys_not_bucket(self, project):
        project.write_json("src/config/stage.json", {"x": 1})
        assert merge_config(project.root, "local", "web")["stage"] == {"x": 1}

        project.write_json("src/config/stage.json", {"x": 2, "y": 3})
        assert merge_config(project.root, "local", "web")["stage"] == {"x": 2, "y": 3}

    def test_key_order_follows_assignment(self, project):
        project.write_json("src/config/config.json", {"all": {"stage": {"b": 1, "a": 2}}})
        project.write_json("src/config/stage.json", {"c": 3, "b": 4})

        stage = merge_config(project.root, "local", "web")["stage"]

        assert list(stage) == ["b", "a", "c"]
        assert stage["b"] == 4

    def test_idempotent_when_fed_back(self, project, tmp_path):
        project.write_json("src/config/config.json", {"local": {"stage": {"width": 1}}})
        project.write_json("src/config/stage.json", {"height": 2})
        project.write_json("src/config/routing.json", {"home": {"private": False}})
        merged = merge_config(project.root, "local", "web")

        other = tmp_path / "other"
        (other / "src" / "config").mkdir(parents=True)
        (other / "src" / "config" / "config.json").write_text("{}")
        (other / "src" / "config" / "stage.json").write_text(json.dumps(merged["stage"]))
        (other / "src" / "config" / "routing.json").write_text(json.dumps(merged["routing"]))

        assert merge_config(other, "local", "web") == merged

    @pytest.mark.parametrize("filename", ["config.json", "stage.json", "routing.json"])
    def test_malformed_json_raises(self, project, filename):
        project.write(f"src/config/{filename}", '{"broken": ')

        with pytest.raises(ConfigParseError) as excinfo:
            merge_config(project.root, "local", "web")

        error = excinfo.value
        assert isinstance(error, json.JSONDecodeError)
        assert isinstance(error, AutoLoaderError)
        assert filename in str(error)
        assert error.path.name == filename
        assert isinstance(error.__cause__, json.JSONDecodeError)
