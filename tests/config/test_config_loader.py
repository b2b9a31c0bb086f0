"""
Tests for redirect configuration loading and validation
"""

import pytest

from redirectguard import RedirectConfig, load_config, validate_config


class TestRedirectConfig:

    def test_defaults(self):
        config = RedirectConfig.default()

        assert config.max_redirects == 5
        assert config.sensitive_headers == ("cookie", "authorization")
        assert config.follow_redirects is True
        assert config.timeout_s == 30.0

    def test_headers_normalized(self):
        config = RedirectConfig(sensitive_headers=["Cookie", "X-Api-Key"])

        assert config.sensitive_headers == ("cookie", "x-api-key")

    def test_single_header_string(self):
        assert RedirectConfig(sensitive_headers="Cookie").sensitive_headers == ("cookie",)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RedirectConfig().max_redirects = 10

    def test_to_dict(self):
        assert RedirectConfig().to_dict() == {
            "max_redirects": 5,
            "sensitive_headers": ["cookie", "authorization"],
            "follow_redirects": True,
            "timeout_s": 30.0,
        }


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.yml") == RedirectConfig.default()

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text(
            "redirects:\n"
            "  max_redirects: 10\n"
            "  sensitive_headers: [Cookie, Authorization, Proxy-Authorization]\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.max_redirects == 10
        assert config.sensitive_headers == ("cookie", "authorization", "proxy-authorization")
        assert config.follow_redirects is True

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("redirects:\n  max_redirects: 2\n  colour: blue\n", encoding="utf-8")

        assert load_config(str(path)).max_redirects == 2

    def test_invalid_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("redirects: [unclosed\n", encoding="utf-8")

        assert load_config(path) == RedirectConfig.default()

    def test_non_mapping_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        assert load_config(path) == RedirectConfig.default()

    def test_missing_section_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("other:\n  key: 1\n", encoding="utf-8")

        assert load_config(path) == RedirectConfig.default()

    @pytest.mark.parametrize("headers", ["null", "[1, 2]"])
    def test_bad_header_values_give_defaults(self, tmp_path, caplog, headers):
        path = tmp_path / "config.yml"
        path.write_text(f"redirects:\n  sensitive_headers: {headers}\n", encoding="utf-8")

        with caplog.at_level("WARNING", logger="redirectguard.config.loader"):
            config = load_config(path)

        assert config == RedirectConfig.default()
        assert "Invalid redirects section" in caplog.text


class TestValidateConfig:

    def test_defaults_are_clean(self):
        assert validate_config(RedirectConfig()) == []

    def test_negative_limit_is_error(self):
        issues = validate_config(RedirectConfig(max_redirects=-1))

        assert [(i.level, i.path) for i in issues] == [("error", "redirects.max_redirects")]

    def test_non_integer_limit_is_error(self):
        issues = validate_config(RedirectConfig(max_redirects="five"))

        assert issues[0].level == "error"

    @pytest.mark.parametrize("timeout", ["30", None, True])
    def test_non_numeric_timeout_is_error(self, timeout):
        issues = validate_config(RedirectConfig(timeout_s=timeout))

        assert [(i.level, i.path) for i in issues] == [("error", "redirects.timeout_s")]
        assert "must be a number" in issues[0].message

    def test_no_sensitive_headers_warns(self):
        issues = validate_config(RedirectConfig(sensitive_headers=()))

        assert [(i.level, i.path) for i in issues] == [("warn", "redirects.sensitive_headers")]

    def test_limit_without_following_warns(self):
        issues = validate_config(RedirectConfig(follow_redirects=False, max_redirects=9))

        assert issues[0].level == "warn"
        assert "follow_redirects" in issues[0].message

    def test_timeout_must_be_positive(self):
        issues = validate_config(RedirectConfig(timeout_s=0))

        assert issues[0].path == "redirects.timeout_s"

    def test_issue_str(self):
        issue = validate_config(RedirectConfig(max_redirects=-1))[0]

        assert str(issue).startswith("[error] [redirects.max_redirects]")
