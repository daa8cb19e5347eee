"""Tests for MethodConfiguration."""

from pyexpose._internal.method_config import MethodConfiguration


class TestClasspath:
    """Tests for the classpath setting."""

    def test_default_empty(self):
        assert MethodConfiguration().classpath == ""

    def test_separator_appended(self):
        config = MethodConfiguration()
        config.configure("*", "classpath", "ns")

        assert config.classpath == "ns."

    def test_single_separator(self):
        config = MethodConfiguration()
        config.configure("*", "classpath", "app.widgets.")

        assert config.classpath == "app.widgets."

    def test_empty_value_keeps_prefix(self):
        config = MethodConfiguration()
        config.configure("*", "classpath", "ns")
        config.configure("*", "classpath", "")

        assert config.classpath == "ns."

    def test_separator_only_is_noop(self):
        config = MethodConfiguration()
        config.configure("*", "classpath", ".")

        assert config.classpath == ""

    def test_last_write_wins(self):
        config = MethodConfiguration()
        config.configure("*", "classpath", "a")
        config.configure("render", "classpath", "b")

        assert config.classpath == "b."

    def test_not_stored_as_call_option(self):
        config = MethodConfiguration()
        config.configure("*", "classpath", "ns")

        assert config.options == {}


class TestExcluded:
    """Tests for the excluded setting."""

    def test_list_replaces(self):
        config = MethodConfiguration()
        config.configure("*", "excluded", ["a", "b"])
        config.configure("*", "excluded", ["c"])

        assert config.excluded == frozenset({"c"})

    def test_tuple_and_set_accepted(self):
        config = MethodConfiguration()
        config.configure("*", "excluded", ("a",))
        assert config.excluded == frozenset({"a"})

        config.configure("*", "excluded", {"b"})
        assert config.excluded == frozenset({"b"})

    def test_string_ignored(self):
        """A string is not taken as a sequence of method names."""
        config = MethodConfiguration()
        config.configure("*", "excluded", ["a"])
        config.configure("*", "excluded", "reset")

        assert config.excluded == frozenset({"a"})

    def test_non_sequence_ignored(self):
        config = MethodConfiguration()
        config.configure("*", "excluded", 42)
        config.configure("*", "excluded", None)
        config.configure("*", "excluded", [["a"]])
        config.configure("*", "excluded", ("a", 1))

        assert config.excluded == frozenset()
        assert config.options == {}


class TestCallOptions:
    """Tests for per-method and wildcard call options."""

    def test_keys_lowercased(self):
        config = MethodConfiguration()
        config.configure("ReNdEr", "mode", "'sync'")

        assert config.options == {"render": {"mode": "'sync'"}}
        assert config.call_options("RENDER") == [("mode", "'sync'")]

    def test_wildcard_first_then_specific(self):
        config = MethodConfiguration()
        config.configure("render", "mode", "'sync'")
        config.configure("*", "readonly", "true")
        config.configure("*", "mode", "'async'")

        assert config.call_options("render") == [
            ("readonly", "true"),
            ("mode", "'async'"),
            ("mode", "'sync'"),
        ]

    def test_specific_options_stay_with_their_method(self):
        config = MethodConfiguration()
        config.configure("foo", "readonly", "true")

        assert config.call_options("foo") == [("readonly", "true")]
        assert config.call_options("bar") == []

    def test_overwrite_keeps_position(self):
        config = MethodConfiguration()
        config.configure("*", "a", "1")
        config.configure("*", "b", "2")
        config.configure("*", "a", "3")

        assert config.call_options("x") == [("a", "3"), ("b", "2")]

    def test_wildcard_not_validated(self):
        config = MethodConfiguration()
        config.configure("doesNotExist", "mode", "1")

        assert "doesnotexist" in config.options
