"""
Unit tests for the message variants.
"""
import pytest

from jsonmaplayout.messages import MapMessage, SimpleMapMessage, TextMessage, is_map_message


class TestSimpleMapMessage:
    """Construction, copying and mutation of the key/value bag."""

    def test_construct_from_mapping_keeps_order(self):
        message = SimpleMapMessage({"b": 1, "a": 2, "c": 3})
        assert list(message) == ["b", "a", "c"]
        assert len(message) == 3

    def test_empty_and_presized(self):
        assert SimpleMapMessage().is_empty()
        assert SimpleMapMessage(initial_capacity=16).is_empty()

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            SimpleMapMessage(initial_capacity=-1)

    def test_new_instance_is_independent(self):
        original = SimpleMapMessage({"user": "alice"})
        copy = original.new_instance(original.data)
        copy.put("user", "bob")

        assert type(copy) is SimpleMapMessage
        assert original["user"] == "alice"
        assert copy["user"] == "bob"

    def test_source_mapping_is_copied(self):
        source = {"k": 1}
        message = SimpleMapMessage(source)
        source["k"] = 2
        assert message["k"] == 1

    def test_data_view_is_read_only(self):
        message = SimpleMapMessage({"k": 1})
        with pytest.raises(TypeError):
            message.data["k"] = 2

    def test_mutation(self):
        message = SimpleMapMessage().add("a", 1).add("b", 2)
        message.put_all({"c": 3})
        assert message.remove("a") == 1
        assert message.remove("missing") is None
        assert dict(message.items()) == {"b": 2, "c": 3}
        assert "b" in message
        assert message.get("zzz", 0) == 0
        message.clear()
        assert message.is_empty()

    def test_keys_must_be_strings(self):
        with pytest.raises(TypeError):
            SimpleMapMessage({1: "x"})

    def test_equality(self):
        assert SimpleMapMessage({"a": 1}) == SimpleMapMessage({"a": 1})
        assert SimpleMapMessage({"a": 1}) != SimpleMapMessage({"a": 2})
        assert SimpleMapMessage({"a": 1}) != MapMessage({"a": 1})

    def test_is_map_message(self):
        assert is_map_message(SimpleMapMessage())
        assert not is_map_message(TextMessage("x"))
        assert not is_map_message({"a": 1})


class TestMapMessageRendering:
    """Text renderings of a map message."""

    @pytest.fixture
    def message(self):
        return SimpleMapMessage({"user": "alice", "status": 200})

    def test_default(self, message):
        assert message.get_formatted_message() == 'user="alice" status="200"'
        assert str(message) == message.get_formatted_message()

    def test_json(self, message):
        assert message.as_string("JSON") == '{"user":"alice","status":200}'
        assert message.as_string("json") == message.as_string("JSON")

    def test_java(self, message):
        assert message.as_string("JAVA") == '{user="alice", status="200"}'

    def test_xml(self):
        message = SimpleMapMessage({"expr": "a<b"})
        assert message.as_string("XML") == '<Map>\n  <Entry key="expr">a&lt;b</Entry>\n</Map>'

    def test_unknown_format_falls_back(self, message):
        assert message.as_string("YAML") == message.get_formatted_message()

    def test_empty(self):
        assert SimpleMapMessage().get_formatted_message() == ""


class TestTextMessage:
    def test_rendering(self):
        assert TextMessage("hello").get_formatted_message() == "hello"
        assert str(TextMessage("hello")) == "hello"
        assert TextMessage().get_formatted_message() == ""
