"""
Unit tests for the Tags collection.
"""

import pytest
from structtag.errors import ErrorCode, KeyNotSetError, TagNotExistError
from structtag.grammar import parse
from structtag.schema import Tag
from structtag.tags import Tags


def insertion_sort(tags: Tags) -> None:
    """Sort through the len/less/swap primitives only."""
    for i in range(1, tags.len()):
        j = i
        while j > 0 and tags.less(j, j - 1):
            tags.swap(j, j - 1)
            j -= 1


class TestTagsLookup:
    """Test cases for reading from a collection."""

    def test_get(self):
        """Test looking up a tag and rendering it."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested"')

        found = tags.get("json")

        assert str(found) == 'json:"foo,omitempty"'
        assert found.value() == "foo,omitempty"

    def test_get_missing_key(self):
        """Test that looking up an absent key raises TAG_NOT_EXIST."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested"')

        with pytest.raises(TagNotExistError) as exc_info:
            tags.get("toml")

        assert exc_info.value.code == ErrorCode.TAG_NOT_EXIST
        assert exc_info.value.key == "toml"

    def test_keys(self):
        """Test the keys of a collection in storage order."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested"')
        assert tags.keys() == ["json", "structs"]

        empty = parse("")
        assert empty.keys() == []

    def test_len(self):
        """Test the number of stored tags."""
        tags = parse('json:"foo" structs:"bar,omitnested" hcl:"-"')

        assert tags.len() == 3
        assert len(tags) == 3

    def test_contains_and_iter(self):
        """Test membership by key and iteration in storage order."""
        tags = parse('json:"foo" hcl:"-"')

        assert "json" in tags
        assert "toml" not in tags
        assert [tag.key for tag in tags] == ["json", "hcl"]

    def test_returned_values_are_copies(self):
        """Test that changing returned tags or keys leaves the collection intact."""
        tags = parse('json:"foo,omitempty"')

        found = tags.get("json")
        found.name = "bar"
        found.options.append("string")
        tags.keys().append("xml")
        tags.tags()[0].options.clear()

        assert str(tags) == 'json:"foo,omitempty"'

    def test_string(self):
        """Test that formatting reproduces a canonical tag string."""
        raw = 'json:"foo" structs:"bar,omitnested" hcl:"-"'
        tags = parse(raw)

        assert str(tags) == raw
        assert repr(tags) == f"Tags({raw!r})"

    def test_equality(self):
        """Test that collections compare by their ordered tags."""
        assert parse('json:"foo" hcl:"-"') == parse('json:"foo"  hcl:"-" ')
        assert parse('json:"foo" hcl:"-"') != parse('hcl:"-" json:"foo"')
        assert Tags([Tag(key="json", name="foo")]) == parse('json:"foo"')


class TestTagsMutation:
    """Test cases for changing a collection."""

    def test_set_replaces_existing(self):
        """Test that setting an existing key replaces the tag in place."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested"')

        tags.set(Tag(key="json", name="bar", options=[]))

        assert str(tags.get("json")) == 'json:"bar"'
        assert str(tags) == 'json:"bar" structs:"bar,omitnested"'

    def test_set_appends_new(self):
        """Test that setting a new key appends the tag."""
        tags = parse('json:"foo,omitempty"')

        tags.set(Tag(key="structs", name="bar", options=["omitnested"]))

        assert str(tags.get("structs")) == 'structs:"bar,omitnested"'
        assert str(tags) == 'json:"foo,omitempty" structs:"bar,omitnested"'

    def test_set_without_key(self):
        """Test that setting a tag with an empty key raises KEY_NOT_SET."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested"')

        with pytest.raises(KeyNotSetError) as exc_info:
            tags.set(Tag(key="", name="bar", options=[]))

        assert exc_info.value.code == ErrorCode.KEY_NOT_SET
        assert tags.len() == 2

    def test_set_stores_a_copy(self):
        """Test that changing a tag after setting it does not affect the collection."""
        tags = parse("")
        tag = Tag(key="json", name="foo")

        tags.set(tag)
        tag.options.append("omitempty")

        assert str(tags) == 'json:"foo"'

    def test_set_after_get(self):
        """Test the get, change, set back workflow."""
        tags = parse('json:"foo" xml:"foo"')

        tag = tags.get("json")
        tag.options.append("string")
        tags.set(tag)

        assert str(tags) == 'json:"foo,string" xml:"foo"'

    def test_set_addresses_first_duplicate(self):
        """Test that set only replaces the first tag sharing a key."""
        tags = parse('json:"a" json:"b"')

        tags.set(Tag(key="json", name="c"))

        assert str(tags) == 'json:"c" json:"b"'

    def test_delete(self):
        """Test deleting a tag by key."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested" hcl:"-"')

        tags.delete("structs")

        assert tags.len() == 2
        assert str(tags.get("json")) == 'json:"foo,omitempty"'
        assert str(tags) == 'json:"foo,omitempty" hcl:"-"'

    def test_delete_several_and_missing(self):
        """Test deleting several keys, ignoring absent ones."""
        tags = parse('json:"foo" structs:"bar" hcl:"-"')

        tags.delete("toml")
        assert tags.len() == 3

        tags.delete("json", "toml", "hcl")
        assert str(tags) == 'structs:"bar"'

    def test_delete_first_duplicate(self):
        """Test that delete only removes the first tag sharing a key."""
        tags = parse('json:"a" json:"b"')

        tags.delete("json")

        assert str(tags) == 'json:"b"'

    def test_delete_options(self):
        """Test removing options from a tag."""
        tags = parse('json:"foo,omitempty" structs:"bar,omitnested,omitempty" hcl:"-"')

        tags.delete_options("json", "omitempty")
        assert str(tags) == 'json:"foo" structs:"bar,omitnested,omitempty" hcl:"-"'

        tags.delete_options("structs", "omitnested")
        assert str(tags) == 'json:"foo" structs:"bar,omitempty" hcl:"-"'

    def test_delete_options_all_occurrences(self):
        """Test that every occurrence of an option is removed and order is kept."""
        tags = parse('json:"foo,x,y,x,z"')

        tags.delete_options("json", "x", "missing")

        assert tags.get("json").options == ["y", "z"]

    def test_delete_options_missing_key(self):
        """Test that removing options from an absent key is a no-op."""
        tags = parse('json:"foo,omitempty"')

        tags.delete_options("xml", "omitempty")

        assert str(tags) == 'json:"foo,omitempty"'

    def test_add_options(self):
        """Test adding options, skipping those already present."""
        tags = parse('json:"foo" structs:"bar,omitempty" hcl:"-"')

        tags.add_options("json", "omitempty")
        assert str(tags) == 'json:"foo,omitempty" structs:"bar,omitempty" hcl:"-"'

        # this shouldn't change anything
        tags.add_options("structs", "omitempty")
        assert str(tags) == 'json:"foo,omitempty" structs:"bar,omitempty" hcl:"-"'

        # this should append to the existing
        tags.add_options("structs", "omitnested", "flatten")
        assert (
            str(tags)
            == 'json:"foo,omitempty" structs:"bar,omitempty,omitnested,flatten" hcl:"-"'
        )

    def test_add_options_idempotent(self):
        """Test that repeating an add does not change the output."""
        tags = parse('json:"foo"')

        tags.add_options("json", "omitempty")
        once = str(tags)
        tags.add_options("json", "omitempty")
        tags.add_options("json", "string", "string")

        assert once == 'json:"foo,omitempty"'
        assert str(tags) == 'json:"foo,omitempty,string"'

    def test_add_options_missing_key(self):
        """Test that adding options to an absent key is a no-op."""
        tags = parse('json:"foo"')

        tags.add_options("xml", "omitempty")

        assert str(tags) == 'json:"foo"'
        assert "xml" not in tags

    def test_options_with_special_characters(self):
        """Test how set options containing quotes and commas are written."""
        tags = parse("")
        tags.set(Tag(key="json", name="foo", options=['bar:"baz"', "a,b"]))

        assert str(tags) == r'json:"foo,bar:\"baz\",a,b"'
        assert parse(str(tags)).get("json").options == ['bar:"baz"', "a", "b"]


class TestTagsSort:
    """Test cases for ordering a collection by key."""

    def test_sort(self):
        """Test sorting the tags by key."""
        tags = parse('json:"foo" structs:"bar,omitnested" hcl:"-"')

        tags.sort()

        assert str(tags) == 'hcl:"-" json:"foo" structs:"bar,omitnested"'

    def test_sort_is_stable_and_idempotent(self):
        """Test that tags sharing a key keep their order and resorting is a no-op."""
        tags = parse('b:"1" a:"x" b:"2" a:"y"')

        tags.sort()
        assert str(tags) == 'a:"x" a:"y" b:"1" b:"2"'

        tags.sort()
        assert str(tags) == 'a:"x" a:"y" b:"1" b:"2"'

    def test_sort_by_code_point(self):
        """Test that keys compare by code point, uppercase first."""
        tags = parse('json:"" XML:"" _x:"" Json:""')

        tags.sort()

        assert tags.keys() == ["Json", "XML", "_x", "json"]

    def test_less_and_swap(self):
        """Test the primitives used by index based sorts."""
        tags = parse('json:"foo" structs:"bar,omitnested" hcl:"-"')

        assert tags.less(0, 1) is True
        assert tags.less(2, 0) is True
        assert tags.less(1, 2) is False

        tags.swap(0, 2)
        assert tags.keys() == ["hcl", "structs", "json"]

    def test_sort_through_primitives(self):
        """Test that a generic sort over len/less/swap orders the collection."""
        tags = parse('json:"foo" structs:"bar,omitnested" hcl:"-" b:"1" a:"x" b:"2"')

        insertion_sort(tags)

        assert str(tags) == 'a:"x" b:"1" b:"2" hcl:"-" json:"foo" structs:"bar,omitnested"'
