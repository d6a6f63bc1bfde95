# ==============================================
# Tests for Extraction Module
# ==============================================
#
# Covers flat and nested index building, dispatch and membership.
# ==============================================

import logging
from typing import List, Optional

import pytest

from tago import IndexBuilder, apply, apply_one, has_instruction, record_fields

from conftest import Author, Customer, FlatModel, MyModel, NestedModel, Node
from postponed_models import Invoice


# ==============================================
# Flat extraction
# ==============================================

class TestFlatExtraction:
    """Tests for IndexBuilder.build()."""

    def test_flat_model(self):
        """Field1 tagged, Field2 untagged -> two instructions on Field1."""
        index = IndexBuilder("gorm2").build(FlatModel)
        assert index == {"preload=true": ["Field1"], "otherOption=value": ["Field1"]}
        assert len(index) == 2

    def test_nested_fields_not_visited(self):
        """build() only reads top-level fields."""
        index = IndexBuilder("gorm2").build(MyModel)
        assert index == {
            "preload=true": ["Field1", "Field3"],
            "otherOption=value": ["Field1"],
        }

    def test_accepts_instance_and_hints(self):
        """Instances and wrapped hints give the same index as the class."""
        builder = IndexBuilder("gorm2")
        expected = builder.build(MyModel)
        assert builder.build(MyModel()) == expected
        assert builder.build(Optional[MyModel]) == expected
        assert builder.build(List[Optional[MyModel]]) == expected

    def test_other_tag_identifier(self):
        """Tags under other identifiers are ignored."""
        assert len(IndexBuilder("validate").build(MyModel)) == 0

    def test_fresh_index_per_call(self):
        """Each call returns a new index object."""
        builder = IndexBuilder("gorm2")
        assert builder.build(MyModel) is not builder.build(MyModel)

    def test_non_record_raises(self):
        """A non-dataclass model raises TypeError."""
        with pytest.raises(TypeError):
            IndexBuilder("gorm2").build(int)

    def test_from_field(self):
        """from_field parses one field only."""
        field3 = record_fields(MyModel)[2]
        assert IndexBuilder("gorm2").from_field(field3) == {"preload=true": ["Field3"]}


# ==============================================
# Nested extraction
# ==============================================

class TestNestedExtraction:
    """Tests for IndexBuilder.build_nested()."""

    def test_nested_model(self):
        """Nested field names are prefixed with the parent field."""
        index = IndexBuilder("gorm2").build_nested(MyModel, ".")
        assert index == {
            "preload=true": ["Field1", "Field3"],
            "otherOption=value": ["Field1"],
            "otherOption=value2": ["Field3.Subfield1"],
        }

    def test_nested_without_parent_tags(self):
        """Only the nested record carries tags."""
        index = IndexBuilder("gorm2").build_nested(NestedModel, ".")
        assert index == {"otherOption=value2": ["Subfield1"]}

    def test_custom_separator_and_collections(self):
        """list[Optional[T]] and Optional[T] fields are descended into."""
        index = IndexBuilder("mask").build_nested(Customer, "__")
        assert index == {
            "full": ["email"],
            "hash=sha256": ["email"],
            "skip": ["addresses__city"],
            "partial": ["addresses__city__zip_code"],
        }

    def test_empty_separator(self):
        """The separator is plain concatenation."""
        index = IndexBuilder("mask").build_nested(Customer, "")
        assert index["partial"] == ("addressescityzip_code",)

    def test_self_reference_terminates(self):
        """A field of the record's own type is not descended into."""
        index = IndexBuilder("gorm2").build_nested(Node, ".")
        assert index == {
            "index": ["name"],
            "preload=true": ["parent"],
            "preload=false": ["children"],
        }

    def test_indirect_cycle_terminates(self):
        """Author -> Book -> Author stops at the second Author."""
        index = IndexBuilder("gorm2").build_nested(Author, ".")
        assert index == {
            "index": ["name", "books.title"],
            "preload=true": ["books", "books.author"],
        }

    def test_cycle_skip_logged(self, caplog):
        """Skipping a record already on the path is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="tago"):
            IndexBuilder("gorm2").build_nested(Node, ".")
        assert "already being traversed" in caplog.text

    def test_parent_recorded_before_children(self):
        """Under one instruction the parent field precedes its children."""
        index = IndexBuilder("gorm2").build_nested(MyModel, ".")
        assert index["preload=true"] == ("Field1", "Field3")
        assert index.fields("otherOption=value2") == ("Field3.Subfield1",)

    def test_sibling_records_are_not_cycles(self):
        """The same record type in two sibling fields is visited twice."""
        from dataclasses import dataclass
        from tago import tagged

        @dataclass
        class Order:
            shipping: NestedModel = tagged(gorm2="preload=true", default_factory=NestedModel)
            billing: NestedModel = tagged(gorm2="preload=true", default_factory=NestedModel)

        index = IndexBuilder("gorm2").build_nested(Order, ".")
        assert index == {
            "preload=true": ["shipping", "billing"],
            "otherOption=value2": ["shipping.Subfield1", "billing.Subfield1"],
        }


# ==============================================
# Dispatch
# ==============================================

class TestDispatcher:
    """Tests for apply() and apply_one()."""

    @pytest.fixture
    def index(self):
        return IndexBuilder("gorm2").build_nested(MyModel, ".")

    def test_apply_calls_once_per_field_in_order(self, index, calls):
        """Each mapped action runs once per listed field."""
        apply(index, {
            "preload=true": lambda field: calls.append(("preload", field)),
            "otherOption=value2": lambda field: calls.append(("other", field)),
        })
        assert sorted(calls) == [
            ("other", "Field3.Subfield1"),
            ("preload", "Field1"),
            ("preload", "Field3"),
        ]
        preload_calls = [field for label, field in calls if label == "preload"]
        assert preload_calls == ["Field1", "Field3"]

    def test_apply_ignores_unknown_instructions(self, index, calls):
        """Instructions missing from the index run nothing."""
        apply(index, {"preload=false": lambda field: calls.append(field)})
        assert calls == []

    def test_apply_ignores_unmapped_instructions(self, index, calls):
        """Index entries without an action are skipped."""
        apply(index, {})
        assert calls == []

    def test_apply_one(self, index, calls):
        """apply_one runs one action over one instruction."""
        apply_one("preload=true", index, calls.append)
        assert calls == ["Field1", "Field3"]

    def test_apply_one_absent(self, index, calls):
        """apply_one does nothing for an absent instruction."""
        apply_one("missing", index, calls.append)
        assert calls == []

    def test_apply_on_plain_dict(self, calls):
        """Any mapping of instruction to fields works."""
        apply({"a": ["x", "x"]}, {"a": calls.append})
        assert calls == ["x", "x"]

    def test_action_errors_propagate(self, index, calls):
        """An exception from an action stops dispatch and propagates."""

        def fail(field):
            calls.append(field)
            raise RuntimeError(f"cannot preload {field}")

        with pytest.raises(RuntimeError, match="cannot preload Field1"):
            apply_one("preload=true", index, fail)
        assert calls == ["Field1"]


# ==============================================
# Membership
# ==============================================

class TestMembership:
    """Tests for has_instruction()."""

    def test_present(self):
        assert has_instruction(IndexBuilder("gorm2"), MyModel, "preload=true")

    def test_nested_only_instruction_absent(self):
        """Membership uses the flat index."""
        assert not has_instruction(IndexBuilder("gorm2"), MyModel, "otherOption=value2")

    def test_value_participates(self):
        """preload alone is not preload=true."""
        assert not has_instruction(IndexBuilder("gorm2"), MyModel, "preload")


class TestPostponedAnnotationExtraction:
    """Nested extraction on records with an unresolvable hint."""

    def test_tags_and_nested_fields_survive(self):
        """Annotated tags and nested records are still read."""
        index = IndexBuilder("gorm2").build_nested(Invoice, ".")
        assert index == {
            "required": ["email"],
            "preload=true": ["line"],
            "otherOption=value2": ["line.sub"],
        }
