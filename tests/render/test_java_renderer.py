"""Tests for JavaRenderer output and file placement."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any

import pytest

from json_type_infer.api import infer_tree
from json_type_infer.protocols import TypeRenderer
from json_type_infer.render import JavaRenderer
from json_type_infer.typetree import CompositeType, TypeTree

PERSON_JAVA = """\
package com.example;

import java.util.List;

public class Person {
  String name;

  Integer age;

  List<String> tags;

  Address address;

  List<ItemsElem> items;

  public static class Address {
    String city;
  }

  public static class ItemsElem {
    Integer id;
  }
}
"""


@pytest.fixture
def renderer() -> JavaRenderer:
    return JavaRenderer()


class TestPersonExample:
    def test_full_output(
        self, renderer: JavaRenderer, person_document: dict[str, Any]
    ) -> None:
        tree = infer_tree(person_document, "Person")
        assert renderer.render(tree) == PERSON_JAVA

    def test_relative_path(
        self, renderer: JavaRenderer, person_document: dict[str, Any]
    ) -> None:
        tree = infer_tree(person_document, "Person")
        assert renderer.relative_path(tree) == PurePosixPath(
            "com/example/Person.java"
        )

    def test_satisfies_protocol(self, renderer: JavaRenderer) -> None:
        assert isinstance(renderer, TypeRenderer)


class TestTypeMapping:
    def test_boxed_scalars(self, renderer: JavaRenderer) -> None:
        tree = infer_tree(
            {"i": 1, "l": 2**40, "b": True, "d": 1.5, "s": "x", "n": None}, "S"
        )
        source = renderer.render(tree)
        for line in (
            "  Integer i;",
            "  Long l;",
            "  Boolean b;",
            "  Double d;",
            "  String s;",
            "  Object n;",
        ):
            assert line in source

    def test_nested_lists(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"m": [[1]], "e": []}, "M"))
        assert "  List<List<Integer>> m;" in source
        assert "  List<Object> e;" in source

    def test_no_list_import_without_lists(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"a": 1}, "A"))
        assert "import" not in source
        assert source == "package com.example;\n\npublic class A {\n  Integer a;\n}\n"

    def test_empty_class(self, renderer: JavaRenderer) -> None:
        source = renderer.render(TypeTree(CompositeType("Empty")))
        assert source.endswith("public class Empty {\n}\n")

    def test_deep_nesting_indentation(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"a": {"b": {"c": 1}}}, "R"))
        assert "  public static class A {\n    B b;\n" in source
        assert "    public static class B {\n      Integer c;\n    }\n" in source


class TestIdentifiers:
    def test_invalid_key_gets_json_property(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"first-name": "a", "ok": 1}, "P"))
        assert "import com.fasterxml.jackson.annotation.JsonProperty;" in source
        assert '  @JsonProperty("first-name")\n  String firstName;' in source
        assert "  Integer ok;" in source

    def test_keyword_key(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"class": "a"}, "P"))
        assert '@JsonProperty("class")\n  String class_;' in source

    def test_invalid_derived_class_name(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"home-address": {"x": 1}}, "P"))
        assert "  HomeAddress homeAddress;" in source
        assert "public static class HomeAddress {" in source

    def test_imports_sorted(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"a-b": [1]}, "P"))
        imports = [line for line in source.splitlines() if line.startswith("import")]
        assert imports == sorted(imports)
        assert len(imports) == 2

    def test_sibling_collision_emitted_as_is(self, renderer: JavaRenderer) -> None:
        source = renderer.render(infer_tree({"address": {}, "Address": {}}, "P"))
        assert source.count("public static class Address {") == 2


class TestPackage:
    def test_custom_package(self) -> None:
        renderer = JavaRenderer(package_name="org.acme.model")
        tree = TypeTree(CompositeType("Foo"))
        assert renderer.render(tree).startswith("package org.acme.model;\n\n")
        assert renderer.relative_path(tree) == PurePosixPath("org/acme/model/Foo.java")

    def test_default_package(self) -> None:
        renderer = JavaRenderer(package_name="")
        tree = TypeTree(CompositeType("Foo"))
        assert renderer.render(tree) == "public class Foo {\n}\n"
        assert renderer.relative_path(tree) == PurePosixPath("Foo.java")

    @pytest.mark.parametrize("name", ["com..example", "com.class", "1com", "com-x"])
    def test_invalid_package(self, name: str) -> None:
        with pytest.raises(ValueError, match="package"):
            JavaRenderer(package_name=name)

    def test_custom_indent(self) -> None:
        renderer = JavaRenderer(package_name="", indent="\t")
        source = renderer.render(infer_tree({"a": 1}, "A"))
        assert source == "public class A {\n\tInteger a;\n}\n"
