from __future__ import annotations

from mystery_forge.diagrams.class_diagram import (
    ClassDefinition,
    ClassDiagramBuilder,
    ClassMethod,
    ClassProperty,
    Relationship,
    format_relationship,
)


def test_class_block_layout() -> None:
    diagram = (
        ClassDiagramBuilder()
        .add_class(
            ClassDefinition(
                name="Vault",
                annotations=("<<Service>>",),
                properties=(ClassProperty(name="balance", type="Decimal", visibility="-"),),
                methods=(
                    ClassMethod(name="open", parameters="key", return_type="bool", visibility="+"),
                    ClassMethod(name="close"),
                ),
            )
        )
        .build()
    )
    assert diagram.splitlines() == [
        "classDiagram",
        "    class Vault {",
        "        <<Service>>",
        "        -Decimal balance",
        "        +open(key) bool",
        "        close()",
        "    }",
    ]


def test_last_class_definition_wins() -> None:
    diagram = (
        ClassDiagramBuilder()
        .add_class(ClassDefinition(name="A", methods=(ClassMethod(name="old"),)))
        .add_class(ClassDefinition(name="A", methods=(ClassMethod(name="new"),)))
        .build()
    )
    assert "new()" in diagram
    assert "old()" not in diagram
    assert diagram.count("class A {") == 1


def test_relationship_arrows_and_cardinality() -> None:
    assert (
        format_relationship(
            Relationship(
                from_class="Bank",
                to_class="Ledger",
                type="composition",
                label="owns",
                cardinality_from="1",
                cardinality_to="*",
            )
        )
        == 'Bank "1" *-- "*" Ledger : owns'
    )
    assert format_relationship(Relationship("A", "B", "inheritance")) == "A <|-- B"
    assert format_relationship(Relationship("A", "B", "aggregation")) == "A o-- B"
    assert format_relationship(Relationship("A", "B", "dependency")) == "A ..> B"
    assert format_relationship(Relationship("A", "B", "association")) == "A --> B"
    assert format_relationship(Relationship("A", "B", "mystery")) == "A -- B"


def test_relationships_follow_classes() -> None:
    diagram = (
        ClassDiagramBuilder()
        .add_relationship(Relationship("A", "B", "association", label="uses"))
        .add_class(ClassDefinition(name="A"))
        .build()
    )
    assert diagram.splitlines() == [
        "classDiagram",
        "    class A {",
        "    }",
        "    A --> B : uses",
    ]


def test_free_text_members_cannot_break_out_of_the_class_block() -> None:
    diagram = (
        ClassDiagramBuilder()
        .add_class(
            ClassDefinition(
                name="A",
                annotations=('<<x>>\n}\nclass "B',),
                properties=(ClassProperty(name='id\r\n"x"', type="str\nint"),),
                methods=(ClassMethod(name='run\n}\nclass "C', parameters='a\n"b"'),),
            )
        )
        .build()
    )
    member_lines = diagram.splitlines()[2:-1]
    assert member_lines == [
        "        <<x>> } class 'B",
        "        str int id 'x'",
        "        run } class 'C(a 'b')",
    ]
    assert diagram.splitlines()[-1] == "    }"
    for line in member_lines:
        assert '"' not in line
        assert "\r" not in line
