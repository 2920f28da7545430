from pytest_archon import archrule


def test_translator_independence() -> None:
    """
    The translator must not import any concrete builder backend.
    It only talks to the builder protocols.
    """
    (
        archrule("translator_is_independent")
        .match("query_translator*")
        .should_not_import("query_translator_sqlalchemy*")
        .should_not_import("sqlalchemy*")
        .check("query_translator")
    )


def test_ports_isolation() -> None:
    """
    Ports (protocols) are the lowest level.
    They must not import the translations or the bundled adapters.
    """
    (
        archrule("ports_isolation")
        .match("query_translator.ports*")
        .should_not_import("query_translator.adapters*")
        .should_not_import("query_translator.filtering*")
        .should_not_import("query_translator.ordering*")
        .should_not_import("query_translator.pagination*")
        .should_not_import("query_translator.translator*")
        .check("query_translator")
    )


def test_translations_ignore_adapters() -> None:
    """
    Translation modules work against any builder.
    Adapters are implementations and must not be referenced by them.
    """
    (
        archrule("translations_adapter_free")
        .match("query_translator.filtering*")
        .match("query_translator.ordering*")
        .match("query_translator.pagination*")
        .match("query_translator.keys*")
        .match("query_translator.translator*")
        .should_not_import("query_translator.adapters*")
        .check("query_translator")
    )


def test_sqlalchemy_backend_layering() -> None:
    """
    The SQLAlchemy builder depends on the translator's vocabulary
    (operators, exceptions, ports) but never on the in-memory adapter.
    """
    (
        archrule("sqlalchemy_backend_layering")
        .match("query_translator_sqlalchemy*")
        .should_not_import("query_translator.adapters*")
        .check("query_translator_sqlalchemy")
    )
