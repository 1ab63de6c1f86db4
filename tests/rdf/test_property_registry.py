import logging
from io import StringIO

import pytest

from wikibase_rdf.internal_representation.datatypes import UNRESOLVED, Datatype
from wikibase_rdf.internal_representation.value_kinds import ValueKind
from wikibase_rdf.internal_representation.values import (
    EntityValue,
    GlobeValue,
    QuantityValue,
    StringValue,
    TimeValue,
)
from wikibase_rdf.rdf_builder.property_registry.registry import PropertyTypeRegistry


def test_seeded_properties_do_not_touch_network(registry, fake_fetcher):
    assert registry.get_type("P31") == Datatype.ITEM
    assert registry.get_type("P18") == Datatype.COMMONS_MEDIA
    assert registry.get_type("P569") == Datatype.TIME
    assert registry.get_type("P625") == Datatype.GLOBE_COORDINATES
    assert registry.get_type("P856") == Datatype.URL
    assert registry.get_type("P1082") == Datatype.QUANTITY
    assert fake_fetcher.urls == []


def test_bundled_snapshot_is_loaded_per_instance(resolver):
    first = PropertyTypeRegistry(resolver=resolver)
    second = PropertyTypeRegistry(resolver=resolver)

    first.set_type("P31", Datatype.STRING)

    assert len(first) == len(second) > 600
    assert second.get_type("P31") == Datatype.ITEM


def test_unknown_property_is_fetched_once(registry, fake_fetcher):
    assert "P9001" not in registry

    assert registry.get_type("P9001") == Datatype.URL
    assert fake_fetcher.calls_for("P9001") == 1

    assert registry.get_type("P9001") == Datatype.URL
    assert fake_fetcher.calls_for("P9001") == 1
    assert "P9001" in registry


def test_failed_lookup_is_remembered(registry, fake_fetcher, caplog):
    with caplog.at_level(logging.ERROR):
        assert registry.get_type("P123456") is UNRESOLVED

    assert "P123456" in caplog.text
    assert "NetworkError" in caplog.text

    assert registry.get_type("P123456") is UNRESOLVED
    assert fake_fetcher.calls_for("P123456") == 1


def test_unknown_remote_datatype_degrades_to_unresolved(registry, caplog):
    with caplog.at_level(logging.ERROR):
        result = registry.get_type("P9003")

    assert result is UNRESOLVED
    assert "UnknownTypeError" in caplog.text
    assert "nonsense-type" in caplog.text


def test_malformed_response_degrades_to_unresolved(registry, caplog):
    with caplog.at_level(logging.ERROR):
        assert registry.get_type("P9004") is UNRESOLVED
    assert "ParseError" in caplog.text


def test_set_type_overrides_seed_and_cache(registry, fake_fetcher):
    registry.set_type("P999", Datatype.TIME)
    assert registry.get_type("P999") == Datatype.TIME

    registry.set_type("P31", Datatype.TIME)
    assert registry.get_type("P31") == Datatype.TIME

    assert registry.get_type("P9001") == Datatype.URL
    registry.set_type("P9001", Datatype.TIME)
    assert registry.get_type("P9001") == Datatype.TIME
    assert fake_fetcher.calls_for("P999") == 0


def test_set_type_replaces_unresolved(registry):
    assert registry.get_type("P123456") is UNRESOLVED
    registry.set_type("P123456", Datatype.STRING)
    assert registry.get_type("P123456") == Datatype.STRING


def test_infer_type_for_definite_value_kinds(make_registry, fake_fetcher):
    registry = make_registry()

    assert (
        registry.infer_type_from_value("P1", EntityValue(value="Q5")) == Datatype.ITEM
    )
    assert (
        registry.infer_type_from_value("P2", GlobeValue(latitude=52.5, longitude=13.4))
        == Datatype.GLOBE_COORDINATES
    )
    assert (
        registry.infer_type_from_value("P3", QuantityValue(value="+42"))
        == Datatype.QUANTITY
    )
    assert (
        registry.infer_type_from_value("P4", TimeValue(value="+2001-01-01T00:00:00Z"))
        == Datatype.TIME
    )
    assert fake_fetcher.urls == []
    assert len(registry) == 0


def test_infer_globe_ignores_registry_state(make_registry):
    registry = make_registry({"P17": Datatype.ITEM})
    value = GlobeValue(latitude=0.0, longitude=0.0)

    assert registry.infer_type_from_value("P17", value) == Datatype.GLOBE_COORDINATES
    assert registry.infer_type_from_value("P7777", value) == Datatype.GLOBE_COORDINATES


def test_infer_string_uses_property_type(make_registry):
    registry = make_registry(
        {"P856": Datatype.URL, "P18": Datatype.COMMONS_MEDIA, "P1476": Datatype.STRING}
    )

    assert (
        registry.infer_type_from_value("P856", StringValue(value="https://example.org"))
        == Datatype.URL
    )
    assert (
        registry.infer_type_from_value("P18", StringValue(value="Example.jpg"))
        == Datatype.COMMONS_MEDIA
    )
    assert (
        registry.infer_type_from_value("P1476", StringValue(value="Title"))
        == Datatype.STRING
    )


def test_infer_string_defaults_to_string(make_registry, fake_fetcher):
    registry = make_registry()

    assert (
        registry.infer_type_from_value("P123456", StringValue(value="abc"))
        == Datatype.STRING
    )
    assert fake_fetcher.calls_for("P123456") == 1


def test_infer_string_resolves_online(make_registry):
    registry = make_registry()

    assert (
        registry.infer_type_from_value("P9005", StringValue(value="Example.jpg"))
        == Datatype.COMMONS_MEDIA
    )
    assert registry.get_type("P9005") == Datatype.COMMONS_MEDIA


def test_infer_with_explicit_value_kind(make_registry):
    registry = make_registry({"P856": Datatype.URL})

    assert registry.infer_type_from_value("P1", "Q5", ValueKind.ENTITY) == Datatype.ITEM
    assert registry.infer_type_from_value("P856", "https://a.b", "string") == Datatype.URL


def test_infer_rejects_unknown_value_kind(make_registry):
    registry = make_registry()

    with pytest.raises(ValueError):
        registry.infer_type_from_value("P1", "text", "monolingual")


def test_register_keeps_last_property_only(make_registry):
    registry = make_registry()
    assert registry.last_registered is None

    assert registry.register("P31") is None
    registry.register("P17")

    assert registry.last_registered == "P17"


def test_export_orders_by_property_number(make_registry):
    registry = make_registry(
        {"P9": Datatype.ITEM, "P10": Datatype.STRING, "P2": Datatype.TIME}
    )
    out = StringIO()

    count = registry.export_snapshot(out)

    assert count == 3
    assert out.getvalue().splitlines() == [
        "property_id\tdatatype",
        "P2\tTIME",
        "P9\tITEM",
        "P10\tSTRING",
    ]


def test_export_skips_unresolved_and_unknown_entries(make_registry, caplog):
    registry = make_registry({"P2": Datatype.TIME})
    registry.get_type("P123456")
    registry.set_type("P3", "not-a-datatype")
    registry.set_type("P4", "URL")
    out = StringIO()

    with caplog.at_level(logging.WARNING):
        count = registry.export_snapshot(out)

    assert count == 2
    lines = out.getvalue().splitlines()
    assert lines[1:] == ["P2\tTIME", "P4\tURL"]
    assert "P3" in caplog.text
    assert "not-a-datatype" in caplog.text
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert not any("P123456" in message for message in warnings)


def test_export_includes_resolved_properties(make_registry):
    registry = make_registry({"P31": Datatype.ITEM})
    registry.get_type("P9002")
    out = StringIO()

    registry.export_snapshot(out)

    assert out.getvalue().splitlines()[1:] == [
        "P31\tITEM",
        "P9002\tGLOBE_COORDINATES",
    ]


def test_exported_snapshot_seeds_new_registry(registry, resolver, fake_fetcher, tmp_path):
    registry.get_type("P9001")
    path = tmp_path / "property_types.tsv"
    with open(path, "w", encoding="utf-8", newline="") as f:
        registry.export_snapshot(f)

    from wikibase_rdf.rdf_builder.property_registry.snapshot import load_snapshot

    reloaded = PropertyTypeRegistry(resolver=resolver, snapshot=load_snapshot(path))

    assert reloaded.known_types() == registry.known_types()
    assert reloaded.get_type("P9001") == Datatype.URL
    assert fake_fetcher.calls_for("P9001") == 1


def test_known_types_excludes_failures(make_registry):
    registry = make_registry({"P31": Datatype.ITEM})
    registry.get_type("P123456")

    assert registry.known_types() == {"P31": Datatype.ITEM}
    assert len(registry) == 2


def test_shape_uses_resolved_type(make_registry):
    registry = make_registry({"P585": Datatype.TIME})

    shape = registry.shape("P585")

    assert shape.datatype == Datatype.TIME
    assert shape.predicates.value_node == "psv:P585"


def test_shape_of_unresolved_property(make_registry):
    registry = make_registry()

    with pytest.raises(KeyError) as exc:
        registry.shape("P123456")

    assert "P123456" in str(exc.value)
