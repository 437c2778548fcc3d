"""Tests for filter predicates and the `filters` combinator."""

import json

import pytest
from urllib.parse import parse_qs

from podman_api.core.domain.models import ContainerStatus, PodStatus
from podman_api.core.opts import (
    ContainerListFilter,
    ContainerListOpts,
    ImageListFilter,
    ImageSearchFilter,
    NetworkListFilter,
    PodListFilter,
    SecretListFilter,
    VolumeListFilter,
    VolumeListOpts,
    VolumePruneFilter,
)
from podman_api.core.opts.filters import Equality, FilterItem, encode_filters, group_filters


def _decoded_filters(opts) -> dict:
    query = parse_qs(opts.serialize())
    return json.loads(query["filters"][0])


class TestFilterItem:
    def test_positive_item(self):
        item = VolumeListFilter.label_key_val("env", "prod").query_item()
        assert item == FilterItem("label", "env=prod", Equality.EQUAL)
        assert item.as_pair() == ("label", "env=prod")

    def test_negated_label_uses_bang_key(self):
        item = ContainerListFilter.no_label_key("env").query_item()
        assert item.equality is Equality.NOT_EQUAL
        assert item.as_pair() == ("label!", "env")
        assert str(item) == "label!=env"

    def test_negated_label_key_val(self):
        pair = NetworkListFilter.no_label_key_val("tier", "db").query_item().as_pair()
        assert pair == ("label!", "tier=db")

    def test_enum_values_use_wire_value(self):
        assert ContainerListFilter.status(ContainerStatus.RUNNING).query_item().value == "running"
        assert PodListFilter.status("degraded").query_item().value == PodStatus.DEGRADED.value

    def test_bool_and_int_values(self):
        assert ImageListFilter.dangling(True).query_item().value == "true"
        assert ImageSearchFilter.stars(3).query_item().as_pair() == ("stars", "3")
        assert PodListFilter.container_number(2).query_item().as_pair() == ("ctr-number", "2")

    def test_image_reference_renders_name_and_tag(self):
        assert ImageListFilter.reference("alpine", "3.18").query_item().value == "alpine:3.18"
        assert ImageListFilter.reference("alpine").query_item().value == "alpine"

    def test_predicates_compare_by_term(self):
        assert SecretListFilter.name("db") == SecretListFilter.name("db")
        assert SecretListFilter.name("db") != SecretListFilter.id("db")


class TestCombinator:
    def test_same_key_values_are_all_kept(self):
        opts = (
            VolumeListOpts.builder()
            .filter([VolumeListFilter.label_key("env"), VolumeListFilter.label_key_val("env", "prod")])
            .build()
        )
        assert _decoded_filters(opts) == {"label": ["env", "env=prod"]}

    def test_groups_in_first_seen_key_order(self):
        grouped = group_filters(
            [
                ContainerListFilter.name("web"),
                ContainerListFilter.label_key("a"),
                ContainerListFilter.name("db"),
            ]
        )
        assert list(grouped) == ["name", "label"]
        assert grouped["name"] == ["web", "db"]

    def test_filters_text_is_compact(self):
        text = encode_filters([ContainerListFilter.exited(0), ContainerListFilter.status("exited")])
        assert text == '{"exited":["0"],"status":["exited"]}'

    def test_no_predicates_means_no_filters_key(self):
        opts = ContainerListOpts.builder().all(True).filter([]).build()
        assert opts.serialize() == "all=true"

    def test_empty_collection_removes_earlier_filters(self):
        builder = ContainerListOpts.builder().filter([ContainerListFilter.name("web")])
        opts = builder.filter([]).build()
        assert opts.get("filters") is None
        assert opts.serialize() is None

    def test_second_call_replaces_first(self):
        opts = (
            ContainerListOpts.builder()
            .filter([ContainerListFilter.name("web")])
            .filter([ContainerListFilter.pod("p1")])
            .build()
        )
        assert _decoded_filters(opts) == {"pod": ["p1"]}

    def test_accepts_any_iterable(self):
        predicates = (VolumeListFilter.driver(d) for d in ("local", "nfs"))
        opts = VolumeListOpts.builder().filter(predicates).build()
        assert _decoded_filters(opts) == {"driver": ["local", "nfs"]}

    def test_rejects_predicates_of_another_resource(self):
        builder = VolumeListOpts.builder()
        with pytest.raises(TypeError, match="VolumeListFilter"):
            builder.filter([VolumeListFilter.name("data"), ContainerListFilter.pod("p1")])
        assert builder.build().get("filters") is None

    def test_rejects_sibling_predicate_sets(self):
        with pytest.raises(TypeError):
            VolumeListOpts.builder().filter([VolumePruneFilter.until("24h")])


class TestClosedPredicateSets:
    def test_direct_construction_is_refused(self):
        with pytest.raises(TypeError, match="named constructors"):
            VolumeListFilter("bogus", "x")

    def test_named_constructors_build_the_subclass(self):
        predicate = PodListFilter.label_key("app")
        assert type(predicate) is PodListFilter
        assert predicate.query_item().as_pair() == ("label", "app")
