"""Tests for decoding raw FreshBooks payloads."""

from __future__ import annotations

import pytest

from freshbooks_convert.exceptions import PayloadDecodeError
from freshbooks_convert.response_bag import MappingResponseBag
from freshbooks_convert.response_payloads import TEXT_KEY, bag_from_json, bag_from_xml


class TestBagFromXml:
    """Tests for bag_from_xml."""

    def test_root_is_exposed_by_tag(self, invoice_list_xml) -> None:
        """bag_from_xml exposes the root element under its tag name."""
        bag = bag_from_xml(invoice_list_xml)
        response = bag.get_bag("response")
        assert response is not None
        assert response.get("status") == "ok"

    def test_namespace_and_attributes_precede_children(self, invoice_list_xml) -> None:
        """bag_from_xml orders xmlns, attributes, then child elements."""
        response = bag_from_xml(invoice_list_xml).get_bag("response")
        names = [name for name, _ in response.as_ordered_pairs()]
        assert names == ["xmlns", "status", "invoices"]
        assert response.get("xmlns") == "http://www.freshbooks.com/api/"

    def test_repeated_children_collapse_into_list(self, invoice_list_xml) -> None:
        """bag_from_xml groups repeated sibling tags."""
        invoices = bag_from_xml(invoice_list_xml).get_bag("response").get_bag("invoices")
        assert invoices.get("page") == "2"
        items = invoices.get("invoice")
        assert isinstance(items, list)
        assert [item["invoice_id"] for item in items] == ["344", "345"]

    def test_single_child_stays_nested_bag(self) -> None:
        """bag_from_xml keeps a lone child as a nested bag."""
        payload = b'<response status="ok"><client><client_id>7</client_id></client></response>'
        client = bag_from_xml(payload).get_bag("response").get_bag("client")
        assert isinstance(client, MappingResponseBag)
        assert client.get("client_id") == "7"

    def test_leaf_elements_become_text(self) -> None:
        """bag_from_xml turns childless elements into strings."""
        payload = "<response><notes></notes><amount>10.00</amount></response>"
        response = bag_from_xml(payload).get_bag("response")
        assert response.get("notes") == ""
        assert response.get("amount") == "10.00"

    def test_leaf_with_attributes_keeps_text(self) -> None:
        """bag_from_xml stores text of attributed leaves under the text key."""
        payload = '<response><amount currency="USD">10.00</amount></response>'
        amount = bag_from_xml(payload).get_bag("response").get_bag("amount")
        assert amount.get("currency") == "USD"
        assert amount.get(TEXT_KEY) == "10.00"

    def test_namespaced_children_do_not_repeat_xmlns(self, invoice_list_xml) -> None:
        """bag_from_xml only records xmlns where a namespace is introduced."""
        invoices = bag_from_xml(invoice_list_xml).get_bag("response").get_bag("invoices")
        assert invoices.get("xmlns") is None

    def test_malformed_xml_raises(self) -> None:
        """bag_from_xml raises PayloadDecodeError for broken documents."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            bag_from_xml("<response status='ok'>")
        assert exc_info.value.payload_format == "XML"


class TestBagFromJson:
    """Tests for bag_from_json."""

    def test_decodes_objects(self) -> None:
        """bag_from_json wraps the decoded object."""
        bag = bag_from_json('{"response": {"status": "ok", "page": 1}}')
        assert bag.get_bag("response").get("status") == "ok"
        assert bag.get_bag("response").get("page") == 1

    def test_accepts_bytes(self) -> None:
        """bag_from_json accepts raw bytes."""
        assert bag_from_json(b'{"a": "1"}').get("a") == "1"

    def test_preserves_key_order(self) -> None:
        """bag_from_json keeps object keys in payload order."""
        bag = bag_from_json('{"response": {"z": 1, "a": 2, "m": {"page": "3"}}}')
        names = [name for name, _ in bag.get_bag("response").as_ordered_pairs()]
        assert names == ["z", "a", "m"]

    def test_malformed_json_raises(self) -> None:
        """bag_from_json raises PayloadDecodeError for invalid JSON."""
        with pytest.raises(PayloadDecodeError):
            bag_from_json("{not json")

    def test_non_object_top_level_raises(self) -> None:
        """bag_from_json requires an object at the top level."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            bag_from_json("[1, 2]")
        assert exc_info.value.actual is list
