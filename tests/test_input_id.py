"""End-to-end tests for the InputId value object."""

from __future__ import annotations

import pytest

from inputid import ConfigurationError, InputId, TypeMismatchError


def test_named_control_in_strict_document(html5_soup) -> None:
    soup = html5_soup("")

    assert str(InputId(name="username", owner_document=soup)) == "username"


def test_prefix_is_joined_with_separator(html5_soup) -> None:
    soup = html5_soup("")

    input_id = InputId(name="username", prefix="personal-info", owner_document=soup)

    assert str(input_id) == "personal-info_username"


def test_value_is_used_only_for_choice_controls(html5_soup) -> None:
    soup = html5_soup("")

    radio = InputId(name="color", value="red", type="radio", owner_document=soup)
    text = InputId(name="color", value="red", type="text", owner_document=soup)

    assert str(radio) == "color_red"
    assert str(text) == "color"


def test_unicode_name_in_strict_and_legacy_documents(html5_soup, legacy_soup) -> None:
    name = "çÃó-Çªº亜[123][]"

    assert str(InputId(name=name, owner_document=html5_soup(""))) == "cao-cao亜-123"
    assert str(InputId(name=name, owner_document=legacy_soup(""))) == "cao-cao-123"
    assert str(InputId(name="1" + name, owner_document=legacy_soup(""))) == "f_1cao-cao-123"


def test_lxml_documents_work_the_same(html5_tree, legacy_tree) -> None:
    name = "çÃó-Çªº亜[123][]"

    assert str(InputId(name=name, owner_document=html5_tree(""))) == "cao-cao亜-123"
    assert str(InputId(name="1" + name, owner_document=legacy_tree(""))) == "f_1cao-cao-123"


def test_unnamed_elements_get_fallback_with_suffixes(html5_soup) -> None:
    soup = html5_soup("<div></div>")
    generated = []
    for _ in range(3):
        element = soup.new_tag("input")
        soup.div.append(element)
        element["id"] = str(InputId(element))
        generated.append(element["id"])

    assert generated == ["f", "f_1", "f_2"]


def test_same_base_in_sequence_gets_increasing_suffixes(html5_soup) -> None:
    soup = html5_soup('<div><input name="email"><input name="email"><input name="email"></div>')

    for element in soup.find_all("input"):
        element["id"] = str(InputId(element))

    assert [element["id"] for element in soup.find_all("input")] == ["email", "email_1", "email_2"]


def test_element_keeps_its_own_identifier(html5_soup) -> None:
    soup = html5_soup('<input id="username" name="username">')

    assert str(InputId(soup.input)) == "username"
    assert str(InputId(soup.input)) == "username"


def test_document_bound_id_avoids_existing_ids(html5_soup) -> None:
    soup = html5_soup('<input id="username">')

    assert str(InputId(name="username", owner_document=soup, force_uniqueness=True)) == "username_1"
    assert str(InputId(name="username", owner_document=soup)) == "username"


def test_identifier_is_computed_once(html5_soup) -> None:
    soup = html5_soup('<div></div>')
    input_id = InputId(name="city", owner_document=soup, force_uniqueness=True)

    assert not input_id.resolved
    assert input_id.to_string() == "city"
    assert input_id.resolved

    soup.div["id"] = "city"

    assert str(input_id) == "city"
    assert str(InputId(name="city", owner_document=soup, force_uniqueness=True)) == "city_1"


def test_instances_are_immutable(html5_soup) -> None:
    input_id = InputId(name="city", owner_document=html5_soup(""))

    with pytest.raises(AttributeError):
        input_id._string = "other"
    with pytest.raises(AttributeError):
        input_id.name = "other"
    str(input_id)
    with pytest.raises(AttributeError):
        input_id._options = None


def test_copies_change_one_input(html5_soup) -> None:
    soup = html5_soup("")
    base = InputId(name="color", value="red", type="text", owner_document=soup)

    assert str(base.with_type("radio")) == "color_red"
    assert str(base.with_name("shade")) == "shade"
    assert str(base.with_value("blue").with_type("checkbox")) == "color_blue"
    assert str(base.with_prefix("paint")) == "paint_color"
    assert str(base) == "color"


def test_copies_do_not_carry_the_element(html5_soup) -> None:
    soup = html5_soup('<input id="email" name="email">')
    source = InputId(soup.input)

    copy = source.with_value("x")

    assert copy.options.element is None
    assert copy.to_dict()["owner_document"] is source.options.document
    # The copy is owned by the document, so the element's id counts as taken.
    assert str(copy) == "email_1"


def test_uniqueness_toggles(html5_soup) -> None:
    soup = html5_soup('<input id="email">')
    base = InputId(name="email", owner_document=soup)

    assert str(base.force_uniqueness()) == "email_1"
    assert str(base.force_uniqueness().ignore_uniqueness()) == "email"


def test_to_dict_excludes_the_element(html5_soup) -> None:
    soup = html5_soup('<input type="radio" name="color" value="red">')

    data = InputId(soup.input, prefix="form").to_dict()

    assert "element" not in data
    assert data["name"] == "color"
    assert data["value"] == "red"
    assert data["type"] == "radio"
    assert data["prefix"] == "form"
    assert data["separator"] == "_"
    assert data["fallback"] == "f"
    assert data["force_uniqueness"] is True


def test_get_element_and_labels(html5_soup) -> None:
    soup = html5_soup(
        '<label for="email">E-mail</label><input id="email" name="email">'
        '<label>Again <input name="again"></label>'
    )

    input_id = InputId(soup.find("input", attrs={"name": "email"}))

    assert input_id.get_element() is soup.find(id="email")
    assert [label.get_text() for label in input_id.get_labels()] == ["E-mail"]


def test_labels_empty_when_element_is_not_in_document(html5_soup) -> None:
    input_id = InputId(name="ghost", owner_document=html5_soup(""))

    assert input_id.get_element() is None
    assert input_id.get_labels() == []


def test_construction_errors_are_raised_eagerly(html5_soup) -> None:
    soup = html5_soup("<p>text</p>")

    with pytest.raises(ConfigurationError):
        InputId(name="a", owner_document=soup, fallback="")
    with pytest.raises(ConfigurationError):
        InputId(name="a", owner_document=soup, separator="/")
    with pytest.raises(ConfigurationError):
        InputId(name="a", owner_document="not a document")
    with pytest.raises(TypeMismatchError):
        InputId(soup.p.string)


def test_repr_does_not_resolve(html5_soup) -> None:
    input_id = InputId(name="city", owner_document=html5_soup(""))

    assert "name='city'" in repr(input_id)
    assert not input_id.resolved
