import pytest

from acmecontacts.contacts import (
    Contact,
    ContactList,
    ContactNotFoundError,
    DuplicateIdError,
    format_contact,
    format_listing,
    name_matches,
    reset_file,
)


def make(contact_id, name="Ana Silva"):
    return Contact(
        id=contact_id,
        name=name,
        company="ACME",
        department="TI",
        phone="ext-1",
        mobile="ext-2",
        email="ana@example.com",
    )


def test_insert_keeps_ids_sorted():
    contacts = ContactList([make(5), make(1), make(3)])
    assert [c.id for c in contacts] == [1, 3, 5]
    assert len(contacts) == 3


def test_insert_returns_id():
    contacts = ContactList()
    assert contacts.insert(make(7)) == 7
    assert 7 in contacts


def test_insert_duplicate_raises():
    contacts = ContactList([make(2)])
    with pytest.raises(DuplicateIdError):
        contacts.insert(make(2, "Other"))
    assert len(contacts) == 1


def test_remove_returns_id_and_drops_contact():
    contacts = ContactList([make(1), make(2)])
    assert contacts.remove(1) == 1
    assert 1 not in contacts
    assert [c.id for c in contacts] == [2]


def test_remove_missing_raises():
    with pytest.raises(ContactNotFoundError):
        ContactList([make(1)]).remove(9)


def test_get_and_missing():
    contacts = ContactList([make(4, "Bruno")])
    assert contacts.get(4).name == "Bruno"
    with pytest.raises(ContactNotFoundError):
        contacts.get(5)


def test_search_name_ignores_case():
    contacts = ContactList([make(1, "Ana Silva"), make(2, "Bruno Costa")])
    assert [c.id for c in contacts.search_name("SILVA")] == [1]
    assert contacts.search_name("zz") == []


def test_name_matches_rules():
    assert name_matches("Ana Silva", "na si")
    assert name_matches("Ana", "")
    assert not name_matches("Ana", "Anabela")


def test_update_ignores_blank_values():
    contacts = ContactList([make(1)])
    updated = contacts.update(1, name="Beatriz", company="")
    assert updated.name == "Beatriz"
    assert updated.company == "ACME"
    assert contacts.get(1) == updated


def test_update_unknown_field_raises():
    contacts = ContactList([make(1)])
    with pytest.raises(TypeError):
        contacts.update(1, id=3)


def test_update_missing_raises():
    with pytest.raises(ContactNotFoundError):
        ContactList().update(1, name="X")


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "list.dat"
    original = ContactList([make(3), make(1, "Ção")])
    original.save(path)
    loaded = ContactList.load(path)
    assert list(loaded) == list(original)


def test_load_missing_creates_empty_file(tmp_path):
    path = tmp_path / "new.dat"
    loaded = ContactList.load(path)
    assert len(loaded) == 0
    assert path.exists()


def test_reset_file(tmp_path):
    path = tmp_path / "list.dat"
    path.write_text("")
    assert reset_file(path) is True
    assert not path.exists()
    assert reset_file(path) is False


def test_format_contact_lines():
    text = format_contact(make(8), 8)
    assert text.startswith("\n========== Cliente 8 ==========")
    assert "\nCodigo: 8\n" in text
    assert "\nE-mail: ana@example.com\n" in text
    assert text.endswith("=================================")


def test_format_listing():
    assert format_listing([]) == "A lista esta vazia"
    text = format_listing(ContactList([make(1), make(2)]))
    assert text.startswith("========== Lista de Contatos ==========\n")
    assert text.count("Email: ana@example.com") == 2
    assert text.index("Codigo: 1") < text.index("Codigo: 2")