"""Contact records kept in ascending id order, with file persistence."""

from __future__ import annotations

import bisect
import json
from dataclasses import asdict, dataclass, fields, replace
from operator import attrgetter
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_FILE = "listasalva.dat"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


@dataclass(frozen=True)
class Contact:
    """A single entry of the contact list."""

    id: int
    name: str = ""
    company: str = ""
    department: str = ""
    phone: str = ""
    mobile: str = ""
    email: str = ""


_EDITABLE = tuple(f.name for f in fields(Contact) if f.name != "id")


class DuplicateIdError(ValueError):
    """Raised when a contact id is already in the list."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"contact {contact_id} already exists")
        self.contact_id = contact_id


class ContactNotFoundError(LookupError):
    """Raised when no contact has the requested id."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"contact {contact_id} not found")
        self.contact_id = contact_id


class ContactList:
    """Contacts ordered by id, each id present at most once."""

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._items: list[Contact] = []
        for contact in contacts:
            self.insert(contact)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._items))

    def __contains__(self, contact_id: object) -> bool:
        if not isinstance(contact_id, int):
            return False
        index = self._index(contact_id)
        return index < len(self._items) and self._items[index].id == contact_id

    def _index(self, contact_id: int) -> int:
        return bisect.bisect_left(self._items, contact_id, key=attrgetter("id"))

    def _position(self, contact_id: int) -> int:
        index = self._index(contact_id)
        if index < len(self._items) and self._items[index].id == contact_id:
            return index
        raise ContactNotFoundError(contact_id)

    def insert(self, contact: Contact) -> int:
        """Insert a contact in id order and return its id."""
        if contact.id in self:
            raise DuplicateIdError(contact.id)
        self._items.insert(self._index(contact.id), contact)
        return contact.id

    def remove(self, contact_id: int) -> int:
        """Remove the contact with this id and return the removed id."""
        removed = self._items.pop(self._position(contact_id))
        return removed.id

    def get(self, contact_id: int) -> Contact:
        """Return the contact with this id."""
        return self._items[self._position(contact_id)]

    def search_name(self, text: str) -> list[Contact]:
        """Return contacts whose name contains text, ignoring ASCII case."""
        return [c for c in self._items if name_matches(c.name, text)]

    def update(self, contact_id: int, **kwargs: str) -> Contact:
        """Replace the given fields; empty values leave a field unchanged."""
        unknown = set(kwargs) - set(_EDITABLE)
        if unknown:
            raise TypeError(f"unknown contact fields: {', '.join(sorted(unknown))}")
        position = self._position(contact_id)
        changes = {key: value for key, value in kwargs.items() if value}
        updated = replace(self._items[position], **changes)
        self._items[position] = updated
        return updated

    def save(self, path: str | Path) -> None:
        """Write every contact to path, one JSON object per line."""
        with open(path, "w", encoding="utf-8") as handle:
            for contact in self._items:
                handle.write(json.dumps(asdict(contact), ensure_ascii=False))
                handle.write("\n")

    @classmethod
    def load(cls, path: str | Path) -> "ContactList":
        """Read contacts from path; a missing file is created empty."""
        path = Path(path)
        if not path.exists():
            path.touch()
            return cls()
        contacts = cls()
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if line.strip():
                    contacts.insert(Contact(**json.loads(line)))
        return contacts


def name_matches(name: str, text: str) -> bool:
    """Tell whether text occurs in name, ignoring ASCII letter case."""
    return text.translate(_ASCII_LOWER) in name.translate(_ASCII_LOWER)


def format_contact(contact: Contact, heading: int) -> str:
    """Render one contact as a titled card."""
    lines = [
        f"========== Cliente {heading} ==========",
        f"Codigo: {contact.id}",
        f"Nome: {contact.name}",
        f"Empresa: {contact.company}",
        f"Departamento: {contact.department}",
        f"Telefone: {contact.phone}",
        f"Celular: {contact.mobile}",
        f"E-mail: {contact.email}",
        "=================================",
    ]
    return "\n" + "\n".join(lines)


def format_listing(contacts: Iterable[Contact]) -> str:
    """Render the whole list, or a notice when it is empty."""
    entries = [
        f"\nCodigo: {c.id}\n"
        f"Nome: {c.name}\n"
        f"Empresa: {c.company}\n"
        f"Departamento: {c.department}\n"
        f"Telefone: {c.phone}\n"
        f"Celular: {c.mobile}\n"
        f"Email: {c.email}\n\n"
        "=======================================\n"
        for c in contacts
    ]
    if not entries:
        return "A lista esta vazia"
    return "========== Lista de Contatos ==========\n" + "".join(entries)


def reset_file(path: str | Path) -> bool:
    """Delete the saved list; return whether a file was removed."""
    try:
        Path(path).unlink()
    except OSError:
        return False
    return True