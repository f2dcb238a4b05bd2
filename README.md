# acmecontacts

A small contact book for the terminal. Contacts are kept in ascending code
(id) order, each code at most once, and are saved to a data file when you
leave the program. The menu and its messages are in Portuguese.

## Install

    pip install .

## Running

    acmecontacts [--file PATH]

`--file` names the data file; it defaults to `listasalva.dat` in the current
directory. The same entry point can be started with
`python -m acmecontacts.cli`.

On start the saved list is loaded; if the file does not exist, a new empty
one is created. A numbered menu then lets you:

1. insert a new contact (code, name, company, department, phone, mobile,
   e-mail). The code must be an integer; the prompt repeats until it is.
   A code already in use asks whether to enter another one (`s`) or cancel
   the insert (`n`),
2. show every contact,
3. look up a contact by code,
4. search by name: a substring match on the name that ignores the case of
   ASCII letters,
5. edit a contact after confirmation: leave a field blank to keep its
   current value,
6. remove a contact after confirmation,
7. save and quit. If the list is empty the old data file is deleted instead.

Any other choice is reported as invalid and the menu is shown again. The
program also ends when input runs out. The screen is cleared between steps
only when output goes to a terminal.

## Data file

The list is written as one JSON object per line, with the keys `id`, `name`,
`company`, `department`, `phone`, `mobile` and `email`, in code order.

## Using it from Python

```python
from acmecontacts.contacts import Contact, ContactList

book = ContactList()
book.insert(Contact(id=7, name="Ana Souza", email="ana@example.com"))
book.insert(Contact(id=3, name="Bruno Lima"))

[c.id for c in book]            # [3, 7]
3 in book                       # True
book.search_name("souza")       # [Contact(id=7, name='Ana Souza', ...)]
book.update(7, company="ACME")  # returns the updated Contact
book.remove(3)                  # 3
book.save("contacts.dat")

again = ContactList.load("contacts.dat")
```

`Contact` is a frozen dataclass. `ContactList.insert` raises
`DuplicateIdError` for a code already in the list, and `get`, `remove` and
`update` raise `ContactNotFoundError` for an unknown code. `update` ignores
empty values and raises `TypeError` for a field name a contact does not have.
`ContactList.load` creates the file empty when it is missing.

The module also offers `name_matches(name, text)`, `format_contact(contact,
heading)` and `format_listing(contacts)` for the texts the menu shows, and
`reset_file(path)`, which deletes a data file and tells whether one was
removed.

To drive the menu from your own streams, build a `Session` from
`acmecontacts.cli` with a `ContactList`, input and output streams and the
data file path, then call `run()`.

## Limits

There is a single list per data file, no locking against two programs using
the same file at once, and no import or export in other formats.

## Tests

    pip install .[test]
    pytest