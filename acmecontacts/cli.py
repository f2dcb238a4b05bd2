"""Interactive menu for managing the contact list."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from acmecontacts.contacts import (
    DEFAULT_FILE,
    Contact,
    ContactList,
    ContactNotFoundError,
    DuplicateIdError,
    format_contact,
    format_listing,
    reset_file,
)

_INT = re.compile(r"\s*([+-]?\d+)")
_PAUSE = "\n\n\n\n\n\n\n\n\nPressione ENTER para continuar..."

MENU = (
    "========== Lista de contatos ACME S.A ==========\n\n"
    "MENU: \n\n"
    "1 - Inserir novo contato.\n"
    "2 - Exibir lista de contatos.\n"
    "3 - Buscar contato por codigo.\n"
    "4 - Buscar contato por nome.\n"
    "5 - Editar contato.\n"
    "6 - Remover contato.\n"
    "7 - Encerrar programa.\n"
    "\nSelecione uma opcao: "
)

_DATA_PROMPTS = (
    ("name", "Nome: "),
    ("company", "Empresa: "),
    ("department", "Departamento: "),
    ("phone", "Telefone: "),
    ("mobile", "Celular: "),
    ("email", "Email: "),
)

_EDIT_LABELS = (
    ("name", "nome"),
    ("company", "empresa"),
    ("department", "departamento"),
    ("phone", "telefone"),
    ("mobile", "celular"),
    ("email", "e-mail"),
)


def _parse_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


class Session:
    """One run of the menu over a contact list."""

    def __init__(
        self,
        contacts: ContactList,
        stdin: TextIO,
        stdout: TextIO,
        path: str | Path = DEFAULT_FILE,
    ) -> None:
        self.contacts = contacts
        self._in = stdin
        self._out = stdout
        self.path = Path(path)

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read()

    def _answer(self, prompt: str) -> str:
        return self._ask(prompt).strip()[:1].lower()

    def _clear(self) -> None:
        isatty = getattr(self._out, "isatty", None)
        if isatty is not None and isatty():
            self._write("\033[2J\033[H")

    def _pause(self, prompt: str = _PAUSE) -> None:
        self._write(prompt)
        try:
            self._read()
        except EOFError:
            pass
        self._clear()

    def run(self) -> None:
        """Show the menu until the user quits or input ends."""
        actions = {
            1: self.add_contact,
            2: self.show_all,
            3: self.find_by_id,
            4: self.find_by_name,
            5: self.edit_contact,
            6: self.remove_contact,
        }
        while True:
            try:
                option = _parse_int(self._ask(MENU))
                self._clear()
                if option == 7:
                    self.finish()
                    return
                action = actions.get(option)
                if action is None:
                    self._write("Opcao invalida!!")
                    self._pause()
                else:
                    action()
            except EOFError:
                return

    def _collect(self) -> Contact:
        while True:
            contact_id = _parse_int(self._ask("Codigo: "))
            if contact_id is not None:
                break
            self._write("Entrada invalida! Insira um numero inteiro para o codigo.\n")
        data = {key: self._ask(prompt) for key, prompt in _DATA_PROMPTS}
        return Contact(id=contact_id, **data)

    def _insert(self, contact: Contact) -> int | None:
        while True:
            try:
                return self.contacts.insert(contact)
            except DuplicateIdError:
                answer = self._answer(
                    "Codigo inserido ja existente, deseja inserir outro codigo? s/n\n"
                )
                if answer == "n":
                    return None
                if answer == "s":
                    new_id = _parse_int(self._ask("Digite o codigo novo: "))
                    if new_id is not None:
                        contact = Contact(**{**contact.__dict__, "id": new_id})

    def add_contact(self) -> None:
        """Ask for a new contact and insert it."""
        inserted = self._insert(self._collect())
        self._clear()
        if inserted is None:
            self._write("Nao foi possivel inserir...")
        else:
            self._write(f"Contato {inserted} inserido com sucesso!")
        self._pause()

    def show_all(self) -> None:
        """Print every contact."""
        self._write(format_listing(self.contacts))
        self._pause("\nPressione ENTER para continuar...")

    def _lookup(self, prompt: str) -> tuple[int, Contact] | None:
        code = _parse_int(self._ask(prompt))
        if code is None:
            return None
        try:
            contact = self.contacts.get(code)
        except ContactNotFoundError:
            return None
        self._clear()
        self._write(format_contact(contact, code))
        return code, contact

    def _not_found(self) -> None:
        self._write("Cliente nao localizado...\n")
        self._write("Retornando ao menu...")
        self._pause()

    def find_by_id(self) -> None:
        """Show the contact with the code the user enters."""
        if self._lookup("Digite o codigo do cliente que deseja consultar: ") is None:
            self._write("Cliente nao localizado...")
        self._pause()

    def find_by_name(self) -> None:
        """Show every contact whose name contains the text the user enters."""
        text = self._ask("Digite o nome/sobrenome do cliente: ")
        if not len(self.contacts):
            self._write("Lista vazia ou invalida.\n")
        else:
            matches = self.contacts.search_name(text)
            for contact in matches:
                self._write(format_contact(contact, contact.id) + "\n")
            if not matches:
                self._write(
                    "Não foi achado nenhum cliente com o nome que inseriu: "
                    f"{text}\n"
                )
        self._pause()

    def edit_contact(self) -> None:
        """Change fields of a contact after confirmation."""
        found = self._lookup("Digite o codigo do cliente que deseja editar: ")
        if found is None:
            self._not_found()
            return
        code, _ = found
        answer = self._answer("\n\nDeseja mesmo editar esse cliente? s/n\n")
        if answer == "s":
            changes = {
                key: self._ask(
                    f"Insira o novo {label} (deixe em branco para permanecer igual): "
                )
                for key, label in _EDIT_LABELS
            }
            self.contacts.update(code, **changes)
            self._write("Dados alterados com sucesso")
            self._pause("\nPressione ENTER para continuar...")
        elif answer == "n":
            self._write("\nCliente nao editado...\n\n")
            self._write("Retornando ao menu...")
            self._pause()
        else:
            self._write("Opcao invalida!")
            self._write("Retornando ao menu...")
            self._pause()

    def remove_contact(self) -> None:
        """Delete a contact after confirmation."""
        found = self._lookup("Digite o codigo do cliente que deseja remover: ")
        if found is None:
            self._not_found()
            return
        code, _ = found
        answer = self._answer("\n\nDeseja mesmo remover esse cliente? s/n\n")
        if answer == "s":
            try:
                self.contacts.remove(code)
                self._write(f"\nCliente {code} removido!")
            except ContactNotFoundError:
                self._write("\nNao foi possivel remover")
        elif answer == "n":
            self._write("\nCliente nao removido...\n")
            self._write("Retornando ao menu...")
        else:
            self._write("Opcao invalida!\n")
            self._write("Retornando ao menu...")
        self._pause()

    def finish(self) -> None:
        """Save the list, or delete the saved file when the list is empty."""
        count = len(self.contacts)
        if count == 0:
            self._write("Nenhum contato salvo.\n")
            self._write("Excluindo possiveis contatos em outras sessoes...\n")
            if reset_file(self.path):
                self._write("Antigos salvamentos excluidos com sucesso.\n")
            else:
                self._write("Falha na exclusao. Pode nao haver arquivo antigo.\n")
            return
        self._write(f"Salvando {count} contatos")
        try:
            self.contacts.save(self.path)
        except OSError:
            self._write("Erro ao salvar a lista\n")
            return
        self._write("\nLista salva com sucesso!\n")


def _open_list(path: Path, out: TextIO) -> ContactList:
    if path.exists():
        contacts = ContactList.load(path)
        out.write("Lista carregada com sucesso!\n")
    else:
        out.write("Nenhum dado existente, gerando nova lista\n")
        contacts = ContactList.load(path)
        out.write("Nova lista criada com sucesso.\n")
    return contacts


def main(argv: list[str] | None = None) -> int:
    """Start the interactive contact list."""
    parser = argparse.ArgumentParser(
        prog="acmecontacts", description="Manage the ACME contact list."
    )
    parser.add_argument(
        "--file", default=DEFAULT_FILE, help="file the list is kept in"
    )
    args = parser.parse_args(argv)
    path = Path(args.file)
    stdin, stdout = sys.stdin, sys.stdout
    contacts = _open_list(path, stdout)
    session = Session(contacts, stdin, stdout, path)
    if len(contacts):
        stdout.write(f"Carregado {len(contacts)} contatos")
    else:
        stdout.write("A lista esta vazia")
    session._pause()
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())