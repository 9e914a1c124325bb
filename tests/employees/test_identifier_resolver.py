import pytest

from src.beacon_attendance.beacon_attendance.core.exceptions import DecodeError, NotFoundError
from src.beacon_attendance.beacon_attendance.employees.model import Employee
from src.beacon_attendance.beacon_attendance.employees.resolver import IdentifierResolver


def test_exact_identifier_match(employees_repo, ana):
    resolver = IdentifierResolver(employees_repo)
    assert resolver.resolve("416E61204C6F70657A") == ana


def test_exact_match_wins_even_when_identifier_is_not_hex(employees_repo):
    badge = employees_repo.add(Employee(employee_id=7, name="Badge Holder", identifier="BEACON-07"))
    assert IdentifierResolver(employees_repo).resolve("BEACON-07") == badge


def test_decoded_name_matches_case_insensitively(employees_repo, ana):
    # "ana lopez" in lower-case hex: no stored identifier matches it.
    assert IdentifierResolver(employees_repo).resolve("616e61206c6f70657a") == ana


def test_inactive_employees_are_ignored(employees_repo):
    employees_repo.add(Employee(employee_id=3, name="Mei Chen", identifier="4D6569204368656E", is_active=False))
    resolver = IdentifierResolver(employees_repo)

    with pytest.raises(NotFoundError):
        resolver.resolve("4D6569204368656E")


def test_undecodable_identifier_raises_decode_error(employees_repo):
    with pytest.raises(DecodeError):
        IdentifierResolver(employees_repo).resolve("not-hex")


def test_decodable_but_unknown_name_raises_not_found(employees_repo):
    # "Nobody"
    with pytest.raises(NotFoundError):
        IdentifierResolver(employees_repo).resolve("4E6F626F6479")
