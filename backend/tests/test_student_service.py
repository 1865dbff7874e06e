from datetime import date, timedelta

import pytest

from student_management import models
from student_management.repositories import StudentRepository
from student_management.services import StudentService


def _add(session, nom, born=None, prenom=None):
    return StudentService(session).save(models.Student(nom=nom, prenom=prenom, date_naissance=born))


def test_save_assigns_id(session):
    s = _add(session, 'Mido')
    assert s.id is not None
    assert StudentService(session).find_by_id(s.id).nom == 'Mido'


def test_save_with_existing_id_updates(session):
    s = _add(session, 'Mido', prenom='Ali')
    svc = StudentService(session)
    updated = svc.save(models.Student(id=s.id, nom='Martin', prenom='Ali'))
    assert updated.id == s.id
    assert updated.nom == 'Martin'
    assert svc.count_students() == 1


def test_save_with_unknown_id_inserts(session):
    svc = StudentService(session)
    s = svc.save(models.Student(id=999, nom='Mido'))
    assert svc.count_students() == 1
    assert svc.find_by_id(s.id) is not None


def test_save_rejects_future_birth_date(session):
    with pytest.raises(ValueError):
        _add(session, 'Mido', born=date.today() + timedelta(days=1))
    assert StudentService(session).count_students() == 0


def test_delete_reports_whether_row_existed(session):
    student_id = _add(session, 'Mido').id
    svc = StudentService(session)
    assert svc.delete(student_id) is True
    assert svc.delete(student_id) is False
    assert svc.find_all() == []


def test_find_all_is_stable_without_mutation(session):
    _add(session, 'A')
    _add(session, 'B')
    svc = StudentService(session)
    first = [s.id for s in svc.find_all()]
    second = [s.id for s in svc.find_all()]
    assert first == second
    assert len(first) == 2


def test_count_by_year_groups_birth_years(session):
    _add(session, 'A', born=date(2001, 1, 10))
    _add(session, 'B', born=date(2001, 12, 31))
    _add(session, 'C', born=date(1999, 6, 1))
    _add(session, 'D')
    rows = StudentService(session).find_nbr_student_by_year()
    assert [(r.year, r.total) for r in rows] == [(1999, 1), (2001, 2)]


def test_count_by_year_empty(session):
    assert StudentRepository(session).count_by_birth_year() == []
