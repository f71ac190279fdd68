"""
Tests for the company and job repositories, called directly with a session.
"""

import pytest

from app.core.exceptions import BadRequestError, NotFoundError
from app.crud import company as company_crud
from app.crud import job as job_crud
from app.schemas.company import CompanyCreateRequest
from app.schemas.job import JobCreateRequest


class _EmptyResult:
    def mappings(self):
        return []


def capture_execute(monkeypatch, repository):
    """Record the (sql, values) a repository sends to the database."""
    executed = []

    def fake_execute(db, sql, values=()):
        executed.append((sql, list(values)))
        return _EmptyResult()

    monkeypatch.setattr(repository, "execute", fake_execute)
    return executed


class TestCompanyRepository:

    def test_create(self, db_session, seed):
        company = company_crud.create(db_session, CompanyCreateRequest(
            handle="new", name="New", description="New Description", numEmployees=1, logoUrl="http://new.img",
        ))

        assert company.handle == "new"
        assert company.num_employees == 1

    def test_find_all_unfiltered(self, db_session, seed):
        companies = company_crud.find_all(db_session)

        assert [c["handle"] for c in companies] == ["c1", "c2", "c3"]
        assert companies[0] == {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "num_employees": 1,
            "logo_url": "http://c1.img",
        }

    def test_find_all_max_employees(self, db_session, seed):
        companies = company_crud.find_all(db_session, {"maxEmployees": 2})

        assert [c["handle"] for c in companies] == ["c1", "c2"]

    def test_find_all_empty_filters(self, db_session, seed):
        with pytest.raises(BadRequestError):
            company_crud.find_all(db_session, {})

    @pytest.mark.requires_postgres
    def test_find_all_name_like_is_case_insensitive(self, db_session, seed):
        companies = company_crud.find_all(db_session, {"nameLike": "c", "minEmployees": 2})

        assert [c["handle"] for c in companies] == ["c2", "c3"]

    def test_find_all_name_like_statement(self, db_session, monkeypatch):
        executed = capture_execute(monkeypatch, company_crud)

        company_crud.find_all(db_session, {"nameLike": "net", "maxEmployees": 5})

        sql, values = executed[0]
        assert 'WHERE "name" ILIKE $1 AND "num_employees" <= $2' in sql
        assert values == ["%net%", 5]

    def test_update_translates_columns(self, db_session, seed):
        company = company_crud.update(db_session, "c1", {"numEmployees": 7, "logoUrl": None})

        assert company["num_employees"] == 7
        assert company["logo_url"] is None
        assert company["name"] == "C1"

    def test_update_not_found(self, db_session, seed):
        with pytest.raises(NotFoundError):
            company_crud.update(db_session, "nope", {"name": "x"})

    def test_update_no_data(self, db_session, seed):
        with pytest.raises(BadRequestError):
            company_crud.update(db_session, "c1", {})

    def test_remove_not_found(self, db_session, seed):
        with pytest.raises(NotFoundError):
            company_crud.remove(db_session, "nope")


class TestJobRepository:

    def test_create(self, db_session, seed):
        job = job_crud.create(db_session, JobCreateRequest(
            title="Test", salary=100, equity=0.1, companyHandle="c1",
        ))

        assert job.id is not None
        assert job.company_handle == "c1"

    def test_create_unknown_company(self, db_session, seed):
        with pytest.raises(BadRequestError):
            job_crud.create(db_session, JobCreateRequest(title="Test", companyHandle="nope"))

    def test_find_all_flag_and_bound(self, db_session, seed):
        jobs = job_crud.find_all(db_session, {"minSalary": 100, "hasEquity": True})

        assert [j["title"] for j in jobs] == ["j1", "j2"]

    def test_find_all_equity_false(self, db_session, seed):
        jobs = job_crud.find_all(db_session, {"hasEquity": False})

        assert len(jobs) == 3

    def test_find_all_title_statement(self, db_session, monkeypatch):
        executed = capture_execute(monkeypatch, job_crud)

        job_crud.find_all(db_session, {"title": "j2", "minSalary": 2, "hasEquity": True})

        sql, values = executed[0]
        assert 'WHERE "title" ILIKE $1 AND "salary" >= $2 AND "equity" > 0' in sql
        assert "ORDER BY title" in sql
        assert values == ["%j2%", 2]

    def test_update(self, db_session, seed):
        job = job_crud.update(db_session, seed["j2"], {"title": "New", "salary": 500})

        assert job["id"] == seed["j2"]
        assert job["title"] == "New"
        assert job["salary"] == 500
        assert job["company_handle"] == "c2"

    def test_update_not_found(self, db_session, seed):
        with pytest.raises(NotFoundError):
            job_crud.update(db_session, 0, {"title": "x"})

    def test_remove(self, db_session, seed):
        job_crud.remove(db_session, seed["j3"])

        with pytest.raises(NotFoundError):
            job_crud.get(db_session, seed["j3"])
