from __future__ import annotations

from typing import Any

import pytest

from candidateintake.core import (
    InvalidCompany,
    InvalidDate,
    InvalidDescription,
    InvalidEndDate,
    InvalidInstitution,
    InvalidPosition,
    InvalidTitle,
    validate_education,
    validate_experience,
)


def build_education(**kwargs: Any) -> dict[str, Any]:
    defaults: dict[str, Any] = {
        "institution": "University",
        "title": "Computer Science",
        "startDate": "2020-01-01",
        "endDate": "2024-01-01",
    }
    defaults.update(kwargs)
    return defaults


def build_experience(**kwargs: Any) -> dict[str, Any]:
    defaults: dict[str, Any] = {
        "company": "Tech Corp",
        "position": "Developer",
        "description": "Full stack development",
        "startDate": "2020-01-01",
        "endDate": "2023-01-01",
    }
    defaults.update(kwargs)
    return defaults


def test_education_accepts_complete_entry():
    validate_education(build_education())


def test_education_accepts_open_ended_entry():
    entry = build_education()
    del entry["endDate"]

    validate_education(entry)


def test_education_accepts_equal_dates():
    validate_education(build_education(startDate="2022-06-01", endDate="2022-06-01"))


def test_education_rejects_end_before_start():
    entry = build_education(startDate="2024-01-01", endDate="2020-01-01")

    with pytest.raises(InvalidEndDate, match="^Invalid end date: End date cannot be before start date$"):
        validate_education(entry)


def test_education_malformed_end_date_is_a_date_error():
    with pytest.raises(InvalidDate, match="^Invalid date$"):
        validate_education(build_education(endDate="2024-13-01"))


def test_education_requires_start_date():
    with pytest.raises(InvalidDate):
        validate_education(build_education(startDate=None))


@pytest.mark.parametrize("institution", [None, "", "x" * 101])
def test_education_rejects_institution(institution):
    with pytest.raises(InvalidInstitution, match="^Invalid institution$"):
        validate_education(build_education(institution=institution))


@pytest.mark.parametrize("title", [None, "", "x" * 101])
def test_education_rejects_title(title):
    with pytest.raises(InvalidTitle, match="^Invalid title$"):
        validate_education(build_education(title=title))


def test_education_accepts_snake_case_keys():
    validate_education(
        {
            "institution": "University",
            "title": "Physics",
            "start_date": "2019-09-01",
            "end_date": "2023-06-30",
        }
    )


def test_education_rejects_non_mapping_entry():
    with pytest.raises(InvalidInstitution):
        validate_education("University")


def test_experience_accepts_complete_entry():
    validate_experience(build_experience())


def test_experience_description_boundary():
    validate_experience(build_experience(description="a" * 200))

    with pytest.raises(InvalidDescription, match="^Invalid description$"):
        validate_experience(build_experience(description="a" * 201))


def test_experience_description_is_optional():
    validate_experience(build_experience(description=None))


def test_experience_does_not_enforce_date_order():
    validate_experience(build_experience(startDate="2024-01-01", endDate="2020-01-01"))


def test_experience_end_date_checks_shape_only():
    validate_experience(build_experience(endDate="2023-13-45"))

    with pytest.raises(InvalidEndDate, match="^Invalid end date$"):
        validate_experience(build_experience(endDate="2023/01/01"))


def test_experience_start_date_is_fully_validated():
    with pytest.raises(InvalidDate):
        validate_experience(build_experience(startDate="2023-13-45"))


@pytest.mark.parametrize("company", [None, "", "x" * 101])
def test_experience_rejects_company(company):
    with pytest.raises(InvalidCompany, match="^Invalid company$"):
        validate_experience(build_experience(company=company))


@pytest.mark.parametrize("position", [None, "", "x" * 101])
def test_experience_rejects_position(position):
    with pytest.raises(InvalidPosition, match="^Invalid position$"):
        validate_experience(build_experience(position=position))
