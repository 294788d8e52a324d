"""Tests for visitdesk.services.form_service — draft editing and submit validation."""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from visitdesk.core.exceptions import FormValidationError
from visitdesk.schemas.visit import Location, VisitStatus
from visitdesk.services.form_service import VisitRequestForm


def _fill(form: VisitRequestForm, visit_day: date, **overrides) -> None:
    fields = {
        "visitDate": visit_day,
        "startTime": "10h00",
        "endTime": "11h00",
        "location": "SiteA",
        "numberOfPeople": 2,
    }
    fields.update(overrides)
    form.edit(**fields)


class TestDraft:
    def test_defaults(self, repository, alice) -> None:
        form = VisitRequestForm(repository, alice)
        assert form.draft.requesterName == "Alice"
        assert form.draft.numberOfPeople == 1
        assert form.draft.visitDate is None
        assert form.draft.location == Location.unset
        assert form.draft.isClient is False

    def test_edit_accumulates(self, repository, alice, visit_day) -> None:
        form = VisitRequestForm(repository, alice)
        form.edit(startTime="9h00")
        form.edit(endTime="9h30")
        assert form.draft.startTime == "9h00"
        assert form.draft.endTime == "9h30"

    def test_edit_unknown_field(self, repository, alice) -> None:
        form = VisitRequestForm(repository, alice)
        with pytest.raises(FormValidationError) as excinfo:
            form.edit(colour="blue")
        assert excinfo.value.fields == ["colour"]

    def test_edit_party_size_bounds(self, repository, alice) -> None:
        form = VisitRequestForm(repository, alice)
        with pytest.raises(FormValidationError):
            form.edit(numberOfPeople=0)
        with pytest.raises(FormValidationError):
            form.edit(numberOfPeople=51)
        assert form.draft.numberOfPeople == 1

    def test_edit_unknown_location(self, repository, alice) -> None:
        form = VisitRequestForm(repository, alice)
        with pytest.raises(FormValidationError) as excinfo:
            form.edit(location="SiteC")
        assert excinfo.value.fields == ["location"]


class TestSubmit:
    @pytest.mark.parametrize("missing", ["visitDate", "startTime", "endTime", "location"])
    def test_missing_required_field(self, alice, visit_day, missing) -> None:
        repository = MagicMock()
        form = VisitRequestForm(repository, alice)
        blank = {"visitDate": None, "startTime": "", "endTime": "", "location": ""}
        _fill(form, visit_day, **{missing: blank[missing]})
        draft_before = form.draft

        with pytest.raises(FormValidationError) as excinfo:
            form.submit()

        assert excinfo.value.fields == [missing]
        repository.create.assert_not_called()
        assert form.draft == draft_before

    def test_empty_form_lists_all_missing(self, alice) -> None:
        repository = MagicMock()
        form = VisitRequestForm(repository, alice)
        with pytest.raises(FormValidationError) as excinfo:
            form.submit()
        assert excinfo.value.fields == ["visitDate", "startTime", "endTime", "location"]
        repository.create.assert_not_called()

    def test_unknown_time_slot(self, alice, visit_day) -> None:
        repository = MagicMock()
        form = VisitRequestForm(repository, alice)
        _fill(form, visit_day, endTime="23h00")
        with pytest.raises(FormValidationError) as excinfo:
            form.submit()
        assert excinfo.value.fields == ["endTime"]
        repository.create.assert_not_called()

    def test_past_date(self, alice) -> None:
        repository = MagicMock()
        form = VisitRequestForm(repository, alice)
        _fill(form, date(2026, 3, 1))
        with pytest.raises(FormValidationError) as excinfo:
            form.submit(today=date(2026, 3, 2))
        assert excinfo.value.fields == ["visitDate"]
        repository.create.assert_not_called()

    def test_today_is_refused(self, alice) -> None:
        repository = MagicMock()
        form = VisitRequestForm(repository, alice)
        today = date(2026, 3, 2)
        _fill(form, today)
        with pytest.raises(FormValidationError) as excinfo:
            form.submit(today=today)
        assert excinfo.value.fields == ["visitDate"]
        repository.create.assert_not_called()

    def test_tomorrow_is_allowed(self, repository, alice) -> None:
        form = VisitRequestForm(repository, alice)
        today = date.today()
        tomorrow = today + timedelta(days=1)
        _fill(form, tomorrow)
        assert form.submit(today=today).visitDate == tomorrow

    def test_success_creates_and_resets(self, repository, alice, visit_day) -> None:
        form = VisitRequestForm(repository, alice)
        _fill(form, visit_day, requesterName="Alice M.", comments="Bring badges")
        created = form.submit()

        assert created.status == VisitStatus.pending
        assert created.requesterId == alice.id
        assert created.requesterName == "Alice M."
        assert created.comments == "Bring badges"
        assert repository.list() == [created]

        assert form.draft.requesterName == "Alice"
        assert form.draft.visitDate is None
        assert form.draft.comments == ""

    def test_conditional_fields_may_be_empty(self, repository, alice, visit_day) -> None:
        form = VisitRequestForm(repository, alice)
        _fill(form, visit_day, isClient=True, needsCatering=True)
        created = form.submit()
        assert created.clientNumber == ""
        assert created.deliveryTime == ""

    def test_reset(self, repository, alice, visit_day) -> None:
        form = VisitRequestForm(repository, alice)
        _fill(form, visit_day)
        form.reset()
        assert form.missing_fields() == ["visitDate", "startTime", "endTime", "location"]
        assert form.draft.requesterName == "Alice"
