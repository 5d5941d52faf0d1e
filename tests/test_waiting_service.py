"""Unit tests for WaitingService.

Run with: pytest tests/test_waiting_service.py -v
"""

from datetime import date, datetime

import pytest

from roomescape.domain.errors import (
    DeletionNotAllowedError,
    DuplicateReservationError,
    DuplicateWaitingError,
    MemberNotFoundError,
    ReservationTimeNotFoundError,
    ThemeNotFoundError,
    WaitingNotFoundError,
)

EARLY = datetime(2025, 5, 1, 12, 0)


class TestCreate:
    """Tests for WaitingService.create."""

    def test_creates_waiting(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")

        waiting = waiting_service.create(bob.id.value, **slot)

        assert waiting.member == bob
        assert waiting.date == slot["date"]
        assert waiting_service.find_all() == [waiting]

    def test_duplicate_waiting_is_unavailable(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        waiting_service.create(bob.id.value, **slot)

        with pytest.raises(DuplicateWaitingError):
            waiting_service.create(bob.id.value, **slot)
        assert len(waiting_service.find_all()) == 1

    def test_store_rejection_maps_to_unavailable(
        self, waiting_service, stores, fake_db, slot, monkeypatch
    ):
        bob = fake_db.add_member("bob")
        waiting_service.create(bob.id.value, **slot)
        monkeypatch.setattr(
            stores["waitings"],
            "exists_by_member_and_schedule",
            lambda member_id, schedule: False,
        )

        with pytest.raises(DuplicateWaitingError):
            waiting_service.create(bob.id.value, **slot)

    def test_different_members_may_wait_for_same_slot(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        carol = fake_db.add_member("carol")

        waiting_service.create(bob.id.value, **slot)
        waiting_service.create(carol.id.value, **slot)

        assert len(waiting_service.find_all()) == 2

    def test_past_slot_is_accepted(self, waiting_service, fake_db, slot):
        """Joining a waitlist has no booking-window check."""
        bob = fake_db.add_member("bob")

        waiting = waiting_service.create(bob.id.value, **{**slot, "date": date(2000, 1, 1)})

        assert waiting.date == date(2000, 1, 1)

    @pytest.mark.parametrize(
        "override, error",
        [
            ({"time_id": 999}, ReservationTimeNotFoundError),
            ({"theme_id": 999}, ThemeNotFoundError),
        ],
    )
    def test_missing_reference_raises_error(self, waiting_service, fake_db, slot, override, error):
        bob = fake_db.add_member("bob")
        with pytest.raises(error):
            waiting_service.create(bob.id.value, **{**slot, **override})

    def test_missing_member_raises_error(self, waiting_service, slot):
        with pytest.raises(MemberNotFoundError):
            waiting_service.create(999, **slot)


class TestApprove:
    """Tests for approve and approve_first."""

    def test_approve_creates_reservation_and_removes_waiting(
        self, waiting_service, reservation_service, fake_db, slot
    ):
        bob = fake_db.add_member("bob")
        waiting = waiting_service.create(bob.id.value, **slot)

        reservation = waiting_service.approve(waiting.id.value)

        assert reservation.member == bob
        assert reservation.schedule == waiting.schedule
        assert reservation_service.find_all() == [reservation]
        assert waiting_service.find_all() == []

    def test_approve_missing_waiting_raises_error(self, waiting_service):
        with pytest.raises(WaitingNotFoundError):
            waiting_service.approve(404)

    def test_approve_reserved_slot_is_unavailable(
        self, waiting_service, reservation_service, fake_db, slot
    ):
        alice = fake_db.add_member("alice")
        bob = fake_db.add_member("bob")
        reservation_service.create(alice.id.value, now=EARLY, **slot)
        waiting = waiting_service.create(bob.id.value, **slot)

        with pytest.raises(DuplicateReservationError):
            waiting_service.approve(waiting.id.value)
        assert waiting_service.find_all() == [waiting]

    def test_approve_first_promotes_earliest(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        carol = fake_db.add_member("carol")
        first = waiting_service.create(bob.id.value, **slot)
        second = waiting_service.create(carol.id.value, **slot)
        assert first.created_at < second.created_at

        reservation = waiting_service.approve_first(
            theme_id=slot["theme_id"], date=slot["date"], time_id=slot["time_id"]
        )

        assert reservation.member == bob
        assert waiting_service.find_all() == [second]

    def test_approve_first_without_waitings_does_nothing(
        self, waiting_service, reservation_service, slot
    ):
        result = waiting_service.approve_first(
            theme_id=slot["theme_id"], date=slot["date"], time_id=slot["time_id"]
        )

        assert result is None
        assert reservation_service.find_all() == []

    def test_approve_first_missing_theme_raises_error(self, waiting_service, slot):
        with pytest.raises(ThemeNotFoundError):
            waiting_service.approve_first(theme_id=999, date=slot["date"], time_id=slot["time_id"])


class TestDelete:
    """Tests for the two deletion paths."""

    def test_owner_can_delete(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        carol = fake_db.add_member("carol")
        mine = waiting_service.create(bob.id.value, **slot)
        other = waiting_service.create(carol.id.value, **slot)

        waiting_service.delete_by_member_and_id(bob.id.value, mine.id.value)

        assert waiting_service.find_all() == [other]

    def test_non_owner_cannot_delete(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        mallory = fake_db.add_member("mallory")
        waiting = waiting_service.create(bob.id.value, **slot)

        with pytest.raises(DeletionNotAllowedError):
            waiting_service.delete_by_member_and_id(mallory.id.value, waiting.id.value)
        assert waiting_service.find_all() == [waiting]

    def test_member_delete_missing_raises_error(self, waiting_service, fake_db):
        bob = fake_db.add_member("bob")
        with pytest.raises(WaitingNotFoundError):
            waiting_service.delete_by_member_and_id(bob.id.value, 404)

    def test_admin_delete(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        waiting = waiting_service.create(bob.id.value, **slot)

        waiting_service.delete_by_id(waiting.id.value)

        assert waiting_service.find_all() == []

    def test_admin_delete_missing_raises_error(self, waiting_service):
        with pytest.raises(WaitingNotFoundError):
            waiting_service.delete_by_id(404)


class TestRanks:
    """Tests for find_ranks_by_member."""

    def test_ranks_follow_creation_order(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        carol = fake_db.add_member("carol")
        dave = fake_db.add_member("dave")
        waiting_service.create(bob.id.value, **slot)
        waiting_service.create(carol.id.value, **slot)
        waiting_service.create(dave.id.value, **slot)

        ranks = {
            member.name: [r.rank for r in waiting_service.find_ranks_by_member(member.id.value)]
            for member in (bob, carol, dave)
        }

        assert ranks == {"bob": [0], "carol": [1], "dave": [2]}

    def test_ranks_are_per_schedule(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        carol = fake_db.add_member("carol")
        waiting_service.create(bob.id.value, **slot)
        waiting_service.create(carol.id.value, **slot)
        other_day = {**slot, "date": date(2025, 6, 2)}
        waiting_service.create(carol.id.value, **other_day)

        ranks = waiting_service.find_ranks_by_member(carol.id.value)

        assert [(r.waiting.date, r.rank) for r in ranks] == [
            (date(2025, 6, 1), 1),
            (date(2025, 6, 2), 0),
        ]

    def test_rank_moves_up_after_cancellation(self, waiting_service, fake_db, slot):
        bob = fake_db.add_member("bob")
        carol = fake_db.add_member("carol")
        first = waiting_service.create(bob.id.value, **slot)
        waiting_service.create(carol.id.value, **slot)

        waiting_service.delete_by_member_and_id(bob.id.value, first.id.value)

        assert [r.rank for r in waiting_service.find_ranks_by_member(carol.id.value)] == [0]
