"""Unit tests for the name-based matcher."""

import pytest

from lostfound.services.matching.matcher import Matcher, names_match


class TestNamesMatch:
    @pytest.mark.parametrize("a, b", [
        ("Blue Backpack", "backpack"),
        ("keys", "Car KEYS"),
        ("Phone", "phone"),
    ])
    def test_substring_either_way(self, a, b):
        assert names_match(a, b)

    @pytest.mark.parametrize("a, b", [
        ("Blue backpack", "Red backpack"),
        ("phones", "phone case"),
    ])
    def test_no_token_or_fuzzy_matching(self, a, b):
        assert not names_match(a, b)


class TestFindAndNotify:
    def test_found_item_matches_earlier_lost_item(self, matcher, report, alice, bob, notification_service):
        lost = report(alice, "lost", "Blue backpack")
        found = report(bob, "found", "Backpack")

        n = matcher.find_and_notify(found)

        assert n is not None
        assert n.for_user_id == lost.reporter_user_id
        assert n.matched_item_ids == [found.id]
        assert notification_service.list_for("S100") == [n]

    def test_lost_item_matches_earlier_found_item(self, matcher, report, alice, bob, notification_service):
        found = report(bob, "found", "backpack")
        lost = report(alice, "lost", "Blue Backpack")

        n = matcher.find_and_notify(lost)

        assert n.for_user_id == found.reporter_user_id == "T200"
        assert n.matched_item_ids == [lost.id]
        assert len(notification_service.list_for("T200")) == 1
        assert notification_service.list_for("S100") == []

    def test_same_type_never_matches(self, matcher, report, alice, bob):
        report(alice, "lost", "Backpack")
        new = report(bob, "lost", "Backpack")

        assert matcher.find_and_notify(new) is None

    def test_claimed_candidates_are_skipped(self, matcher, report, alice, bob, item_registry):
        lost = report(alice, "lost", "Backpack")
        item_registry.mark_claimed(lost.id, alice)
        found = report(bob, "found", "Backpack")

        assert matcher.find_and_notify(found) is None

    def test_only_first_candidate_in_insertion_order(self, matcher, report, alice, bob, admin, notification_service):
        report(alice, "lost", "Umbrella")
        report(admin, "lost", "Black umbrella")
        found = report(bob, "found", "umbrella")

        n = matcher.find_and_notify(found)

        assert n.for_user_id == "S100"
        assert notification_service.list_for("A001") == []

    def test_no_candidate(self, matcher, report, alice, bob):
        report(alice, "lost", "Scarf")
        found = report(bob, "found", "Calculator")

        assert matcher.find_and_notify(found) is None

    def test_new_item_is_unchanged(self, matcher, report, alice, bob, item_registry):
        report(alice, "lost", "Backpack")
        found = report(bob, "found", "Backpack")

        matcher.find_and_notify(found)

        assert item_registry.get(found.id) == found


class TestOwnReports:
    def test_own_reports_excluded_by_default(self, matcher, report, alice):
        report(alice, "lost", "Backpack")
        found = report(alice, "found", "Backpack")

        assert list(matcher.candidates_for(found)) == []
        assert matcher.find_and_notify(found) is None

    def test_own_report_skipped_in_favour_of_next_candidate(self, matcher, report, alice, bob):
        report(alice, "lost", "Backpack")
        bobs = report(bob, "lost", "Backpack")
        found = report(alice, "found", "Backpack")

        assert [it.id for it in matcher.candidates_for(found)] == [bobs.id]
        assert matcher.find_and_notify(found).for_user_id == "T200"

    def test_own_reports_match_when_allowed(self, store, notification_service, report, alice):
        matcher = Matcher(store, notification_service, exclude_own_reports=False)
        report(alice, "lost", "Backpack")
        found = report(alice, "found", "Backpack")

        n = matcher.find_and_notify(found)

        assert n.for_user_id == "S100"
        assert n.matched_item_ids == [found.id]
