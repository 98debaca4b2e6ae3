"""Tests for help requests module models."""

import pytest
from pydantic import ValidationError

from modules.help_requests.models import (
    CreateHelpRequestRequest,
    UNRANKED_URGENCY,
    urgency_rank,
)


class TestUrgencyRank:
    @pytest.mark.parametrize(
        "label, rank",
        [
            ("Very Urgent (within 1 hour)", 0),
            ("Very Urgent", 0),
            ("Urgent (today)", 1),
            ("Urgent", 1),
            ("Soon (this week)", 2),
            ("Soon", 2),
            ("Not urgent", 3),
        ],
    )
    def test_prefix_ranks(self, label, rank):
        """Labels should rank by prefix, not exact match."""
        assert urgency_rank(label) == rank

    @pytest.mark.parametrize("label", ["Whenever", "", "urgent", "very urgent"])
    def test_unrecognized_sorts_last(self, label):
        assert urgency_rank(label) == UNRANKED_URGENCY


class TestCreateHelpRequestRequest:
    def test_valid(self):
        request = CreateHelpRequestRequest(
            title="Jump start",
            category="Transportation",
            description="Car battery died",
            location="Lot C",
            urgency="Urgent (today)",
        )
        assert request.urgency == "Urgent (today)"

    def test_missing_urgency_rejected(self):
        with pytest.raises(ValidationError):
            CreateHelpRequestRequest(
                title="Jump start",
                category="Transportation",
                description="Car battery died",
                location="Lot C",
            )
