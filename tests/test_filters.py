"""
Unit tests for the jobs screen filters.
"""

from fleet_maintenance.data.filters import DEFAULT_FILTERS, JobFilters, apply_job_filters, serialize_filters


class TestApplyJobFilters:
    """Test apply_job_filters."""

    def test_default_filters_keep_everything(self, jobs):
        """Test no filters means no filtering."""
        assert apply_job_filters(jobs, DEFAULT_FILTERS) == jobs

    def test_filter_by_ship(self, jobs):
        """Test the ship filter."""
        result = apply_job_filters(jobs, JobFilters(ship_id="s1"))
        assert [j.id for j in result] == ["j1", "j3"]

    def test_filters_combine(self, jobs):
        """Test every set filter must match."""
        result = apply_job_filters(jobs, JobFilters(ship_id="s1", status="In Progress", priority="Medium"))
        assert [j.id for j in result] == ["j3"]

    def test_no_match(self, jobs):
        """Test filters can exclude everything."""
        assert apply_job_filters(jobs, JobFilters(status="Cancelled")) == []

    def test_empty_string_means_any(self, jobs):
        """Test blank filter values are ignored."""
        assert apply_job_filters(jobs, JobFilters(ship_id="", priority="")) == jobs

    def test_does_not_mutate_input(self, jobs):
        """Test the original list is untouched."""
        before = list(jobs)
        apply_job_filters(jobs, JobFilters(status="Open"))
        assert jobs == before


class TestSerializeFilters:
    """Test serialize_filters."""

    def test_serialize(self):
        """Test filters serialize to a plain dict."""
        assert serialize_filters(JobFilters(status="Open")) == {
            "ship_id": None,
            "status": "Open",
            "priority": None,
        }
