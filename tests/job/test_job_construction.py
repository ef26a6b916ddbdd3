"""Tests for Job construction and configuration plumbing."""

import pytest

from bench_inputs import Job, JobConfig, inputs


class TestJobConstruction:
    """Test constructor validation and defaults."""

    def test_defaults(self):
        job = Job([1, 2, 3])
        assert job.inputs == (1, 2, 3)
        assert job.dup_inputs is False
        assert job.sample_n == 10
        assert job.sample_dt == 200_000_000
        assert job.reports == []

    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"dup_inputs": True},
            {"sample_n": 1, "sample_dt": 1},
            {"config": JobConfig(sample_n=2)},
        ],
    )
    def test_empty_inputs_rejected(self, options):
        with pytest.raises(ValueError, match="No inputs specified"):
            Job([], **options)

    def test_empty_iterator_rejected(self):
        with pytest.raises(ValueError):
            Job(iter(()))

    def test_invalid_sample_n(self):
        with pytest.raises(ValueError):
            Job([1], sample_n=0)

    def test_invalid_sample_dt(self):
        with pytest.raises(ValueError):
            Job([1], sample_dt=-1)

    def test_config_used_as_given(self):
        cfg = JobConfig(dup_inputs=True, sample_n=4, sample_dt=1234)
        job = Job([1], config=cfg)
        assert job.config is cfg
        assert job.dup_inputs is True
        assert job.sample_n == 4
        assert job.sample_dt == 1234

    def test_keywords_applied_over_config(self):
        cfg = JobConfig(sample_n=2, sample_dt=1234, max_sample_retries=3)
        job = Job([1], sample_n=99, dup_inputs=True, config=cfg)
        assert job.sample_n == 99
        assert job.dup_inputs is True
        assert job.sample_dt == 1234
        assert job.config.max_sample_retries == 3
        # The caller's config is left untouched.
        assert cfg.sample_n == 2
        assert cfg.dup_inputs is False

    def test_keyword_over_config_is_validated(self):
        with pytest.raises(ValueError):
            Job([1], sample_n=0, config=JobConfig())

    def test_keyword_dup_inputs_builds_copying_routine(self):
        values = [[1]]
        seen = []
        job = Job(values, dup_inputs=True, config=JobConfig())
        job.time(1, seen.append)
        assert seen[-1] == values[0]
        assert seen[-1] is not values[0]

    def test_inputs_are_the_callers_objects(self):
        values = [[1], [2]]
        job = Job(values)
        assert job.inputs[0] is values[0]
        assert job.inputs[1] is values[1]


class TestJobSetters:
    """Test runtime reconfiguration."""

    def test_dup_inputs_rebuilds_routine(self):
        values = [[1]]
        job = Job(values)
        seen = []

        job.time(1, seen.append)
        assert seen[-1] is values[0]

        job.dup_inputs = True
        assert job.dup_inputs is True
        job.time(1, seen.append)
        assert seen[-1] == values[0]
        assert seen[-1] is not values[0]

        job.dup_inputs = False
        job.time(1, seen.append)
        assert seen[-1] is values[0]

    def test_sample_setters_validate(self):
        job = Job([1])
        job.sample_n = 3
        job.sample_dt = 5_000
        assert job.sample_n == 3
        assert job.sample_dt == 5_000

        with pytest.raises(ValueError):
            job.sample_n = 0
        with pytest.raises(ValueError):
            job.sample_dt = 0
        # Failed assignments leave the previous configuration in place.
        assert job.sample_n == 3
        assert job.sample_dt == 5_000

    def test_setters_keep_other_fields(self):
        job = Job([1], config=JobConfig(max_sample_retries=2))
        job.sample_n = 7
        job.dup_inputs = True
        assert job.config.max_sample_retries == 2
        assert job.sample_n == 7


class TestInputsContext:
    """Test the ``inputs`` context manager."""

    def test_yields_configured_job(self):
        with inputs([1, 2], dup_inputs=True, sample_n=2) as job:
            assert isinstance(job, Job)
            assert job.inputs == (1, 2)
            assert job.dup_inputs is True
            assert job.sample_n == 2
        assert job.reports == []

    def test_empty_values_rejected(self):
        with pytest.raises(ValueError):
            with inputs([]):
                pass
