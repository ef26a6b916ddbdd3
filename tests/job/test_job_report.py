"""Tests for Job.report with real timings."""

import io

import pytest

from bench_inputs import Job, Report, inputs


class TestJobReport:
    """Test benchmarking registered operations."""

    def test_report_returns_positive_throughput(self, fast_options):
        job = Job(list(range(10)), **fast_options)
        report = job.report("sum", lambda x: sum(range(x + 50)))

        assert isinstance(report, Report)
        assert report.label == "sum"
        assert report.ips > 0
        assert report.n == fast_options["sample_n"]
        assert job.reports == [report]

    def test_invocations_per_sample_scale_with_inputs(self, fast_options):
        job = Job([1, 2, 3], **fast_options)
        report = job.report("abs", lambda x: abs(x) + 1)
        assert report.invocations_per_sample % 3 == 0

    def test_symmetric_workload_counters(self, fast_options):
        counters = [0, 0, 0, 0]

        def bump_low(i):
            counters[i] += 1

        def bump_high(i):
            counters[i + 2] += 1

        with inputs([0, 1], **fast_options) as job:
            job.report("aaa", bump_low)
            job.report("bbb", bump_high)
            job.compare()

        assert len(job.reports) == 2
        assert {r.label for r in job.reports} == {"aaa", "bbb"}
        assert counters[0] > 0
        assert counters[0] == counters[1]
        assert counters[2] > 0
        assert counters[2] == counters[3]

    def test_reports_keep_registration_order(self, fast_options):
        job = Job([1], **fast_options)
        job.report("first", lambda x: x + 1)
        job.report("second", lambda x: x * 2)
        assert [r.label for r in job.reports] == ["first", "second"]

    def test_dup_inputs_preserves_originals(self, fast_options):
        values = [[1, 2], [3]]
        with inputs(values, dup_inputs=True, **fast_options) as job:
            job.report("append", lambda lst: lst.append(0))
            job.report("clear", lambda lst: lst.clear())

        assert values == [[1, 2], [3]]
        assert len(job.reports) == 2

    def test_without_dup_inputs_values_are_mutated(self, fast_options):
        values = [[1, 2], [3]]
        with inputs(values, **fast_options) as job:
            job.report("append", lambda lst: lst.append(0))

        assert len(values[0]) > 2
        assert len(values[1]) > 1

    def test_output_format(self, fast_options, capsys):
        job = Job([1, 2], **fast_options)
        report = job.report("square", lambda x: x * x * x)

        out, err = capsys.readouterr()
        lines = out.splitlines()
        assert lines[0] == "square"
        assert lines[1] == (
            f"  {report.ips:.1f} i/s (±{report.relative_stddev:.2f}%)"
        )
        assert err == ""

    def test_custom_output_stream(self, fast_options, capsys):
        buf = io.StringIO()
        job = Job([1], out=buf, **fast_options)
        job.report("neg", lambda x: -x - 1)
        job.compare()

        assert buf.getvalue().startswith("neg\n")
        assert "Comparison:" in buf.getvalue()
        assert capsys.readouterr().out == ""

    @pytest.mark.slow
    def test_default_sampling(self):
        job = Job(["abc", "aaa", "xyz", ""], sample_n=2)
        report = job.report("upper", str.upper)
        assert report.ips > 0
