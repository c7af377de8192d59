"""Tests for committing several artifacts in one run."""

from signed_codegen.artifact import Artifact, CommitJob, CommitOptions, commit_many


class TestCommitMany:
    def test_collects_outcomes_and_errors(self, config, make_renderer):
        (config.root_dir / "manual.py").write_text("hand written\n")
        jobs = [
            CommitJob(Artifact.resolve(config, "a.py"), make_renderer("a = 1\n")),
            CommitJob(Artifact.resolve(config, "manual.py"), make_renderer("m = 1\n")),
            CommitJob(Artifact.resolve(config, "b.py"), make_renderer("b = 1\n")),
        ]
        report = commit_many(jobs, config)
        assert report.created == ["a.py", "b.py"]
        assert not report.passed
        assert report.errors[0]["path"] == "manual.py"
        assert "does not have a signature" in report.errors[0]["error"]

    def test_second_run_unchanged(self, config, make_renderer):
        jobs = [CommitJob(Artifact.resolve(config, "a.py"), make_renderer("a = 1\n"))]
        commit_many(jobs, config)
        report = commit_many(jobs, config)
        assert report.unchanged == ["a.py"]
        assert report.passed

    def test_per_job_options(self, config, make_renderer):
        (config.root_dir / "manual.py").write_text("hand written\n")
        jobs = [
            CommitJob(
                Artifact.resolve(config, "manual.py"),
                make_renderer("m = 1\n"),
                CommitOptions(clobber=True),
            ),
        ]
        report = commit_many(jobs, config)
        assert report.updated == ["manual.py"]

    def test_summary(self, config, make_renderer):
        (config.root_dir / "manual.py").write_text("hand written\n")
        jobs = [CommitJob(Artifact.resolve(config, "manual.py"), make_renderer("m\n"))]
        summary = commit_many(jobs, config).summary()
        assert "Errors:    1" in summary
        assert "manual.py" in summary

    def test_undecodable_target_does_not_stop_batch(self, config, make_renderer):
        (config.root_dir / "latin.py").write_bytes(b"caf\xe9\n")
        jobs = [
            CommitJob(Artifact.resolve(config, "latin.py"), make_renderer("l = 1\n")),
            CommitJob(Artifact.resolve(config, "b.py"), make_renderer("b = 1\n")),
        ]
        report = commit_many(jobs, config)
        assert report.created == ["b.py"]
        assert [e["path"] for e in report.errors] == ["latin.py"]
        assert (config.root_dir / "b.py").is_file()

    def test_value_error_recorded(self, config):
        def broken():
            raise ValueError("bad structural input")

        jobs = [
            CommitJob(Artifact.resolve(config, "broken.py"), broken),
            CommitJob(Artifact.resolve(config, "ok.py"), lambda: "ok = 1\n"),
        ]
        report = commit_many(jobs, config)
        assert report.errors == [{"path": "broken.py", "error": "bad structural input"}]
        assert report.created == ["ok.py"]
