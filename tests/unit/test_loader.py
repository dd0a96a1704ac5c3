"""Tests for loading JSON build exports."""

from __future__ import annotations

import json

import pytest

from promoterebuild.core.loader import BuildLoadError, load_build, parse_build


class TestLoadBuild:
    def test_round_trip(self, make_build, branch_job, make_checkout, base_remote, write_build):
        build = make_build(branch_job, [make_checkout(base_remote, "abc123")])
        assert load_build(write_build(build)) == build

    def test_preserves_checkout_order(
        self, make_build, branch_job, make_checkout, base_remote, write_build
    ):
        build = make_build(
            branch_job,
            [make_checkout(base_remote, "first"), make_checkout(base_remote, "second")],
        )
        loaded = load_build(write_build(build))
        assert [c.last_built_hash for c in loaded.checkouts] == ["first", "second"]

    def test_ignores_host_fields_it_does_not_use(self, base_remote):
        export = {
            "job": {
                "kind": "pipeline",
                "full_name": "p",
                "definition": {
                    "kind": "cps-scm",
                    "script_path": "Jenkinsfile",
                    "scm": {
                        "kind": "git",
                        "branches": ["*/main"],
                        "user_remote_configs": [{"url": base_remote, "name": "origin"}],
                    },
                },
            },
            "number": 5,
            "checkouts": [
                {
                    "remote_urls": [base_remote],
                    "scm_name": "app",
                    "last_built_revision": {"sha1": "abc123", "branches": ["main"]},
                }
            ],
        }
        build = parse_build(json.dumps(export))
        assert build.checkouts[0].last_built_hash == "abc123"
        assert build.job.definition.scm.first_remote_url == base_remote

    def test_missing_file(self, tmp_path):
        with pytest.raises(BuildLoadError, match="not found"):
            load_build(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(BuildLoadError, match="invalid build export"):
            load_build(path)

    def test_schema_violation(self):
        with pytest.raises(BuildLoadError) as excinfo:
            parse_build('{"job": {"kind": "other", "full_name": "f"}}', source="mem")
        assert str(excinfo.value).startswith("mem:")

    def test_is_value_error(self):
        assert issubclass(BuildLoadError, ValueError)
