from pathlib import Path

import pytest

from arbiter.samples import ArenaConfig, Sample, load_config


REPO_ROOT = Path(__file__).resolve().parents[1]


def test_load_config(tmp_path):
    cfg_path = tmp_path / "samples.yaml"
    cfg_path.write_text(
        """
base_url: http://localhost:8000/
samples_dir: docs
timeout_seconds: 5
samples:
  - filename: a.html
    label: "Sample A"
  - filename: b.html
""",
        encoding="utf-8",
    )

    cfg = load_config(cfg_path)

    assert isinstance(cfg, ArenaConfig)
    assert cfg.samples == [Sample("a.html", "Sample A"), Sample("b.html", "b.html")]
    assert cfg.base_url == "http://localhost:8000/"
    assert cfg.samples_dir == tmp_path / "docs"
    assert cfg.timeout_seconds == 5.0


def test_load_config_defaults(tmp_path):
    cfg_path = tmp_path / "samples.yaml"
    cfg_path.write_text("samples:\n  - filename: a.html\n", encoding="utf-8")

    cfg = load_config(cfg_path)

    assert cfg.base_url is None
    assert cfg.samples_dir is None
    assert cfg.timeout_seconds == 20.0


@pytest.mark.parametrize(
    "body",
    ["", "samples: []\n", "samples:\n  - label: no file\n"],
)
def test_load_config_rejects_bad_manifests(tmp_path, body):
    cfg_path = tmp_path / "samples.yaml"
    cfg_path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_shipped_manifest_points_at_existing_samples():
    cfg = load_config(REPO_ROOT / "src" / "configs" / "samples.yaml")

    assert len(cfg.samples) == 6
    for s in cfg.samples:
        assert (cfg.samples_dir / s.filename).exists()
